"""Module auto-loader — import every eligible module file in a directory.

Lists the direct entries of a directory (no recursion), keeps files ending in
the module suffix except the reserved entry-point file, and imports each one
as a fresh module:

    routes/search.py     -> modules["search"]
    routes/users.py      -> modules["users"]
    routes/__init__.py   -> skipped (reserved entry point)
    routes/notes.txt     -> skipped (wrong suffix)

A module that defines ``default`` is represented by that value; otherwise the
module object itself is used.

Each call loads into its own throwaway package, ``<module_prefix>_<hex>``,
whose ``__path__`` is the scanned directory.  Route modules can therefore
import their siblings (``from . import helpers``), and a sibling imported
that way is the same module object the loader hands back.  The package and
everything under it leave ``sys.modules`` when the call returns or fails.

Nothing is cached: every call re-lists the directory and re-executes every
module.  The first failure aborts the call and no partial mapping escapes.
"""

import asyncio
import importlib
import importlib.machinery
import importlib.util
import logging
import os
import sys
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType
from typing import Any

from dirroutes._errors import (
    DirectoryIOError,
    DirectoryNotFoundError,
    InvalidInputError,
    ModuleEvaluationError,
    ModuleLoadError,
    ModuleSyntaxError,
)
from dirroutes._types import ModuleMap
from dirroutes.config import LoaderConfig
from dirroutes.observability.events import DirectoryScanned, ModuleImported, now_ns
from dirroutes.observability.log import EventLog

logger = logging.getLogger("dirroutes.discovery")

# Module attribute that takes precedence over the module namespace
_DEFAULT_EXPORT = "default"

_MISSING = object()


async def auto_load_modules(
    directory: str | os.PathLike[str],
    *,
    config: LoaderConfig | None = None,
    log: EventLog | None = None,
) -> ModuleMap:
    """Import every eligible module in *directory* and map name -> export.

    Imports run one at a time in listing order, each in a worker thread so the
    event loop is not blocked by module top-level code.

    Raises:
        InvalidInputError: If *directory* is not a non-empty path.
        DirectoryNotFoundError: If *directory* does not exist.
        DirectoryIOError: If *directory* cannot be listed for any other reason.
        ModuleSyntaxError: If a module file contains malformed source.
        ModuleEvaluationError: If a module raises while executing.
        ModuleLoadError: If a module file cannot be read.

    """
    if config is None:
        config = LoaderConfig()
    root = _as_path(directory).absolute()

    file_names = await asyncio.to_thread(list_directory, root)
    if config.sort_entries:
        file_names = sorted(file_names)
    eligible = [name for name in file_names if config.is_eligible(name)]

    if log is not None:
        log.append(DirectoryScanned(
            path=str(root),
            entries=len(file_names),
            eligible=len(eligible),
            timestamp_ns=now_ns(),
        ))

    modules: ModuleMap = {}
    with module_namespace(root, config) as package:
        for file_name in eligible:
            name = config.module_name(file_name)
            path = root / file_name

            start = time.perf_counter()
            module = await asyncio.to_thread(import_file, path, name, package=package)
            elapsed_ms = (time.perf_counter() - start) * 1000

            value = resolve_export(module)
            logger.debug("loaded module %s from %s", name, path)
            if log is not None:
                log.append(ModuleImported(
                    name=name,
                    path=str(path),
                    has_default=value is not module,
                    import_ms=elapsed_ms,
                    timestamp_ns=now_ns(),
                ))
            modules[name] = value

    return modules


@contextmanager
def module_namespace(root: Path, config: LoaderConfig) -> Iterator[str]:
    """Register a one-off package rooted at *root* and yield its name.

    On exit the package and every ``<package>.*`` module are removed from
    ``sys.modules``, including siblings pulled in by relative imports.
    """
    package_name = f"{config.module_prefix}_{uuid.uuid4().hex}"
    package = ModuleType(package_name)
    package.__path__ = [str(root)]
    package.__package__ = package_name
    sys.modules[package_name] = package
    # Files written since the last scan must be visible to sibling imports
    importlib.invalidate_caches()
    try:
        yield package_name
    finally:
        prefix = package_name + "."
        for key in list(sys.modules):
            if key == package_name or key.startswith(prefix):
                sys.modules.pop(key, None)


def list_directory(directory: Path) -> list[str]:
    """Return the names of the direct entries of *directory*.

    Raises:
        DirectoryNotFoundError: If *directory* does not exist.
        DirectoryIOError: On any other ``OSError``.

    """
    try:
        return os.listdir(directory)
    except FileNotFoundError as exc:
        raise DirectoryNotFoundError(exc.errno, exc.strerror, str(directory)) from exc
    except OSError as exc:
        raise DirectoryIOError(exc.errno, exc.strerror, str(directory)) from exc


def import_file(path: Path, name: str, *, package: str) -> ModuleType:
    """Import a single file as ``<package>.<name>`` without touching ``sys.path``.

    Reading, compiling and executing are separate steps so that unreadable
    files, malformed source and failing top-level code raise distinct errors.
    If a sibling already imported ``<package>.<name>`` during this call, that
    module is returned as-is.

    """
    module_name = f"{package}.{name}"
    existing = sys.modules.get(module_name)
    if existing is not None:
        return existing

    try:
        source = path.read_bytes()
    except OSError as exc:
        msg = f"Failed to read module {path}: {exc}"
        raise ModuleLoadError(msg, module_name=name, path=str(path)) from exc

    try:
        code = compile(source, str(path), "exec", dont_inherit=True)
    except (SyntaxError, ValueError) as exc:
        msg = f"Invalid syntax in module {path}: {exc}"
        err = ModuleSyntaxError(msg, module_name=name, path=str(path))
        if isinstance(exc, SyntaxError):
            err.filename = exc.filename
            err.lineno = exc.lineno
            err.offset = exc.offset
            err.text = exc.text
        raise err from exc

    # An explicit loader lets non-".py" suffixes load the same way
    loader = importlib.machinery.SourceFileLoader(module_name, str(path))
    spec = importlib.util.spec_from_file_location(module_name, path, loader=loader)
    if spec is None:
        msg = f"Cannot build an import spec for {path}"
        raise ModuleLoadError(msg, module_name=name, path=str(path))

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    # Marks the module as mid-import so cyclic ``from . import`` errors say so
    spec._initializing = True  # type: ignore[attr-defined]
    try:
        exec(code, module.__dict__)  # noqa: S102
    except Exception as exc:
        sys.modules.pop(module_name, None)
        msg = f"Failed to evaluate module {path}: {type(exc).__name__}: {exc}"
        raise ModuleEvaluationError(msg, module_name=name, path=str(path)) from exc
    finally:
        spec._initializing = False  # type: ignore[attr-defined]

    return module


def resolve_export(module: ModuleType) -> Any:
    """Return the module's ``default`` export if it has one, else the module.

    Presence decides, not truthiness: ``default = None`` or ``default = []``
    is returned as-is rather than falling back to the module.
    """
    value = getattr(module, _DEFAULT_EXPORT, _MISSING)
    if value is _MISSING:
        return module
    return value


def _as_path(directory: object) -> Path:
    if isinstance(directory, str):
        if not directory:
            msg = "Directory path must be a non-empty string"
            raise InvalidInputError(msg)
        return Path(directory)
    if isinstance(directory, os.PathLike):
        return Path(directory)
    msg = f"Directory must be a str or os.PathLike, got {type(directory).__name__}"
    raise InvalidInputError(msg)
