"""Directory reference normalization.

``load()`` accepts more than a plain path so a routes package can point the
loader at its own directory::

    load("app/routes")                    # directory path (str or PathLike)
    load(sys.modules[__name__])           # parent directory of module.__file__
    load({"url": "file:///app/routes/x.py"})   # parent directory of a file URL

Everything is validated before the filesystem is touched.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from types import ModuleType
from urllib.parse import urlparse
from urllib.request import url2pathname

from dirroutes._errors import InvalidInputError
from dirroutes._types import DirectoryRef


def resolve_directory(ref: DirectoryRef) -> Path:
    """Return the directory a reference points to.

    Raises:
        InvalidInputError: If *ref* is empty, ``None``, or carries no usable
            ``__file__`` or ``file:`` URL locator.

    """
    if ref is None or isinstance(ref, bool):
        msg = f"Expected a directory path or a module reference, got {ref!r}"
        raise InvalidInputError(msg)

    if isinstance(ref, str):
        if not ref:
            msg = "Directory path must be a non-empty string"
            raise InvalidInputError(msg)
        return Path(ref)

    if isinstance(ref, os.PathLike):
        return Path(ref)

    # Modules are located by __file__ only; a module-level ``url`` is user data
    file = _locator(ref, "__file__")
    if file is not None or isinstance(ref, ModuleType):
        if not isinstance(file, (str, os.PathLike)) or not str(file):
            msg = f"Module reference has an unusable __file__: {file!r}"
            raise InvalidInputError(msg)
        return Path(file).parent

    url = _locator(ref, "url")
    if url is not None:
        return _path_from_url(url).parent

    msg = (
        f"Expected a directory path or an object with a 'url' or '__file__' "
        f"locator, got {type(ref).__name__}"
    )
    raise InvalidInputError(msg)


def _locator(ref: object, name: str) -> object | None:
    if isinstance(ref, Mapping):
        return ref.get(name)
    return getattr(ref, name, None)


def _path_from_url(url: object) -> Path:
    if not isinstance(url, str) or not url:
        msg = f"Resource URL must be a non-empty string, got {url!r}"
        raise InvalidInputError(msg)

    parsed = urlparse(url)
    if parsed.scheme != "file":
        msg = f"Invalid resource URL {url!r}: only file: URLs are supported"
        raise InvalidInputError(msg)
    if parsed.netloc not in ("", "localhost"):
        msg = f"Invalid resource URL {url!r}: remote host {parsed.netloc!r}"
        raise InvalidInputError(msg)
    if not parsed.path:
        msg = f"Invalid resource URL {url!r}: no path"
        raise InvalidInputError(msg)

    return Path(url2pathname(parsed.path))
