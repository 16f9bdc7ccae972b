"""dirroutes error hierarchy.

All dirroutes-specific errors inherit from LoaderError for easy catching.
Each error also inherits the closest builtin so callers can keep catching
``FileNotFoundError``, ``SyntaxError`` and friends.
"""

import errno as _errno


class LoaderError(Exception):
    """Base error for all dirroutes operations."""

    code: str = "ELOADER"


class ConfigError(LoaderError):
    """Invalid or unreadable loader configuration."""

    code = "ECONFIG"


class InvalidInputError(LoaderError, ValueError):
    """The entry point received neither a directory nor a usable resource locator."""

    code = "EINVAL"


class DirectoryError(LoaderError, OSError):
    """The directory could not be enumerated.

    Constructed like ``OSError(errno, strerror, filename)`` so ``errno`` and
    ``filename`` survive the wrapping.
    """

    @property
    def code(self) -> str:  # type: ignore[override]
        if self.errno is None:
            return "EIO"
        return _errno.errorcode.get(self.errno, "EIO")


class DirectoryNotFoundError(DirectoryError, FileNotFoundError):
    """The directory does not exist."""

    @property
    def code(self) -> str:  # type: ignore[override]
        return "ENOENT"


class DirectoryIOError(DirectoryError):
    """Any other enumeration failure (permissions, not a directory, ...)."""


class ModuleLoadError(LoaderError):
    """An eligible module file could not be loaded.

    Attributes:
        module_name: Module name derived from the file name.
        path: Absolute path of the module file.

    """

    code = "EMODULE"

    def __init__(self, message: str, *, module_name: str = "", path: str = "") -> None:
        super().__init__(message)
        self.module_name = module_name
        self.path = path


class ModuleSyntaxError(ModuleLoadError, SyntaxError):
    """An eligible module file contains malformed source."""

    code = "ESYNTAX"


class ModuleEvaluationError(ModuleLoadError):
    """An eligible module raised while executing its top level."""

    code = "EEVAL"


class RouteShapeError(LoaderError, TypeError):
    """A module's ``routes`` attribute is truthy but not a sequence of routes."""

    code = "ESHAPE"
