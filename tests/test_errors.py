"""Tests for dirroutes._errors."""

import errno

from dirroutes._errors import (
    ConfigError,
    DirectoryError,
    DirectoryIOError,
    DirectoryNotFoundError,
    InvalidInputError,
    LoaderError,
    ModuleEvaluationError,
    ModuleLoadError,
    ModuleSyntaxError,
    RouteShapeError,
)


class TestErrorHierarchy:
    """All dirroutes errors inherit from LoaderError and a matching builtin."""

    def test_loader_error_is_exception(self) -> None:
        assert issubclass(LoaderError, Exception)

    def test_builtin_bases(self) -> None:
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(DirectoryNotFoundError, FileNotFoundError)
        assert issubclass(DirectoryIOError, OSError)
        assert issubclass(ModuleSyntaxError, SyntaxError)
        assert issubclass(RouteShapeError, TypeError)

    def test_module_errors_share_base(self) -> None:
        assert issubclass(ModuleSyntaxError, ModuleLoadError)
        assert issubclass(ModuleEvaluationError, ModuleLoadError)

    def test_io_error_is_not_not_found(self) -> None:
        assert not issubclass(DirectoryIOError, FileNotFoundError)

    def test_catch_all_loader_errors(self) -> None:
        """All specific errors are catchable via LoaderError."""
        for error_cls in (
            ConfigError, InvalidInputError, ModuleEvaluationError,
            ModuleLoadError, RouteShapeError,
        ):
            try:
                raise error_cls("test")
            except LoaderError:
                pass  # Expected — all caught by base class


class TestErrorCodes:
    """Stable codes distinguish error kinds."""

    def test_static_codes(self) -> None:
        assert ConfigError.code == "ECONFIG"
        assert InvalidInputError.code == "EINVAL"
        assert ModuleLoadError.code == "EMODULE"
        assert ModuleSyntaxError.code == "ESYNTAX"
        assert ModuleEvaluationError.code == "EEVAL"
        assert RouteShapeError.code == "ESHAPE"

    def test_not_found_code(self) -> None:
        err = DirectoryNotFoundError(errno.ENOENT, "No such file or directory", "/missing")
        assert err.code == "ENOENT"
        assert err.filename == "/missing"

    def test_io_code_from_errno(self) -> None:
        assert DirectoryIOError(errno.EACCES, "Permission denied", "/x").code == "EACCES"
        assert DirectoryIOError(errno.ENOTDIR, "Not a directory", "/x").code == "ENOTDIR"

    def test_io_code_without_errno(self) -> None:
        assert DirectoryIOError("failed").code == "EIO"

    def test_directory_errors_share_base(self) -> None:
        assert issubclass(DirectoryNotFoundError, DirectoryError)
        assert issubclass(DirectoryIOError, DirectoryError)


class TestModuleLoadError:
    """Module errors carry the module name and path."""

    def test_attributes(self) -> None:
        err = ModuleEvaluationError("boom", module_name="users", path="/r/users.py")
        assert err.module_name == "users"
        assert err.path == "/r/users.py"
        assert str(err) == "boom"

    def test_syntax_error_message(self) -> None:
        err = ModuleSyntaxError("bad source", module_name="x", path="/r/x.py")
        assert err.msg == "bad source"
