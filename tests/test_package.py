"""Tests for dirroutes package exports and metadata."""

import dirroutes


class TestPackageMetadata:
    """Package-level exports and metadata."""

    def test_version_string(self) -> None:
        assert isinstance(dirroutes.__version__, str)
        assert "0.1.0" in dirroutes.__version__

    def test_free_threading_declaration(self) -> None:
        assert dirroutes._Py_mod_gil == 0

    def test_all_exports_resolvable(self) -> None:
        for name in dirroutes.__all__:
            getattr(dirroutes, name)

    def test_lazy_exports_are_the_real_objects(self) -> None:
        from dirroutes.autoload import auto_load_modules
        from dirroutes.routes.aggregator import load

        assert dirroutes.load is load
        assert dirroutes.auto_load_modules is auto_load_modules

    def test_invalid_attribute_raises(self) -> None:
        import pytest

        with pytest.raises(AttributeError, match="no attribute"):
            dirroutes.nonexistent_thing  # type: ignore[attr-defined]  # noqa: B018
