"""dirroutes configuration.

LoaderConfig controls which files are eligible and how the aggregated result
is keyed.  It is frozen after creation.
"""

from dataclasses import dataclass

from dirroutes._errors import ConfigError


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Configuration for a directory scan.

    Attributes:
        suffix: File-name suffix that marks a loadable module.
        index_name: Reserved entry-point file name that is never imported, so
            an aggregator living beside its route files cannot load itself.
        routes_key: Key under which the aggregated route list is stored.
            Always overwrites a module of the same name.
        module_prefix: Dotted prefix used when registering loaded modules in
            ``sys.modules``.
        sort_entries: Import in sorted file-name order instead of raw
            directory-listing order.

    """

    suffix: str = ".py"
    index_name: str = "__init__.py"
    routes_key: str = "routes"
    module_prefix: str = "dirroutes_modules"
    sort_entries: bool = False

    def __post_init__(self) -> None:
        if not self.suffix:
            msg = "LoaderConfig.suffix must be a non-empty string"
            raise ConfigError(msg)
        if not self.routes_key:
            msg = "LoaderConfig.routes_key must be a non-empty string"
            raise ConfigError(msg)

    def is_eligible(self, file_name: str) -> bool:
        """Return True if *file_name* should be imported."""
        return file_name.endswith(self.suffix) and file_name != self.index_name

    def module_name(self, file_name: str) -> str:
        """Strip the module suffix: ``search.py`` -> ``search``."""
        return file_name[: -len(self.suffix)]
