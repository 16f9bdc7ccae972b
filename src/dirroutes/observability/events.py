"""Event model for loader observability.

One event type per pipeline stage: directory scan, module import, shape
classification, and the final aggregation.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import TypeAlias

from dirroutes._types import ModuleShape


@dataclass(frozen=True, slots=True)
class DirectoryScanned:
    """A directory was listed and filtered.

    Attributes:
        path: Absolute directory path.
        entries: Number of directory entries seen.
        eligible: Number of entries that passed the file-name filter.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    entries: int
    eligible: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ModuleImported:
    """A module file was imported.

    Attributes:
        name: Module name (file name without suffix).
        path: Absolute path to the module file.
        has_default: True if the module exposed a ``default`` export.
        import_ms: Time spent compiling and executing in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    name: str
    path: str
    has_default: bool
    import_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ModuleClassified:
    """A loaded module's export was classified.

    Attributes:
        name: Module name.
        shape: Which classification rule matched.
        routes: Number of routes the module contributed.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    name: str
    shape: ModuleShape
    routes: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RoutesAggregated:
    """A directory finished loading.

    Attributes:
        path: Absolute directory path.
        modules: Number of modules loaded.
        routes: Total number of routes collected.
        duration_ms: Wall time of the whole call in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    modules: int
    routes: int
    duration_ms: float
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

LoaderEvent: TypeAlias = (
    DirectoryScanned
    | ModuleImported
    | ModuleClassified
    | RoutesAggregated
)


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
