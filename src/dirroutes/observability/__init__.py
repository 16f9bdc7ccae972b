"""Loader observability — structured events for every scan.

Records what each call listed, imported and classified:
- **Scan**: directory entries seen vs. eligible
- **Import**: per-module timing and default-export detection
- **Classify**: which shape rule matched and how many routes it contributed
- **Aggregate**: totals for the whole call

All events are frozen dataclasses with nanosecond timestamps.

Quick Start:
    >>> from dirroutes import load
    >>> from dirroutes.observability import EventLog, ModuleClassified
    >>> log = EventLog()
    >>> # result = await load("routes/", log=log)
    >>> # log.query(event_type=ModuleClassified)

"""

from dirroutes.observability.events import (
    DirectoryScanned,
    LoaderEvent,
    ModuleClassified,
    ModuleImported,
    RoutesAggregated,
    now_ns,
)
from dirroutes.observability.log import EventLog

__all__ = [
    "DirectoryScanned",
    "EventLog",
    "LoaderEvent",
    "ModuleClassified",
    "ModuleImported",
    "RoutesAggregated",
    "now_ns",
]
