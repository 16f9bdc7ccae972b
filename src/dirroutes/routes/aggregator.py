"""Route aggregator — collect declarative routes from a directory of modules.

Loads every module through :func:`dirroutes.autoload.auto_load_modules`,
classifies each export, and flattens the routes into one list stored under
the reserved ``routes`` key of the returned mapping::

    routes/users.py    routes = [list_users, get_user]   -> 2 routes
    routes/search.py   default = {"path": ..., ...}     -> 1 route
    routes/helpers.py  def slugify(...): ...            -> 0 routes (still in mapping)

    result = await load("routes/")
    result["routes"]   # [list_users, get_user, {...search...}]
    result["helpers"]  # <module helpers>

Route order is module order (directory listing) then each module's own order.
"""

import logging
import os
import time
from pathlib import Path
from typing import Any

from dirroutes._types import DirectoryRef, ModuleMap, RouteLike
from dirroutes.autoload import auto_load_modules
from dirroutes.config import LoaderConfig
from dirroutes.observability.events import ModuleClassified, RoutesAggregated, now_ns
from dirroutes.observability.log import EventLog
from dirroutes.routes.classify import classify_module
from dirroutes.routes.entry import resolve_directory

logger = logging.getLogger("dirroutes.discovery")


async def load(
    ref: DirectoryRef,
    *,
    config: LoaderConfig | None = None,
    log: EventLog | None = None,
) -> dict[str, Any]:
    """Load a routes directory given a path or a module-style reference.

    *ref* may be a directory path, a module object (its ``__file__``'s
    directory is scanned), or any object or mapping with a ``file:`` URL under
    ``url``.  Invalid references raise ``InvalidInputError`` before any
    filesystem access.

    """
    directory = resolve_directory(ref)
    return await aggregate(directory, config=config, log=log)


async def aggregate(
    directory: str | os.PathLike[str],
    *,
    config: LoaderConfig | None = None,
    log: EventLog | None = None,
) -> dict[str, Any]:
    """Load *directory* and add the flattened route list under ``routes``.

    Every module stays in the returned mapping under its own name, whether or
    not it contributed routes.  The route list overwrites any module that is
    itself named ``routes``.

    """
    if config is None:
        config = LoaderConfig()
    start = time.perf_counter()

    modules: ModuleMap = await auto_load_modules(directory, config=config, log=log)
    routes: list[RouteLike] = []

    for name, value in modules.items():
        result = classify_module(value, routes_key=config.routes_key)
        if result.shape == "routes_property":
            logger.debug(
                "loading routes from routes property file: %s with %d routes",
                name, len(result.routes),
            )
        elif result.shape == "route_array":
            logger.debug("loading routes from module as an array from file: %s", name)
        elif result.shape == "single_route":
            logger.debug("loading module as a route file: %s", name)

        routes.extend(result.routes)
        if log is not None:
            log.append(ModuleClassified(
                name=name,
                shape=result.shape,
                routes=len(result.routes),
                timestamp_ns=now_ns(),
            ))

    if log is not None:
        log.append(RoutesAggregated(
            path=str(Path(directory).absolute()),
            modules=len(modules),
            routes=len(routes),
            duration_ms=(time.perf_counter() - start) * 1000,
            timestamp_ns=now_ns(),
        ))

    modules[config.routes_key] = routes
    return modules
