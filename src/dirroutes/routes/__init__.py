"""Declarative route aggregation.

Loads a directory of modules and collects every route declaration into one
flat list, keeping each module reachable under its own name.

Public API::

    from dirroutes.routes import load

    result = await load("app/routes")
    for route in result["routes"]:
        app.route(route["path"])(route["handler"])
"""

from dirroutes.routes.aggregator import aggregate, load
from dirroutes.routes.classify import Classification, classify_module, is_route
from dirroutes.routes.entry import resolve_directory

__all__ = [
    "Classification",
    "aggregate",
    "classify_module",
    "is_route",
    "load",
    "resolve_directory",
]
