"""Shared type definitions for dirroutes."""

import os
from typing import Any, Literal, TypeAlias

# Loaded modules keyed by module name (file name without its suffix)
ModuleMap: TypeAlias = dict[str, Any]

# How a module's export was classified by the route aggregator
ModuleShape: TypeAlias = Literal["routes_property", "route_array", "single_route", "non_route"]

# A directory path, or an object whose resource locator points into a directory
DirectoryRef: TypeAlias = str | os.PathLike[str] | object

# Anything the route predicate accepts: a mapping or an attribute-bearing object
RouteLike: TypeAlias = Any
