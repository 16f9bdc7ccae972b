"""Route shape classification.

A loaded module export is matched against four shapes, in this order (first
match wins)::

    routes_property   value.routes is truthy      -> every element of value.routes
    route_array       non-empty list/tuple whose  -> every element of value
                      first element is a route
    single_route      value is itself a route     -> value
    non_route         anything else               -> nothing

Field lookups are structural: mappings are read by key, everything else by
attribute, and a missing field reads as ``None``.  "Truthy" is plain Python
truthiness, so an empty-string path or a ``None`` handler does not count,
while any callable handler does regardless of its arity.

A truthy ``routes`` that is a string, bytes or a mapping is rejected with
``RouteShapeError`` instead of being spread into characters or keys.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from dirroutes._errors import RouteShapeError
from dirroutes._types import ModuleShape, RouteLike


@dataclass(frozen=True, slots=True)
class Classification:
    """The matched shape of a module export and the routes it contributes.

    Attributes:
        shape: Which rule matched.
        routes: Routes contributed, in the module's own order.

    """

    shape: ModuleShape
    routes: tuple[RouteLike, ...]


def field(value: Any, name: str) -> Any:
    """Read *name* from a mapping key or an attribute; ``None`` if absent."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def is_route(value: Any) -> bool:
    """Return True if *value* has a truthy path and a truthy handler.

    The handler may live at ``value.handler`` or ``value.config.handler``.
    """
    has_handler = field(value, "handler") or field(field(value, "config"), "handler")
    return bool(has_handler and field(value, "path"))


def classify_module(value: Any, *, routes_key: str = "routes") -> Classification:
    """Classify a module export into one of the four route shapes.

    Routes found through ``routes_property`` or ``route_array`` are passed
    through as-is; only the single-route case and the first array element are
    checked with :func:`is_route`.

    Raises:
        RouteShapeError: If ``value.routes`` is truthy but not an iterable of
            routes: ``True``, a number, or a ``str``/``bytes``/mapping, which
            would otherwise be spread element by element.

    """
    declared = field(value, routes_key)
    if declared:
        return Classification("routes_property", _as_route_tuple(declared, routes_key))

    if isinstance(value, (list, tuple)) and value and is_route(value[0]):
        return Classification("route_array", tuple(value))

    if is_route(value):
        return Classification("single_route", (value,))

    return Classification("non_route", ())


def _as_route_tuple(declared: object, routes_key: str) -> tuple[RouteLike, ...]:
    if isinstance(declared, (str, bytes, Mapping)) or not isinstance(declared, Iterable):
        msg = (
            f"'{routes_key}' must be a list or tuple of routes, "
            f"got {type(declared).__name__}"
        )
        raise RouteShapeError(msg)
    return tuple(declared)
