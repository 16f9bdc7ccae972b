"""dirroutes — load a directory of modules and collect their declarative routes.

Drop route modules into a directory and load them all at once. Each module
is imported, classified by the shape of its export, and every route it
declares ends up in one flat list.

Quick start::

    import dirroutes

    result = await dirroutes.load("app/routes")
    result["routes"]      # every route, in directory order
    result["helpers"]     # non-route modules stay reachable by name

Raw discovery without classification::

    modules = await dirroutes.auto_load_modules("app/routes")

Route shapes recognised per module (first match wins):

    routes = [...]                   routes property
    default = [{path, handler}, ...] route array
    default = {path, handler}        single route
    path = "/x"; handler = ...       single route (module namespace)

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "DirectoryIOError",
    "DirectoryNotFoundError",
    "EventLog",
    "InvalidInputError",
    "LoaderConfig",
    "LoaderError",
    "ModuleEvaluationError",
    "ModuleLoadError",
    "ModuleSyntaxError",
    "RouteShapeError",
    "__version__",
    "aggregate",
    "auto_load_modules",
    "classify_module",
    "is_route",
    "load",
    "load_config",
    "resolve_directory",
    "resolve_export",
]

_LAZY = {
    "ConfigError": "dirroutes._errors",
    "DirectoryIOError": "dirroutes._errors",
    "DirectoryNotFoundError": "dirroutes._errors",
    "InvalidInputError": "dirroutes._errors",
    "LoaderError": "dirroutes._errors",
    "ModuleEvaluationError": "dirroutes._errors",
    "ModuleLoadError": "dirroutes._errors",
    "ModuleSyntaxError": "dirroutes._errors",
    "RouteShapeError": "dirroutes._errors",
    "EventLog": "dirroutes.observability.log",
    "LoaderConfig": "dirroutes.config",
    "aggregate": "dirroutes.routes.aggregator",
    "auto_load_modules": "dirroutes.autoload",
    "classify_module": "dirroutes.routes.classify",
    "is_route": "dirroutes.routes.classify",
    "load": "dirroutes.routes.aggregator",
    "load_config": "dirroutes.config_loader",
    "resolve_directory": "dirroutes.routes.entry",
    "resolve_export": "dirroutes.autoload",
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import dirroutes`` fast while providing a flat top-level API.
    """
    module_path = _LAZY.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
