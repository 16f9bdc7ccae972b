"""Shared test fixtures for dirroutes."""

from __future__ import annotations

from pathlib import Path

import pytest

# One module per route shape, plus files the loader must leave alone.
ROUTE_FILES: dict[str, str] = {
    "single_route.py": (
        "async def _handler(request):\n"
        "    return 'single'\n"
        "\n"
        "default = {'path': '/singleroute', 'handler': _handler}\n"
    ),
    "multi_route.py": (
        "routes = [\n"
        "    {'path': '/multiroute1', 'handler': lambda request: 'one'},\n"
        "    {'path': '/multiroute2', 'handler': lambda request: 'two'},\n"
        "]\n"
    ),
    "array_route.py": (
        "default = [\n"
        "    {'path': '/arrayroute1', 'handler': lambda request: 'one'},\n"
        "    {'path': '/arrayroute2', 'handler': lambda request: 'two'},\n"
        "]\n"
    ),
    "config_route.py": (
        "default = {'path': '/configroute', 'config': {'handler': lambda request: 'cfg'}}\n"
    ),
    "non_route_module.py": "default = {'path': '/nonroute'}\n",
    "helpers.py": (
        "def slugify(text):\n"
        "    return text.lower().replace(' ', '-')\n"
    ),
    "notes.txt": "not a module\n",
    # The entry point sits beside its routes and must never be imported.
    "__init__.py": "raise RuntimeError('entry point was imported')\n",
}


def write_module(directory: Path, name: str, content: str) -> Path:
    """Write a module file and return its path."""
    p = directory / name
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content)
    return p


@pytest.fixture
def routes_dir(tmp_path: Path) -> Path:
    """An empty routes/ directory."""
    d = tmp_path / "routes"
    d.mkdir()
    return d


@pytest.fixture
def populated_routes_dir(routes_dir: Path) -> Path:
    """A routes/ directory holding one module per route shape."""
    for name, content in ROUTE_FILES.items():
        write_module(routes_dir, name, content)
    return routes_dir
