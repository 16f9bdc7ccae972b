"""Load LoaderConfig from dirroutes.yaml or dirroutes.toml if present.

Merges file config with keyword overrides. Overrides win.
"""

from __future__ import annotations

from pathlib import Path

from dirroutes._errors import ConfigError
from dirroutes.config import LoaderConfig

_KNOWN_KEYS = frozenset({
    "suffix",
    "index_name",
    "routes_key",
    "module_prefix",
    "sort_entries",
})


def load_config(root: Path, **overrides: object) -> LoaderConfig:
    """Load LoaderConfig from *root*, optionally merging a config file.

    Looks for dirroutes.yaml, dirroutes.yml, or dirroutes.toml in *root*.
    A missing file yields defaults; a malformed one raises ``ConfigError``.
    """
    file_config = _read_config_file(Path(root))
    merged = {**file_config, **overrides}
    return LoaderConfig(**merged)  # type: ignore[arg-type]


def _read_config_file(root: Path) -> dict[str, object]:
    for name in ("dirroutes.yaml", "dirroutes.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "dirroutes.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    import yaml

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        msg = f"Malformed config file {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data, path)


def _parse_toml(path: Path) -> dict[str, object]:
    import tomllib

    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as exc:
        msg = f"Malformed config file {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data, path)


def _flatten_section(data: object, path: Path) -> dict[str, object]:
    """Extract dirroutes.* keys and bare known keys into one flat dict."""
    if not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    result: dict[str, object] = {}
    section = data.get("dirroutes")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _KNOWN_KEYS:
                result[k] = v
    for k, v in data.items():
        if k != "dirroutes" and k in _KNOWN_KEYS:
            result.setdefault(k, v)
    return result
