"""Optimiser configuration and its JSON form."""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union

from .errors import ConfigError

DEFAULT_PRECISION = 5
_MAX_PRECISION = 0xFFFFFFFF
_CONFIG_FIELDS = frozenset({"pretty", "precision", "plugins"})


@dataclass
class PluginConfig:
    """Settings for one plugin."""

    name: str
    enabled: bool = True
    params: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "enabled": self.enabled,
            "params": copy.deepcopy(self.params),
        }


def _default_plugins() -> list:
    return [PluginConfig(name="preset-default")]


@dataclass
class Config:
    """Top-level optimiser configuration."""

    pretty: bool = False
    precision: int = DEFAULT_PRECISION
    plugins: list = field(default_factory=_default_plugins)
    options: dict = field(default_factory=dict)

    def enable_plugin(self, plugin_name: str) -> None:
        """Enable a plugin, adding it if it is not configured yet."""
        for plugin in self.plugins:
            if plugin.name == plugin_name:
                plugin.enabled = True
                return
        self.plugins.append(PluginConfig(name=plugin_name))

    def disable_plugin(self, plugin_name: str) -> None:
        """Disable a configured plugin; unknown names are ignored."""
        for plugin in self.plugins:
            if plugin.name == plugin_name:
                plugin.enabled = False
                return

    def to_dict(self) -> dict:
        """Return the configuration as JSON-compatible data, options flattened."""
        data: dict = {
            "pretty": self.pretty,
            "precision": self.precision,
            "plugins": [plugin.to_dict() for plugin in self.plugins],
        }
        for key, value in self.options.items():
            if key not in _CONFIG_FIELDS:
                data[key] = copy.deepcopy(value)
        return data

    def to_js_config(self) -> str:
        """Return the configuration as compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def save_to_file(self, path: Union[str, os.PathLike]) -> None:
        """Write the configuration to ``path`` as indented JSON."""
        Path(path).write_text(
            json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
        )


def _plugin_from_dict(data: Any) -> PluginConfig:
    if not isinstance(data, Mapping):
        raise ConfigError("each plugin entry must be an object")
    name = data.get("name")
    if not isinstance(name, str):
        raise ConfigError("plugin entry needs a string 'name'")
    enabled = data.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ConfigError(f"plugin {name!r}: 'enabled' must be a boolean")
    params = data.get("params", {})
    if not isinstance(params, Mapping):
        raise ConfigError(f"plugin {name!r}: 'params' must be an object")
    return PluginConfig(name=name, enabled=enabled, params=dict(params))


def config_from_dict(data: Any) -> Config:
    """Build a Config from parsed JSON data, validating field types."""
    if not isinstance(data, Mapping):
        raise ConfigError("configuration must be a JSON object")
    pretty = data.get("pretty", False)
    if not isinstance(pretty, bool):
        raise ConfigError("'pretty' must be a boolean")
    precision = data.get("precision", DEFAULT_PRECISION)
    if (
        isinstance(precision, bool)
        or not isinstance(precision, int)
        or not 0 <= precision <= _MAX_PRECISION
    ):
        raise ConfigError("'precision' must be a non-negative integer")
    plugins_data = data.get("plugins", [])
    if not isinstance(plugins_data, list):
        raise ConfigError("'plugins' must be an array")
    plugins = [_plugin_from_dict(item) for item in plugins_data]
    options = {key: value for key, value in data.items() if key not in _CONFIG_FIELDS}
    return Config(pretty=pretty, precision=precision, plugins=plugins, options=options)


def load_config(path: Union[str, os.PathLike]) -> Config:
    """Load a JSON configuration file.

    Errors reading the file propagate as OSError; content that is not a valid
    configuration raises ConfigError.
    """
    content = Path(path).read_text(encoding="utf-8")
    try:
        return config_from_dict(json.loads(content))
    except (json.JSONDecodeError, ConfigError) as exc:
        raise ConfigError("Configuration file must be valid JSON for now") from exc