"""Plugin registry and the machinery that runs plugins over a syntax tree."""

from __future__ import annotations

import abc
import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from .errors import ConfigError, PluginError, SvgooError
from .xast import VisitResult, XastNode, traverse_tree

Visitor = Callable[[XastNode], Optional[VisitResult]]

_DEFAULT_PRESET_NAMES = (
    "removeDoctype",
    "removeXMLProcInst",
    "removeComments",
    "removeMetadata",
    "removeEditorsNSData",
    "cleanupAttrs",
    "mergeStyles",
    "inlineStyles",
    "minifyStyles",
    "cleanupIds",
    "removeUselessDefs",
    "cleanupNumericValues",
    "convertColors",
    "removeUnknownsAndDefaults",
    "removeNonInheritableGroupAttrs",
    "removeUselessStrokeAndFill",
    "removeViewBox",
    "cleanupEnableBackground",
    "removeHiddenElems",
    "removeEmptyText",
    "convertShapeToPath",
    "convertEllipseToCircle",
    "moveElemsAttrsToGroup",
    "moveGroupAttrsToElems",
    "collapseGroups",
    "convertPathData",
    "convertTransform",
    "removeEmptyAttrs",
    "removeEmptyContainers",
    "mergePaths",
    "removeUnusedNS",
    "sortDefsChildren",
    "removeTitle",
    "removeDesc",
)


@dataclass(frozen=True)
class PluginMeta:
    """Name and description of a plugin."""

    name: str
    description: str


class Plugin(abc.ABC):
    """A transformation that may hand back a visitor to run over the tree."""

    meta: PluginMeta

    @property
    def name(self) -> str:
        return self.meta.name

    @abc.abstractmethod
    def execute(
        self, root: XastNode, params: Mapping[str, Any], info: Mapping[str, Any]
    ) -> Optional[Visitor]:
        """Prepare the plugin for ``root`` and return a visitor, or None."""


class FunctionPlugin(Plugin):
    """A plugin whose work is done by an ordinary function."""

    def __init__(
        self,
        meta: PluginMeta,
        func: Callable[[XastNode, Mapping[str, Any], Mapping[str, Any]], Optional[Visitor]],
    ) -> None:
        self.meta = meta
        self._func = func

    def execute(
        self, root: XastNode, params: Mapping[str, Any], info: Mapping[str, Any]
    ) -> Optional[Visitor]:
        return self._func(root, params, info)


@dataclass
class PluginSpec:
    """A plugin selected by name, with the parameters to run it with."""

    name: str
    params: dict = field(default_factory=dict)

    @staticmethod
    def from_value(value: Any) -> "PluginSpec":
        """Build a spec from a bare name or a ``{"name", "params"}`` mapping."""
        if isinstance(value, str):
            return PluginSpec(value)
        if isinstance(value, Mapping):
            name = value.get("name")
            if not isinstance(name, str):
                raise ConfigError("plugin entry needs a string 'name'")
            params = value.get("params", {})
            if not isinstance(params, Mapping):
                raise ConfigError(f"plugin {name!r}: 'params' must be an object")
            return PluginSpec(name, copy.deepcopy(dict(params)))
        raise ConfigError("plugin entry must be a name or an object")


class PluginRegistry:
    """Plugins known by name."""

    def __init__(self) -> None:
        self._plugins: dict = {}

    def register(self, plugin: Plugin) -> None:
        """Add ``plugin``, replacing any plugin already registered under its name."""
        self._plugins[plugin.meta.name] = plugin

    def get(self, name: str) -> Optional[Plugin]:
        return self._plugins.get(name)

    def plugin_names(self) -> list:
        return list(self._plugins)

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins


def invoke_plugins(
    root: XastNode,
    specs,
    registry: PluginRegistry,
    info: Optional[Mapping[str, Any]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> None:
    """Run each plugin in ``specs`` over ``root`` in order.

    Parameters from ``overrides`` take precedence over each spec's own.
    """
    info = {} if info is None else info
    for spec in specs:
        plugin = registry.get(spec.name)
        if plugin is None:
            raise PluginError(spec.name, "Plugin not found")
        params = copy.deepcopy(spec.params)
        if overrides:
            params.update(overrides)
        try:
            visitor = plugin.execute(root, params, info)
        except SvgooError:
            raise
        except Exception as exc:
            raise PluginError(spec.name, str(exc)) from exc
        if visitor is None:
            continue
        if not callable(visitor):
            raise PluginError(spec.name, "plugin returned an invalid visitor")
        traverse_tree(root, visitor)


def default_preset() -> list:
    """The plugins of the default preset, in the order they run."""
    return [PluginSpec(name) for name in _DEFAULT_PRESET_NAMES]