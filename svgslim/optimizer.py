"""High-level optimisation entry points and a fluent builder."""

from __future__ import annotations

import asyncio
import os
from typing import Optional, Union

from .config import Config, load_config
from .engine import optimize_document
from .errors import InvalidInputError


def optimize_svg(svg_content: str, config: Optional[Config] = None) -> str:
    """Optimise ``svg_content`` and return the resulting markup."""
    if not isinstance(svg_content, str):
        raise InvalidInputError("SVG content must be a string")
    if not svg_content.strip():
        raise InvalidInputError("SVG content cannot be empty")
    if config is None:
        config = Config()
    config.to_js_config()
    return optimize_document(svg_content, config).data


async def optimize_svg_async(svg_content: str, config: Optional[Config] = None) -> str:
    """Optimise ``svg_content`` in a worker thread."""
    return await asyncio.to_thread(optimize_svg, svg_content, config)


class OptimizerBuilder:
    """Fluent configuration of an optimisation run."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()

    def pretty(self, pretty: bool) -> "OptimizerBuilder":
        self.config.pretty = bool(pretty)
        return self

    def precision(self, precision: int) -> "OptimizerBuilder":
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError("precision must be a non-negative integer")
        self.config.precision = precision
        return self

    def enable_plugin(self, plugin_name: str) -> "OptimizerBuilder":
        self.config.enable_plugin(plugin_name)
        return self

    def disable_plugin(self, plugin_name: str) -> "OptimizerBuilder":
        self.config.disable_plugin(plugin_name)
        return self

    def config_from_file(self, path: Union[str, os.PathLike]) -> "OptimizerBuilder":
        """Replace the configuration with one loaded from ``path``."""
        self.config = load_config(path)
        return self

    def use_config(self, config: Config) -> "OptimizerBuilder":
        self.config = config
        return self

    def optimize(self, svg_content: str) -> str:
        return optimize_svg(svg_content, self.config)

    async def optimize_async(self, svg_content: str) -> str:
        return await optimize_svg_async(svg_content, self.config)