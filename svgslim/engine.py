"""Built-in text-level SVG optimisation passes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .config import Config
from .errors import InvalidInputError

ENGINE_VERSION = "4.0.0-svgoo"

# The passes follow ECMAScript regular-expression semantics: ``\s`` covers this
# exact character set and ``\w`` is ASCII only.
_WS_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WS = "[" + re.escape(_WS_CHARS) + "]"
_WORD = "[A-Za-z0-9_]"

_COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")
_BETWEEN_TAGS_RE = re.compile(">" + _WS + "+<")
_EMPTY_ATTR_RE = re.compile(_WS + "+" + _WORD + '+=""' + _WS + "*")
_WS_RUN_RE = re.compile(_WS + "+")
_WIDTH_RE = re.compile(r'width="([^"]*?)"')
_HEIGHT_RE = re.compile(r'height="([^"]*?)"')


@dataclass(frozen=True)
class OptimizationResult:
    """Optimised markup plus the dimensions found in it, if any."""

    data: str
    width: Optional[str] = None
    height: Optional[str] = None


@dataclass(frozen=True)
class PluginDescription:
    """Name and summary of one built-in pass."""

    name: str
    description: str


_PLUGINS = (
    PluginDescription("removeComments", "Remove HTML comments"),
    PluginDescription("removeEmptyAttrs", "Remove empty attributes"),
    PluginDescription("collapseWhitespace", "Collapse whitespace"),
)


def optimize_document(
    svg_string: str, config: Union[Config, Mapping[str, Any], None] = None
) -> OptimizationResult:
    """Run the built-in passes over ``svg_string``.

    The configuration is accepted so callers can pass one through; the
    built-in passes do not depend on any of its settings.
    """
    if not isinstance(svg_string, str):
        raise InvalidInputError("SVG content must be a string")
    if config is not None and not isinstance(config, (Config, Mapping)):
        raise InvalidInputError("configuration must be a Config or a mapping")

    optimized = _COMMENT_RE.sub("", svg_string)
    optimized = _BETWEEN_TAGS_RE.sub("><", optimized)
    optimized = optimized.strip(_WS_CHARS)
    optimized = _EMPTY_ATTR_RE.sub(" ", optimized)
    optimized = _WS_RUN_RE.sub(" ", optimized)

    width = _WIDTH_RE.search(optimized)
    height = _HEIGHT_RE.search(optimized)
    return OptimizationResult(
        data=optimized,
        width=width.group(1) if width else None,
        height=height.group(1) if height else None,
    )


def list_plugins() -> list:
    """Describe the built-in passes, in the order they are listed."""
    return list(_PLUGINS)


def validate_svg(value: Any) -> bool:
    """Tell whether ``value`` is a string that looks like SVG or XML markup."""
    if not isinstance(value, str):
        return False
    trimmed = value.strip(_WS_CHARS)
    return "<svg" in trimmed or "<?xml" in trimmed