"""Exception hierarchy for SVG optimisation."""

from __future__ import annotations


class SvgooError(Exception):
    """Base class for every error raised by this package."""

    prefix = "svgslim error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class JavaScriptError(SvgooError):
    """The optimisation engine failed while running a script-level step."""

    prefix = "JavaScript runtime error"


class SvgProcessingError(SvgooError):
    """An SVG document could not be parsed or processed."""

    prefix = "SVG processing error"


class ConfigError(SvgooError):
    """A configuration could not be loaded or is malformed."""

    prefix = "Configuration error"


class InvalidInputError(SvgooError):
    """The input handed to the optimiser is unusable."""

    prefix = "Invalid input"


class PluginError(SvgooError):
    """A plugin failed or could not be found."""

    prefix = "Plugin error"

    def __init__(self, plugin_name: str, message: str) -> None:
        super().__init__(message)
        self.plugin_name = plugin_name

    def __str__(self) -> str:
        return f"{self.prefix}: {self.plugin_name}: {self.message}"