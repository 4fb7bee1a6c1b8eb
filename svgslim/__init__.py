"""Text-level SVG minifier with an svgo-style configuration, syntax tree and plugin registry."""

__version__ = "1.2.0"