"""Command-line interface for the SVG optimiser."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import Config, load_config
from .errors import SvgooError
from .optimizer import optimize_svg

_VERSION = "1.2.0"

_DESCRIPTION = """\
Cross-platform SVG optimizer with svgo compatibility.

svgslim is a standalone SVG optimization tool.

EXAMPLES:
  svgslim input.svg -o output.svg          Optimize single file
  svgslim *.svg                            Process multiple files
  cat input.svg | svgslim > output.svg     Use with pipes
  svgslim --pretty input.svg               Pretty print output"""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="svgslim",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"svgslim {_VERSION}")
    parser.add_argument(
        "input",
        nargs="*",
        metavar="INPUT",
        help="Input SVG file(s) (use - for stdin). With several files, "
        ".min.svg versions are created.",
    )
    parser.add_argument(
        "-o", "--output", metavar="OUTPUT", help="Output file (use - for stdout)"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress non-error output"
    )
    parser.add_argument(
        "-c", "--config", metavar="CONFIG", help="Path to JSON configuration file"
    )
    parser.add_argument(
        "--pretty", action="store_true", help="Format output with indentation"
    )
    parser.add_argument(
        "--disable", action="append", default=[], metavar="PLUGIN", help="Disable plugin(s)"
    )
    parser.add_argument(
        "--enable", action="append", default=[], metavar="PLUGIN", help="Enable plugin(s)"
    )
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _min_name(path: str) -> Path:
    source = Path(path)
    ext = source.suffix[1:] if source.suffix else ""
    return source.with_name(f"{source.stem}.min.{ext}")


def _run(args: argparse.Namespace, inputs: list) -> int:
    config = load_config(args.config) if args.config else Config()
    if args.pretty:
        config.pretty = True
    for name in args.disable:
        config.disable_plugin(name)
    for name in args.enable:
        config.enable_plugin(name)

    output = args.output
    many = len(inputs) > 1
    if many and output is not None and output != "-":
        print(
            "Error: Cannot specify a single output file when processing multiple input files",
            file=sys.stderr,
        )
        print(
            "Use --output with a directory path or omit it to output to stdout",
            file=sys.stderr,
        )
        return 1

    for index, input_path in enumerate(inputs):
        optimized = optimize_svg(_read_input(input_path), config)

        if not many:
            destination = output
        elif input_path == "-":
            destination = None
        else:
            destination = str(_min_name(input_path))

        if destination == "-":
            sys.stdout.write(optimized)
        elif destination is not None:
            Path(destination).write_text(optimized, encoding="utf-8")
            if many and not args.quiet:
                print(f"Optimized: {input_path} -> {destination}")
        else:
            sys.stdout.write(optimized)
            if index < len(inputs) - 1:
                sys.stdout.write("\n")
    sys.stdout.flush()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)
    inputs = list(args.input) or ["-"]
    try:
        return _run(args, inputs)
    except (OSError, UnicodeDecodeError, SvgooError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())