# svgslim

A small SVG minifier, usable as a Python library or from the command line.
It works on the markup as text and applies these passes, in this order:

1. remove `<!-- ... -->` comments;
2. collapse whitespace between a `>` and the next `<`;
3. trim leading and trailing whitespace;
4. drop empty attributes such as ` class=""`;
5. turn every remaining run of whitespace into a single space.

It reads and writes an svgo-style JSON configuration.

## Installation

```
pip install svgslim
```

## Command line

```
svgslim input.svg -o output.svg      # optimize one file
svgslim a.svg b.svg                  # writes a.min.svg and b.min.svg
cat input.svg | svgslim > out.svg    # read stdin, write stdout
svgslim --pretty input.svg
svgslim --config svgo.config.json input.svg
svgslim --disable removeComments --enable sortAttrs input.svg
```

Options:

- `INPUT ...` – input files; `-` (or no input at all) reads stdin.
- `-o, --output OUTPUT` – output file; `-` writes to stdout. With several
  inputs only `-` is accepted; a file name is an error.
- `-q, --quiet` – do not print the `Optimized: a.svg -> a.min.svg` lines
  shown when several files are processed.
- `-c, --config CONFIG` – load a JSON configuration file.
- `--pretty`, `--disable PLUGIN`, `--enable PLUGIN` – set the matching
  fields of the configuration (both plugin options may be repeated).
- `--version`, `--help`.

When several inputs are written to stdout, their outputs are separated by a
newline. Empty or whitespace-only input, a missing file, or an invalid
configuration prints `Error: ...` to stderr and exits with status 1.

## Library

```python
from svgslim.optimizer import optimize_svg, OptimizerBuilder
from svgslim.config import Config

svg = '<svg xmlns="http://www.w3.org/2000/svg">  <!-- note -->  <rect/></svg>'

print(optimize_svg(svg, Config()))
# <svg xmlns="http://www.w3.org/2000/svg"><rect/></svg>

result = (
    OptimizerBuilder()
    .pretty(True)
    .precision(3)
    .enable_plugin("removeComments")
    .disable_plugin("preset-default")
    .optimize(svg)
)
```

`optimize_svg_async` and `OptimizerBuilder.optimize_async` run the same work
in a worker thread for asyncio code. `OptimizerBuilder.config_from_file(path)`
and `use_config(config)` replace the builder's configuration.

The passes themselves live in `svgslim.engine`:

- `optimize_document(svg_string, config=None)` returns an
  `OptimizationResult` with `data` and the first `width` and `height`
  attribute values found, or `None`.
- `list_plugins()` returns `PluginDescription` entries for
  `removeComments`, `removeEmptyAttrs` and `collapseWhitespace`.
- `validate_svg(value)` tells whether a string contains `<svg` or `<?xml`.

### Configuration

```json
{
  "pretty": false,
  "precision": 5,
  "plugins": [
    {"name": "preset-default", "enabled": true},
    {"name": "removeComments", "enabled": false, "params": {}}
  ]
}
```

`svgslim.config.load_config(path)` reads such a file; unknown top-level keys
are kept in `Config.options`. `config_from_dict(data)` builds a `Config` from
parsed data, and `Config.to_dict()`, `to_js_config()` and `save_to_file(path)`
write it back. `enable_plugin(name)` adds a plugin entry if none exists;
`disable_plugin(name)` ignores unknown names.

Errors are raised as subclasses of `svgslim.errors.SvgooError`
(`InvalidInputError`, `ConfigError`, `PluginError`, `SvgProcessingError`,
`JavaScriptError`). Problems reading a file are raised as `OSError`.

### Document tree and plugins

`svgslim.xast` provides node types (`XastRoot`, `XastElement`, `XastText`,
`XastComment`, `XastDoctype`, `XastInstruction`, `XastCdata`), a depth-first
`traverse_tree(node, callback)` steered by `VisitResult`, and
`node_to_dict` / `node_from_dict` for JSON-compatible data.

`svgslim.plugins` provides `PluginRegistry`, the `Plugin` base class,
`FunctionPlugin`, `PluginSpec.from_value`, and `invoke_plugins`, which runs
registered plugins over a tree and applies the visitors they return.
`default_preset()` lists the names of the default preset's plugins.

## What it does not do

- There is no XML parser: the optimiser never builds a tree from markup, and
  malformed input is passed through the text passes rather than rejected.
- The configuration is carried along but does not change the output:
  `pretty`, `precision` and the plugin list (and so `--pretty`, `--enable`
  and `--disable`) are recorded only.
- No plugins are implemented. `default_preset()` gives names only, and the
  registry holds just the plugins you register yourself.