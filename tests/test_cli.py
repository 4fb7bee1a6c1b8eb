import io
import sys

import pytest

from svgslim.cli import build_parser, main

SIMPLE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
    <rect x="10" y="10" width="80" height="80" fill="red"/>
</svg>"""

SIMPLE_OUT = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">'
    '<rect x="10" y="10" width="80" height="80" fill="red"/></svg>'
)

COMPLEX_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="200" height="200" viewBox="0 0 200 200">
    <!-- This is a comment that should be removed -->
    <metadata>
        <creator>Test Creator</creator>
    </metadata>
    <title>Test SVG</title>
    <desc>A test SVG for optimization</desc>
    <rect x="10" y="10" width="80" height="80" fill="red" stroke="none"/>
    <circle cx="150" cy="50" r="30" fill="blue"/>
    <g transform="translate(0,0)">
        <rect x="50" y="120" width="40" height="40" fill="green"/>
    </g>
</svg>"""

UNFORMATTED_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">


    <rect     x="10"    y="10"   width="80"      height="80"    fill="red"   />


</svg>"""

UNUSED_DEFS_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
    <defs>
        <linearGradient id="unusedGradient">
            <stop offset="0%" stop-color="red"/>
            <stop offset="100%" stop-color="green"/>
        </linearGradient>
    </defs>
    <rect x="10" y="10" width="80" height="80" fill="red"/>
</svg>"""

INVALID_SVG = "<not-svg>This is not a valid SVG</not-svg>"

MALFORMED_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
    <rect x="10" y="10" width="80" height="80" fill="red"
    <circle x="invalid" 
</svg>"""


def is_wellformed_svg(content):
    return (
        content.lstrip().startswith("<")
        and content.rstrip().endswith(">")
        and "xmlns" in content
        and "<svg" in content
        and ("</svg>" in content or "/>" in content)
    )


def generate_large_svg(elements):
    parts = [
        '<svg xmlns="http://www.w3.org/2000/svg" width="1000" height="1000" viewBox="0 0 1000 1000">'
    ]
    for i in range(elements):
        parts.append(
            f'<rect x="{(i % 100) * 10}" y="{(i // 100) * 10}" width="8" height="8" '
            f'fill="#{i % 0xFFFFFF:06x}"/>'
        )
    parts.append("</svg>")
    return "".join(parts)


def generate_nested_svg(depth):
    opening = "".join(f'<g transform="translate({i}, {i})">' for i in range(depth))
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">'
        + opening
        + '<rect x="10" y="10" width="10" height="10" fill="red"/>'
        + "</g>" * depth
        + "</svg>"
    )


def run(monkeypatch, capsys, argv, stdin=""):
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "svgslim" in capsys.readouterr().out


def test_help(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    out = capsys.readouterr().out
    for text in ("SVG optimization tool", "INPUT", "--output", "--config", "--pretty",
                 "--disable", "--enable"):
        assert text in out


def test_parser_collects_repeated_flags():
    args = build_parser().parse_args(
        ["a.svg", "--disable", "removeComments", "--disable", "removeMetadata", "-q"]
    )
    assert args.input == ["a.svg"]
    assert args.disable == ["removeComments", "removeMetadata"]
    assert args.enable == []
    assert args.quiet is True


def test_stdin_to_stdout(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, [], SIMPLE_SVG)
    assert code == 0
    assert out == SIMPLE_OUT


def test_minimal_svg(monkeypatch, capsys):
    minimal = '<svg xmlns="http://www.w3.org/2000/svg"/>'
    code, out, _ = run(monkeypatch, capsys, [], minimal)
    assert code == 0
    assert out == minimal


def test_stdin_with_dash_argument(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["-"], SIMPLE_SVG)
    assert code == 0
    assert out == SIMPLE_OUT


def test_stdin_with_dash_output(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["-", "--output", "-"], SIMPLE_SVG)
    assert code == 0
    assert out == SIMPLE_OUT


def test_file_input_to_stdout(monkeypatch, capsys, tmp_path):
    src = tmp_path / "input.svg"
    src.write_text(SIMPLE_SVG, encoding="utf-8")
    code, out, _ = run(monkeypatch, capsys, [str(src)])
    assert code == 0
    assert out == SIMPLE_OUT


def test_file_input_to_file_output(monkeypatch, capsys, tmp_path):
    src = tmp_path / "input.svg"
    dst = tmp_path / "output.svg"
    src.write_text(COMPLEX_SVG, encoding="utf-8")
    code, out, _ = run(monkeypatch, capsys, [str(src), "--output", str(dst)])
    assert code == 0
    assert out == ""
    assert src.exists()
    assert is_wellformed_svg(dst.read_text(encoding="utf-8"))


def test_stdin_to_file_output(monkeypatch, capsys, tmp_path):
    dst = tmp_path / "output.svg"
    code, _, _ = run(monkeypatch, capsys, ["--output", str(dst)], SIMPLE_SVG)
    assert code == 0
    assert dst.read_text(encoding="utf-8") == SIMPLE_OUT


def test_file_output_dash(monkeypatch, capsys, tmp_path):
    src = tmp_path / "input.svg"
    src.write_text(SIMPLE_SVG, encoding="utf-8")
    code, out, _ = run(monkeypatch, capsys, [str(src), "--output", "-"])
    assert code == 0
    assert out == SIMPLE_OUT


@pytest.mark.parametrize(
    "flags",
    [
        ["--pretty"],
        ["--enable", "sortAttrs"],
        ["--disable", "removeComments"],
        ["--disable", "removeComments", "--disable", "removeMetadata"],
        ["--disable", "removeComments", "--enable", "sortAttrs"],
    ],
)
def test_flags_still_produce_svg(monkeypatch, capsys, flags):
    code, out, _ = run(monkeypatch, capsys, flags, SIMPLE_SVG)
    assert code == 0
    assert is_wellformed_svg(out)
    assert "<rect" in out


def test_config_file(monkeypatch, capsys, tmp_path):
    cfg = tmp_path / "svgo.config.json"
    cfg.write_text(
        '{"pretty": true, "plugins": [{"name": "preset-default", "enabled": true},'
        ' {"name": "removeComments", "enabled": false}]}',
        encoding="utf-8",
    )
    code, out, _ = run(monkeypatch, capsys, ["--config", str(cfg)], COMPLEX_SVG)
    assert code == 0
    assert "<svg" in out and "</svg>" in out


def test_invalid_config_file(monkeypatch, capsys, tmp_path):
    cfg = tmp_path / "bad.json"
    cfg.write_text('{"plugins": "not-an-array"}', encoding="utf-8")
    code, out, err = run(monkeypatch, capsys, ["--config", str(cfg)], SIMPLE_SVG)
    assert code == 1
    assert out == ""
    assert "Configuration error" in err


def test_nonexistent_input_file(monkeypatch, capsys, tmp_path):
    code, _, err = run(monkeypatch, capsys, [str(tmp_path / "nonexistent.svg")])
    assert code == 1
    assert "No such file" in err


def test_nonexistent_config_file(monkeypatch, capsys, tmp_path):
    missing = tmp_path / "nonexistent.config.json"
    code, _, err = run(monkeypatch, capsys, ["--config", str(missing)], SIMPLE_SVG)
    assert code == 1
    assert "No such file" in err


@pytest.mark.parametrize("text", ["", "   \n  \t  \n  "])
def test_empty_input_fails(monkeypatch, capsys, text):
    code, out, err = run(monkeypatch, capsys, [], text)
    assert code == 1
    assert out == ""
    assert "Invalid input" in err


def test_invalid_svg_is_passed_through(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, [], INVALID_SVG)
    assert code == 0
    assert out == INVALID_SVG


def test_malformed_xml_is_lenient(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, [], MALFORMED_SVG)
    assert code == 0
    assert out.startswith("<svg") and out.endswith("</svg>")


def test_complex_svg_optimization(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, [], COMPLEX_SVG)
    assert code == 0
    assert "xmlns" in out
    assert "<!--" not in out
    assert len(out) < len(COMPLEX_SVG)


def test_comments_removed(monkeypatch, capsys):
    svg = """<svg xmlns="http://www.w3.org/2000/svg">
        <!-- This comment should be removed by default -->
        <rect x="0" y="0" width="10" height="10"/>
    </svg>"""
    code, out, _ = run(monkeypatch, capsys, [], svg)
    assert code == 0
    assert "rect" in out
    assert "<!--" not in out and "-->" not in out


def test_unformatted_cleaned(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, [], UNFORMATTED_SVG)
    assert code == 0
    assert is_wellformed_svg(out)
    assert "    " not in out


def test_unused_defs(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, [], UNUSED_DEFS_SVG)
    assert code == 0
    assert is_wellformed_svg(out)


def test_large_svg(monkeypatch, capsys):
    large = generate_large_svg(1000)
    code, out, _ = run(monkeypatch, capsys, [], large)
    assert code == 0
    assert is_wellformed_svg(out)
    assert out.count("<rect") == 1000


def test_very_large_svg(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, [], generate_large_svg(10000))
    assert code == 0
    assert out.count("<rect") == 10000


def test_nested_svg(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, [], generate_nested_svg(50))
    assert code == 0
    assert is_wellformed_svg(out)
    assert out.count("<g ") == 50


def test_utf8_preserved(monkeypatch, capsys):
    svg = """<svg xmlns="http://www.w3.org/2000/svg">
        <text>Hello 世界 🌍</text>
    </svg>"""
    code, out, _ = run(monkeypatch, capsys, [], svg)
    assert code == 0
    assert is_wellformed_svg(out)
    assert "Hello 世界 🌍" in out


def test_deterministic_output(monkeypatch, capsys):
    _, first, _ = run(monkeypatch, capsys, [], SIMPLE_SVG)
    _, second, _ = run(monkeypatch, capsys, [], SIMPLE_SVG)
    assert first == second


def test_multiple_input_files(monkeypatch, capsys, tmp_path):
    one = tmp_path / "file1.svg"
    two = tmp_path / "file2.svg"
    one.write_text(SIMPLE_SVG, encoding="utf-8")
    two.write_text(COMPLEX_SVG, encoding="utf-8")
    code, out, _ = run(monkeypatch, capsys, [str(one), str(two)])
    assert code == 0
    out1 = tmp_path / "file1.min.svg"
    out2 = tmp_path / "file2.min.svg"
    assert out1.read_text(encoding="utf-8") == SIMPLE_OUT
    assert "svg" in out2.read_text(encoding="utf-8")
    assert f"Optimized: {one} -> {out1}" in out


def test_multiple_input_files_quiet(monkeypatch, capsys, tmp_path):
    one = tmp_path / "a.svg"
    two = tmp_path / "b.svg"
    one.write_text(SIMPLE_SVG, encoding="utf-8")
    two.write_text(SIMPLE_SVG, encoding="utf-8")
    code, out, _ = run(monkeypatch, capsys, ["-q", str(one), str(two)])
    assert code == 0
    assert out == ""
    assert (tmp_path / "b.min.svg").exists()


def test_multiple_files_single_output_error(monkeypatch, capsys, tmp_path):
    one = tmp_path / "file1.svg"
    two = tmp_path / "file2.svg"
    one.write_text(SIMPLE_SVG, encoding="utf-8")
    two.write_text(COMPLEX_SVG, encoding="utf-8")
    argv = [str(one), str(two), "--output", str(tmp_path / "output.svg")]
    code, _, err = run(monkeypatch, capsys, argv)
    assert code == 1
    assert (
        "Cannot specify a single output file when processing multiple input files" in err
    )
    assert not (tmp_path / "file1.min.svg").exists()


def test_multiple_files_with_dash_output(monkeypatch, capsys, tmp_path):
    one = tmp_path / "file1.svg"
    two = tmp_path / "file2.svg"
    one.write_text(SIMPLE_SVG, encoding="utf-8")
    two.write_text(SIMPLE_SVG, encoding="utf-8")
    code, out, _ = run(monkeypatch, capsys, [str(one), str(two), "--output", "-"])
    assert code == 0
    assert "svg" in out
    assert (tmp_path / "file1.min.svg").exists()
    assert (tmp_path / "file2.min.svg").exists()


def test_stdin_among_multiple_inputs(monkeypatch, capsys, tmp_path):
    other = tmp_path / "other.svg"
    other.write_text(SIMPLE_SVG, encoding="utf-8")
    code, out, _ = run(monkeypatch, capsys, ["-", str(other)], SIMPLE_SVG)
    assert code == 0
    assert out.startswith(SIMPLE_OUT + "\n")
    assert (tmp_path / "other.min.svg").read_text(encoding="utf-8") == SIMPLE_OUT