# topmark:header:start
#
#   project      : Frack
#   file         : test_diagnostic_render.py
#   file_relpath : tests/rendering/test_diagnostic_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end rendering of errors and warnings.

The expected strings are spelled out byte for byte: header, location arrow,
code block, helps with their suggestions, then notes.
"""

from __future__ import annotations

import io

from frack import render_to_string
from frack.config.model import Palette
from frack.diagnostic.model import Code, Error, File, Help, Line, Marker, Note, Span, Warning
from frack.rendering.renderer import DiagnosticRenderer
from tests.conftest import B, C, R, rule


def _mismatched_types() -> Error:
    return Error(
        error_code="E0308",
        message="mismatched types",
        file=File("main.rs", 7, 5),
        code=Code(
            [
                Line(
                    "fn foo() -> String {",
                    3,
                    Marker(Span(12, 17), "-", 12, "expected `String` because of return type"),
                ),
                Line("    12_i32", 7, Marker(Span(4, 9), message="expected `String`, found `i32`")),
            ]
        ),
        helps=[
            Help(
                "consider using the available `ToString` impl",
                Code.single(
                    "    12_i32.to_string()",
                    7,
                    Marker(Span(10, 21), "~", 10, "convert this into a `String`", True),
                ),
            )
        ],
    )


def test_mismatched_types_renders_like_rustc() -> None:
    expected = (
        f"{B}{C(9)}error[E0308]{R}{B}: mismatched types{R}\n"
        f"{C(12)} --> {R}main.rs:7:5\n"
        f"{rule('  |')}\n"
        f"{rule('3 | ')}fn foo() -> String {{\n"
        f"{rule('  | ')}{B}{C(12)}            ------ expected `String` because of return type{R}\n"
        f"{rule('...')}\n"
        f"{rule('7 | ')}    12_i32\n"
        f"{rule('  | ')}{B}{C(9)}    ^^^^^^ expected `String`, found `i32`{R}\n"
        f"{B}{C(14)}help{R}: consider using the available `ToString` impl\n"
        f"{rule('  |')}\n"
        f"{rule('7 | ')}    12_i32{C(10)}.to_string(){R}\n"
        f"{rule('  | ')}{B}{C(10)}          ~~~~~~~~~~~~ convert this into a `String`{R}\n"
    )
    assert render_to_string(_mismatched_types()) == expected


def test_str_and_render_match_render_to_string() -> None:
    error = _mismatched_types()
    sink = io.StringIO()
    error.render(sink)
    assert sink.getvalue() == str(error) == error.render_to_string()


def test_error_without_helps_or_notes_closes_its_block() -> None:
    error = Error("E0425", "cannot find value `y`", File("a.rs", 2, 5), Code.single(
        "    y", 2, Marker(Span(4, 4), message="not found in this scope")
    ))
    out = render_to_string(error)
    assert out.endswith(f"not found in this scope{R}\n{rule('  |')}\n")


def test_error_with_note_leaves_block_open() -> None:
    error = Error(
        "E0425",
        "cannot find value `y`",
        File("a.rs", 2, 5),
        Code.single("    y", 2, Marker(Span(4, 4))),
        notes=[Note("did you mean `x`?")],
    )
    out = render_to_string(error)
    assert out.endswith(f"{B}{C(9)}    ^{R}\n{B}note{R}: did you mean `x`?\n")


def test_help_without_suggestion_is_a_single_row() -> None:
    assert render_to_string(Help("remove this")) == f"{B}{C(14)}help{R}: remove this\n"


def test_help_passes_extend_to_its_suggestion() -> None:
    help = Help("try this", Code.single("x", 1, Marker(Span(0, 0), "~", 10)))
    assert render_to_string(help, extend=False).endswith(f"~{R}\n")
    assert render_to_string(help, extend=True).endswith(f"~{R}\n{rule('  |')}\n")


def test_helps_and_notes_keep_their_order() -> None:
    error = Error(
        "E1",
        "m",
        File("f", 1, 1),
        Code.single("x", 1),
        helps=[Help("first"), Help("second")],
        notes=[Note("third"), Note("fourth")],
    )
    out = render_to_string(error)
    positions = [out.index(word) for word in ("first", "second", "third", "fourth")]
    assert positions == sorted(positions)


def test_warning_note_is_indented_under_the_gutter() -> None:
    warning = Warning(
        "unused variable: `x`",
        File("src/main.rs", 12, 9),
        Code.single("    let x = 5;", 12, Marker(Span(8, 8), color=3)),
        notes=[Note("`#[warn(unused_variables)]` on by default")],
    )
    expected = (
        f"{B}{C(3)}warning{R}{B}: unused variable: `x`{R}\n"
        f"{C(12)} --> {R}src/main.rs:12:9\n"
        f"{rule('   |')}\n"
        f"{rule('12 | ')}    let x = 5;\n"
        f"{rule('   | ')}{B}{C(3)}        ^{R}\n"
        f"{rule('   = ')}{B}note{R}: `#[warn(unused_variables)]` on by default\n"
    )
    assert render_to_string(warning) == expected


def test_warning_note_prefix_tracks_gutter_width() -> None:
    warning = Warning(
        "w", File("f", 1, 1), Code.single("x", 1234), notes=[Note("n")]
    )
    assert render_to_string(warning).endswith(f"{rule('     = ')}{B}note{R}: n\n")


def test_bare_note_uses_error_form() -> None:
    assert render_to_string(Note("hello")) == f"{B}note{R}: hello\n"


def test_palette_overrides_label_and_gutter_colors() -> None:
    palette = Palette(error=1, warning=2, location=4, help=6)
    error = Error(
        "E1", "m", File("f", 1, 1), Code.single("x", 1), helps=[Help("h")]
    )
    out = render_to_string(error, palette=palette)
    assert out.startswith(f"{B}{C(1)}error[E1]{R}")
    assert f"{C(4)} --> {R}" in out
    assert f"{B}{C(4)}  |{R}\n" in out
    assert f"{B}{C(6)}help{R}: h\n" in out
    assert C(12) not in out


def test_render_error_and_render_warning_entry_points() -> None:
    renderer = DiagnosticRenderer()
    error = Error("E1", "m", File("f", 1, 1), Code.single("x", 1))
    warning = Warning("m", File("f", 1, 1), Code.single("x", 1))

    error_sink, warning_sink = io.StringIO(), io.StringIO()
    renderer.render_error(error, error_sink)
    renderer.render_warning(warning, warning_sink)

    assert error_sink.getvalue() == render_to_string(error)
    assert warning_sink.getvalue() == render_to_string(warning)


def test_two_line_sample_with_gap_and_colored_suggestion() -> None:
    error = Error(
        "E0308",
        "mismatched types",
        File("main.rs", 7, 5),
        Code(
            [
                Line("fn foo() -> String {", 3, Marker(Span(12, 18), "-", 12)),
                Line("    12_i32", 7, Marker(Span(4, 9))),
            ]
        ),
        helps=[
            Help(
                "consider using the available `ToString` impl",
                Code.single(
                    "    12_i32.to_string()",
                    7,
                    Marker(Span(10, 21), "~", 10, color_span=True),
                ),
            )
        ],
    )
    rows = render_to_string(error).split("\n")
    assert rows == [
        f"{B}{C(9)}error[E0308]{R}{B}: mismatched types{R}",
        f"{C(12)} --> {R}main.rs:7:5",
        rule("  |"),
        f"{rule('3 | ')}fn foo() -> String {{",
        f"{rule('  | ')}{B}{C(12)}{' ' * 12}{'-' * 7}{R}",
        rule("..."),
        f"{rule('7 | ')}    12_i32",
        f"{rule('  | ')}{B}{C(9)}    {'^' * 6}{R}",
        f"{B}{C(14)}help{R}: consider using the available `ToString` impl",
        rule("  |"),
        f"{rule('7 | ')}    12_i32{C(10)}.to_string(){R}",
        f"{rule('  | ')}{B}{C(10)}{' ' * 10}{'~' * 12}{R}",
        "",
    ]
