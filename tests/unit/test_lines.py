"""Tests for the line builder."""

from __future__ import annotations

import click
import pytest

from boxgrid.exceptions import RendererContractError
from boxgrid.lines import ROLE_GLYPHS, build_line
from boxgrid.models import FrameCharacters, RowRole, TableOptions

COLUMNS = ["name", "age"]
WIDTHS = {"name": 4, "age": 3}


def _line(role: RowRole, row: dict | None = None, **options: object) -> str:
    return build_line(role, row or {}, COLUMNS, WIDTHS, TableOptions(**options)).text


class TestRoleGlyphs:
    """Tests for the role glyph table."""

    def test_every_role_has_glyphs(self) -> None:
        assert set(ROLE_GLYPHS) == set(RowRole)

    @pytest.mark.parametrize(
        "role,renderer",
        [
            (RowRole.TOP, "skeleton"),
            (RowRole.HEADER, "header"),
            (RowRole.SEPARATOR, "skeleton"),
            (RowRole.DATA, "cell"),
            (RowRole.BOTTOM, "skeleton"),
        ],
    )
    def test_renderer_per_role(self, role: RowRole, renderer: str) -> None:
        assert ROLE_GLYPHS[role].renderer == renderer


class TestBuildLine:
    """Tests for build_line."""

    def test_top(self) -> None:
        assert _line(RowRole.TOP) == "┌──────┬─────┐"

    def test_header(self) -> None:
        assert _line(RowRole.HEADER, {"name": "name", "age": "age"}) == "│ name │ age │"

    def test_separator(self) -> None:
        assert _line(RowRole.SEPARATOR) == "├──────┼─────┤"

    def test_data(self) -> None:
        assert _line(RowRole.DATA, {"name": "Foo", "age": 12}) == "│ Foo  │ 12  │"

    def test_bottom(self) -> None:
        assert _line(RowRole.BOTTOM) == "└──────┴─────┘"

    def test_missing_value_renders_blank(self) -> None:
        assert _line(RowRole.DATA, {"name": "Foo"}) == "│ Foo  │     │"

    def test_none_value_renders_blank(self) -> None:
        assert _line(RowRole.DATA, {"name": "Foo", "age": None}) == "│ Foo  │     │"

    def test_value_with_ansi_codes_renders_with_default_options(self) -> None:
        """Style codes already in a value don't count towards its width."""
        red = "\x1b[31mred\x1b[0m"
        line = build_line(RowRole.DATA, {"name": red}, ["name"], {"name": 4}, TableOptions())
        assert line.segments[1] == f" {red}  "
        assert click.unstyle(line.text) == "│ red  │"

    def test_extra_keys_ignored(self) -> None:
        """Only the given columns are rendered."""
        row = {"name": "Foo", "age": 1, "other": "x"}
        assert _line(RowRole.DATA, row) == "│ Foo  │ 1   │"

    def test_segments(self) -> None:
        line = build_line(RowRole.DATA, {"name": "Foo", "age": 12}, COLUMNS, WIDTHS, TableOptions())
        assert line.role is RowRole.DATA
        assert line.segments == ("│", " Foo  ", "│", " 12  ", "│")

    def test_single_column_has_no_divider(self) -> None:
        line = build_line(RowRole.TOP, {}, ["name"], {"name": 4}, TableOptions())
        assert line.segments == ("┌", "──────", "┐")

    def test_no_columns(self) -> None:
        """Zero columns degrade to the two border glyphs."""
        for role, expected in [
            (RowRole.TOP, "┌┐"),
            (RowRole.HEADER, "││"),
            (RowRole.SEPARATOR, "├┤"),
            (RowRole.DATA, "││"),
            (RowRole.BOTTOM, "└┘"),
        ]:
            assert build_line(role, {}, [], {}, TableOptions()).text == expected

    def test_padding_zero(self) -> None:
        assert _line(RowRole.TOP, padding=0) == "┌────┬───┐"
        assert _line(RowRole.DATA, {"name": "Foo", "age": 12}, padding=0) == "│Foo │12 │"

    def test_padding_three(self) -> None:
        assert _line(RowRole.TOP, padding=3) == "┌──────────┬─────────┐"
        assert _line(RowRole.DATA, {"name": "Foo", "age": 12}, padding=3) == "│   Foo    │   12    │"

    def test_custom_characters(self) -> None:
        characters = FrameCharacters().replace(horizontal="=", top_tee="+")
        assert _line(RowRole.TOP, characters=characters) == "┌======+=====┐"

    def test_custom_space_fills_content_rows(self) -> None:
        """The space role is the fill glyph of header and data rows."""
        assert _line(RowRole.DATA, {"name": "Foo"}, characters={"space": "."}) == "│.Foo .│.....│"


class TestRenderers:
    """Tests for renderer dispatch in build_line."""

    def test_renderer_receives_segment_and_width(self) -> None:
        calls: list[tuple[str, int]] = []

        def cell(text: str, width: int) -> str:
            calls.append((text, width))
            return text

        _line(RowRole.DATA, {"name": "Foo", "age": 12}, cell=cell)
        assert calls == [(" Foo  ", 6), (" 12  ", 5)]

    def test_skeleton_renders_borders_and_dividers(self) -> None:
        calls: list[tuple[str, int]] = []

        def skeleton(text: str, width: int) -> str:
            calls.append((text, width))
            return text

        _line(RowRole.HEADER, {"name": "name", "age": "age"}, skeleton=skeleton)
        assert calls == [("│", 1), ("│", 1), ("│", 1)]

    def test_skeleton_renders_border_rows(self) -> None:
        calls: list[str] = []

        def skeleton(text: str, width: int) -> str:
            calls.append(text)
            return text

        _line(RowRole.SEPARATOR, skeleton=skeleton)
        assert calls == ["├", "──────", "┼", "─────", "┤"]

    def test_header_renderer_only_for_header_rows(self) -> None:
        def shout(text: str, width: int) -> str:
            return text.upper()

        assert _line(RowRole.HEADER, {"name": "name", "age": "age"}, header=shout) == (
            "│ NAME │ AGE │"
        )
        assert _line(RowRole.DATA, {"name": "Foo", "age": 12}, header=shout) == "│ Foo  │ 12  │"

    def test_styled_renderer_keeps_printed_length(self) -> None:
        def red(text: str, width: int) -> str:
            return click.style(text, fg="red", italic=True)

        line = build_line(
            RowRole.DATA, {"name": "Foo", "age": 12}, COLUMNS, WIDTHS, TableOptions(cell=red)
        )
        assert line.segments[1] == click.style(" Foo  ", fg="red", italic=True)
        assert click.unstyle(line.text) == "│ Foo  │ 12  │"

    def test_length_changing_renderer_raises(self) -> None:
        def strip(text: str, width: int) -> str:
            return text.strip()

        with pytest.raises(RendererContractError) as exc_info:
            _line(RowRole.DATA, {"name": "Foo", "age": 12}, cell=strip)

        assert exc_info.value.text == " Foo  "
        assert exc_info.value.expected == 6
        assert exc_info.value.actual == 3
