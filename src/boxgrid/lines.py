"""
Line building.

A line is a left border glyph, one padded segment per column with a divider
glyph between adjacent segments, and a right border glyph. The row role
picks the glyphs and which renderer presents the column segments; border
and divider glyphs always go through the skeleton renderer.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .exceptions import RendererContractError
from .layout import stringify
from .models import Line, RowRole, TableOptions
from .renderers import Renderer, printed_length


@dataclass(frozen=True)
class RoleGlyphs:
    """Roles of the frame character set used by one kind of line."""

    left: str
    fill: str
    divider: str
    right: str
    renderer: str


ROLE_GLYPHS: dict[RowRole, RoleGlyphs] = {
    RowRole.TOP: RoleGlyphs("top_left", "horizontal", "top_tee", "top_right", "skeleton"),
    RowRole.HEADER: RoleGlyphs("vertical", "space", "vertical", "vertical", "header"),
    RowRole.SEPARATOR: RoleGlyphs("left_tee", "horizontal", "cross", "right_tee", "skeleton"),
    RowRole.DATA: RoleGlyphs("vertical", "space", "vertical", "vertical", "cell"),
    RowRole.BOTTOM: RoleGlyphs(
        "bottom_left", "horizontal", "bottom_tee", "bottom_right", "skeleton"
    ),
}


def _present(renderer: Renderer, text: str) -> str:
    expected = printed_length(text)
    rendered = renderer(text, expected)
    actual = printed_length(rendered)
    if actual != expected:
        raise RendererContractError(text, rendered, expected, actual)
    return rendered


def build_line(
    role: RowRole,
    row: Mapping[Any, Any],
    columns: Sequence[Any],
    widths: Mapping[Any, int],
    options: TableOptions,
) -> Line:
    """
    Build one line of a grid.

    Args:
        role: Kind of line to build
        row: Values by column key. Border lines pass an empty mapping.
        columns: Column keys in display order
        widths: Width of every column
        options: Table configuration

    Returns:
        The rendered line

    Raises:
        RendererContractError: If a renderer changes the printed length of
            a segment
    """
    glyphs = ROLE_GLYPHS[role]
    characters = options.frame
    fill = getattr(characters, glyphs.fill)
    skeleton = options.skeleton
    renderer: Renderer = getattr(options, glyphs.renderer)
    pad = fill * options.padding

    segments = [_present(skeleton, getattr(characters, glyphs.left))]
    for i, key in enumerate(columns):
        width = widths[key]
        value = row.get(key)
        if value is None:
            inner = fill * width
        else:
            text = stringify(value)
            inner = text + " " * (width - printed_length(text))
        segments.append(_present(renderer, pad + inner + pad))
        if i < len(columns) - 1:
            segments.append(_present(skeleton, getattr(characters, glyphs.divider)))
    segments.append(_present(skeleton, getattr(characters, glyphs.right)))

    return Line(role=role, segments=tuple(segments))
