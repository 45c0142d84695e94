"""
Content renderers.

A renderer receives one fixed-length piece of a line (a padded cell, a run
of border glyphs, or a single divider) together with its width, and returns
a presentation of it. Renderers may decorate the text, typically with ANSI
styles, but must not change its printed length.

Example:
    from boxgrid import render_table
    from boxgrid.renderers import styled

    print(render_table(rows, header=styled(fg="green", bold=True)))
"""

from __future__ import annotations

from typing import Any, Protocol

import click


class Renderer(Protocol):
    """Protocol for per-role content renderers."""

    def __call__(self, text: str, width: int) -> str:
        """
        Present a segment of a line.

        Args:
            text: Printable content, exactly ``width`` characters long
            width: Declared width of the segment

        Returns:
            Decorated text with the same printed length
        """
        ...


def passthrough(text: str, width: int) -> str:
    """Renderer that leaves text untouched."""
    return text


def styled(**style: Any) -> Renderer:
    """
    Build a renderer that applies a terminal style to its segment.

    Args:
        **style: Keyword arguments accepted by ``click.style``
            (``fg``, ``bg``, ``bold``, ``italic``, ...)

    Returns:
        Renderer wrapping each segment in ANSI style codes
    """

    def render(text: str, width: int) -> str:
        return click.style(text, **style)

    return render


def printed_length(text: str) -> int:
    """Length of text as it appears on a terminal, ignoring ANSI codes."""
    return len(click.unstyle(text))


STYLED_HEADER = styled(fg="blue", bold=True)
STYLED_SKELETON = styled(fg="white", bold=True)
STYLED_CELL: Renderer = passthrough
