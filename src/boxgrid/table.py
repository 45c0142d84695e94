"""
Table renderer with box-drawing borders.

This module provides a TableRenderer class for rendering a sequence of
key/value records as a fixed-width grid, one column per distinct key.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .layout import collect_columns, compute_widths, total_width
from .lines import build_line
from .models import Line, RowRole, TableOptions

logger = logging.getLogger(__name__)

_EMPTY_ROW: Mapping[Any, Any] = {}


class TableRenderer:
    """Render records as a box-drawing table.

    Example output:
        ┌──────┬─────┐
        │ name │ age │
        ├──────┼─────┤
        │ Foo  │ 12  │
        ├──────┼─────┤
        │ Bar  │     │
        └──────┴─────┘
    """

    def __init__(self, options: TableOptions | None = None) -> None:
        """Initialize the table renderer.

        Args:
            options: Table configuration. Defaults to single-line borders,
                padding of 1 and no decoration.
        """
        self._options = options if options is not None else TableOptions()

    @property
    def options(self) -> TableOptions:
        return self._options

    def lines(self, records: Sequence[Mapping[Any, Any]]) -> list[Line]:
        """Render records as a list of lines.

        The grid is a top border, the header, a separator, then the data
        rows with a separator between each pair, and a bottom border.

        Args:
            records: Rows of the table; keys not present in a row render
                as blank cells

        Returns:
            Lines of the grid, top to bottom
        """
        options = self._options
        columns = collect_columns(records)
        widths = compute_widths(records, columns, options.headers)
        header_row = {key: options.label(key) for key in columns}

        def line(role: RowRole, row: Mapping[Any, Any] = _EMPTY_ROW) -> Line:
            return build_line(role, row, columns, widths, options)

        lines = [line(RowRole.TOP), line(RowRole.HEADER, header_row), line(RowRole.SEPARATOR)]
        for i, record in enumerate(records):
            if i > 0:
                lines.append(line(RowRole.SEPARATOR))
            lines.append(line(RowRole.DATA, record))
        lines.append(line(RowRole.BOTTOM))

        logger.debug(
            "Rendered %d record(s) into %d line(s), %d column(s), width %d",
            len(records),
            len(lines),
            len(columns),
            total_width(widths, options.padding),
        )
        return lines

    def render(self, records: Sequence[Mapping[Any, Any]]) -> str:
        """Render records as a formatted table string.

        Args:
            records: Rows of the table

        Returns:
            Table string with box-drawing borders, lines joined by newlines
        """
        return "\n".join(line.text for line in self.lines(records))
