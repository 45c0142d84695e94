"""
boxgrid: Render key/value records as box-drawing tables.

Columns are derived from the records themselves, in order of first
appearance, and every column is as wide as its longest value or label.
Records don't need to share keys; missing values render as blank cells.

Example:
    from boxgrid import render_table

    print(render_table([{"name": "Foo", "age": 12}, {"name": "Bar"}]))

    ┌──────┬─────┐
    │ name │ age │
    ├──────┼─────┤
    │ Foo  │ 12  │
    ├──────┼─────┤
    │ Bar  │     │
    └──────┴─────┘
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .charsets import PRESETS, get_charset
from .exceptions import (
    BoxGridError,
    ConfigurationError,
    InvalidCharacterSetError,
    InvalidPaddingError,
    InvalidRendererError,
    RendererContractError,
)
from .layout import collect_columns, compute_widths, stringify, total_width
from .lines import build_line
from .models import FrameCharacters, Line, RowRole, TableOptions
from .renderers import Renderer, passthrough, styled
from .table import TableRenderer

try:
    from ._version import __version__  # type: ignore[import-not-found]
except ImportError:
    __version__ = "0.0.0+unknown"


def render_table(data: Sequence[Mapping[Any, Any]], **options: Any) -> str:
    """
    Render records as a box-drawing table.

    Args:
        data: Records to render, one row each
        **options: ``TableOptions`` fields:
            - headers (Mapping): Column key to label overrides
            - padding (int): Fill glyphs around each cell (default: 1)
            - characters (FrameCharacters | Mapping | str): Frame glyphs,
              partial overrides or a preset name
            - header, cell, skeleton (Renderer): Per-role renderers

    Returns:
        Table string ready for printing

    Raises:
        ConfigurationError: If the options are invalid
    """
    return TableRenderer(TableOptions(**options)).render(data)


__all__ = [
    # Version
    "__version__",
    # Main API
    "render_table",
    "TableRenderer",
    "build_line",
    "collect_columns",
    "compute_widths",
    "stringify",
    "total_width",
    # Models
    "FrameCharacters",
    "Line",
    "RowRole",
    "TableOptions",
    # Character sets
    "PRESETS",
    "get_charset",
    # Renderers
    "Renderer",
    "passthrough",
    "styled",
    # Exceptions
    "BoxGridError",
    "ConfigurationError",
    "InvalidCharacterSetError",
    "InvalidPaddingError",
    "InvalidRendererError",
    "RendererContractError",
]
