"""
Column derivation and width calculation.

Both are recomputed from scratch for every render pass; nothing here keeps
state between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .renderers import printed_length

logger = logging.getLogger(__name__)

Record = Mapping[Any, Any]


def stringify(value: Any) -> str:
    """
    Convert a cell value to its display text.

    Text is returned unchanged, booleans as ``true``/``false`` and numbers
    in base 10. Floats with an integral value drop the fraction and never
    use exponent notation (``1e16`` is ``10000000000000000``). Never raises
    for ordinary values.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def collect_columns(records: Iterable[Record]) -> list[Any]:
    """
    Collect the column keys of a sequence of records.

    Keys are ordered by first appearance: records in order, and within a
    record in its own key order.

    Args:
        records: Records to scan

    Returns:
        Unique column keys; empty when there are no records
    """
    seen: set[Any] = set()
    columns: list[Any] = []
    for record in records:
        for key in record:
            if key not in seen:
                seen.add(key)
                columns.append(key)
    return columns


def compute_widths(
    records: Sequence[Record],
    columns: Sequence[Any],
    labels: Mapping[Any, Any] | None = None,
) -> dict[Any, int]:
    """
    Compute the display width of every column.

    A column is as wide as the longer of its label and its longest value,
    measured as printed on a terminal (ANSI style codes don't count).
    Records that lack the column (or hold ``None`` for it) don't contribute.

    Args:
        records: Records being rendered
        columns: Column keys, as returned by ``collect_columns``
        labels: Column key to label mapping. Columns without a label use
            the key itself.

    Returns:
        Column key to width mapping
    """
    widths: dict[Any, int] = {}
    for key in columns:
        label = labels.get(key) if labels else None
        width = printed_length(stringify(key if label is None else label))
        for record in records:
            value = record.get(key)
            if value is not None:
                width = max(width, printed_length(stringify(value)))
        widths[key] = width

    logger.debug("Computed widths for %d column(s): %s", len(widths), widths)
    return widths


def total_width(widths: Mapping[Any, int], padding: int) -> int:
    """
    Printed length of every line of a grid.

    Two outer borders, each column's segment, and one divider between
    each pair of adjacent columns.
    """
    segments = sum(width + 2 * padding for width in widths.values())
    dividers = max(len(widths) - 1, 0)
    return 2 + segments + dividers
