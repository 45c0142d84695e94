"""Named frame character set presets."""

from __future__ import annotations

from .exceptions import InvalidCharacterSetError
from .models import FrameCharacters

SINGLE = FrameCharacters()

ROUNDED = SINGLE.replace(top_left="╭", top_right="╮", bottom_left="╰", bottom_right="╯")

DOUBLE = FrameCharacters(
    horizontal="═",
    vertical="║",
    cross="╬",
    top_left="╔",
    top_right="╗",
    bottom_left="╚",
    bottom_right="╝",
    top_tee="╦",
    bottom_tee="╩",
    left_tee="╠",
    right_tee="╣",
)

HEAVY = FrameCharacters(
    horizontal="━",
    vertical="┃",
    cross="╋",
    top_left="┏",
    top_right="┓",
    bottom_left="┗",
    bottom_right="┛",
    top_tee="┳",
    bottom_tee="┻",
    left_tee="┣",
    right_tee="┫",
)

# For terminals without box-drawing glyphs
ASCII = FrameCharacters(
    horizontal="-",
    vertical="|",
    cross="+",
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    top_tee="+",
    bottom_tee="+",
    left_tee="+",
    right_tee="+",
)

PRESETS: dict[str, FrameCharacters] = {
    "single": SINGLE,
    "rounded": ROUNDED,
    "double": DOUBLE,
    "heavy": HEAVY,
    "ascii": ASCII,
}

DEFAULT_CHARSET = "single"


def get_charset(name: str) -> FrameCharacters:
    """
    Look up a preset by name (case-insensitive).

    Raises:
        InvalidCharacterSetError: If no preset has that name
    """
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        choices = ", ".join(PRESETS)
        raise InvalidCharacterSetError(
            "charset", f"unknown preset {name!r} (choose from: {choices})"
        ) from None
