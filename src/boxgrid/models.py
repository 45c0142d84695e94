"""Core models for boxgrid."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from dataclasses import replace as dataclass_replace
from enum import Enum
from typing import Any, cast

from .exceptions import InvalidCharacterSetError, InvalidPaddingError, InvalidRendererError
from .renderers import Renderer, passthrough


@dataclass(frozen=True)
class FrameCharacters:
    """
    The 12 glyphs a grid is drawn with.

    Attributes:
        space: Fill glyph of header and data rows
        horizontal: Fill glyph of top, separator and bottom rows
        vertical: Left/right border and divider of header and data rows
        cross: Divider of separator rows
        top_left: Top-left corner
        top_right: Top-right corner
        bottom_left: Bottom-left corner
        bottom_right: Bottom-right corner
        top_tee: Divider of the top row
        bottom_tee: Divider of the bottom row
        left_tee: Left border of separator rows
        right_tee: Right border of separator rows
    """

    space: str = " "
    horizontal: str = "─"
    vertical: str = "│"
    cross: str = "┼"
    top_left: str = "┌"
    top_right: str = "┐"
    bottom_left: str = "└"
    bottom_right: str = "┘"
    top_tee: str = "┬"
    bottom_tee: str = "┴"
    left_tee: str = "├"
    right_tee: str = "┤"

    def __post_init__(self) -> None:
        for role in ROLES:
            glyph = getattr(self, role)
            if not isinstance(glyph, str):
                raise InvalidCharacterSetError(
                    role, f"expected a string, got {type(glyph).__name__}"
                )
            if len(glyph) != 1:
                raise InvalidCharacterSetError(
                    role, f"expected exactly one character, got {glyph!r}"
                )

    @classmethod
    def from_dict(
        cls, d: Mapping[str, str], base: FrameCharacters | None = None
    ) -> FrameCharacters:
        """
        Build a character set from a mapping of role to glyph.

        Keys are role names (``"top_left"``) or the glyph the role has in
        the default set (``"┌"``).

        Args:
            d: Role to glyph mapping
            base: Character set supplying roles missing from ``d``. When
                omitted, ``d`` must name all 12 roles.

        Raises:
            InvalidCharacterSetError: If a key is unknown, a glyph is
                malformed, or a role is missing and no base is given
        """
        resolved: dict[str, str] = {}
        for key, glyph in d.items():
            role = GLYPH_ALIASES.get(key, key)
            if role not in ROLES:
                raise InvalidCharacterSetError(str(key), "unknown role")
            resolved[role] = glyph

        if base is not None:
            return dataclass_replace(base, **resolved)

        missing = [role for role in ROLES if role not in resolved]
        if missing:
            raise InvalidCharacterSetError(missing[0], "missing from character set")
        return cls(**resolved)

    def replace(self, **overrides: str) -> FrameCharacters:
        """Return a copy with some roles swapped out."""
        return FrameCharacters.from_dict(overrides, base=self)

    def to_dict(self) -> dict[str, str]:
        return {role: getattr(self, role) for role in ROLES}


ROLES: tuple[str, ...] = tuple(f.name for f in fields(FrameCharacters))
"""Role names of a frame character set, in declaration order."""

GLYPH_ALIASES: dict[str, str] = {
    getattr(FrameCharacters, role): role for role in ROLES
}
"""Default glyph of each role, usable as an alias for the role name."""


class RowRole(Enum):
    """Kind of line in a rendered grid."""

    TOP = "top"
    HEADER = "header"
    SEPARATOR = "separator"
    DATA = "data"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Line:
    """
    One rendered line of a grid.

    Attributes:
        role: Which kind of line this is
        segments: Rendered pieces in order: left border, column segments
            interleaved with dividers, right border
    """

    role: RowRole
    segments: tuple[str, ...]

    @property
    def text(self) -> str:
        return "".join(self.segments)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TableOptions:
    """
    Configuration of a table render.

    Attributes:
        headers: Column key to display label overrides
        padding: Fill glyphs on each side of every cell's inner text
        characters: Frame character set. A mapping is merged onto the
            default set and a string names a preset.
        header: Renderer for header cells
        cell: Renderer for data cells
        skeleton: Renderer for borders, dividers and separator rows
    """

    headers: Mapping[Any, Any] = field(default_factory=dict)
    padding: int = 1
    characters: FrameCharacters | Mapping[str, str] | str = field(
        default_factory=FrameCharacters
    )
    header: Renderer = passthrough
    cell: Renderer = passthrough
    skeleton: Renderer = passthrough

    def __post_init__(self) -> None:
        if isinstance(self.padding, bool) or not isinstance(self.padding, int):
            raise InvalidPaddingError(self.padding)
        if self.padding < 0:
            raise InvalidPaddingError(self.padding)

        if self.headers is None:
            object.__setattr__(self, "headers", {})
        elif not isinstance(self.headers, Mapping):
            raise TypeError(f"headers must be a mapping, got {type(self.headers).__name__}")

        characters: Any = self.characters
        if characters is None:
            characters = FrameCharacters()
        elif isinstance(characters, str):
            from .charsets import get_charset

            characters = get_charset(characters)
        elif isinstance(characters, Mapping):
            characters = FrameCharacters.from_dict(characters, base=FrameCharacters())
        elif not isinstance(characters, FrameCharacters):
            raise InvalidCharacterSetError(
                "characters", f"unsupported type {type(characters).__name__}"
            )
        object.__setattr__(self, "characters", characters)

        for role in ("header", "cell", "skeleton"):
            renderer = getattr(self, role)
            if renderer is None:
                object.__setattr__(self, role, passthrough)
            elif not callable(renderer):
                raise InvalidRendererError(role, renderer)

    @property
    def frame(self) -> FrameCharacters:
        """Resolved frame character set."""
        return cast(FrameCharacters, self.characters)

    def label(self, key: Any) -> Any:
        """Display label of a column key."""
        label = self.headers.get(key)
        return key if label is None else label
