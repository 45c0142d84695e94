"""Exceptions for boxgrid."""


# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class BoxGridError(Exception):
    """
    Base exception for all boxgrid errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(BoxGridError, ValueError):
    """
    Base exception for invalid table configuration.

    Raised synchronously when options are built, before any line
    of the table is produced.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class InvalidCharacterSetError(ConfigurationError):
    """Raised when a frame character set is incomplete or malformed."""

    def __init__(self, role: str, reason: str) -> None:
        self.role = role
        self.reason = reason
        super().__init__(f"Invalid frame character '{role}': {reason}")


class InvalidPaddingError(ConfigurationError):
    """Raised when padding is not a non-negative integer."""

    def __init__(self, padding: object) -> None:
        self.padding = padding
        super().__init__(f"Padding must be a non-negative integer, got {padding!r}")


class InvalidRendererError(ConfigurationError):
    """Raised when a renderer hook is not callable."""

    def __init__(self, role: str, renderer: object) -> None:
        self.role = role
        self.renderer = renderer
        super().__init__(f"Renderer '{role}' must be callable, got {type(renderer).__name__}")


# ---------------------------------------------------------------------------
# Rendering Exceptions
# ---------------------------------------------------------------------------


class RendererContractError(BoxGridError):
    """
    Raised when a renderer changes the printed length of its input.

    Renderers may decorate text (e.g. with ANSI styles) but must keep the
    printed content the same length, otherwise lines of the grid would no
    longer line up.

    Attributes:
        text: Segment passed to the renderer
        rendered: What the renderer returned
        expected: Printed length of the input
        actual: Printed length of the output
    """

    def __init__(self, text: str, rendered: str, expected: int, actual: int) -> None:
        self.text = text
        self.rendered = rendered
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Renderer changed printed length of {text!r}: expected {expected}, got {actual}"
        )
