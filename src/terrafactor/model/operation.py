"""Operation tags and the coloured markers they resolve to."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from terrafactor.errors import InvalidOperationError

# Visible width of every marker ("+  " / "-  "), excluding colour codes.
MARKER_WIDTH: int = 3


@dataclass(frozen=True)
class Palette:
    """ANSI escape codes used to colour the markers.

    Attributes:
        create: Code emitted before the ``+`` marker.
        destroy: Code emitted before the ``-`` marker.
        reset: Code emitted straight after the marker glyph and padding.
    """

    create: str = "\033[32m"
    destroy: str = "\033[31m"
    reset: str = "\033[0m"


DEFAULT_PALETTE: Palette = Palette()

# Markers without any escape codes, for pipes and dumb terminals.
PLAIN_PALETTE: Palette = Palette(create="", destroy="", reset="")


class Operation(enum.Enum):
    """Rendering mode selected by the caller."""

    CREATE = "create"
    DESTROY = "destroy"

    @classmethod
    def from_tag(cls, tag: str) -> Operation:
        """Resolve an exact, case-sensitive operation tag.

        Raises:
            InvalidOperationError: If *tag* is not ``"create"`` or ``"destroy"``.
        """
        try:
            return cls(tag)
        except ValueError:
            raise InvalidOperationError(str(tag)) from None

    @property
    def marker(self) -> str:
        """The visible marker text, always :data:`MARKER_WIDTH` characters."""
        return "+  " if self is Operation.CREATE else "-  "

    def prefix(self, palette: Palette = DEFAULT_PALETTE) -> str:
        """Return the marker wrapped in *palette*'s colour and reset codes."""
        color = palette.create if self is Operation.CREATE else palette.destroy
        return f"{color}{self.marker}{palette.reset}"
