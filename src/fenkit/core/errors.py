"""FEN parsing errors."""

from __future__ import annotations

from enum import Enum


class FenErrorKind(Enum):
    """Why a FEN string was rejected."""

    ROW_OVERFLOW = "a rank holds more than 8 files"
    COL_OVERFLOW = "column cursor left the board"  # reserved, never raised
    INVALID_TOKEN = "unrecognized character in the placement field"
    INVALID_POSITION = "wrong rank count or misplaced rank separator"
    INVALID_PLAYER = "side to move must be 'w' or 'b'"
    INVALID_CASTLING_STATUS = "castling rights must be '-' or drawn from 'KQkq'"
    INVALID_EN_PASSANT_TARGET = "en passant target must be '-' or a3-h3/a6-h6"
    INVALID_NUMERIC_VALUE = "move counter out of range"
    INSUFFICIENT_FIELDS = "FEN needs exactly 6 space-separated fields"


class FenParsingError(ValueError):
    """Raised when FEN text is rejected.

    Attributes:
        kind: The :class:`FenErrorKind` that triggered the rejection.
        field: Name of the FEN field being decoded, if known.
        value: The offending text.
    """

    def __init__(
        self,
        kind: FenErrorKind,
        value: str = "",
        field: str | None = None,
    ) -> None:
        self.kind = kind
        self.value = value
        self.field = field
        super().__init__(self._format())

    def _format(self) -> str:
        where = f" in {self.field}" if self.field else ""
        return f"Invalid FEN{where}: {self.kind.value}: {self.value!r}"

    def with_field(self, field: str) -> FenParsingError:
        """Attach the field name and return the same error."""
        self.field = field
        self.args = (self._format(),)
        return self

    def __reduce__(self):
        return (type(self), (self.kind, self.value, self.field))
