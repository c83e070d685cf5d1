"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FenConfig:
    """Knobs that change what :func:`~fenkit.core.notation.fen.parse_fen` accepts."""

    # Inclusive upper bound for the halfmove/fullmove fields. The default
    # keeps counters to a single digit; None accepts any non-negative integer.
    max_counter: int | None = 9

    def __post_init__(self) -> None:
        if self.max_counter is not None and self.max_counter < 0:
            raise ValueError(f"max_counter must be >= 0, got {self.max_counter}")

    def counter_in_range(self, value: int) -> bool:
        if value < 0:
            return False
        return self.max_counter is None or value <= self.max_counter


DEFAULT_CONFIG = FenConfig()
