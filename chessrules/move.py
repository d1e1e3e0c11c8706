"""Origin/target pairing used by the orchestration layer."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidSquareError
from .squares import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    origin: Square
    target: Square

    @classmethod
    def from_uci(cls, text: str) -> Move:
        text = text.strip().lower()
        if len(text) != 4:
            raise InvalidSquareError(f"Invalid move: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))

    def uci(self) -> str:
        return f"{square_name(self.origin)}{square_name(self.target)}"

    def __str__(self) -> str:
        return self.uci()
