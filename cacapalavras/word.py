"""A hidden word and where it lies on the board."""

from __future__ import annotations

from dataclasses import dataclass

MAX_LENGTH = 19

Position = tuple[int, int]


@dataclass
class Word:
    """A word to find, with its start and end cells as (row, column)."""

    text: str
    start: Position = (0, 0)
    end: Position = (0, 0)
    found: bool = False

    @classmethod
    def from_text(cls, text: str) -> Word:
        """Build an unplaced word, truncated to the maximum length."""
        return cls(text[:MAX_LENGTH])

    def length(self) -> int:
        """Number of letters in the word."""
        return len(self.text)

    def is_found(self) -> bool:
        """Whether the player has already located this word."""
        return self.found