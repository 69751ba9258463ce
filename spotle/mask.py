from typing import Any

import more_itertools
import numpy as np

from spotle.consts import DEFAULT_MASK_ROWS, MAX_ATTEMPTS, WORD_LENGTH


class Mask:
    """Read-only (attempt, position) table of pre-revealed cells."""

    def __init__(self, table: list[list[bool]] | np.ndarray) -> None:
        items = np.array(table, dtype=bool)
        if items.ndim != 2:
            raise ValueError(f"Mask table must be two dimensional, got shape {items.shape}")
        items.flags.writeable = False
        self.items = items

    @classmethod
    def empty(cls, max_attempts: int = MAX_ATTEMPTS, word_length: int = WORD_LENGTH) -> "Mask":
        return cls(np.zeros((max_attempts, word_length), dtype=bool))

    @classmethod
    def from_flat(cls, items: list[bool], word_length: int = WORD_LENGTH) -> "Mask":
        if len(items) % word_length != 0:
            raise ValueError(f"{len(items)} mask cells do not split into rows of {word_length}")
        return cls([list(row) for row in more_itertools.chunked(items, word_length)])

    @classmethod
    def default(cls, max_attempts: int = MAX_ATTEMPTS, word_length: int = WORD_LENGTH) -> "Mask":
        schedule = cls.from_flat(DEFAULT_MASK_ROWS, WORD_LENGTH).items
        table = np.zeros((max_attempts, word_length), dtype=bool)
        rows = min(max_attempts, schedule.shape[0])
        columns = min(word_length, schedule.shape[1])
        table[:rows, :columns] = schedule[:rows, :columns]
        return cls(table)

    @property
    def max_attempts(self) -> int:
        return self.items.shape[0]

    @property
    def word_length(self) -> int:
        return self.items.shape[1]

    def is_masked(self, attempt_index: int, position_index: int) -> bool:
        if not 0 <= attempt_index < self.max_attempts:
            raise IndexError(f"Attempt {attempt_index} outside of mask with {self.max_attempts} attempts")
        if not 0 <= position_index < self.word_length:
            raise IndexError(f"Position {position_index} outside of mask with word length {self.word_length}")
        return bool(self.items[attempt_index, position_index])

    def to_list(self) -> list[list[bool]]:
        return self.items.tolist()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Mask):
            return False

        return np.array_equal(self.items, other.items)

    def __hash__(self) -> int:
        return hash(self.items.tobytes()) ^ hash(self.items.shape)

    def __repr__(self) -> str:
        rows = ["".join("#" if cell else "." for cell in row) for row in self.items]
        return f"Mask({'/'.join(rows)})"
