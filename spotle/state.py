import enum
from dataclasses import dataclass
from typing import Union

from spotle.mask import Mask


class CharacterState(enum.StrEnum):
    UNKNOWN = "unknown"
    CORRECT = "correct"
    WRONG_PLACE = "wrong_place"
    NOT_IN_WORD = "not_in_word"
    MASKED = "masked"


@dataclass
class Row:
    guess: str
    char_states: list[CharacterState]

    @classmethod
    def empty(cls, mask: Mask, attempt_index: int, word_length: int) -> "Row":
        char_states = [
            CharacterState.MASKED if mask.is_masked(attempt_index, position) else CharacterState.UNKNOWN
            for position in range(word_length)
        ]
        return cls(guess="", char_states=char_states)


@dataclass(frozen=True)
class InProgress:
    pass


@dataclass(frozen=True)
class Won:
    pass


@dataclass(frozen=True)
class Lost:
    secret: str


Outcome = Union[InProgress, Won, Lost]


def is_terminal(outcome: Outcome) -> bool:
    return isinstance(outcome, (Won, Lost))


@dataclass(frozen=True)
class CharacterInput:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


Signal = Union[CharacterInput, Backspace, Submit, Quit, Cancel]


@dataclass(frozen=True)
class Snapshot:
    rows: tuple[Row, ...]
    current_attempt: int
    buffer: str
    keyboard: dict[str, CharacterState]
    outcome: Outcome
    closed: bool = False

    @property
    def max_attempts(self) -> int:
        return len(self.rows)

    @property
    def terminal(self) -> bool:
        return is_terminal(self.outcome)
