from spotle.consts import ALPHABET
from spotle.state import CharacterState


class KeyboardStatus:
    """Aggregate per-letter feedback, independent of row position."""

    def __init__(self) -> None:
        self.letters = {letter: CharacterState.UNKNOWN for letter in ALPHABET}

    def get(self, letter: str) -> CharacterState:
        return self.letters.get(letter, CharacterState.UNKNOWN)

    def set(self, letter: str, state: CharacterState) -> None:
        if letter in self.letters:
            self.letters[letter] = state

    def as_dict(self) -> dict[str, CharacterState]:
        return dict(self.letters)
