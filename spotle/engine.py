import copy
import logging

from spotle.config import GameConfig
from spotle.consts import DEFAULT_SECRET, MAX_ATTEMPTS, WORD_LENGTH
from spotle.keyboard import KeyboardStatus
from spotle.mask import Mask
from spotle.state import (
    Backspace,
    Cancel,
    CharacterInput,
    CharacterState,
    InProgress,
    Lost,
    Outcome,
    Quit,
    Row,
    Signal,
    Snapshot,
    Submit,
    Won,
    is_terminal,
)

logger = logging.getLogger(__name__)


def evaluate_guess(secret: str, guess: str, mask: Mask, attempt_index: int) -> list[CharacterState]:
    assert len(secret) == len(guess) == mask.word_length
    states = [
        CharacterState.MASKED if mask.is_masked(attempt_index, idx) else CharacterState.UNKNOWN
        for idx in range(len(guess))
    ]

    for idx, (secret_letter, guessed_letter) in enumerate(zip(secret, guess)):
        if states[idx] == CharacterState.UNKNOWN and secret_letter == guessed_letter:
            states[idx] = CharacterState.CORRECT

    # Presence is checked against the whole secret, so a repeated guess letter
    # can be marked WRONG_PLACE more often than it occurs in the secret.
    for idx, guessed_letter in enumerate(guess):
        if states[idx] != CharacterState.UNKNOWN:
            continue

        if guessed_letter in secret:
            states[idx] = CharacterState.WRONG_PLACE
        else:
            states[idx] = CharacterState.NOT_IN_WORD

    return states


def update_keyboard(keyboard: KeyboardStatus, secret: str, guess: str, mask: Mask, attempt_index: int) -> None:
    unmasked = [idx for idx in range(len(guess)) if not mask.is_masked(attempt_index, idx)]

    for idx in unmasked:
        if secret[idx] == guess[idx]:
            keyboard.set(guess[idx], CharacterState.CORRECT)

    for idx in unmasked:
        letter = guess[idx]
        if keyboard.get(letter) != CharacterState.UNKNOWN:
            continue

        if letter in secret:
            keyboard.set(letter, CharacterState.WRONG_PLACE)
        else:
            keyboard.set(letter, CharacterState.NOT_IN_WORD)


class Game:
    secret: str
    mask: Mask
    rows: list[Row]
    current_attempt: int
    buffer: str
    keyboard: KeyboardStatus
    outcome: Outcome
    closed: bool

    def __init__(
        self,
        secret: str = DEFAULT_SECRET,
        max_attempts: int = MAX_ATTEMPTS,
        word_length: int = WORD_LENGTH,
        mask: Mask | None = None,
    ) -> None:
        if max_attempts < 1 or word_length < 1:
            raise ValueError(f"Game needs at least one attempt and one letter, got {max_attempts}x{word_length}")
        secret = secret.lower()
        if len(secret) != word_length:
            raise ValueError(f"Secret {secret!r} does not have {word_length} letters")
        if mask is None:
            mask = Mask.default(max_attempts, word_length)
        if (mask.max_attempts, mask.word_length) != (max_attempts, word_length):
            raise ValueError(
                f"Mask shape {mask.max_attempts}x{mask.word_length} does not match {max_attempts}x{word_length}"
            )

        self.secret = secret
        self.max_attempts = max_attempts
        self.word_length = word_length
        self.mask = mask
        self.rows = [Row.empty(mask, idx, word_length) for idx in range(max_attempts)]
        self.current_attempt = 0
        self.buffer = ""
        self.keyboard = KeyboardStatus()
        self.outcome = InProgress()
        self.closed = False

    @classmethod
    def from_config(cls, config: GameConfig) -> "Game":
        return cls(
            secret=config.secret,
            max_attempts=config.max_attempts,
            word_length=config.word_length,
            mask=config.build_mask(),
        )

    def snapshot(self) -> Snapshot:
        return Snapshot(
            rows=tuple(copy.deepcopy(self.rows)),
            current_attempt=self.current_attempt,
            buffer=self.buffer,
            keyboard=self.keyboard.as_dict(),
            outcome=self.outcome,
            closed=self.closed,
        )

    def step(self, signal: Signal) -> Snapshot:
        if self.closed:
            return self.snapshot()

        if isinstance(signal, Cancel):
            self.close("cancelled")
        elif is_terminal(self.outcome):
            if isinstance(signal, Quit):
                self.close("quit")
        elif isinstance(signal, CharacterInput):
            self.type_char(signal.char)
        elif isinstance(signal, Backspace):
            self.buffer = self.buffer[:-1]
        elif isinstance(signal, Submit):
            self.submit()

        return self.snapshot()

    def close(self, reason: str) -> None:
        logger.info("Session %s with outcome %s", reason, self.outcome)
        self.closed = True

    def type_char(self, char: str) -> None:
        char = char.lower()
        if char == " " or len(char) != 1 or len(self.buffer) >= self.word_length:
            return

        self.buffer += char

    def submit(self) -> None:
        if len(self.buffer) != self.word_length:
            return

        guess = self.buffer
        update_keyboard(self.keyboard, self.secret, guess, self.mask, self.current_attempt)
        self.rows[self.current_attempt] = Row(
            guess=guess,
            char_states=evaluate_guess(self.secret, guess, self.mask, self.current_attempt),
        )
        logger.debug("Attempt %d: %s -> %s", self.current_attempt, guess, self.rows[self.current_attempt].char_states)

        self.buffer = ""
        self.current_attempt += 1

        if guess == self.secret:
            self.outcome = Won()
            logger.info("Won after %d attempts", self.current_attempt)
        elif self.current_attempt >= self.max_attempts:
            self.outcome = Lost(secret=self.secret)
            logger.info("Lost, the answer was %s", self.secret)
