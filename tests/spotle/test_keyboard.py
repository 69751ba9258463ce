from spotle.consts import ALPHABET
from spotle.keyboard import KeyboardStatus
from spotle.state import CharacterState


def test_initial_status():
    keyboard = KeyboardStatus()
    assert keyboard.as_dict() == {letter: CharacterState.UNKNOWN for letter in ALPHABET}


def test_non_alphabet_letters():
    keyboard = KeyboardStatus()
    keyboard.set("1", CharacterState.CORRECT)
    keyboard.set("A", CharacterState.CORRECT)

    assert keyboard.get("1") == CharacterState.UNKNOWN
    assert keyboard.get("?") == CharacterState.UNKNOWN
    assert set(keyboard.as_dict()) == set(ALPHABET)


def test_as_dict_is_a_copy():
    keyboard = KeyboardStatus()
    letters = keyboard.as_dict()
    letters["a"] = CharacterState.CORRECT
    assert keyboard.get("a") == CharacterState.UNKNOWN

    keyboard.set("a", CharacterState.WRONG_PLACE)
    assert keyboard.get("a") == CharacterState.WRONG_PLACE
