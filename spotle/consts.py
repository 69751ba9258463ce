import string

WORD_LENGTH = 5
MAX_ATTEMPTS = 6
DEFAULT_SECRET = "world"

ALPHABET = string.ascii_lowercase
KEYBOARD_ROWS = ["qwertyuiop", "asdfghjkl", "zxcvbnm"]

# Hint schedule, one pre-revealed position on each of the first five attempts.
DEFAULT_MASK_ROWS = [
    False, False, True, False, False,
    False, True, False, False, False,
    False, True, False, False, False,
    False, False, True, False, False,
    False, False, True, False, False,
]
