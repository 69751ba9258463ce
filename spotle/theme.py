import curses
import enum
from dataclasses import dataclass, replace

from spotle.config import ThemeName

# Bright black, only available on terminals with 16 colours.
DARK_GRAY = 8
GRAY = curses.COLOR_WHITE


class BorderStyle(enum.Enum):
    PLAIN = "┌┐└┘─│"
    THICK = "┏┓┗┛━┃"
    ROUNDED = "╭╮╰╯─│"

    @property
    def top_left(self) -> str:
        return self.value[0]

    @property
    def top_right(self) -> str:
        return self.value[1]

    @property
    def bottom_left(self) -> str:
        return self.value[2]

    @property
    def bottom_right(self) -> str:
        return self.value[3]

    @property
    def horizontal(self) -> str:
        return self.value[4]

    @property
    def vertical(self) -> str:
        return self.value[5]


@dataclass(frozen=True)
class Theme:
    active_row_input_color: int
    border_color: int
    header_text_error_color: int
    header_text_success_color: int
    empty_row_block_color: int
    guess_in_right_place_color: int
    guess_in_word_color: int
    guess_not_in_word_color: int
    keyboard_not_guessed_color: int
    keyboard_in_right_place_color: int
    keyboard_in_word_color: int
    keyboard_not_in_word_color: int
    row_border_style: BorderStyle
    guessed_row_border_style: BorderStyle

    @classmethod
    def light(cls) -> "Theme":
        return cls(
            active_row_input_color=curses.COLOR_BLACK,
            border_color=curses.COLOR_BLACK,
            header_text_error_color=curses.COLOR_RED,
            header_text_success_color=curses.COLOR_GREEN,
            empty_row_block_color=GRAY,
            guess_in_right_place_color=curses.COLOR_GREEN,
            guess_in_word_color=curses.COLOR_YELLOW,
            guess_not_in_word_color=DARK_GRAY,
            keyboard_not_guessed_color=curses.COLOR_BLACK,
            keyboard_in_right_place_color=curses.COLOR_GREEN,
            keyboard_in_word_color=curses.COLOR_YELLOW,
            keyboard_not_in_word_color=GRAY,
            row_border_style=BorderStyle.PLAIN,
            guessed_row_border_style=BorderStyle.THICK,
        )

    @classmethod
    def dark(cls) -> "Theme":
        return replace(
            cls.light(),
            active_row_input_color=curses.COLOR_WHITE,
            border_color=curses.COLOR_WHITE,
            keyboard_not_guessed_color=curses.COLOR_WHITE,
            keyboard_not_in_word_color=GRAY,
        )


def get_theme(name: ThemeName) -> Theme:
    if name == ThemeName.LIGHT:
        return Theme.light()
    return Theme.dark()


@dataclass(frozen=True)
class CellStyle:
    border_color: int
    text_color: int
    border_style: BorderStyle
    modifier: int = curses.A_NORMAL
