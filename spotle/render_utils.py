import curses
import enum
import textwrap
from dataclasses import dataclass

from spotle.consts import KEYBOARD_ROWS
from spotle.state import CharacterState, Lost, Outcome, Snapshot, Won
from spotle.theme import CellStyle, BorderStyle, Theme

CELL_WIDTH = 5
CELL_HEIGHT = 3
PADDING = 1

TITLE = "Spotle"
KEYBOARD_TITLE = "Available Letters"

CELL_TEMPLATES = {
    CharacterState.UNKNOWN: " {} ",
    CharacterState.CORRECT: "[{}]",
    CharacterState.WRONG_PLACE: "({})",
    CharacterState.NOT_IN_WORD: "-{}-",
    CharacterState.MASKED: "*{}*",
}


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Layout:
    header: Rect
    board: Rect
    keyboard: Rect


class RowKind(enum.Enum):
    EMPTY = "empty"
    CURRENT = "current"
    GUESSED = "guessed"


def board_size(rows: int, columns: int) -> tuple[int, int]:
    return CELL_WIDTH * columns + 2 * PADDING, CELL_HEIGHT * rows + 2 * PADDING


def compute_layout(height: int, width: int, rows: int, columns: int) -> Layout | None:
    """Centres the board inside a one cell margin.

    The header takes the upper 60% of the space above the board and the keyboard
    the lower 70% of the space below it, both as wide as the board.
    """
    outer = Rect(x=1, y=1, width=width - 2, height=height - 2)
    grid_width, grid_height = board_size(rows, columns)
    if outer.width < grid_width or outer.height < grid_height:
        return None

    board = Rect(
        x=outer.x + (outer.width - grid_width) // 2,
        y=outer.y + (outer.height - grid_height) // 2,
        width=grid_width,
        height=grid_height,
    )

    top_height = board.y - outer.y
    header = Rect(x=board.x, y=outer.y, width=grid_width, height=top_height * 60 // 100)

    bottom_y = board.y + board.height
    bottom_height = outer.y + outer.height - bottom_y
    keyboard_height = bottom_height - bottom_height * 30 // 100
    keyboard = Rect(
        x=board.x,
        y=bottom_y + bottom_height - keyboard_height,
        width=grid_width,
        height=keyboard_height,
    )
    return Layout(header=header, board=board, keyboard=keyboard)


def cell_rect(board: Rect, row_index: int, position: int) -> Rect:
    return Rect(
        x=board.x + PADDING + position * CELL_WIDTH,
        y=board.y + PADDING + row_index * CELL_HEIGHT,
        width=CELL_WIDTH,
        height=CELL_HEIGHT,
    )


def row_kind(row_index: int, current_attempt: int, terminal: bool = False) -> RowKind:
    if row_index < current_attempt:
        return RowKind.GUESSED
    if row_index == current_attempt and not terminal:
        return RowKind.CURRENT
    return RowKind.EMPTY


def cell_letter(snapshot: Snapshot, row_index: int, position: int, placeholder: str = " ") -> str:
    kind = row_kind(row_index, snapshot.current_attempt, snapshot.terminal)
    if kind == RowKind.GUESSED:
        return snapshot.rows[row_index].guess[position]
    if kind == RowKind.CURRENT and position < len(snapshot.buffer):
        return snapshot.buffer[position]
    return placeholder


def cell_style(theme: Theme, kind: RowKind, state: CharacterState) -> CellStyle:
    reversed_if_masked = curses.A_REVERSE if state == CharacterState.MASKED else curses.A_NORMAL

    if kind == RowKind.EMPTY:
        return CellStyle(
            border_color=theme.empty_row_block_color,
            text_color=theme.empty_row_block_color,
            border_style=theme.row_border_style,
            modifier=reversed_if_masked,
        )

    if kind == RowKind.CURRENT:
        return CellStyle(
            border_color=theme.border_color,
            text_color=theme.active_row_input_color,
            border_style=theme.row_border_style,
            modifier=reversed_if_masked,
        )

    color = {
        CharacterState.CORRECT: theme.guess_in_right_place_color,
        CharacterState.WRONG_PLACE: theme.guess_in_word_color,
        CharacterState.NOT_IN_WORD: theme.guess_not_in_word_color,
        CharacterState.UNKNOWN: theme.keyboard_not_guessed_color,
        CharacterState.MASKED: theme.active_row_input_color,
    }[state]
    if state == CharacterState.WRONG_PLACE:
        modifier = curses.A_DIM
    else:
        modifier = reversed_if_masked
    return CellStyle(
        border_color=color,
        text_color=color,
        border_style=theme.guessed_row_border_style,
        modifier=modifier,
    )


def keyboard_style(theme: Theme, state: CharacterState) -> tuple[int, int]:
    color = {
        CharacterState.UNKNOWN: theme.keyboard_not_guessed_color,
        CharacterState.CORRECT: theme.keyboard_in_right_place_color,
        CharacterState.WRONG_PLACE: theme.keyboard_in_word_color,
        CharacterState.NOT_IN_WORD: theme.keyboard_not_in_word_color,
        CharacterState.MASKED: theme.active_row_input_color,
    }[state]
    modifier = curses.A_DIM if state == CharacterState.NOT_IN_WORD else curses.A_NORMAL
    return color, modifier


def header_message(outcome: Outcome) -> str:
    if isinstance(outcome, Won):
        return "Game is over! You win! Press q or esc key to exit."
    if isinstance(outcome, Lost):
        return f"Game over! The answer was '{outcome.secret}'. Press q or esc key to exit."
    return ""


def header_color(theme: Theme, outcome: Outcome) -> int:
    if isinstance(outcome, Won):
        return theme.header_text_success_color
    return theme.header_text_error_color


def format_board(snapshot: Snapshot) -> str:
    lines = []
    for row_index, row in enumerate(snapshot.rows):
        kind = row_kind(row_index, snapshot.current_attempt, snapshot.terminal)
        placeholder = "_" if kind == RowKind.CURRENT else "."
        cells = [
            CELL_TEMPLATES[state].format(cell_letter(snapshot, row_index, position, placeholder))
            for position, state in enumerate(row.char_states)
        ]
        lines.append(" ".join(cells))

    lines.append("")
    for keyboard_row in KEYBOARD_ROWS:
        lines.append(" ".join(CELL_TEMPLATES[snapshot.keyboard[letter]].format(letter) for letter in keyboard_row))

    message = header_message(snapshot.outcome)
    if message:
        lines.extend(["", message])
    return "\n".join(lines)


class CursesPainter:
    def __init__(self, screen: "curses.window", theme: Theme) -> None:
        self.screen = screen
        self.theme = theme
        self.color_pairs: dict[int, int] = {}

    def color(self, foreground: int) -> int:
        if foreground >= curses.COLORS:
            foreground = curses.COLOR_WHITE

        if foreground not in self.color_pairs:
            pair_id = len(self.color_pairs) + 1
            curses.init_pair(pair_id, foreground, -1)
            self.color_pairs[foreground] = pair_id
        return curses.color_pair(self.color_pairs[foreground])

    def put(self, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
        try:
            self.screen.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell raises after the text is drawn.
            pass

    def draw_box(self, rect: Rect, border_style: BorderStyle, attr: int, title: str = "") -> None:
        if rect.width < 2 or rect.height < 2:
            return

        inner = rect.width - 2
        top = border_style.horizontal * inner
        if title:
            top = (title[:inner] + top)[:inner]
        self.put(rect.y, rect.x, border_style.top_left + top + border_style.top_right, attr)
        for y in range(rect.y + 1, rect.y + rect.height - 1):
            self.put(y, rect.x, border_style.vertical, attr)
            self.put(y, rect.x + rect.width - 1, border_style.vertical, attr)
        bottom = border_style.bottom_left + border_style.horizontal * inner + border_style.bottom_right
        self.put(rect.y + rect.height - 1, rect.x, bottom, attr)

    def draw(self, snapshot: Snapshot) -> None:
        self.screen.erase()
        height, width = self.screen.getmaxyx()
        layout = compute_layout(height, width, snapshot.max_attempts, len(snapshot.rows[0].char_states))
        if layout is None:
            self.put(0, 0, "Terminal too small, press esc to exit.", self.color(self.theme.header_text_error_color))
            self.screen.refresh()
            return

        self.draw_header(layout.header, snapshot.outcome)
        self.draw_box(layout.board, BorderStyle.ROUNDED, self.color(self.theme.border_color))
        for row_index, row in enumerate(snapshot.rows):
            kind = row_kind(row_index, snapshot.current_attempt, snapshot.terminal)
            for position, state in enumerate(row.char_states):
                style = cell_style(self.theme, kind, state)
                self.draw_cell(
                    cell_rect(layout.board, row_index, position),
                    cell_letter(snapshot, row_index, position),
                    style,
                )
        self.draw_keyboard(layout.keyboard, snapshot.keyboard)
        self.screen.refresh()

    def draw_cell(self, rect: Rect, letter: str, style: CellStyle) -> None:
        attr = style.modifier | curses.A_BOLD
        self.draw_box(rect, style.border_style, self.color(style.border_color) | attr)
        self.put(rect.y + rect.height // 2, rect.x + 1, letter.center(rect.width - 2), self.color(style.text_color) | attr)

    def draw_header(self, rect: Rect, outcome: Outcome) -> None:
        self.draw_box(rect, BorderStyle.PLAIN, self.color(self.theme.border_color), title=TITLE)
        lines = textwrap.wrap(header_message(outcome), width=max(rect.width - 2, 1))
        text_attr = self.color(header_color(self.theme, outcome))
        for offset, line in enumerate(lines[: max(rect.height - 2, 0)]):
            self.put(rect.y + 1 + offset, rect.x + 1, line.center(rect.width - 2), text_attr)

    def draw_keyboard(self, rect: Rect, keyboard: dict[str, CharacterState]) -> None:
        self.draw_box(rect, BorderStyle.PLAIN, self.color(self.theme.border_color), title=KEYBOARD_TITLE)
        for offset, keyboard_row in enumerate(KEYBOARD_ROWS[: max(rect.height - 2, 0)]):
            # One blank after every key except the last keeps the row centred.
            x = rect.x + 1 + (rect.width - 2 - (2 * len(keyboard_row) - 1)) // 2
            for letter in keyboard_row:
                color, modifier = keyboard_style(self.theme, keyboard[letter])
                self.put(rect.y + 1 + offset, x, letter, self.color(color) | modifier)
                x += 2
