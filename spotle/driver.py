import curses
import logging

from spotle.engine import Game
from spotle.render_utils import CursesPainter
from spotle.state import Backspace, Cancel, CharacterInput, Outcome, Quit, Signal, Submit, Won, is_terminal
from spotle.tracker import Tracker

logger = logging.getLogger(__name__)

ESCAPE = 27
ENTER_KEYS = {curses.KEY_ENTER, ord("\n"), ord("\r")}
BACKSPACE_KEYS = {curses.KEY_BACKSPACE, 127, 8}


def decode_key(key: int | str, outcome: Outcome) -> Signal | None:
    """Maps a curses key (as returned by get_wch) onto a game signal."""
    if isinstance(key, str):
        if len(key) != 1:
            return None
        key_code = ord(key)
    else:
        key_code = key

    if key_code in ENTER_KEYS:
        return Submit()
    if key_code in BACKSPACE_KEYS:
        return Backspace()
    if key_code == ESCAPE:
        return Cancel()

    if isinstance(key, int) and key > 0xFF:
        return None

    char = chr(key_code)
    if not char.isprintable():
        return None
    if char == "q" and is_terminal(outcome):
        return Quit()
    return CharacterInput(char=char)


def setup_screen() -> None:
    curses.curs_set(0)
    curses.start_color()
    curses.use_default_colors()


def run(screen: "curses.window", game: Game, painter: CursesPainter, tracker: Tracker) -> None:
    snapshot = game.snapshot()
    with tracker.timer("session_seconds"):
        while not snapshot.closed:
            painter.draw(snapshot)
            signal = decode_key(screen.get_wch(), snapshot.outcome)
            if signal is None:
                continue

            with tracker.scope("signals"):
                tracker.count(type(signal).__name__.lower())
            snapshot = game.step(signal)

    tracker.log_value("won", int(isinstance(snapshot.outcome, Won)))
    tracker.log_value("attempts_used", snapshot.current_attempt)
    logger.info("Session finished after %d attempts", snapshot.current_attempt)
