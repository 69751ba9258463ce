import curses
import json
import logging
from argparse import ArgumentParser

from spotle.config import GameConfig, ThemeName, load_config
from spotle.driver import run, setup_screen
from spotle.engine import Game
from spotle.render_utils import CursesPainter, format_board
from spotle.theme import get_theme
from spotle.tracker import Tracker


def build_config(args) -> GameConfig:
    config = load_config(args.config) if args.config else GameConfig()

    overrides = {}
    if args.secret is not None:
        overrides["secret"] = args.secret
    if args.max_attempts is not None:
        overrides["max_attempts"] = args.max_attempts
    if args.theme is not None:
        overrides["theme"] = args.theme
    if args.no_mask:
        overrides["mask"] = [[False] * config.word_length for _ in range(overrides.get("max_attempts", config.max_attempts))]
    elif "max_attempts" in overrides and config.mask is not None:
        # A mask read from the config no longer fits, fall back to the default schedule.
        overrides["mask"] = None

    return GameConfig.model_validate({**config.model_dump(), **overrides})


def main() -> None:
    parser = ArgumentParser()
    parser.add_argument("--config", type=str, default=None, help="JSON file with the game configuration")
    parser.add_argument("--secret", type=str, default=None, help="Word to guess")
    parser.add_argument("--max_attempts", type=int, default=None, help="Number of guesses allowed")
    parser.add_argument("--theme", type=ThemeName, choices=list(ThemeName), default=None, help="Colour theme")
    parser.add_argument("--no_mask", action="store_true", default=False, help="Do not pre-reveal any cells")
    parser.add_argument("--log_file", type=str, default=None, help="Write logs here, the terminal is taken by the game")
    parser.add_argument("--log_level", type=str, default="INFO", help="Logging level")
    args = parser.parse_args()

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=args.log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )

    config = build_config(args)
    game = Game.from_config(config)
    tracker = Tracker()

    def play(screen: "curses.window") -> None:
        setup_screen()
        run(screen, game, CursesPainter(screen, get_theme(config.theme)), tracker)

    curses.wrapper(play)

    print(format_board(game.snapshot()))
    print(json.dumps(tracker.report(), indent=2))


if __name__ == "__main__":
    main()
