# termsnake/main.py
from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from termsnake.config import AppConfig
from termsnake.core.constants import Difficulty
from termsnake.core.placement import NoSpaceError
from termsnake.logs import configure_logging
from termsnake.runners.run_snake import main as run_snake, prepare
from termsnake.viz.renderer_curses import TerminalTooSmallError

CONTROLS = """\
Controls:
  w a s d  Move the snake (arrow keys work too)
  q        Quit the game
  r        Restart after game over
"""

EXIT_HELP = 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="termsnake",
        usage="%(prog)s [options]",
        epilog=CONTROLS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,          # -h selects hard mode
        allow_abbrev=False,
    )
    p.add_argument("-help", action="store_true", help="Show this help message")
    p.add_argument("-w", "-wrap", dest="wrap", action="store_true", help="Enable wrapping borders")
    p.add_argument("-e", "-easy", dest="difficulty", action="store_const", const=Difficulty.EASY,
                   help="Set difficulty to easy (default)")
    p.add_argument("-m", "-medium", dest="difficulty", action="store_const", const=Difficulty.MEDIUM,
                   help="Set difficulty to medium")
    p.add_argument("-h", "-hard", dest="difficulty", action="store_const", const=Difficulty.HARD,
                   help="Set difficulty to hard")
    p.add_argument("-seed", type=int, default=None, help="Seed the random number generator")
    p.add_argument("-gui", action="store_true", help="Play in a pygame window instead of the terminal")
    p.set_defaults(difficulty=Difficulty.EASY)
    return p


def parse_args(argv: Optional[Sequence[str]] = None, base: Optional[AppConfig] = None) -> AppConfig:
    """Build the startup config. Exits with usage on -help (1) or a bad flag (2)."""
    p = build_parser()
    args = p.parse_args(argv)
    if args.help:
        p.print_help()
        p.exit(EXIT_HELP)
    cfg = base if base is not None else AppConfig()
    return cfg.with_(
        wrap=args.wrap,
        difficulty=args.difficulty,
        seed=args.seed,
        renderer="pygame" if args.gui else "curses",
    )


def config_from_env(cfg: AppConfig) -> AppConfig:
    return cfg.with_(
        log_file=os.environ.get("TERMSNAKE_LOG") or cfg.log_file,
        log_level=os.environ.get("TERMSNAKE_LOG_LEVEL", cfg.log_level),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    cfg = config_from_env(parse_args(argv))
    log = configure_logging(cfg)
    try:
        rules = prepare(cfg)
    except (NoSpaceError, ValueError) as e:
        return _startup_failed(log, e)
    try:
        run_snake(cfg, rules)
    except TerminalTooSmallError as e:
        return _startup_failed(log, e)
    except KeyboardInterrupt:
        return 130
    return 0


def _startup_failed(log: logging.Logger, e: Exception) -> int:
    log.error("cannot start: %s", e)
    print(f"termsnake: {e}", file=sys.stderr)
    return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
