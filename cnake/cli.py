"""Command line entry point."""

from __future__ import annotations

import curses
import sys
from dataclasses import dataclass

from .game import BOARD_SIZE_MIN, start


@dataclass(frozen=True)
class Options:
    show_help: bool = False
    loopable_walls: bool = True


def help_text() -> str:
    return (
        "cnake - a snake game\n"
        "  Usage: cnake [flags]\n"
        "  Flags:\n"
        "    -h, --help            Display this message\n"
        "    -n, --no-loop-walls   Turn off loopable walls\n"
        "  Controls:\n"
        "    p - Pause\n"
        "    Movement:\n"
        "       w       k       ↑\n"
        "     a   d   h   l   ←   →\n"
        "       s       j       ↓\n"
    )


def parse_args(argv: list[str]) -> Options:
    """Read flags; a help flag wins at once and unknown arguments are ignored."""
    loopable_walls = True
    for arg in argv:
        if arg in ("-h", "--help"):
            return Options(show_help=True, loopable_walls=loopable_walls)
        if arg in ("-n", "--no-loop-walls"):
            loopable_walls = False
    return Options(loopable_walls=loopable_walls)


def main(argv: list[str] | None = None) -> int:
    options = parse_args(sys.argv[1:] if argv is None else argv)
    if options.show_help:
        print(help_text())
        return 0
    screen = curses.initscr()
    try:
        curses.curs_set(0)
        screen.nodelay(True)
        curses.noecho()
        max_y, max_x = screen.getmaxyx()
        if max_x < BOARD_SIZE_MIN * 2 + 3 or max_y < BOARD_SIZE_MIN + 3:
            curses.endwin()
            print("\033[31mERROR:\033[0m Terminal too small!")
            return 1
        score = start(screen, options.loopable_walls)
    finally:
        if not curses.isendwin():
            curses.endwin()
    print(f"You ate {score} peices of fruit!")
    return 0


if __name__ == "__main__":
    sys.exit(main())