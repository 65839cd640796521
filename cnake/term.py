"""Raw terminal output and tty mode switching."""

from __future__ import annotations

import subprocess
import sys
from typing import TextIO

from .coord import Coord

R_EMPTY = "  "
R_HEAD = "\033[42m  "
R_TAIL = "\033[102m\033[36mXX"
R_FRUIT = "\033[31m▝▘"
RESET = "\033[0;0m"

PAUSE_MENU_TEXT = "PAUSED"
PAUSE_MENU_EMPTY = "      "


def move_to(x: int, y: int, stream: TextIO | None = None) -> None:
    """Move the terminal cursor to screen column x, row y."""
    out = stream if stream is not None else sys.stdout
    out.write(f"\033[{y};{x}H")


def put_block(pos: Coord, block: str, stream: TextIO | None = None) -> None:
    """Print a block at a board position; a board cell is two columns wide."""
    out = stream if stream is not None else sys.stdout
    move_to(2 * pos.x, pos.y + 2, out)
    out.write(f"{block}{RESET}")
    out.flush()


def set_raw() -> None:
    """Switch the terminal to unbuffered input."""
    subprocess.run(["/bin/stty", "raw"], check=False)


def set_cooked() -> None:
    """Switch the terminal back to buffered input."""
    subprocess.run(["/bin/stty", "cooked"], check=False)