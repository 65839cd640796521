"""Snake game state and the interactive game loop."""

from __future__ import annotations

import curses
import random
import time
from enum import Enum

from .body import SnakeBody
from .coord import Coord
from .term import (
    PAUSE_MENU_EMPTY,
    PAUSE_MENU_TEXT,
    R_EMPTY,
    R_FRUIT,
    R_HEAD,
    R_TAIL,
    put_block,
)

BOARD_SIZE_MIN = 10
TAIL_INC = 3
SLEEP_INTERVAL = 0.1
INITIAL_GROWTH = 3


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


_KEY_DIRECTIONS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}


class Game:
    """State of one game on a board of width x height cells, 1-based."""

    def __init__(
        self,
        width: int,
        height: int,
        loopable_walls: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.loopable_walls = loopable_walls
        self.rng = rng if rng is not None else random.Random()
        self.pause_pos = Coord(width // 2, height // 2)
        self.body = SnakeBody()
        self.length_to_add = INITIAL_GROWTH
        self.running = True
        self.direction = Direction.UP
        self.fruit: Coord | None = None
        self.place_fruit()
        self.score = 0
        self.paused = False
        self.body.push_front(Coord(width // 2, height // 2))

    def place_fruit(self) -> None:
        """Put the fruit on a random cell not covered by the snake."""
        open_cells = [
            Coord(x, y)
            for y in range(1, self.height + 1)
            for x in range(1, self.width + 1)
            if Coord(x, y) not in self.body
        ]
        if not open_cells:
            self.running = False
            return
        self.fruit = self.rng.choice(open_cells)

    def handle_key(self, key: str | None) -> None:
        """Apply one key press; None means no key was pressed."""
        if key == "p":
            self.paused = not self.paused
        if key is None:
            return
        if self.paused:
            if key == "q":
                self.running = False
            return
        wanted = _KEY_DIRECTIONS.get(key)
        if wanted is not None and self.direction is not wanted.opposite:
            self.direction = wanted

    def step(self) -> Coord | None:
        """Advance one tick; return the cell the tail left, if any."""
        head = self.body.head
        dx, dy = self.direction.value
        x, y = head.x + dx, head.y + dy
        out_of_bounds = x <= 0 or y <= 0 or x > self.width or y > self.height
        if self.loopable_walls and out_of_bounds:
            if x <= 0:
                x = self.width
            elif x > self.width:
                x = 1
            if y > self.height:
                y = 1
            elif y <= 0:
                y = self.height
            out_of_bounds = False
        new_head = Coord(x, y)
        if out_of_bounds or new_head in self.body:
            self.running = False
            return None
        if head == self.fruit:
            self.length_to_add += TAIL_INC
            self.score += 1
            self.place_fruit()
        self.body.push_front(new_head)
        if self.length_to_add > 0:
            self.length_to_add -= 1
            return None
        return self.body.pop_back()


def _show_score(screen, score: int) -> None:
    screen.addstr(0, 0, f"Score: {score}\n")


def _draw_box(screen, game: Game) -> None:
    _show_score(screen, game.score)
    screen.addch(curses.ACS_ULCORNER)
    for _ in range(game.width * 2):
        screen.addch(curses.ACS_HLINE)
    screen.addch(curses.ACS_URCORNER)
    screen.addch("\n")
    for _ in range(game.height):
        screen.addch(curses.ACS_VLINE)
        screen.addstr(R_EMPTY * game.width)
        screen.addch(curses.ACS_VLINE)
        screen.addch("\n")
    screen.addch(curses.ACS_LLCORNER)
    for _ in range(game.width * 2):
        screen.addch(curses.ACS_HLINE)
    screen.addch(curses.ACS_LRCORNER)


def _draw(game: Game) -> None:
    if game.fruit is not None:
        put_block(game.fruit, R_FRUIT)
    cells = iter(game.body)
    put_block(next(cells), R_HEAD)
    neck = next(cells, None)
    if neck is not None:
        put_block(neck, R_TAIL)


def start(screen, loopable_walls: bool = True) -> int:
    """Play a game on a curses screen until it ends; return the score."""
    max_y, max_x = screen.getmaxyx()
    game = Game((max_x - 3) // 2, max_y - 3, loopable_walls)
    _draw_box(screen, game)
    while game.running:
        code = screen.getch()
        key = None if code == -1 else chr(code)
        game.handle_key(key)
        if key == "p":
            put_block(game.pause_pos, PAUSE_MENU_TEXT if game.paused else PAUSE_MENU_EMPTY)
            screen.refresh()
        if not game.paused:
            score_before = game.score
            vacated = game.step()
            if game.score != score_before:
                _show_score(screen, game.score)
            if vacated is not None:
                put_block(vacated, R_EMPTY)
            _draw(game)
            screen.refresh()
        time.sleep(SLEEP_INTERVAL)
    return game.score