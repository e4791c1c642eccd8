"""Game rules: snake movement, walls, apples, scoring and the high score file."""

from __future__ import annotations

import enum
import random
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

import pygame

from snakegrid.settings import GRID, HIGHSCORE_FILE, MOVE_DELAY

# Inner obstacles as (x, y, width, height).
_WALLS = (
    (300, 180, 20, 60),
    (300, 300, 20, 60),
    (300, 180, 60, 20),
    (300, 340, 60, 20),
    (480, 300, 20, 60),
    (480, 180, 20, 60),
    (440, 340, 60, 20),
    (440, 180, 60, 20),
)

# Playing field: cells with MIN <= coordinate < LIMIT are inside.
_FIELD_MIN = 20
_FIELD_X_LIMIT = 780
_FIELD_Y_LIMIT = 520

_APPLE_COLUMNS = 760 // GRID
_APPLE_ROWS = 500 // GRID

_INTEGER = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Cell:
    """The top-left corner of one grid square."""

    x: int
    y: int


class Direction(enum.Enum):
    """A heading of the snake: step in x, step in y and drawing angle."""

    UP = (0, -GRID, 270.0)
    DOWN = (0, GRID, 90.0)
    LEFT = (-GRID, 0, 180.0)
    RIGHT = (GRID, 0, 0.0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def angle(self) -> float:
        return self.value[2]


_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class Logic:
    """State of one game of snake and the rules that advance it."""

    def __init__(self, highscore_path: str | Path = HIGHSCORE_FILE, rng: random.Random | None = None):
        self.highscore_path = Path(highscore_path)
        self.rng = rng if rng is not None else random.Random()
        self.segments: list[Cell] = [Cell(400, 260), Cell(380, 260), Cell(360, 260)]
        self.direction = Direction.RIGHT
        self.apple: Cell | None = None
        self.apple_eaten = True
        self.score = 0
        self.high_score = 0
        self.running = True
        self.last_move_time: int | None = None
        self.on_eat: Callable[[], None] | None = None
        self.load_high_score()

    @property
    def angle(self) -> float:
        """Rotation of the head picture in degrees."""
        return self.direction.angle

    @property
    def head(self) -> Cell:
        return self.segments[0]

    def move_snake(self) -> None:
        """Advance one cell; the tail stays put while an apple is being digested."""
        head = self.segments[0]
        self.segments.insert(0, Cell(head.x + self.direction.dx, head.y + self.direction.dy))
        if not self.apple_eaten:
            self.segments.pop()

    def turn(self, direction: Direction) -> bool:
        """Change heading unless it would reverse or repeat the current axis."""
        if direction.dy != 0 and self.direction.dy != 0:
            return False
        if direction.dx != 0 and self.direction.dx != 0:
            return False
        self.direction = direction
        return True

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Apply quit requests and arrow or escape key presses."""
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in _KEY_DIRECTIONS:
                    self.turn(_KEY_DIRECTIONS[event.key])

    def impact(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) lies in a wall or outside the field."""
        if x >= _FIELD_X_LIMIT or y >= _FIELD_Y_LIMIT or x < _FIELD_MIN or y < _FIELD_MIN:
            return True
        return any(
            wx <= x < wx + width and wy <= y < wy + height
            for wx, wy, width, height in _WALLS
        )

    def generate_apple(self) -> Cell:
        """Place a new apple on a random free-of-wall cell and return it."""
        while True:
            cell = Cell(
                _FIELD_MIN + self.rng.randrange(_APPLE_COLUMNS) * GRID,
                _FIELD_MIN + self.rng.randrange(_APPLE_ROWS) * GRID,
            )
            if not self.impact(cell.x, cell.y):
                self.apple = cell
                return cell

    def tail_bite(self) -> bool:
        """Whether the head overlaps any other segment."""
        head = self.segments[0]
        return any(segment == head for segment in self.segments[1:])

    def save_high_score(self) -> None:
        try:
            self.highscore_path.write_text(str(self.high_score))
        except OSError:
            pass

    def load_high_score(self) -> None:
        try:
            text = self.highscore_path.read_text()
        except OSError:
            return
        match = _INTEGER.match(text)
        self.high_score = int(match.group(1)) if match else 0

    def run_logic(self, now: int, events: Iterable[pygame.event.Event] = ()) -> bool:
        """Take one step if MOVE_DELAY milliseconds have passed; return whether it did."""
        if self.last_move_time is None:
            self.last_move_time = now
            return False
        if now - self.last_move_time < MOVE_DELAY:
            return False

        self.handle_events(events)
        self.move_snake()
        if self.apple_eaten:
            self.generate_apple()

        if self.segments[0] == self.apple:
            if self.on_eat is not None:
                self.on_eat()
            self.score += 1
            if self.score > self.high_score:
                self.high_score = self.score
                self.save_high_score()

        self.apple_eaten = any(segment == self.apple for segment in self.segments)
        self.last_move_time = now
        return True