"""Piece model and catalog: shapes per rotation state, colors, spawn"""
from dataclasses import dataclass, replace
from typing import Dict, List, Tuple

from tetris_config import CONFIG
from tetris_rng import random_int

Shape = Tuple[Tuple[int, ...], ...]


def _shapes(*mats: List[List[int]]) -> Tuple[Shape, ...]:
    return tuple(tuple(tuple(r) for r in m) for m in mats)


# Rotation states in right-hand order; O has a single state.
SHAPES: Dict[str, Tuple[Shape, ...]] = {
    "O": _shapes(
        [[1,1],
         [1,1]],
    ),
    "S": _shapes(
        [[0,1,1],[1,1,0],[0,0,0]],
        [[0,1,0],[0,1,1],[0,0,1]],
        [[0,0,0],[0,1,1],[1,1,0]],
        [[1,0,0],[1,1,0],[0,1,0]],
    ),
    "L": _shapes(
        [[1,0,0],[1,1,1],[0,0,0]],
        [[0,1,1],[0,1,0],[0,1,0]],
        [[0,0,0],[1,1,1],[0,0,1]],
        [[0,1,0],[0,1,0],[1,1,0]],
    ),
    "Z": _shapes(
        [[1,1,0],[0,1,1],[0,0,0]],
        [[0,0,1],[0,1,1],[0,1,0]],
        [[0,0,0],[1,1,0],[0,1,1]],
        [[0,1,0],[1,1,0],[1,0,0]],
    ),
    "J": _shapes(
        [[0,0,1],[1,1,1],[0,0,0]],
        [[0,1,0],[0,1,0],[0,1,1]],
        [[0,0,0],[1,1,1],[1,0,0]],
        [[1,1,0],[0,1,0],[0,1,0]],
    ),
    "I": _shapes(
        [[1,1,1,1],[0,0,0,0],[0,0,0,0],[0,0,0,0]],
        [[0,0,0,1],[0,0,0,1],[0,0,0,1],[0,0,0,1]],
        [[0,0,0,0],[0,0,0,0],[0,0,0,0],[1,1,1,1]],
        [[1,0,0,0],[1,0,0,0],[1,0,0,0],[1,0,0,0]],
    ),
    "T": _shapes(
        [[0,1,0],[1,1,1],[0,0,0]],
        [[0,1,0],[0,1,1],[0,1,0]],
        [[0,0,0],[1,1,1],[0,1,0]],
        [[0,1,0],[1,1,0],[0,1,0]],
    ),
}

# Color tag per piece kind; also the fill of locked cells.
COLORS: Dict[str, str] = {
    "O": "yellow",
    "S": "green",
    "L": "orange",
    "Z": "red",
    "J": "blue",
    "I": "cyan",
    "T": "purple",
}

PIECES = list(SHAPES)


@dataclass(frozen=True)
class Position:
    x: int
    y: int


@dataclass(frozen=True)
class Tetromino:
    shapes: Tuple[Shape, ...]
    position: Position
    color: str
    rotation: int = 0

    def __post_init__(self):
        if not 0 <= self.rotation < len(self.shapes):
            raise ValueError(f"rotation {self.rotation} out of range for {len(self.shapes)} shapes")

    @property
    def shape(self) -> Shape:
        return self.shapes[self.rotation]

    @staticmethod
    def spawn(t: str) -> "Tetromino":
        return Tetromino(SHAPES[t], Position(CONFIG["START_X"], CONFIG["START_Y"]), COLORS[t])

    def moved(self, dx: int, dy: int) -> "Tetromino":
        return replace(self, position=Position(self.position.x + dx, self.position.y + dy))

    def rotated(self) -> "Tetromino":
        return replace(self, rotation=(self.rotation + 1) % len(self.shapes))

    def respawned(self) -> "Tetromino":
        """Same piece kind back at its start position and rotation."""
        return replace(self, position=Position(CONFIG["START_X"], CONFIG["START_Y"]), rotation=0)


def random_tetromino(seed: int) -> Tuple[Tetromino, int]:
    """Draw a uniformly random catalog piece. Returns (piece, next seed)."""
    i, seed = random_int(seed, 0, len(PIECES) - 1)
    return Tetromino.spawn(PIECES[i]), seed
