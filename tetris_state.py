"""
Game state and the action reducer.

The whole game is a fold of actions over an immutable ``State``:

  - ``initial_state`` builds the first state from a random seed
  - ``reduce_state`` maps (state, action) to the next state
  - ``run_actions`` folds a stream of actions, yielding every state

Nothing here mutates a live state; each transition rebuilds the frozen
dataclass with ``dataclasses.replace``. The random seed is part of the
state, so a given seed and action sequence always replay the same game.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Optional

from tetris_board import (Grid, collide, initialise_grid, line_clear,
                          place_tetromino_on_grid, shape_cells, top_out)
from tetris_config import CONFIG
from tetris_piece import Tetromino, random_tetromino
from tetris_scoring import (calculate_score, level_for_rows,
                            speed_multiplier_for_level)

log = logging.getLogger(__name__)


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE = "rotate"


class ActionKind(Enum):
    TICK = "tick"
    MOVE = "move"
    ROTATE = "rotate"
    DOWN = "down"
    DROP = "drop"
    HOLD = "hold"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    direction: Optional[Direction] = None

    @staticmethod
    def move(direction: Direction) -> "Action":
        if direction not in (Direction.LEFT, Direction.RIGHT):
            raise ValueError(f"cannot move {direction}")
        return Action(ActionKind.MOVE, direction)


TICK = Action(ActionKind.TICK)
ROTATE = Action(ActionKind.ROTATE)
DOWN = Action(ActionKind.DOWN)
DROP = Action(ActionKind.DROP)
HOLD = Action(ActionKind.HOLD)
MOVE_LEFT = Action.move(Direction.LEFT)
MOVE_RIGHT = Action.move(Direction.RIGHT)


@dataclass(frozen=True)
class State:
    current_tetromino: Tetromino
    next_tetromino: Tetromino
    held_tetromino: Optional[Tetromino]
    grid: Grid
    score: int
    level: int
    high_score: int
    game_end: bool
    speed_multiplier: int
    speed_count: int
    rows_cleared: int
    used_hold: bool
    seed: int


def initial_state(seed: int, high_score: int = 0) -> State:
    current, seed = random_tetromino(seed)
    nxt, seed = random_tetromino(seed)
    return State(
        current_tetromino=current,
        next_tetromino=nxt,
        held_tetromino=None,
        grid=initialise_grid(CONFIG["GRID_WIDTH"], CONFIG["GRID_HEIGHT"]),
        score=0,
        level=1,
        high_score=high_score,
        game_end=False,
        speed_multiplier=CONFIG["MULTIPLIER"],
        speed_count=0,
        rows_cleared=0,
        used_hold=False,
        seed=seed,
    )


# (dx, dy) probed for each direction; ROTATE checks the already-rotated piece in place
_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.ROTATE: (0, 0),
}


def collision_detection(s: State, direction: Direction) -> bool:
    """Return True if the current piece cannot take one step in ``direction``."""
    try:
        dx, dy = _OFFSETS[direction]
    except KeyError:
        raise ValueError(f"unknown direction {direction!r}") from None
    return collide(s.grid, shape_cells(s.current_tetromino, dx, dy))


def move_down(s: State) -> State:
    """Step the piece down one row, or lock it if it is resting."""
    if not collision_detection(s, Direction.DOWN):
        return replace(s, current_tetromino=s.current_tetromino.moved(0, 1), speed_count=0)

    grid, cleared = line_clear(place_tetromino_on_grid(s.grid, s.current_tetromino))
    rows = s.rows_cleared + cleared
    level = level_for_rows(rows)
    nxt, seed = random_tetromino(s.seed)
    game_end = top_out(grid)
    if cleared:
        log.debug("cleared %d rows (total %d, level %d)", cleared, rows, level)
    if game_end:
        log.info("game over with score %d", s.score + calculate_score(s.level, cleared))
    return replace(
        s,
        current_tetromino=s.next_tetromino,
        next_tetromino=nxt,
        grid=grid,
        game_end=game_end,
        score=s.score + calculate_score(s.level, cleared),
        speed_count=0,
        speed_multiplier=speed_multiplier_for_level(level),
        level=level,
        rows_cleared=rows,
        used_hold=False,
        seed=seed,
    )


def tick(s: State) -> State:
    if s.game_end:
        return initial_state(s.seed, high_score=max(s.score, s.high_score))
    if s.speed_count >= s.speed_multiplier:
        return move_down(s)
    return replace(s, speed_count=s.speed_count + 1)


def move(s: State, direction: Direction) -> State:
    if direction not in (Direction.LEFT, Direction.RIGHT):
        raise ValueError(f"cannot move {direction}")
    if collision_detection(s, direction):
        return s
    dx = 1 if direction is Direction.RIGHT else -1
    return replace(s, current_tetromino=s.current_tetromino.moved(dx, 0))


def rotate(s: State) -> State:
    candidate = replace(s, current_tetromino=s.current_tetromino.rotated())
    return s if collision_detection(candidate, Direction.ROTATE) else candidate


def drop(s: State) -> State:
    """Hard drop: fall until resting, then lock."""
    # y grows every step and a piece cannot pass the floor, so this ends
    # within GRID_HEIGHT iterations
    while not collision_detection(s, Direction.DOWN):
        s = move_down(s)
    return move_down(s)


def hold(s: State) -> State:
    if s.used_hold:
        return s
    stored = s.current_tetromino.respawned()
    if s.held_tetromino is None:
        nxt, seed = random_tetromino(s.seed)
        return replace(s, current_tetromino=s.next_tetromino, next_tetromino=nxt,
                       held_tetromino=stored, used_hold=True, seed=seed)
    return replace(s, current_tetromino=s.held_tetromino, held_tetromino=stored, used_hold=True)


def reduce_state(s: State, action: Action) -> State:
    kind = action.kind
    if kind is ActionKind.TICK:
        return tick(s)
    if kind is ActionKind.MOVE:
        return move(s, action.direction)
    if kind is ActionKind.ROTATE:
        return rotate(s)
    if kind is ActionKind.DOWN:
        return move_down(s)
    if kind is ActionKind.DROP:
        return drop(s)
    if kind is ActionKind.HOLD:
        return hold(s)
    raise ValueError(f"unknown action {action!r}")


def run_actions(s: State, actions: Iterable[Action]) -> Iterator[State]:
    """Fold actions over the state, yielding each new state in order."""
    for action in actions:
        s = reduce_state(s, action)
        yield s
