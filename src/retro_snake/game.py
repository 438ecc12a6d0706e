# game.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

import numpy as np  # type: ignore

from .config import CFG, Config, FALLBACK_FOOD, INITIAL_DIRECTION, initial_snake

Cell = Tuple[int, int]
Direction = Tuple[int, int]


# ---------- Helpers ----------
def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Seedable random source for food placement."""
    return np.random.default_rng(seed)

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(cell: Cell, board_size: int) -> bool:
    x, y = cell
    return 0 <= x < board_size and 0 <= y < board_size

def spawn_food(occupied: Iterable[Cell], rng: np.random.Generator, board_size: int = CFG.board_size) -> Cell:
    """
    Pick a uniformly random free cell.
    Free cells are everything on the board minus `occupied`; pass the
    post-move occupancy (new head included). A full board yields FALLBACK_FOOD.
    """
    free = np.ones((board_size, board_size), dtype=bool)  # indexed [y, x]
    for cell in occupied:
        if in_bounds(cell, board_size):
            free[cell[1], cell[0]] = False

    open_cells = np.argwhere(free)  # row-major (y, x) pairs
    if len(open_cells) == 0:
        return FALLBACK_FOOD
    y, x = open_cells[rng.integers(len(open_cells))]
    return (int(x), int(y))


# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    snake: Tuple[Cell, ...]        # head at index 0
    direction: Direction           # last applied
    pending: Direction             # applied on the next tick
    food: Optional[Cell]           # None only once the board is full
    score: int = 0
    running: bool = False
    game_over: bool = False
    won: bool = False
    reason: Optional[str] = None   # "wall", "self" or "full" once over
    just_ate: bool = False

    @property
    def head(self) -> Cell:
        return self.snake[0]

def new_game_state(rng: np.random.Generator, cfg: Config = CFG) -> GameState:
    snake = initial_snake(cfg.board_size)
    return GameState(
        snake=snake,
        direction=INITIAL_DIRECTION,
        pending=INITIAL_DIRECTION,
        food=spawn_food(snake, rng, cfg.board_size),
    )


# ---------- Transitions ----------
def request_direction(state: GameState, direction: Direction) -> GameState:
    """Queue a turn for the next tick; 180° turns against the applied direction are dropped."""
    if state.game_over:
        return state
    if is_opposite(direction, state.direction):
        return state
    return replace(state, pending=direction)

def start(state: GameState, rng: np.random.Generator, cfg: Config = CFG) -> GameState:
    if state.game_over:
        state = new_game_state(rng, cfg)
    return replace(state, running=True)

def pause(state: GameState) -> GameState:
    if not state.running:
        return state
    return replace(state, running=False)

def reset(rng: np.random.Generator, cfg: Config = CFG) -> GameState:
    return new_game_state(rng, cfg)

def _terminal(state: GameState, reason: str) -> GameState:
    return replace(state, running=False, game_over=True, reason=reason, just_ate=False)

def advance(state: GameState, rng: np.random.Generator, board_size: int = CFG.board_size) -> GameState:
    """
    Advance the game by one tick.
    Returns the state unchanged when paused or already over. A wall or body hit
    yields a terminal state with snake, food and score left as they were.
    """
    if not state.running or state.game_over:
        return state

    hx, hy = state.head
    dx, dy = state.pending
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_bounds(new_head, board_size):
        return _terminal(state, "wall")

    # Self collision (tail included: it has not moved yet)
    if new_head in state.snake:
        return _terminal(state, "self")

    # Move: drop the tail
    if new_head != state.food:
        snake = (new_head,) + state.snake[:-1]
        return replace(state, snake=snake, direction=state.pending, just_ate=False)

    # Eat: keep the tail
    snake = (new_head,) + state.snake
    if len(snake) == board_size * board_size:
        return replace(
            state,
            snake=snake,
            direction=state.pending,
            food=None,
            score=state.score + 1,
            running=False,
            game_over=True,
            won=True,
            reason="full",
            just_ate=True,
        )

    return replace(
        state,
        snake=snake,
        direction=state.pending,
        food=spawn_food(snake, rng, board_size),
        score=state.score + 1,
        just_ate=True,
    )
