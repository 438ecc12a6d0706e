# session.py
from __future__ import annotations

import logging
from typing import Optional, Protocol

import numpy as np  # type: ignore
import pygame  # type: ignore

from . import game
from .config import CFG, Config
from .game import Direction, GameState

logger = logging.getLogger(__name__)

# Posted by the pygame timer once per tick period
TICK_EVENT = pygame.USEREVENT + 1


class TickTimer(Protocol):
    def arm(self, interval_ms: int) -> None: ...
    def cancel(self) -> None: ...


class PygameTimer:
    """Fixed-period timer that posts TICK_EVENT onto the pygame event queue."""

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type

    def arm(self, interval_ms: int) -> None:
        pygame.time.set_timer(self.event_type, interval_ms)

    def cancel(self) -> None:
        pygame.time.set_timer(self.event_type, 0)


class GameSession:
    """
    Owns the one live GameState and the tick timer.

    Every operation swaps `state` for a new value. `tick()` reads `state` when
    the timer fires, so the latest pending direction is always the one applied.
    The timer runs exactly while the game is running and not over.
    """

    def __init__(
        self,
        timer: TickTimer,
        cfg: Config = CFG,
        rng: Optional[np.random.Generator] = None,
    ):
        self.cfg = cfg
        self.timer = timer
        self.rng = rng if rng is not None else game.make_rng(cfg.seed)
        self.state: GameState = game.new_game_state(self.rng, cfg)
        self._ticking = False

    @property
    def ticking(self) -> bool:
        return self._ticking

    # ---------- Controls ----------
    def start(self) -> None:
        if self.state.running and not self.state.game_over:
            return
        if self.state.game_over:
            logger.info("Restarting after game over (score %d)", self.state.score)
        self.state = game.start(self.state, self.rng, self.cfg)
        logger.info("Game started")
        self._sync_timer()

    def pause(self) -> None:
        if not self.state.running:
            return
        self.state = game.pause(self.state)
        logger.info("Game paused at score %d", self.state.score)
        self._sync_timer()

    def toggle(self) -> None:
        if self.state.running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self.state = game.reset(self.rng, self.cfg)
        logger.info("Game reset")
        self._sync_timer()

    def request_direction(self, direction: Direction) -> None:
        self.state = game.request_direction(self.state, direction)

    # ---------- Timer ----------
    def tick(self) -> GameState:
        prev = self.state
        self.state = game.advance(prev, self.rng, self.cfg.board_size)

        if self.state is not prev:
            if self.state.just_ate and self.state.food is not None:
                logger.debug("Food eaten, score %d, next food at %s", self.state.score, self.state.food)
            if self.state.won:
                logger.info("Board filled, player wins with score %d", self.state.score)
            elif self.state.game_over:
                logger.info("Game over (%s) with score %d", self.state.reason, self.state.score)
        self._sync_timer()
        return self.state

    def _sync_timer(self) -> None:
        should_tick = self.state.running and not self.state.game_over
        if should_tick == self._ticking:
            return
        if should_tick:
            self.timer.arm(self.cfg.move_interval_ms)
            logger.debug("Tick timer armed at %d ms", self.cfg.move_interval_ms)
        else:
            self.timer.cancel()
            logger.debug("Tick timer cancelled")
        self._ticking = should_tick
