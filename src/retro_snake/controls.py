# controls.py
from __future__ import annotations

from typing import Dict, Tuple

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import Direction, GameState
from .render import Layout
from .session import GameSession

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}
RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
QUIT_KEYS = (pygame.K_ESCAPE,)


# ---------- Buttons ----------
def toggle_button(state: GameState) -> Tuple[str, bool]:
    """Start/Pause toggle: (label, enabled). Disabled once the game is over."""
    return ("PAUSE" if state.running else "START"), not state.game_over

def reset_button(state: GameState) -> Tuple[str, bool]:
    """Reset is locked while a game is in progress."""
    return "RESET", not (state.running and not state.game_over)

def buttons_for(state: GameState) -> Tuple[Tuple[str, bool], Tuple[str, bool]]:
    return toggle_button(state), reset_button(state)

def press_toggle(session: GameSession) -> None:
    if toggle_button(session.state)[1]:
        session.toggle()

def press_reset(session: GameSession) -> None:
    if reset_button(session.state)[1]:
        session.reset()


# ---------- Events ----------
def handle_key(session: GameSession, key: int) -> bool:
    """Apply one key press. Return False to quit."""
    if key in QUIT_KEYS:
        return False

    direction = KEY_DIRECTIONS.get(key)
    if direction is not None:
        session.request_direction(direction)
    elif key in RESTART_KEYS:
        if session.state.game_over:
            session.reset()
    elif key == pygame.K_p:
        press_toggle(session)
    elif key == pygame.K_r:
        press_reset(session)
    return True

def handle_click(session: GameSession, layout: Layout, pos: Tuple[int, int]) -> None:
    if layout.toggle_button.collidepoint(pos):
        press_toggle(session)
    elif layout.reset_button.collidepoint(pos):
        press_reset(session)

def handle_event(session: GameSession, layout: Layout, event: pygame.event.Event) -> bool:
    """Process one input event; update session. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        return handle_key(session, event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        handle_click(session, layout, event.pos)
    return True
