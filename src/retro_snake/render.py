# render.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import pygame  # type: ignore

from .config import (
    MARGIN, SCORE_BAR_H, CONTROLS_H, MIN_CELL_SIZE,
    PRIMARY, SECONDARY, ACCENT, FOOD_EDGE, BOARD_BG, GRID_LINE, WINDOW_BG,
    TEXT, HINT, EYE, PUPIL, GAME_OVER_WASH, PANEL_BG, DISABLED,
)
from .game import Cell, Direction, GameState

BUTTON_W, BUTTON_H, BUTTON_GAP = 140, 44, 11


# ---------- Layout ----------
@dataclass(frozen=True)
class Layout:
    cell: int
    board: pygame.Rect
    toggle_button: pygame.Rect
    reset_button: pygame.Rect
    size: Tuple[int, int]

def fit_cell_size(board_size: int, cell_size: int, display_w: int, display_h: int) -> int:
    """Shrink cells so the whole window fits the display; never below MIN_CELL_SIZE."""
    if display_w <= 0 or display_h <= 0:
        return cell_size  # display size unknown
    avail = min(display_w - 2 * MARGIN, display_h - SCORE_BAR_H - CONTROLS_H)
    if board_size * cell_size <= avail:
        return cell_size
    return max(avail // board_size, MIN_CELL_SIZE)

def make_layout(board_size: int, cell: int) -> Layout:
    board_px = board_size * cell
    width = max(board_px + 2 * MARGIN, 2 * BUTTON_W + BUTTON_GAP + 2 * MARGIN)
    board = pygame.Rect((width - board_px) // 2, SCORE_BAR_H, board_px, board_px)

    buttons_w = 2 * BUTTON_W + BUTTON_GAP
    bx = (width - buttons_w) // 2
    by = board.bottom + 16
    toggle = pygame.Rect(bx, by, BUTTON_W, BUTTON_H)
    reset = pygame.Rect(bx + BUTTON_W + BUTTON_GAP, by, BUTTON_W, BUTTON_H)
    return Layout(cell=cell, board=board, toggle_button=toggle, reset_button=reset,
                  size=(width, board.bottom + CONTROLS_H))


# ---------- Fonts ----------
@dataclass
class Fonts:
    title: pygame.font.Font
    body: pygame.font.Font
    small: pygame.font.Font

def load_fonts() -> Fonts:
    return Fonts(
        title=pygame.font.SysFont(None, 44, bold=True),
        body=pygame.font.SysFont(None, 26, bold=True),
        small=pygame.font.SysFont(None, 20),
    )


# ---------- Geometry helpers ----------
def eye_positions(head: Cell, direction: Direction, cell: int) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Eye centres (board-relative px), placed toward the side the head faces."""
    x0, y0 = head[0] * cell, head[1] * cell
    dx, dy = direction
    if dx != 0:
        ex = x0 + cell * (0.71 if dx == 1 else 0.23)
        return (ex, y0 + cell * 0.33), (ex, y0 + cell * 0.68)
    ey = y0 + cell * (0.74 if dy == 1 else 0.22)
    return (x0 + cell * 0.32, ey), (x0 + cell * 0.69, ey)

def food_radius(cell: int, just_ate: bool, now_ms: int) -> float:
    r = cell * 0.34
    if just_ate:
        r += math.sin(now_ms / 70) * 1.4
    return r


# ---------- Draw ----------
def draw_board(surface: pygame.Surface, board_size: int, cell: int) -> None:
    surface.fill(BOARD_BG)
    w, h = surface.get_size()
    for i in range(board_size + 1):
        pygame.draw.line(surface, GRID_LINE, (i * cell, 0), (i * cell, h))
        pygame.draw.line(surface, GRID_LINE, (0, i * cell), (w, i * cell))

def draw_food(surface: pygame.Surface, food: Cell, cell: int, just_ate: bool, now_ms: int) -> None:
    center = ((food[0] + 0.5) * cell, (food[1] + 0.5) * cell)
    r = food_radius(cell, just_ate, now_ms)
    pygame.draw.circle(surface, ACCENT, center, r)
    pygame.draw.circle(surface, FOOD_EDGE, center, r, width=1)

def draw_snake(surface: pygame.Surface, state: GameState, cell: int) -> None:
    pad = max(1, round(cell * 0.055))
    # tail first so the head ends up on top
    for i in range(len(state.snake) - 1, -1, -1):
        x, y = state.snake[i]
        rect = pygame.Rect(x * cell + pad, y * cell + pad, cell - 2 * pad, cell - 2 * pad)
        color = PRIMARY if i == 0 else SECONDARY
        pygame.draw.rect(surface, color, rect, border_radius=4 if i == 0 else 3)

    eye_r = max(1, round(cell * 0.08))
    pupil_r = max(1, round(cell * 0.032))
    for ex, ey in eye_positions(state.head, state.direction, cell):
        pygame.draw.circle(surface, EYE, (ex, ey), eye_r)
        pygame.draw.circle(surface, PUPIL, (ex, ey), pupil_r)

def draw_game_over(surface: pygame.Surface, fonts: Fonts, state: GameState) -> None:
    w, h = surface.get_size()
    wash = pygame.Surface((w, h), pygame.SRCALPHA)
    wash.fill(GAME_OVER_WASH)
    surface.blit(wash, (0, 0))

    title = fonts.title.render("YOU WIN" if state.won else "GAME OVER", True, PRIMARY)
    sco   = fonts.body.render(f"Final score: {state.score}", True, TEXT)
    sub   = fonts.small.render("Press Enter or Space to restart", True, (136, 136, 136))

    pw = max(title.get_width(), sco.get_width(), sub.get_width()) + 48
    ph = title.get_height() + sco.get_height() + sub.get_height() + 60
    panel = pygame.Surface((pw, ph), pygame.SRCALPHA)
    pygame.draw.rect(panel, PANEL_BG, panel.get_rect(), border_radius=13)

    y = 22
    for line in (title, sco, sub):
        panel.blit(line, line.get_rect(midtop=(pw // 2, y)))
        y += line.get_height() + 8
    surface.blit(panel, panel.get_rect(center=(w // 2, int(h * 0.4))))

def draw_button(screen: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect,
                label: str, enabled: bool, color: Tuple[int, int, int]) -> None:
    fill = color if enabled else DISABLED
    pygame.draw.rect(screen, fill, rect, border_radius=9)
    pygame.draw.rect(screen, SECONDARY if enabled else DISABLED, rect, width=2, border_radius=9)
    txt = font.render(label, True, (255, 255, 255) if color == PRIMARY else (51, 34, 34))
    screen.blit(txt, txt.get_rect(center=rect.center))

def draw_game(screen: pygame.Surface, fonts: Fonts, state: GameState, layout: Layout,
              buttons: Sequence[Tuple[str, bool]], now_ms: int) -> None:
    """
    Draw one frame.
    `buttons` is (label, enabled) for the toggle and reset buttons, in that order.
    """
    screen.fill(WINDOW_BG)

    # score bar
    score = fonts.body.render(f"Score: {state.score}", True, (255, 255, 255))
    bar = score.get_rect(center=(layout.size[0] // 2, SCORE_BAR_H // 2)).inflate(48, 16)
    pygame.draw.rect(screen, SECONDARY, bar, border_radius=16)
    screen.blit(score, score.get_rect(center=bar.center))

    # board
    board = pygame.Surface(layout.board.size)
    board_size = layout.board.width // layout.cell
    draw_board(board, board_size, layout.cell)
    if state.food is not None:
        draw_food(board, state.food, layout.cell, state.just_ate, now_ms)
    draw_snake(board, state, layout.cell)
    if state.game_over:
        draw_game_over(board, fonts, state)
    screen.blit(board, layout.board.topleft)
    pygame.draw.rect(screen, SECONDARY, layout.board.inflate(6, 6), width=3, border_radius=6)

    # controls
    (toggle_label, toggle_on), (reset_label, reset_on) = buttons
    draw_button(screen, fonts.body, layout.toggle_button, toggle_label, toggle_on, PRIMARY)
    draw_button(screen, fonts.body, layout.reset_button, reset_label, reset_on, ACCENT)

    hint = fonts.small.render("Use arrow keys to play  |  P pause  |  R reset", True, HINT)
    screen.blit(hint, hint.get_rect(midtop=(layout.size[0] // 2, layout.toggle_button.bottom + 14)))
