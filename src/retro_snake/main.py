# main.py
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import pygame  # type: ignore

from .config import BOARD_SIZE, CELL_SIZE, MOVE_INTERVAL_MS, Config
from .controls import buttons_for, handle_event
from .render import draw_game, fit_cell_size, load_fonts, make_layout
from .session import TICK_EVENT, GameSession, PygameTimer

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="retro-snake", description="Play Snake.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--board-size", type=int, default=BOARD_SIZE, help="cells per side")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="px per cell (shrinks to fit the display)")
    parser.add_argument("--interval-ms", type=int, default=MOVE_INTERVAL_MS, help="ms between ticks")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(
        seed=args.seed,
        board_size=args.board_size,
        cell_size=args.cell_size,
        move_interval_ms=args.interval_ms,
    )

    pygame.init()
    info = pygame.display.Info()
    cell = fit_cell_size(cfg.board_size, cfg.cell_size, info.current_w, info.current_h)
    layout = make_layout(cfg.board_size, cell)
    screen = pygame.display.set_mode(layout.size)
    pygame.display.set_caption("Retro Snake")
    fonts = load_fonts()
    clock = pygame.time.Clock()
    logger.info("Board %dx%d, %d px cells, tick %d ms", cfg.board_size, cfg.board_size, cell, cfg.move_interval_ms)

    session = GameSession(PygameTimer(TICK_EVENT), cfg)
    running = True

    while running:
        # 1) input + ticks, in queue order
        for event in pygame.event.get():
            if event.type == TICK_EVENT:
                session.tick()
            elif not handle_event(session, layout, event):
                running = False
                break

        # 2) render
        state = session.state
        draw_game(screen, fonts, state, layout, buttons_for(state), pygame.time.get_ticks())
        pygame.display.flip()
        clock.tick(60)  # movement is paced by TICK_EVENT, not the frame rate

    session.pause()
    pygame.quit()


if __name__ == "__main__":
    main()
