# main.py
import argparse
import logging
import random
from typing import Optional, Tuple

import pygame # type: ignore
from .config import WIDTH, HEIGHT, UP, DOWN, LEFT, RIGHT, CFG
from .render import draw
from .session import (
    new_session, handle_direction_input, handle_restart_input,
    advance, render_model,
)

KEY_TO_HEADING = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

def heading_for_key(key: int) -> Optional[Tuple[int, int]]:
    return KEY_TO_HEADING.get(key)

def main():
    parser = argparse.ArgumentParser(description="Play snake.")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="food placement seed")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    rng = random.Random(args.seed)
    session = new_session(pygame.time.get_ticks(), rng=rng)
    running = True

    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    session = handle_restart_input(session, pygame.time.get_ticks(), rng=rng)
                else:
                    heading = heading_for_key(event.key)
                    if heading is not None:
                        session = handle_direction_input(session, heading)
        if not running:
            break

        # 2) update
        session = advance(session, pygame.time.get_ticks())

        # 3) render
        draw(screen, font, render_model(session))
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated inside step_game

    pygame.quit()

if __name__ == "__main__":
    main()
