# render.py
from typing import Tuple
import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE,
    BG, GREEN, HEAD, RED, TEXT,
)
from .session import RenderModel

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, model: RenderModel) -> None:
    screen.fill(BG)
    # food
    if model.food is not None:
        draw_cell(screen, model.food[0], model.food[1], RED)
    # snake (head brighter)
    for i, (x, y) in enumerate(model.snake):
        draw_cell(screen, x, y, HEAD if i == 0 else GREEN)
    # score
    txt = font.render(f"Score: {model.score}", True, TEXT)
    screen.blit(txt, (8, 6))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, model: RenderModel) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    heading = "BOARD CLEARED" if model.reason == "board_full" else "GAME OVER"
    title = font.render(heading, True, (240, 240, 250))
    sub   = font.render("Press R to restart", True, TEXT)
    sco   = font.render(f"Score: {model.final_score}", True, TEXT)

    tx = title.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 16))
    sx = sub.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 16))
    cx = sco.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 44))

    screen.blit(title, tx)
    screen.blit(sub, sx)
    screen.blit(sco, cx)

def draw(screen: pygame.Surface, font: pygame.font.Font, model: RenderModel) -> None:
    draw_game(screen, font, model)
    if model.game_over:
        draw_game_over(screen, font, model)
