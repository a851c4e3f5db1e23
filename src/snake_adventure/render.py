# render.py
from typing import Sequence, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, HUD_HEIGHT, CELL_SIZE, GRID_W, GRID_H,
    BG, GRID_LINE, HEAD, BODY, APPLE, TEXT, MUTED, ACCENT, PAUSED, PANEL,
    MAX_APPLES,
)
from .session import APPLE_CELL, BODY_CELL, HEAD_CELL, SessionSnapshot

CELL_COLORS = {APPLE_CELL: APPLE, BODY_CELL: BODY, HEAD_CELL: HEAD}
CONTROLS_HELP = ("W - Up", "A - Left", "S - Down", "D - Right", "Space - Pause")


# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    # 1px inset so neighbouring segments stay distinguishable
    rect = pygame.Rect(gx * CELL_SIZE + 1, gy * CELL_SIZE + 1, CELL_SIZE - 2, CELL_SIZE - 2)
    pygame.draw.rect(screen, color, rect)

def draw_grid(screen: pygame.Surface) -> None:
    for i in range(GRID_W + 1):
        pygame.draw.line(screen, GRID_LINE, (i * CELL_SIZE, 0), (i * CELL_SIZE, HEIGHT))
    for i in range(GRID_H + 1):
        pygame.draw.line(screen, GRID_LINE, (0, i * CELL_SIZE), (WIDTH, i * CELL_SIZE))

def draw_lines(screen: pygame.Surface, font: pygame.font.Font, lines: Sequence[str],
               topleft: Tuple[int, int], color=TEXT) -> None:
    x, y = topleft
    for line in lines:
        screen.blit(font.render(line, True, color), (x, y))
        y += font.get_linesize()

def dim(screen: pygame.Surface, alpha: int) -> None:
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    screen.blit(overlay, (0, 0))

def draw_centered(screen: pygame.Surface, font: pygame.font.Font, lines: Sequence[Tuple[str, tuple]]) -> None:
    step = font.get_linesize() + 6
    top = HEIGHT // 2 - step * (len(lines) - 1) // 2
    for i, (text, color) in enumerate(lines):
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(WIDTH // 2, top + i * step)))


# ---------- Frames ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: SessionSnapshot) -> None:
    screen.fill(BG)
    draw_grid(screen)
    # board() already hides the apple once the quota is reached
    board = snap.board()
    for code, color in CELL_COLORS.items():
        for gy, gx in np.argwhere(board == code):
            draw_cell(screen, int(gx), int(gy), color)
    draw_hud(screen, font, snap)

def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: SessionSnapshot) -> None:
    pygame.draw.rect(screen, PANEL, pygame.Rect(0, HEIGHT, WIDTH, HUD_HEIGHT))
    stats = snap.stats
    y = HEIGHT + (HUD_HEIGHT - font.get_linesize()) // 2
    screen.blit(font.render(f"Score: {stats.score}", True, TEXT), (10, y))
    apples = font.render(f"Apples: {stats.apples_eaten}/{MAX_APPLES}", True, TEXT)
    screen.blit(apples, apples.get_rect(midtop=(WIDTH // 2, y)))
    if not stats.game_over:
        label = "Tap / Space: resume" if stats.is_paused else "Tap / Space: pause"
        surf = font.render(label, True, PAUSED if stats.is_paused else MUTED)
        screen.blit(surf, surf.get_rect(topright=(WIDTH - 10, y)))

def draw_monitor(screen: pygame.Surface, font: pygame.font.Font, snap: SessionSnapshot, fps: int) -> None:
    lines = (
        f"FPS: {fps}",
        f"Score: {snap.stats.score}",
        f"Apples: {snap.stats.apples_eaten}/{MAX_APPLES}",
    )
    width = max(font.size(line)[0] for line in lines) + 8
    height = font.get_linesize() * len(lines) + 8
    panel = pygame.Surface((width, height), pygame.SRCALPHA)
    panel.fill((31, 41, 55, 200))
    screen.blit(panel, (WIDTH - width - 4, 4))
    draw_lines(screen, font, lines, (WIDTH - width, 8))

def draw_controls_hint(screen: pygame.Surface, font: pygame.font.Font) -> None:
    lines = ("Controls",) + CONTROLS_HELP
    width = max(font.size(line)[0] for line in lines) + 8
    height = font.get_linesize() * len(lines) + 8
    panel = pygame.Surface((width, height), pygame.SRCALPHA)
    panel.fill((31, 41, 55, 200))
    screen.blit(panel, (4, 4))
    draw_lines(screen, font, lines, (8, 8))

def draw_start(screen: pygame.Surface, title_font: pygame.font.Font, font: pygame.font.Font) -> None:
    screen.fill(BG)
    draw_centered(screen, title_font, [("Snake Adventure", ACCENT)])
    draw_lines(
        screen, font,
        (
            f"Collect all {MAX_APPLES} apples without hitting",
            "the walls or yourself.",
            "",
            "WASD / arrows - move, Space - pause",
            "Click the board to steer, 10 points per apple",
            "",
            "Press Enter or click to start",
        ),
        (24, HEIGHT // 2 + 30),
        MUTED,
    )

def draw_paused(screen: pygame.Surface, font: pygame.font.Font) -> None:
    dim(screen, 150)
    draw_centered(screen, font, [("Paused", PAUSED), ("Press Space or tap the bar to resume", TEXT)])

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, snap: SessionSnapshot) -> None:
    dim(screen, 200)
    stats = snap.stats
    title = "Victory!" if stats.won else "Game Over!"
    draw_centered(screen, font, [
        (title, ACCENT),
        (f"Final Score: {stats.score}", TEXT),
        (f"Apples Collected: {stats.apples_eaten}/{MAX_APPLES}", TEXT),
        (f"Snake Length: {len(snap.snake)}", TEXT),
        ("Press Enter or click to play again", MUTED),
    ])
