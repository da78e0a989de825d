"""Drawing of the board, the blocks and the status text."""

from __future__ import annotations

import pygame

from unblock.game import SCREEN_HEIGHT, SCREEN_WIDTH, Game, GameState

WHITE = (255, 255, 255, 255)
GREEN = (0, 228, 48, 255)
GOAL_COLOR = (84, 255, 84)
GOAL_ALPHA = 50
GOAL_ALPHA_WON = 100
BLOCK_ROUNDNESS = 0.25


def draw_board(surface, game: Game) -> None:
    """Draw the grid, shading the exit cells of the primary row."""
    n = game.puzzle_size
    cell = game.cell_size
    ox, oy = game.board_origin
    alpha = GOAL_ALPHA_WON if game.state is GameState.WON else GOAL_ALPHA
    overlay = pygame.Surface((cell, cell), pygame.SRCALPHA)
    overlay.fill((*GOAL_COLOR, alpha))
    for i in range(n):
        for j in range(n):
            x = int(ox + j * cell)
            y = int(oy + i * cell)
            if i == game.primary_row and j > n - 1 - game.primary_size:
                surface.blit(overlay, (x, y))
            pygame.draw.rect(surface, WHITE, pygame.Rect(x, y, cell, cell), width=1)


def draw_blocks(surface, game: Game) -> None:
    """Draw every block as a rounded rectangle."""
    for block in game.blocks:
        x, y = block.position
        w, h = block.size
        rect = pygame.Rect(int(x), int(y), int(w), int(h))
        radius = int(min(w, h) * BLOCK_ROUNDNESS / 2)
        pygame.draw.rect(surface, block.color, rect, border_radius=radius)


def status_color(game: Game) -> tuple:
    """Colour of the status text: green once the puzzle is solved."""
    return GREEN if game.state is GameState.WON else WHITE


def _draw_centered(surface, font, text: str, y: int, color) -> None:
    label = font.render(text, True, color)
    x = SCREEN_WIDTH // 2 - font.size(text)[0] // 2
    surface.blit(label, (x, y))


def draw_ui(surface, game: Game, font_large, font_small) -> None:
    """Draw the move counter and the game state, centred horizontally."""
    color = status_color(game)
    _draw_centered(surface, font_large, f"MOVES: {game.moves}", int(SCREEN_HEIGHT * 0.1), color)
    _draw_centered(surface, font_small, game.state.value, int(SCREEN_HEIGHT * 0.15), color)