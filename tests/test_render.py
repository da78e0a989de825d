import pygame
import pytest

from unblock.game import SCREEN_HEIGHT, SCREEN_WIDTH, Game, GameState
from unblock.render import (
    GREEN,
    WHITE,
    draw_blocks,
    draw_board,
    draw_ui,
    status_color,
)

PUZZLE = "BBoCooooDCooAADCooooooEEFooooGFooooG"


@pytest.fixture(scope="module", autouse=True)
def _fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


def _black_screen():
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    surface.fill((0, 0, 0))
    return surface


def _clear_screen():
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    return surface


def _goal_pixel(game):
    ox, oy = game.board_origin
    cell = game.cell_size
    j = game.puzzle_size - 1
    return (int(ox + j * cell + cell // 2), int(oy + game.primary_row * cell + cell // 2))


def test_goal_cells_are_shaded_green():
    game = Game(PUZZLE)
    surface = _black_screen()
    draw_board(surface, game)
    colour = surface.get_at(_goal_pixel(game))
    assert colour.g > 0
    assert colour.g > colour.r


def test_goal_cells_brighter_when_won():
    game = Game(PUZZLE)
    idle = _black_screen()
    draw_board(idle, game)
    game.state = GameState.WON
    won = _black_screen()
    draw_board(won, game)
    pos = _goal_pixel(game)
    assert won.get_at(pos).g > idle.get_at(pos).g


def test_other_cells_are_not_shaded():
    game = Game(PUZZLE)
    surface = _black_screen()
    draw_board(surface, game)
    ox, oy = game.board_origin
    cell = game.cell_size
    assert surface.get_at((int(ox + cell // 2), int(oy + cell // 2))) == (0, 0, 0, 255)


def test_grid_lines_are_white():
    game = Game(PUZZLE)
    surface = _black_screen()
    draw_board(surface, game)
    ox, oy = game.board_origin
    assert surface.get_at((int(ox), int(oy))) == WHITE


def test_blocks_drawn_in_their_colour():
    game = Game(PUZZLE)
    surface = _black_screen()
    draw_blocks(surface, game)
    for block in game.blocks:
        cx = int(block.position[0] + block.size[0] / 2)
        cy = int(block.position[1] + block.size[1] / 2)
        assert surface.get_at((cx, cy)) == block.color


def test_status_color_depends_on_state():
    game = Game(PUZZLE)
    assert status_color(game) == WHITE
    game.state = GameState.WON
    assert status_color(game) == GREEN


def test_ui_is_centred_below_top():
    game = Game(PUZZLE)
    surface = _clear_screen()
    draw_ui(surface, game, pygame.font.Font(None, 32), pygame.font.Font(None, 18))
    rect = surface.get_bounding_rect()
    assert rect.width > 0
    assert rect.top >= int(SCREEN_HEIGHT * 0.1)
    assert abs(rect.centerx - SCREEN_WIDTH // 2) <= 4


def test_ui_grows_with_move_count():
    game = Game(PUZZLE)
    large, small = pygame.font.Font(None, 32), pygame.font.Font(None, 18)
    few = _clear_screen()
    draw_ui(few, game, large, small)
    game.moves = 123456
    many = _clear_screen()
    draw_ui(many, game, large, small)
    assert many.get_bounding_rect().width > few.get_bounding_rect().width


def test_ui_text_uses_status_colour_when_won():
    game = Game(PUZZLE)
    game.state = GameState.WON
    surface = _clear_screen()
    draw_ui(surface, game, pygame.font.Font(None, 32), pygame.font.Font(None, 18))
    rect = surface.get_bounding_rect()
    inked = [
        surface.get_at((x, y))
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
        if surface.get_at((x, y)).a > 0
    ]
    assert inked
    assert max(c.r for c in inked) == 0