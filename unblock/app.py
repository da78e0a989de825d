"""The windowed game: buttons, input handling and the main loop."""

from __future__ import annotations

import argparse
from itertools import cycle
from typing import Optional, Sequence

import pygame

from unblock.button import Button
from unblock.game import SCREEN_HEIGHT, SCREEN_WIDTH, Game, GameState
from unblock.render import draw_blocks, draw_board, draw_ui

PUZZLE_SIZE = 6
BACKGROUND = (40, 40, 40)
BUTTON_SIZE = (200, 50)
BUTTON_FONT_SIZE = 24
DEFAULT_PUZZLES = (
    "BBoCooooDCooAADCooooooEEFooooGFooooG",
    "BoCCCoBoooDoBAAoDoooooDoEEEFoooooFoo",
)


def _puzzle(text: str) -> str:
    if len(text) != PUZZLE_SIZE * PUZZLE_SIZE:
        raise argparse.ArgumentTypeError(f"a puzzle needs {PUZZLE_SIZE ** 2} cells")
    return text


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line; without puzzles the built-in set is used."""
    parser = argparse.ArgumentParser(prog="unblock")
    parser.add_argument("puzzles", nargs="*", type=_puzzle)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--frames", type=int, default=0)
    args = parser.parse_args(argv)
    args.puzzles = args.puzzles or list(DEFAULT_PUZZLES)
    return args


class _Session:
    """The running game together with its buttons."""

    def __init__(self, puzzles: Sequence[str]):
        self._puzzles = cycle(puzzles)
        self.game = Game(next(self._puzzles), puzzle_size=PUZZLE_SIZE)
        self.running = True
        self.hints_requested = 0
        cx, base = SCREEN_WIDTH * 0.5, SCREEN_HEIGHT * 0.75
        size, fs = BUTTON_SIZE, BUTTON_FONT_SIZE
        self.reload_button = Button((cx - 225, base), size, "Reload", fs, self.reload)
        self.hint_button = Button((cx + 25, base + 75), size, "Hint | 2", fs, self.hint)
        self.undo_button = Button((cx - 225, base + 75), size, "Undo", fs, self.game.pop_move)
        self.quit_button = Button((cx + 25, base), size, "Quit", fs, self.quit)

    def reload(self) -> None:
        if self.game.state is GameState.WON:
            self.game.state = GameState.LOADING
            self.game.puzzle = next(self._puzzles)
        self.game.clear_move_stack()
        self.game.reload_blocks()

    def hint(self) -> None:
        self.hints_requested += 1
        print("Hinting..")

    def quit(self) -> None:
        self.running = False

    def step(self, mouse_pos, mouse_down: bool, mouse_pressed: bool) -> None:
        for button in (self.reload_button, self.hint_button, self.undo_button, self.quit_button):
            button.update(mouse_pos, mouse_down, mouse_pressed)
        self.reload_button.text = "NEW" if self.game.state is GameState.WON else "Reload"
        if self.game.state is not GameState.LOADING:
            self.game.update(mouse_pos, mouse_down)

    def draw(self, surface, fonts) -> None:
        button_font, large, small = fonts
        surface.fill(BACKGROUND)
        draw_board(surface, self.game)
        draw_blocks(surface, self.game)
        self.reload_button.draw(surface, button_font)
        self.quit_button.draw(surface, button_font)
        if self.game.state is not GameState.WON:
            self.hint_button.draw(surface, button_font)
            self.undo_button.draw(surface, button_font)
        draw_ui(surface, self.game, large, small)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    args = parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Test game")
        clock = pygame.time.Clock()
        fonts = (
            pygame.font.Font(None, BUTTON_FONT_SIZE),
            pygame.font.Font(None, 32),
            pygame.font.Font(None, 18),
        )
        session = _Session(args.puzzles)
        frame = 0
        while session.running:
            pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    session.quit()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    pressed = True
            if not session.running:
                break
            session.step(pygame.mouse.get_pos(), pygame.mouse.get_pressed()[0], pressed)
            session.draw(screen, fonts)
            pygame.display.flip()
            clock.tick(args.fps)
            frame += 1
            if args.frames and frame >= args.frames:
                break
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())