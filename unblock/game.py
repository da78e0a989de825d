"""Board state, blocks and the drag-to-slide rules of the puzzle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from itertools import takewhile
from typing import Optional

from unblock.bounds import Bounds, get_bounds

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 960
BOARD_SIZE = 480

WHITE = (255, 255, 255, 255)
RED = (230, 41, 55, 255)
YELLOW = (253, 249, 0, 255)

Vector = tuple[float, float]

_AXIS_INDEX = {"X": 0, "Y": 1}


class GameState(str, Enum):
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    WON = "WON"
    LOADING = "LOADING"


def _with_coord(vec: Vector, index: int, value: float) -> Vector:
    return (value, vec[1]) if index == 0 else (vec[0], value)


@dataclass(eq=False)
class Block:
    """A piece on the board; it slides along its axis ("X", "Y") or not at all."""

    position: Vector
    size: Vector
    axis: str
    color: tuple
    is_main: bool = False

    def bounds(self) -> Bounds:
        return get_bounds(self.position, self.size)

    def is_point_colliding(self, point: Vector) -> bool:
        """Return True if the point lies strictly inside the block."""
        b = self.bounds()
        return b.start[0] < point[0] < b.end[0] and b.start[1] < point[1] < b.end[1]

    def will_box_collide(self, box: Bounds, offset: Vector) -> bool:
        """Return True if the block, shifted by offset, overlaps the box."""
        b = self.bounds()
        sx, sy = b.start[0] + offset[0], b.start[1] + offset[1]
        ex, ey = b.end[0] + offset[0], b.end[1] + offset[1]
        return sx < box.end[0] and ex > box.start[0] and sy < box.end[1] and ey > box.start[1]


@dataclass(frozen=True, eq=False)
class Move:
    """A recorded move: the block and where it was before."""

    block: Block
    last_pos: Vector


class Game:
    """The full state of one puzzle being played."""

    def __init__(self, puzzle: str, puzzle_size: int = 6, primary_row: int = 2,
                 primary_size: int = 2):
        self.puzzle_size = puzzle_size
        self.primary_row = primary_row
        self.primary_size = primary_size
        self.cell_size = BOARD_SIZE // puzzle_size
        self.block_padding = self.cell_size * 5 / 100
        self.board_origin: Vector = (
            SCREEN_WIDTH / 2 - BOARD_SIZE / 2,
            SCREEN_HEIGHT * 9 / 20 - BOARD_SIZE / 2,
        )
        self.board_bounds = get_bounds(self.board_origin, (BOARD_SIZE, BOARD_SIZE))
        self.puzzle = puzzle
        self.state = GameState.IDLE
        self.moves = 0
        self.blocks: list[Block] = []
        self.move_stack: list[Move] = []
        self.moving_block: Optional[Block] = None
        self.touch_offset: Optional[Vector] = None
        self.moving_block_pos: Optional[Vector] = None
        self._forward: Optional[Vector] = None
        self._backward: Optional[Vector] = None
        self.load_blocks()

    def new_block(self, row, col, width, height, axis, color, is_main) -> Block:
        """Create a block at a grid cell; row indexes x and col indexes y."""
        return Block(
            position=(
                self.board_origin[0] + row * self.cell_size + self.block_padding,
                self.board_origin[1] + col * self.cell_size + self.block_padding,
            ),
            size=(
                width * self.cell_size - self.block_padding * 2,
                height * self.cell_size - self.block_padding * 2,
            ),
            axis=axis,
            color=color,
            is_main=is_main,
        )

    @staticmethod
    def _claim(cells: list[str], span: slice, piece: str) -> int:
        run = sum(1 for _ in takewhile(lambda ch: ch == piece, cells[span]))
        for index in range(*span.indices(len(cells)))[:run]:
            cells[index] = "o"
        return run

    def load_blocks(self) -> None:
        """Parse the puzzle string and append its blocks."""
        n = self.puzzle_size
        total = n * n
        if len(self.puzzle) != total:
            raise ValueError(
                f"puzzle must have {total} cells, got {len(self.puzzle)}"
            )
        cells = list(self.puzzle)
        for i, piece in enumerate(cells):
            if piece in ("o", "."):
                continue
            row, col = divmod(i, n)
            if piece == "x":
                self.blocks.append(self.new_block(col, row, 1, 1, "N", WHITE, False))
                continue
            color = RED if piece == "A" else YELLOW
            width = 1 + self._claim(cells, slice(i + 1, total), piece)
            height = 1 + self._claim(cells, slice(i + n, total, n), piece)
            if width > 1:
                axis = "X"
            elif height > 1:
                axis = "Y"
            else:
                axis = ""
            self.blocks.append(
                self.new_block(col, row, width, height, axis, color, piece == "A")
            )

    def reload_blocks(self) -> None:
        self.blocks = []
        self.load_blocks()

    def push_move(self, move: Move) -> None:
        self.move_stack.append(move)

    def pop_move(self) -> None:
        """Undo the last move, if any."""
        if self.move_stack:
            move = self.move_stack.pop()
            move.block.position = move.last_pos

    def clear_move_stack(self) -> None:
        self.moves = 0
        self.move_stack = []
        self.state = GameState.IDLE

    def is_pos_on_board(self, block: Block, pos: Vector) -> bool:
        start, end = self.board_bounds.start, self.board_bounds.end
        return (
            pos[0] > start[0]
            and pos[0] + block.size[0] < end[0]
            and pos[1] > start[1]
            and pos[1] + block.size[1] < end[1]
        )

    def is_blocked(self, block: Block, pos: Vector) -> bool:
        """Return True if the block may not be placed at pos."""
        k = _AXIS_INDEX.get(block.axis)
        if k is not None and block.position[k] < pos[k]:
            if (self._forward is not None and pos[k] >= self._forward[k]) or (
                self._backward is not None and pos[k] <= self._backward[k]
            ):
                return True
        offset = (pos[0] - block.position[0], pos[1] - block.position[1])
        return any(
            block.will_box_collide(other.bounds(), offset)
            for other in self.blocks
            if other is not block
        )

    def move_block(self, block: Block, newpos: Vector) -> bool:
        """Try to move the block to newpos; return True if it moved."""
        if not self.is_blocked(block, newpos) and self.is_pos_on_board(block, newpos):
            block.position = newpos
            reach = block.position[0] + block.size[0] - self.board_origin[0]
            if (
                block.is_main
                and self.state is not GameState.WON
                and reach > BOARD_SIZE - self.cell_size * 0.5
            ):
                self.state = GameState.WON
            return True
        k = _AXIS_INDEX.get(block.axis)
        if k is not None:
            if block.position[k] < newpos[k] and self._forward is None:
                self._forward = newpos
            elif block.position[k] > newpos[k] and self._backward is None:
                self._backward = newpos
        return False

    def settle(self, block: Block) -> None:
        """Snap the block to the nearest cell along its axis."""
        k = _AXIS_INDEX.get(block.axis)
        if k is None:
            return
        offset = block.position[k] - self.board_origin[k]
        quotient = offset / self.cell_size
        if math.fmod(offset, self.cell_size) < self.cell_size * 0.5:
            index = math.floor(quotient)
        else:
            index = math.ceil(quotient)
        coord = self.board_origin[k] + index * self.cell_size + self.block_padding
        block.position = _with_coord(block.position, k, coord)

    def update(self, mouse_pos: Vector, mouse_down: bool) -> None:
        """Advance dragging by one frame of mouse input."""
        if mouse_down and self.state is not GameState.WON:
            if self.moving_block is None:
                grabbed = next(
                    (b for b in self.blocks if b.is_point_colliding(mouse_pos)), None
                )
                if grabbed is not None:
                    self.state = GameState.PLAYING
                    self.moving_block = grabbed
                    self.touch_offset = (
                        mouse_pos[0] - grabbed.position[0],
                        mouse_pos[1] - grabbed.position[1],
                    )
                    self.moving_block_pos = grabbed.position
            if self.moving_block is not None:
                block = self.moving_block
                k = _AXIS_INDEX.get(block.axis)
                if k is not None:
                    target = mouse_pos[k] - self.touch_offset[k]
                    self.move_block(block, _with_coord(block.position, k, target))

        if not mouse_down and self.moving_block is not None:
            block = self.moving_block
            self.settle(block)
            if block.position != self.moving_block_pos:
                self.moves += 1
                self.push_move(Move(block=block, last_pos=self.moving_block_pos))
            self.moving_block = None
            self.touch_offset = None
            self._forward = None
            self._backward = None