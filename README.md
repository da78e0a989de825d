# unblock

A small sliding-block puzzle game. The board is a 6×6 grid full of blocks,
and one of them, the red block, has to be slid out through the exit on the
right-hand side of its row. Horizontal blocks move only left and right,
vertical blocks only up and down, walls do not move at all, and no block
can pass through another.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window and reads the mouse.

## Playing

Start the game with:

```
unblock
```

or give it puzzles of your own, each as a 36-character string:

```
unblock BBoCooooDCooAADCooooooEEFooooGFooooG
```

Options:

- `--fps N` sets the frame rate (default 60).
- `--frames N` closes the window after N frames (default 0, meaning run
  until closed).

Without puzzles on the command line, a built-in set of two is used.

A window opens with the puzzle in the middle and four buttons below it.

- **Drag** a block with the left mouse button to slide it along its axis.
  When you let go, it snaps to the nearest cell. Every drop that leaves a
  block somewhere new counts as one move.
- **Reload** puts the current puzzle back to where it started and resets the
  move counter and the undo history.
- **Undo** puts the last moved block back where it was. The move counter is
  not decreased.
- **Hint** prints `Hinting..` to the console.
- **Quit** closes the window.

The move count is shown above the board, with the game's state under it:
`IDLE` before you have touched anything, `PLAYING` once you have, and `WON`
as soon as the red block reaches the highlighted exit cells. After a win the
blocks can no longer be dragged, Hint and Undo are hidden, and the Reload
button reads **NEW**: it loads the next puzzle of the list, starting over
from the first after the last.

## Puzzle strings

A puzzle is read row by row, six characters per row:

- `o` or `.` is an empty cell.
- `x` is a wall: a fixed one-cell block.
- `A` is the red block that has to get out; it sits in the third row.
- Any other letter marks the cells of one yellow block. A run of the same
  letter along a row makes a horizontal block, a run down a column a
  vertical one.

A string of the wrong length is rejected.

## Using the pieces

The game logic lives apart from the drawing code, so it can be driven
without a window:

- `unblock.game` holds `Game`, `Block`, `Move` and the `GameState` enum. A
  `Game` builds its blocks from a puzzle string with `load_blocks` (or
  `reload_blocks`), moves them with `move_block` and `settle`, checks
  placements with `is_blocked` and `is_pos_on_board`, keeps an undo stack
  (`push_move`, `pop_move`, `clear_move_stack`) and advances one frame of
  mouse input with `update(mouse_pos, mouse_down)`.
- `unblock.bounds` holds `Bounds` and `get_bounds` for the rectangle tests.
- `unblock.button` holds the clickable `Button`, updated from the mouse
  state with `update(mouse_pos, mouse_down, mouse_pressed)` and drawn with
  `draw(surface, font)`.
- `unblock.render` draws a `Game` onto a pygame surface with `draw_board`,
  `draw_blocks` and `draw_ui`; `status_color` gives the colour of the
  status text.
- `unblock.app` holds `parse_args` and `main`, the entry point of the
  `unblock` command.

## What it does not do

- It does not generate puzzles: it plays the ones given on the command line
  or its two built-in ones, in turn.
- The Hint button gives no hint; it only prints a line to the console.
- There is no solver, and solved puzzles and scores are not saved.

## Running the tests

```
pip install ".[test]"
pytest
```