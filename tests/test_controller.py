from __future__ import annotations

from tetris_engine.board import Board, HEIGHT, WIDTH
from tetris_engine.controller import (
    SPAWN_COLUMN,
    SPAWN_ROW,
    can_move,
    collides,
    hard_drop_target,
    occupied_cells,
    render_grid,
    rotate,
    spawn,
    translate,
)
from tetris_engine.tetromino import COLOR_INDEX, Tetromino, TetrominoType


def test_spawn_position_is_above_board() -> None:
    piece = spawn(TetrominoType.T)
    assert piece.position == (SPAWN_COLUMN, SPAWN_ROW) == (3, -2)
    assert piece.rotation == 0
    assert not collides(Board(), piece)


def test_rotating_four_times_restores_piece() -> None:
    board = Board()
    for shape in TetrominoType:
        piece = translate(spawn(shape), 0, 5)
        current = piece
        for _ in range(4):
            current = rotate(current)
            assert not collides(board, current)
        assert current == piece
        assert sorted(occupied_cells(current)) == sorted(occupied_cells(piece))


def test_collision_with_walls_and_floor() -> None:
    board = Board()
    vertical_i = Tetromino(TetrominoType.I, rotation=1, position=(0, 0))
    assert not collides(board, vertical_i)
    assert collides(board, translate(vertical_i, -3, 0))
    assert collides(board, translate(vertical_i, 0, HEIGHT - 3))
    assert not collides(board, translate(vertical_i, 0, HEIGHT - 4))


def test_collision_with_locked_cells() -> None:
    piece = Tetromino(TetrominoType.O, position=(0, 10))
    board = Board().place([(1, 12)], 1)
    assert collides(board, piece)
    higher = translate(piece, 0, -2)
    assert not collides(board, higher)
    assert can_move(board, higher, 0, 1)
    assert not can_move(board, higher, 0, 2)
    assert can_move(board, higher, 2, 2)


def test_rotation_near_wall_is_not_kicked() -> None:
    board = Board()
    # Vertical I in the leftmost column; turning it would reach x = -1.
    piece = Tetromino(TetrominoType.I, rotation=3, position=(-1, 5))
    assert not collides(board, piece)
    assert collides(board, rotate(piece))


def test_hard_drop_target_on_empty_board() -> None:
    board = Board()
    landed = hard_drop_target(board, spawn(TetrominoType.O))
    assert landed.position == (3, HEIGHT - 3)
    assert max(y for _, y in landed.blocks()) == HEIGHT - 1
    assert collides(board, translate(landed, 0, 1))


def test_hard_drop_target_stops_on_stack() -> None:
    board = Board().place([(x, HEIGHT - 1) for x in range(WIDTH)], 1)
    landed = hard_drop_target(board, spawn(TetrominoType.I))
    assert {y for _, y in landed.blocks()} == {HEIGHT - 2}


def test_placed_cells_carry_piece_color() -> None:
    piece = hard_drop_target(Board(), spawn(TetrominoType.J))
    board = Board().place(occupied_cells(piece), piece.color)
    for x, y in occupied_cells(piece):
        assert board.get_cell(x, y) == COLOR_INDEX[TetrominoType.J]


def test_render_grid_overlays_without_locking() -> None:
    board = Board()
    piece = spawn(TetrominoType.O)
    grid = render_grid(board, piece)
    assert grid[0][4] == grid[0][5] == COLOR_INDEX[TetrominoType.O]
    assert sum(cell != 0 for row in grid for cell in row) == 2
    assert not board.grid.any()
    assert render_grid(board) == [[0] * WIDTH for _ in range(HEIGHT)]
