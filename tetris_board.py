"""Board helpers: occupancy, collision, lock, line clear, ghost"""
from typing import List, Optional

from tetris_piece import Piece, Shape, COLS, ROWS

Board = List[List[Optional[str]]]


def new_board() -> Board:
    return [[None] * COLS for _ in range(ROWS)]


def is_occupied(board: Board, x: int, y: int) -> bool:
    if not (0 <= x < COLS and 0 <= y < ROWS):
        raise IndexError(f"cell ({x}, {y}) is outside the {COLS}x{ROWS} board")
    return board[y][x] is not None


def is_valid_move(board: Board, shape: Shape, x: int, y: int) -> bool:
    """Return True if ``shape`` anchored at (x, y) fits on the board.

    Blocks above the top edge (y < 0) are only checked against the side
    walls, so tall pieces can sit partly above the visible board.
    """
    for c, r in shape.blocks():
        bx, by = x + c, y + r
        if bx < 0 or bx >= COLS or by >= ROWS:
            return False
        if by >= 0 and is_occupied(board, bx, by):
            return False
    return True


def lock(board: Board, piece: Piece) -> None:
    """Write the piece's color into the board. Blocks above row 0 are dropped."""
    cells = [(bx, by) for bx, by in piece.cells() if by >= 0]
    for bx, by in cells:
        if bx < 0 or bx >= COLS or by >= ROWS:
            raise ValueError(f"cannot lock {piece.shape.name} block at ({bx}, {by}): out of bounds")
        if board[by][bx] is not None:
            raise ValueError(f"cannot lock {piece.shape.name} block at ({bx}, {by}): cell occupied")
    for bx, by in cells:
        board[by][bx] = piece.shape.color


def clear_full_rows(board: Board) -> int:
    """Remove full rows in place, refill from the top, return the count cleared."""
    kept = [row for row in board if not all(cell is not None for cell in row)]
    cleared = ROWS - len(kept)
    board[:] = [[None] * COLS for _ in range(cleared)] + kept
    return cleared


def ghost_y(board: Board, piece: Piece) -> int:
    """Return the y the piece would come to rest at if hard-dropped."""
    y = piece.y
    while is_valid_move(board, piece.shape, piece.x, y + 1):
        y += 1
    return y
