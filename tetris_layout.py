# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

def compute_dims(cell: int = None) -> Dims:
    cell = int(CONFIG["CELL_SIZE"] if cell is None else cell)
    margin = 16
    panel_w = 200

    board_w = COLS * cell
    board_h = ROWS * cell

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=margin * 3 + board_w + panel_w,
        total_h=margin * 2 + board_h,
        board_x=margin, board_y=margin,
        panel_x=margin * 2 + board_w, panel_y=margin,
    )
