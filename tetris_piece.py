"""Piece model: shape catalog, clockwise rotation, spawn placement"""
from dataclasses import dataclass
from typing import Tuple

COLS, ROWS = 10, 20

Cells = Tuple[Tuple[int, ...], ...]


def rotate_cw(cells: Cells) -> Cells:
    """Transpose, then reverse each row."""
    return tuple(tuple(row) for row in zip(*cells[::-1]))


@dataclass(frozen=True)
class Shape:
    name: str
    cells: Cells
    color: str

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    def rotated(self) -> "Shape":
        return Shape(self.name, rotate_cw(self.cells), self.color)

    def blocks(self):
        """Yield (col, row) offsets of every filled cell."""
        for r, row in enumerate(self.cells):
            for c, v in enumerate(row):
                if v:
                    yield c, r


CATALOG: Tuple[Shape, ...] = (
    Shape("I", ((1, 1, 1, 1),), "cyan"),
    Shape("O", ((1, 1), (1, 1)), "yellow"),
    Shape("T", ((0, 1, 0), (1, 1, 1)), "purple"),
    Shape("S", ((0, 1, 1), (1, 1, 0)), "green"),
    Shape("Z", ((1, 1, 0), (0, 1, 1)), "red"),
    Shape("L", ((0, 0, 1), (1, 1, 1)), "orange"),
    Shape("J", ((1, 0, 0), (1, 1, 1)), "blue"),
)

SHAPES = {s.name: s for s in CATALOG}


@dataclass(frozen=True)
class Piece:
    shape: Shape
    x: int
    y: int

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return Piece(self.shape, self.x + dx, self.y + dy)

    def rotated(self) -> "Piece":
        return Piece(self.shape.rotated(), self.x, self.y)

    def cells(self):
        """Yield absolute (x, y) board coordinates of the piece's blocks."""
        for c, r in self.shape.blocks():
            yield self.x + c, self.y + r

    @staticmethod
    def spawn(shape: Shape) -> "Piece":
        # horizontally centered, top row on the board's first row
        return Piece(shape, (COLS - shape.width) // 2, 0)
