"""Uniform random piece generator"""
import random
from typing import Optional, Sequence

from tetris_piece import CATALOG, Shape


class PieceGenerator:
    """
    Draws shapes by independent uniform choice over the catalog.

    Every draw is i.i.d.: there is no 7-bag and no repeat suppression, so
    repeats and long droughts are both possible. Pass ``seed`` or a ready
    ``random.Random`` to make piece sequences reproducible.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None,
                 shapes: Sequence[Shape] = CATALOG):
        self.rng = rng if rng is not None else random.Random(seed)
        self.shapes = tuple(shapes)

    def next_shape(self) -> Shape:
        return self.rng.choice(self.shapes)
