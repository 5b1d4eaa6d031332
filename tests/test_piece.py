import random
import unittest

from tetris_piece import CATALOG, SHAPES, Piece, rotate_cw, COLS
from tetris_rng import PieceGenerator


class ShapeTests(unittest.TestCase):
    def test_catalog_has_seven_distinct_tetrominoes(self):
        self.assertEqual(sorted(s.name for s in CATALOG), sorted("IOTSZLJ"))
        self.assertEqual(len({s.color for s in CATALOG}), 7)
        for shape in CATALOG:
            self.assertEqual(sum(1 for _ in shape.blocks()), 4, shape.name)

    def test_rotate_cw(self):
        self.assertEqual(rotate_cw(((1, 1, 1, 1),)), ((1,), (1,), (1,), (1,)))
        self.assertEqual(rotate_cw(((0, 1, 0), (1, 1, 1))), ((1, 0), (1, 1), (1, 0)))
        self.assertEqual(rotate_cw(((1, 0, 0), (1, 1, 1))), ((1, 1), (1, 0), (1, 0)))

    def test_four_rotations_restore_every_shape(self):
        for shape in CATALOG:
            turned = shape
            for _ in range(4):
                turned = turned.rotated()
            self.assertEqual(turned, shape)

    def test_rotation_keeps_name_and_color(self):
        turned = SHAPES["L"].rotated()
        self.assertEqual((turned.name, turned.color), ("L", "orange"))
        self.assertEqual((turned.width, turned.height), (2, 3))

    def test_spawn_is_centered_on_top_row(self):
        for shape in CATALOG:
            p = Piece.spawn(shape)
            self.assertEqual(p.y, 0)
            self.assertEqual(p.x, (COLS - shape.width) // 2)
            for x, y in p.cells():
                self.assertTrue(0 <= x < COLS)
                self.assertGreaterEqual(y, 0)

    def test_piece_moves_are_new_values(self):
        p = Piece.spawn(SHAPES["T"])
        q = p.moved(dx=-1, dy=2)
        self.assertEqual((q.x, q.y), (p.x - 1, p.y + 2))
        self.assertEqual((p.x, p.y), (3, 0))


class GeneratorTests(unittest.TestCase):
    def test_seed_is_reproducible(self):
        a = PieceGenerator(seed=42)
        b = PieceGenerator(seed=42)
        self.assertEqual([a.next_shape() for _ in range(50)],
                         [b.next_shape() for _ in range(50)])

    def test_injected_rng(self):
        a = PieceGenerator(rng=random.Random(7))
        b = PieceGenerator(seed=7)
        self.assertEqual([a.next_shape().name for _ in range(20)],
                         [b.next_shape().name for _ in range(20)])

    def test_draws_cover_catalog(self):
        gen = PieceGenerator(seed=3)
        seen = {gen.next_shape().name for _ in range(500)}
        self.assertEqual(seen, set("IOTSZLJ"))

    def test_restricted_shapes(self):
        gen = PieceGenerator(seed=1, shapes=[SHAPES["O"]])
        self.assertTrue(all(gen.next_shape() is SHAPES["O"] for _ in range(10)))


if __name__ == "__main__":
    unittest.main()
