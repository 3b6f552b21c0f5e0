import unittest

from trixel_core.errors import InvalidIdentifier
from trixel_core.mesh import ROOT_IDS, is_north_root, pole_index, root_corners
from trixel_core.subdivide import child_corners, midpoints, subdivide
from trixel_core.vectors import v_cross, v_dot, v_length


def _orientation(corners) -> float:
    v0, v1, v2 = corners
    return v_dot(v_cross(v0, v1), v2)


class TestMesh(unittest.TestCase):
    def test_roots_are_counter_clockwise(self) -> None:
        for r in ROOT_IDS:
            self.assertGreater(_orientation(root_corners(r)), 0.0, msg=f"root {r}")

    def test_hemispheres(self) -> None:
        for r in ROOT_IDS:
            c = root_corners(r)
            pi = pole_index(c)
            self.assertIsNotNone(pi)
            if is_north_root(r):
                self.assertEqual(c[pi][2], 1.0)
            else:
                self.assertEqual(c[pi][2], -1.0)

    def test_unknown_root(self) -> None:
        for bad in (0, 9, -1):
            with self.assertRaises(InvalidIdentifier):
                root_corners(bad)


class TestSubdivide(unittest.TestCase):
    def test_children_keep_orientation_and_unit_length(self) -> None:
        for r in ROOT_IDS:
            for kid in subdivide(root_corners(r)):
                self.assertGreater(_orientation(kid), 0.0)
                for v in kid:
                    self.assertAlmostEqual(v_length(v), 1.0, places=12)
                for grandkid in subdivide(kid):
                    self.assertGreater(_orientation(grandkid), 0.0)

    def test_child_order(self) -> None:
        p0, p1, p2 = corners = root_corners(5)
        w0, w1, w2 = midpoints(corners)
        kids = subdivide(corners)
        self.assertEqual(kids[0], (p0, w2, w1))
        self.assertEqual(kids[1], (p1, w0, w2))
        self.assertEqual(kids[2], (p2, w1, w0))
        self.assertEqual(kids[3], (w0, w1, w2))
        self.assertEqual(child_corners(corners, 4), kids[3])

    def test_bad_child_index(self) -> None:
        with self.assertRaises(ValueError):
            child_corners(root_corners(1), 0)


if __name__ == "__main__":
    unittest.main()
