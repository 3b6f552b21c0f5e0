import unittest

from trixel_core.errors import DepthExceeded, InvalidIdentifier
from trixel_core.trixel_id import (
    MAX_DEPTH,
    TrixelId,
    ancestors,
    child,
    children,
    depth,
    digits,
    is_valid,
    parent,
    root_digit,
)


class TestTrixelId(unittest.TestCase):
    def test_depth_and_root(self) -> None:
        self.assertEqual(depth(1), 0)
        self.assertEqual(depth(8), 0)
        self.assertEqual(depth(4321), 3)
        self.assertEqual(root_digit(4321), 1)
        self.assertEqual(root_digit(4125), 5)

    def test_parse_path_is_shallowest_first(self) -> None:
        tid = TrixelId.parse(4321)
        self.assertEqual(tid.root, 1)
        self.assertEqual(tid.path, (2, 3, 4))
        self.assertEqual(tid.encode(), 4321)
        self.assertEqual(int(tid), 4321)
        self.assertEqual(TrixelId.parse("4321"), tid)
        self.assertEqual(digits(4321), (2, 3, 4))

    def test_ancestors_strip_leading_digits(self) -> None:
        self.assertEqual(ancestors(4321), [321, 21, 1])
        self.assertEqual(ancestors(34321), [4321, 321, 21, 1])
        self.assertEqual(ancestors(4125), [125, 25, 5])
        self.assertEqual(ancestors(7), [])

    def test_ancestors_without_root(self) -> None:
        self.assertEqual(ancestors(4321, include_root=False), [321, 21])
        self.assertEqual(ancestors(21, include_root=False), [])

    def test_ancestor_count_equals_depth(self) -> None:
        for id in (1, 21, 321, 4321, 1234123412341231):
            self.assertEqual(len(ancestors(id)), depth(id))

    def test_child_and_parent(self) -> None:
        self.assertEqual(child(1, 3), 31)
        self.assertEqual(child(21, 4), 421)
        self.assertEqual(children(5), [15, 25, 35, 45])
        self.assertEqual(parent(4321), 321)
        for k in (1, 2, 3, 4):
            self.assertEqual(parent(child(4321, k)), 4321)

    def test_root_has_no_parent(self) -> None:
        with self.assertRaises(InvalidIdentifier):
            parent(3)

    def test_invalid_identifiers(self) -> None:
        for bad in (0, -1, 9, 10, 50, 1230, 1204, 9123, "", "12a", "-21", True, 2.0):
            self.assertFalse(is_valid(bad), msg=repr(bad))
            with self.assertRaises(InvalidIdentifier):
                TrixelId.parse(bad)

    def test_depth_limit(self) -> None:
        deepest = int("1" * (MAX_DEPTH + 1))
        self.assertEqual(depth(deepest), MAX_DEPTH)
        with self.assertRaises(DepthExceeded):
            child(deepest, 1)
        with self.assertRaises(InvalidIdentifier):
            TrixelId.parse("1" * (MAX_DEPTH + 2))

    def test_bad_child_index(self) -> None:
        with self.assertRaises(InvalidIdentifier):
            child(1, 5)
        with self.assertRaises(InvalidIdentifier):
            TrixelId(9)
        with self.assertRaises(InvalidIdentifier):
            TrixelId(1, (0,))


if __name__ == "__main__":
    unittest.main()
