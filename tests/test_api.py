import unittest

from trixel_core.api import (
    MAX_DEPTH,
    SphericalCoord,
    TrixelError,
    ancestors,
    boundary,
    locate,
    select_view,
)


class TestApi(unittest.TestCase):
    def test_four_operations_agree(self) -> None:
        c = SphericalCoord(2.3522, 48.8566)
        id = locate(c, 6)

        chain = ancestors(id)
        self.assertEqual(len(chain), 6)
        self.assertEqual(chain[-1], locate(c, 0))

        b = boundary(id)
        self.assertFalse(b.is_empty)
        self.assertTrue(b.bbox().west <= c.lon <= b.bbox().east)

        self.assertIn(id, select_view(6, b.bbox()))

    def test_errors_share_a_base(self) -> None:
        with self.assertRaises(TrixelError):
            locate(SphericalCoord(0, 0), MAX_DEPTH + 1)
        with self.assertRaises(ValueError):
            ancestors(0)


if __name__ == "__main__":
    unittest.main()
