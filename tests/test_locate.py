import random
import unittest

from trixel_core.boundary import boundary, centroid, corners
from trixel_core.coords import SphericalCoord, lonlat_to_vector, vector_to_lonlat
from trixel_core.errors import InvalidCoordinate, InvalidDepth
from trixel_core.locate import locate, locate_lonlat, locate_many, point_in_triangle
from trixel_core.trixel_id import MAX_DEPTH, ancestors, depth
from trixel_core.view import select_view


class TestLocate(unittest.TestCase):
    def test_origin_is_root_one(self) -> None:
        self.assertEqual(locate(SphericalCoord(0.0, 0.0), 0), 1)

    def test_octants(self) -> None:
        self.assertEqual(locate_lonlat(45, -45, 0), 1)
        self.assertEqual(locate_lonlat(135, -45, 0), 2)
        self.assertEqual(locate_lonlat(-135, -45, 0), 3)
        self.assertEqual(locate_lonlat(-45, -45, 0), 4)
        self.assertEqual(locate_lonlat(-45, 45, 0), 5)
        self.assertEqual(locate_lonlat(-135, 45, 0), 6)
        self.assertEqual(locate_lonlat(135, 45, 0), 7)
        self.assertEqual(locate_lonlat(45, 45, 0), 8)
        # Right ascension input is the same point.
        self.assertEqual(locate_lonlat(315, 45, 0), 5)

    def test_deterministic_and_depth(self) -> None:
        c = SphericalCoord(-122.4194, 37.7749)
        a = locate(c, 5)
        self.assertEqual(a, locate(c, 5))
        self.assertEqual(len(str(a)), 6)
        self.assertEqual(depth(a), 5)

    def test_hierarchy_is_consistent(self) -> None:
        c = SphericalCoord(151.2093, -33.8688)
        deep = locate(c, 10)
        chain = ancestors(deep)
        for d in range(10):
            self.assertEqual(locate(c, d), chain[len(chain) - 1 - d])
            self.assertEqual(locate(c, d), deep % 10 ** (d + 1))

    def test_invalid_depth(self) -> None:
        for bad in (-1, 16, 2.5, True):
            with self.assertRaises(InvalidDepth):
                locate(SphericalCoord(0, 0), bad)

    def test_invalid_coordinate(self) -> None:
        with self.assertRaises(InvalidCoordinate):
            locate_lonlat(0, 100, 3)
        with self.assertRaises(InvalidCoordinate):
            locate(SphericalCoord(400, 0), 3)

    def test_edges_and_poles_are_located(self) -> None:
        for lon in range(-180, 361, 15):
            self.assertEqual(depth(locate_lonlat(lon, 0, 8)), 8)
            self.assertEqual(depth(locate_lonlat(0, lon / 4.0, 8)), 8)
        self.assertIn(locate_lonlat(0, 90, 0), (5, 6, 7, 8))
        self.assertIn(locate_lonlat(0, -90, 0), (1, 2, 3, 4))

    def test_locate_many_keeps_order(self) -> None:
        coords = [SphericalCoord(10, 10), SphericalCoord(-100, -20), SphericalCoord(170, 60)]
        self.assertEqual(locate_many(coords, 4), [locate(c, 4) for c in coords])

    def test_centroid_roundtrip(self) -> None:
        rng = random.Random(1234)
        for _ in range(50):
            c = SphericalCoord(rng.uniform(-180, 180), rng.uniform(-89, 89))
            id = locate(c, 6)
            self.assertEqual(locate(centroid(id), 6), id)

    def test_ring_centroid_roundtrip(self) -> None:
        rng = random.Random(99)
        for _ in range(30):
            c = SphericalCoord(rng.uniform(-180, 180), rng.uniform(-75, 75))
            id = locate(c, 7)
            self.assertEqual(locate(boundary(id).centroid(), 7), id)


class TestAllDepths(unittest.TestCase):
    POINTS = [
        (180.0, 0.0),
        (-180.0, 12.5),
        (180.0, -45.0),
        (0.0, 90.0),
        (123.0, -90.0),
        (-179.9999, 89.9999),
        (179.9999, -89.9999),
        (0.0, 0.0),
    ]

    def _points(self):
        rng = random.Random(2024)
        pts = list(self.POINTS)
        pts.extend((rng.uniform(-180, 180), rng.uniform(-90, 90)) for _ in range(12))
        return pts

    def test_roundtrip_and_rings_at_every_depth(self) -> None:
        for d in range(MAX_DEPTH + 1):
            for lon, lat in self._points():
                id = locate_lonlat(lon, lat, d)
                self.assertEqual(depth(id), d)

                b = boundary(id)
                self.assertFalse(b.is_empty, msg=f"trixel {id}")
                self.assertEqual(b.ring[0], b.ring[-1])
                for (lon1, _), (lon2, _) in zip(b.ring, b.ring[1:]):
                    self.assertLessEqual(abs(lon2 - lon1), 180.0, msg=f"trixel {id}")

                self.assertEqual(locate(b.centroid(), d), id, msg=f"trixel {id} at ({lon}, {lat})")

    def test_deepest_level(self) -> None:
        id = locate_lonlat(-122.4194, 37.7749, MAX_DEPTH)
        self.assertEqual(len(str(id)), MAX_DEPTH + 1)
        self.assertEqual(ancestors(id)[0], locate_lonlat(-122.4194, 37.7749, MAX_DEPTH - 1))
        self.assertEqual(locate(centroid(id), MAX_DEPTH), id)


class TestPartition(unittest.TestCase):
    def test_each_point_in_exactly_one_trixel(self) -> None:
        ids = select_view(2)
        self.assertEqual(len(ids), 128)
        tris = {id: corners(id) for id in ids}

        rng = random.Random(42)
        for _ in range(300):
            p = lonlat_to_vector(rng.uniform(-180, 180), rng.uniform(-90, 90))
            hits = [id for id, c in tris.items() if point_in_triangle(p, c, 0.0)]
            self.assertEqual(len(hits), 1, msg=f"point {p} in {hits}")
            found = locate_lonlat(*vector_to_lonlat(p), 2)
            self.assertEqual(found, hits[0])


if __name__ == "__main__":
    unittest.main()
