import math
import unittest

from trixel_core.coords import (
    SphericalCoord,
    lonlat_to_vector,
    normalize_lon,
    to_radec,
    to_spherical,
    to_vector,
    validate,
    wrap_lon,
)
from trixel_core.errors import InvalidCoordinate
from trixel_core.vectors import slerp, v_length, v_mid, v_normalize


class TestCoords(unittest.TestCase):
    def _assert_vec(self, a, b, places: int = 12) -> None:
        for x, y in zip(a, b):
            self.assertAlmostEqual(x, y, places=places)

    def test_axes(self) -> None:
        self._assert_vec(lonlat_to_vector(0, 0), (1.0, 0.0, 0.0))
        self._assert_vec(lonlat_to_vector(90, 0), (0.0, 1.0, 0.0))
        self._assert_vec(lonlat_to_vector(0, 90), (0.0, 0.0, 1.0))
        self._assert_vec(lonlat_to_vector(270, 0), (0.0, -1.0, 0.0))
        self._assert_vec(lonlat_to_vector(-90, 0), (0.0, -1.0, 0.0))

    def test_unit_length(self) -> None:
        for lon, lat in ((12.5, -33.1), (359.0, 89.0), (-179.9, 0.1)):
            self.assertAlmostEqual(v_length(lonlat_to_vector(lon, lat)), 1.0, places=12)

    def test_roundtrip(self) -> None:
        c = SphericalCoord(-122.4194, 37.7749)
        back = to_spherical(to_vector(c))
        self.assertAlmostEqual(back.lon, c.lon, places=9)
        self.assertAlmostEqual(back.lat, c.lat, places=9)

    def test_radec_aliases(self) -> None:
        c = SphericalCoord.from_radec(350, -20)
        self.assertEqual((c.ra, c.dec), (350.0, -20.0))
        self.assertEqual(c.as_tuple(), (350.0, -20.0))

    def test_radec_output_range(self) -> None:
        c = to_radec(lonlat_to_vector(-90, 10))
        self.assertAlmostEqual(c.ra, 270.0, places=9)
        self.assertAlmostEqual(c.dec, 10.0, places=9)

    def test_validation(self) -> None:
        self.assertEqual(validate(360, -90), (360.0, -90.0))
        for lon, lat in ((361, 0), (-181, 0), (0, 91), (0, -90.5), (math.nan, 0), (0, math.inf), (True, 0), ("x", 0)):
            with self.assertRaises(InvalidCoordinate):
                validate(lon, lat)

    def test_longitude_helpers(self) -> None:
        self.assertEqual(wrap_lon(180.0), -180.0)
        self.assertEqual(wrap_lon(190.0), -170.0)
        self.assertEqual(normalize_lon(180.0), 180.0)
        self.assertEqual(normalize_lon(540.0), 180.0)
        self.assertEqual(normalize_lon(-190.0), 170.0)


class TestVectors(unittest.TestCase):
    def test_normalize_zero(self) -> None:
        self.assertEqual(v_normalize((0.0, 0.0, 0.0)), (0.0, 0.0, 0.0))

    def test_mid_and_slerp(self) -> None:
        a = (1.0, 0.0, 0.0)
        b = (0.0, 1.0, 0.0)
        m = v_mid(a, b)
        s = slerp(a, b, 0.5)
        for x, y in zip(m, s):
            self.assertAlmostEqual(x, y, places=12)
        self.assertEqual(slerp(a, a, 0.3), a)
        self.assertEqual(slerp(a, (-1.0, 0.0, 0.0), 0.5), a)


if __name__ == "__main__":
    unittest.main()
