import unittest

from trixel_cli.parsing import parse_bbox, parse_id_list, parse_lonlat


class TestParsing(unittest.TestCase):
    def test_parse_lonlat(self) -> None:
        self.assertEqual(parse_lonlat("-122.4194,37.7749"), (-122.4194, 37.7749))
        self.assertEqual(parse_lonlat(" 10 , -5 "), (10.0, -5.0))
        for bad in ("1", "1,2,3", "a,b", "1,", ""):
            with self.assertRaises(ValueError):
                parse_lonlat(bad)

    def test_parse_bbox(self) -> None:
        r = parse_bbox("170,-10,-170,10")
        self.assertTrue(r.crosses_antimeridian)
        self.assertEqual((r.west, r.south, r.east, r.north), (170.0, -10.0, -170.0, 10.0))
        for bad in ("0,0,1", "0,-95,1,0", "0,10,1,0"):
            with self.assertRaises(ValueError):
                parse_bbox(bad)

    def test_parse_id_list(self) -> None:
        self.assertEqual(parse_id_list("1, 21 321"), [1, 21, 321])
        with self.assertRaises(ValueError):
            parse_id_list("1,x")
        with self.assertRaises(ValueError):
            parse_id_list(" , ")


if __name__ == "__main__":
    unittest.main()
