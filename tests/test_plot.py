import tempfile
import unittest
from pathlib import Path

import numpy as np

from trixel_cli.plot import _ring_copies, render_trixels, ring_arrays
from trixel_core.boundary import boundary
from trixel_core.region import ViewRect


class TestPlot(unittest.TestCase):
    def test_ring_arrays(self) -> None:
        lons, lats = ring_arrays(boundary(5).ring)
        self.assertEqual(lons.shape, lats.shape)
        self.assertEqual(lons[0], lons[-1])

        lons, lats = ring_arrays(())
        self.assertEqual(lons.size, 0)

    def test_ring_copies(self) -> None:
        self.assertEqual(_ring_copies(np.array([10.0, 20.0])), [0.0])
        self.assertEqual(_ring_copies(np.array([170.0, 190.0])), [0.0, -360.0])
        self.assertEqual(_ring_copies(np.array([-190.0, -170.0])), [0.0, 360.0])

    def test_render(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "sub" / "map.png"
            path, drawn = render_trixels(
                [1, 2, 3, 21, 321],
                out,
                region=ViewRect(170, -10, -170, 10),
                labels=True,
                title="test",
            )
            self.assertEqual(path, out)
            self.assertEqual(drawn, 5)
            self.assertGreater(out.stat().st_size, 0)


if __name__ == "__main__":
    unittest.main()
