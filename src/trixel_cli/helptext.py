HELP_TEXT = r'''
Trixel CLI

Hierarchical Triangular Mesh (HTM) tools: locate points, draw trixel boundaries and
select the trixels covering a map view. Everything is computed locally; nothing is
stored except an optional config file.

Quick start

  # install (dev)
  python3 -m venv .venv
  source .venv/bin/activate
  pip install -U pip
  pip install -e .

  # which depth-5 trixel contains San Francisco?
  trixel locate --depth 5 -- -122.4194,37.7749
  trixel locate --lon=-122.4194 --lat=37.7749

  # its boundary ring, parents and children
  trixel boundary 133346
  trixel ancestors 133346
  trixel children 133346

  # trixels covering a view (west,south,east,north; west > east crosses 180°)
  trixel view --depth 4 --bbox=-125,30,-110,45
  trixel view --zoom 6.5 --center-lat 37.7 --bbox=-125,30,-110,45

  # GeoJSON and a PNG map
  trixel geojson --depth 2 --out level2.geojson
  trixel plot --depth 3

Identifiers
- The rightmost digit is the root trixel (1-8): 1-4 cover the southern hemisphere,
  5-8 the northern one.
- Every digit to its left is a child index (1-4), one level deeper each time, so
  the deepest digit is the leftmost one. depth = number of digits - 1.
- ancestors(4321) = 321, 21, 1. Maximum depth is 15.

Coordinates
- Longitude/latitude in degrees; longitude accepts [-180, 360], latitude [-90, 90].
- A negative leading number looks like an option flag. Use `--` before the
  positional argument, or the `--lon=`/`--lat=` and `--bbox=` forms.

Local storage
- Config: ~/.trixel/config.json  (trixel config show / trixel config set KEY VALUE)
- Plots:  ~/.trixel/plots/

Environment variables
- TRIXEL_HOME: override ~/.trixel
- TRIXEL_CONFIG_PATH: override the config.json path (useful for tests)
'''
