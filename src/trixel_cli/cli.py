from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from trixel_cli.config import TrixelConfig, load_config, save_config
from trixel_cli.helptext import HELP_TEXT
from trixel_cli.logging_config import setup_logging
from trixel_cli.parsing import parse_bbox, parse_id_list, parse_lonlat
from trixel_cli.paths import config_path
from trixel_core.boundary import CornerCache, boundary
from trixel_core.errors import TrixelError
from trixel_core.geojson import feature_collection
from trixel_core.locate import locate_lonlat
from trixel_core.region import ViewRect
from trixel_core.stats import resolution_stats
from trixel_core.trixel_id import MAX_DEPTH, TrixelId, ancestors as id_ancestors, children as id_children
from trixel_core.view import normalized_zoom, resolution_for_zoom, traverse_view

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True)
config_app = typer.Typer(no_args_is_help=True)
app.add_typer(config_app, name="config")


def _fail(msg: str) -> None:
    typer.echo(msg, err=True)
    raise typer.Exit(code=2)


def _parse_id(value: str) -> TrixelId:
    try:
        return TrixelId.parse(value.strip())
    except TrixelError as e:
        raise typer.BadParameter(str(e)) from e


def _parse_region(bbox: Optional[str]) -> Optional[ViewRect]:
    if bbox is None:
        return None
    try:
        return parse_bbox(bbox)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _resolve_depth(cfg: TrixelConfig, depth: Optional[int], zoom: Optional[float], center_lat: float) -> int:
    if depth is not None and zoom is not None:
        _fail("Use either --depth OR --zoom (not both).")
    if zoom is not None:
        return resolution_for_zoom(normalized_zoom(zoom, center_lat))
    if depth is None:
        return cfg.default_depth
    return depth


@app.callback()
def main(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="-v for INFO, -vv for DEBUG logging."),
) -> None:
    """Hierarchical Triangular Mesh tools."""
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    else:
        level = load_config().log_level
    setup_logging(level)


@app.command()
def help() -> None:
    """Show the extended help / usage guide."""
    typer.echo(HELP_TEXT.strip())


@app.command()
def locate(
    at: Optional[str] = typer.Argument(
        None,
        help="'lon,lat' in degrees (use `--` first for a negative longitude), or omit and use --lon/--lat.",
    ),
    lon: Optional[float] = typer.Option(None, "--lon", help="Longitude (alternative to 'lon,lat')."),
    lat: Optional[float] = typer.Option(None, "--lat", help="Latitude (alternative to 'lon,lat')."),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Subdivision depth (default from config)."),
    json_out: bool = typer.Option(False, "--json", help="Print a JSON object."),
) -> None:
    """Find the trixel containing a point."""
    if at is not None:
        if lon is not None or lat is not None:
            _fail("Use either 'lon,lat' OR --lon/--lat (not both).")
        try:
            lon, lat = parse_lonlat(at)
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e
    elif lon is None or lat is None:
        _fail("Provide either 'lon,lat' or both --lon and --lat.")

    d = load_config().default_depth if depth is None else depth
    try:
        id = locate_lonlat(lon, lat, d)
    except TrixelError as e:
        _fail(str(e))
        return

    if json_out:
        typer.echo(json.dumps({"lon": lon, "lat": lat, "depth": d, "id": id}))
        return
    typer.echo(f"id: {id}")
    typer.echo(f"depth: {d}")


@app.command("boundary")
def boundary_cmd(
    id: str = typer.Argument(..., help="Trixel identifier."),
    segments: Optional[int] = typer.Option(None, "--segments", help="Points per edge (default from config)."),
    json_out: bool = typer.Option(False, "--json", help="Print a GeoJSON Polygon geometry."),
) -> None:
    """Print the closed (lon, lat) boundary ring of a trixel."""
    tid = _parse_id(id)
    seg = load_config().segments_per_edge if segments is None else segments
    if seg < 1:
        raise typer.BadParameter("--segments must be >= 1")

    b = boundary(tid, seg)
    if b.is_empty:
        typer.echo(f"trixel {b.id} has no renderable boundary", err=True)
        raise typer.Exit(code=1)

    if json_out:
        typer.echo(json.dumps(b.to_geojson()))
        return
    for lon_v, lat_v in b.ring:
        typer.echo(f"{lon_v:.9f},{lat_v:.9f}")


@app.command()
def ancestors(
    id: str = typer.Argument(..., help="Trixel identifier."),
    no_root: bool = typer.Option(False, "--no-root", help="Stop before the root digit."),
) -> None:
    """Print the ancestors of a trixel, nearest parent first."""
    tid = _parse_id(id)
    for a in id_ancestors(tid, include_root=not no_root):
        typer.echo(str(a))


@app.command()
def children(id: str = typer.Argument(..., help="Trixel identifier.")) -> None:
    """Print the four children of a trixel."""
    tid = _parse_id(id)
    try:
        kids = id_children(tid)
    except TrixelError as e:
        _fail(str(e))
        return
    for c in kids:
        typer.echo(str(c))


@app.command()
def view(
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Target depth (clamped to [0, 15])."),
    zoom: Optional[float] = typer.Option(None, "--zoom", help="Map zoom level; picks the depth from the zoom table."),
    center_lat: float = typer.Option(0.0, "--center-lat", help="View center latitude, used with --zoom."),
    bbox: Optional[str] = typer.Option(None, "--bbox", help="west,south,east,north in degrees (use --bbox=...)."),
    max_results: Optional[int] = typer.Option(None, "--max-results", help="Result cap (default from config)."),
    json_out: bool = typer.Option(False, "--json", help="Print a JSON object instead of one id per line."),
) -> None:
    """Select the trixels at a depth that touch a view rectangle."""
    if max_results is not None and max_results < 0:
        raise typer.BadParameter("--max-results must be >= 0")
    cfg = load_config()
    region = _parse_region(bbox)
    target = _resolve_depth(cfg, depth, zoom, center_lat)

    sel = traverse_view(
        target,
        region,
        max_results=cfg.max_results if max_results is None else max_results,
        max_processed=cfg.max_processed,
        segments=cfg.segments_per_edge,
        cache=CornerCache(),
    )

    if json_out:
        typer.echo(
            json.dumps(
                {
                    "depth": sel.target_depth,
                    "ids": sel.ids,
                    "processed": sel.processed,
                    "pruned": sel.pruned,
                    "truncated": sel.truncated,
                }
            )
        )
        return

    for id in sel.ids:
        typer.echo(str(id))
    typer.echo(
        f"depth={sel.target_depth} count={len(sel.ids)} processed={sel.processed} pruned={sel.pruned}",
        err=True,
    )
    if sel.truncated:
        typer.echo("warning: selection truncated by a cap", err=True)


@app.command()
def stats(
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Single depth (default: every depth)."),
) -> None:
    """Trixel counts and mean areas per depth."""
    depths: List[int] = list(range(MAX_DEPTH + 1)) if depth is None else [depth]
    typer.echo(f"{'depth':>5} {'count':>16} {'mean_area_km2':>18}")
    for d in depths:
        try:
            s = resolution_stats(d)
        except TrixelError as e:
            _fail(str(e))
            return
        typer.echo(f"{s.depth:>5} {s.count:>16} {s.mean_area_km2:>18.6f}")


@app.command()
def geojson(
    ids: Optional[str] = typer.Argument(None, help="Comma-separated identifiers; omit to select by --depth/--bbox."),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Target depth for a view selection."),
    bbox: Optional[str] = typer.Option(None, "--bbox", help="west,south,east,north in degrees (use --bbox=...)."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write to a file instead of stdout."),
) -> None:
    """Emit a GeoJSON FeatureCollection of trixel boundaries."""
    cfg = load_config()
    id_list = _collect_ids(cfg, ids, depth, bbox)

    fc = feature_collection(id_list, segments=cfg.segments_per_edge, cache=CornerCache())
    text = json.dumps(fc)
    if out is None:
        typer.echo(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"wrote {len(fc['features'])} features to {out}")


@app.command()
def plot(
    ids: Optional[str] = typer.Argument(None, help="Comma-separated identifiers; omit to select by --depth/--bbox."),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Target depth for a view selection."),
    bbox: Optional[str] = typer.Option(None, "--bbox", help="west,south,east,north in degrees (use --bbox=...)."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output image (default ~/.trixel/plots/...)."),
    labels: bool = typer.Option(False, "--labels", help="Write identifiers at trixel centroids."),
) -> None:
    """Render trixel boundaries to a PNG map."""
    # Lazy import: keeps matplotlib off the path of every other command.
    from trixel_cli.plot import default_plot_path, render_trixels

    cfg = load_config()
    id_list = _collect_ids(cfg, ids, depth, bbox)
    region = _parse_region(bbox)

    if out is None:
        name = f"trixels_d{depth if depth is not None else cfg.default_depth}.png" if ids is None else "trixels.png"
        out = default_plot_path(name)

    path, drawn = render_trixels(
        id_list,
        out,
        segments=cfg.segments_per_edge,
        region=region,
        title=f"{len(id_list)} trixels",
        labels=labels,
    )
    typer.echo(f"wrote {drawn} trixels to {path}")


def _collect_ids(cfg: TrixelConfig, ids: Optional[str], depth: Optional[int], bbox: Optional[str]) -> List[int]:
    if ids is not None:
        if depth is not None or bbox is not None:
            _fail("Use either identifiers OR --depth/--bbox (not both).")
        try:
            raw = parse_id_list(ids)
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e
        return [_parse_id(str(i)).encode() for i in raw]

    sel = traverse_view(
        cfg.default_depth if depth is None else depth,
        _parse_region(bbox),
        max_results=cfg.max_results,
        max_processed=cfg.max_processed,
        segments=cfg.segments_per_edge,
        cache=CornerCache(),
    )
    if sel.truncated:
        typer.echo("warning: selection truncated by a cap", err=True)
    return sel.ids


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration and where it is read from."""
    cfg = load_config()
    typer.echo(f"path: {config_path()}")
    for key, value in cfg.to_dict().items():
        typer.echo(f"{key}: {value}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Config key."),
    value: str = typer.Argument(..., help="New value."),
) -> None:
    """Set one config value and save the file."""
    cfg = load_config()
    try:
        updated = cfg.with_value(key, value)
    except ValueError as e:
        _fail(str(e))
        return
    save_config(updated)
    logger.info("saved %s=%s to %s", key, value, config_path())
    typer.echo(f"{key}: {getattr(updated, key)}")


if __name__ == "__main__":
    app()
