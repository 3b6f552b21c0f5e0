from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from trixel_cli.paths import config_path
from trixel_core.boundary import DEFAULT_SEGMENTS_PER_EDGE
from trixel_core.trixel_id import MAX_DEPTH
from trixel_core.view import MAX_BFS_QUEUE_PROCESSING, MAX_OUTPUT_TRIXELS

logger = logging.getLogger(__name__)

CONFIG_VERSION = "2026-10-17-trixel-config-v1"

DEFAULT_DEPTH = 5
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TrixelConfig:
    version: str
    default_depth: int
    segments_per_edge: int
    max_results: int
    max_processed: int
    log_level: str

    @staticmethod
    def default() -> "TrixelConfig":
        return TrixelConfig(
            version=CONFIG_VERSION,
            default_depth=DEFAULT_DEPTH,
            segments_per_edge=DEFAULT_SEGMENTS_PER_EDGE,
            max_results=MAX_OUTPUT_TRIXELS,
            max_processed=MAX_BFS_QUEUE_PROCESSING,
            log_level=DEFAULT_LOG_LEVEL,
        )

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "TrixelConfig":
        dflt = TrixelConfig.default()

        def _int(key: str, lo: int, hi: Optional[int] = None) -> int:
            fallback = getattr(dflt, key)
            try:
                v = int(d.get(key, fallback))
            except (TypeError, ValueError):
                return fallback
            if v < lo or (hi is not None and v > hi):
                return fallback
            return v

        level = str(d.get("log_level", DEFAULT_LOG_LEVEL)).upper()
        if level not in LOG_LEVELS:
            level = DEFAULT_LOG_LEVEL

        return TrixelConfig(
            version=str(d.get("version", "")) or CONFIG_VERSION,
            default_depth=_int("default_depth", 0, MAX_DEPTH),
            segments_per_edge=_int("segments_per_edge", 1),
            max_results=_int("max_results", 0),
            max_processed=_int("max_processed", 0),
            log_level=level,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "default_depth": int(self.default_depth),
            "segments_per_edge": int(self.segments_per_edge),
            "max_results": int(self.max_results),
            "max_processed": int(self.max_processed),
            "log_level": self.log_level,
        }

    @staticmethod
    def keys() -> list[str]:
        return [f.name for f in fields(TrixelConfig) if f.name != "version"]

    def with_value(self, key: str, value: str) -> "TrixelConfig":
        """Return a copy with `key` set from a string, validated like from_dict.

        Raises ValueError for unknown keys or values that would be rejected.
        """
        if key not in TrixelConfig.keys():
            raise ValueError(f"unknown config key: {key} (expected one of {', '.join(TrixelConfig.keys())})")
        raw = value.strip()
        if key == "log_level":
            wanted: Any = raw.upper()
        else:
            try:
                wanted = int(raw, 0)
            except ValueError as e:
                raise ValueError(f"invalid value for {key}: {value!r}") from e

        d = self.to_dict()
        d[key] = wanted
        updated = TrixelConfig.from_dict(d)
        # from_dict silently falls back to defaults; here that means rejection.
        if getattr(updated, key) != wanted:
            raise ValueError(f"invalid value for {key}: {value!r}")
        return updated


def load_config(path: Optional[Path] = None) -> TrixelConfig:
    p = path or config_path()
    if not p.exists():
        return TrixelConfig.default()
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return TrixelConfig.default()
    if not isinstance(data, dict):
        return TrixelConfig.default()
    return TrixelConfig.from_dict(data)


def save_config(cfg: TrixelConfig, path: Optional[Path] = None) -> None:
    p = path or config_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_suffix(p.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        json.dump(cfg.to_dict(), f, indent=2, sort_keys=True)
        f.write("\n")
    tmp.replace(p)
