"""Where the CLI keeps its files.

Only the config is persisted; plots default to a folder under the same home. Both can
be redirected through the environment, which is how the tests isolate themselves.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

HOME_ENV = "TRIXEL_HOME"
CONFIG_ENV = "TRIXEL_CONFIG_PATH"


def _env_path(name: str) -> Optional[Path]:
    raw = os.environ.get(name, "").strip()
    return Path(raw).expanduser() if raw else None


def trixel_home() -> Path:
    return _env_path(HOME_ENV) or Path.home() / ".trixel"


def config_path() -> Path:
    """config.json under trixel_home(), unless TRIXEL_CONFIG_PATH names the file directly."""
    return _env_path(CONFIG_ENV) or trixel_home() / "config.json"
