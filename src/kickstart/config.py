"""Load the optional user configuration file."""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import ValidationError

from .models import KickstartConfig
from .services.errors import IoFailedError

KICKSTART_APP_NAME = "kickstart"
CONFIG_FILENAME = "config.json"
CONFIG_PATH_ENV = "KICKSTART_CONFIG"


def config_path() -> Path:
    """Return where the user config lives.

    ``KICKSTART_CONFIG`` overrides the platform config directory.

    Example:
        >>> config_path().name
        'config.json'
    """
    override = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path(user_config_dir(KICKSTART_APP_NAME)) / CONFIG_FILENAME


def load_json(path: Path) -> dict | None:
    """Load a JSON file if it exists.

    Example:
        >>> from pathlib import Path
        >>> load_json(Path("missing.json")) is None
        True
    """
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def load_config(path: Path | None = None) -> KickstartConfig:
    """Load and validate the user config, falling back to defaults.

    Args:
        path: Explicit config file; ``config_path()`` when omitted.

    Returns:
        Parsed ``KickstartConfig``. Defaults when the file is missing or empty.

    Raises:
        IoFailedError: If the file cannot be read, parsed, or validated.
    """
    target = path or config_path()
    try:
        payload = load_json(target)
    except (OSError, json.JSONDecodeError) as exc:
        raise IoFailedError(f"failed to read config {target}: {exc}") from exc
    if not payload:
        return KickstartConfig()
    try:
        return KickstartConfig.model_validate(payload)
    except ValidationError as exc:
        raise IoFailedError(
            f"invalid config {target}",
            recovery_hint=str(exc),
        ) from exc
