"""
Application configuration.

Defaults live in DEFAULT_CONFIG. ``create_app`` merges an explicit dict over
them, and ``load_config`` lets DRAFTBOARD_* environment variables override
individual keys for deployment.
"""

import os
from typing import Any, Dict, Optional

ENV_PREFIX = "DRAFTBOARD_"

DEFAULT_CONFIG: Dict[str, Any] = {
    "title": "Draft Board",
    "description": "Snake draft board with randomized order reveal",
    "version": "1.0.0",
    "debug": False,
    "log_level": "INFO",
    "cors_origins": ["http://localhost:3000", "http://localhost:8080"],
    "settings_dir": ".draftboard",
    "validate_images": True,
    "image_timeout": 5.0,
    "tick_interval": 1.0,
    "seed": None,
}


def _coerce(raw: str, default: Any) -> Any:
    if isinstance(default, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    if isinstance(default, list):
        return [item.strip() for item in raw.split(",") if item.strip()]
    if default is None:
        # Only the seed defaults to None
        return int(raw) if raw.strip() else None
    return raw


def load_config(overrides: Optional[Dict[str, Any]] = None,
                environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Build the effective configuration.

    Precedence: explicit overrides > environment > defaults.
    """
    environ = os.environ if environ is None else environ
    config = dict(DEFAULT_CONFIG)

    for key, default in DEFAULT_CONFIG.items():
        env_key = f"{ENV_PREFIX}{key.upper()}"
        if env_key in environ:
            config[key] = _coerce(environ[env_key], default)

    if overrides:
        config.update(overrides)

    return config
