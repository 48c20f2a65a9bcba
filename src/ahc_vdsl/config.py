"""Configuration for ahc-vdsl.

Values come from an optional JSON file named by ``AHC_VDSL_CONFIG`` and are
then overridden by the individual ``AHC_VDSL_*`` environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV = "AHC_VDSL_CONFIG"
ENABLED_ENV = "AHC_VDSL_VIS"
OUTPUT_ENV = "AHC_VDSL_OUTPUT"
MODE_ENV = "AHC_VDSL_MODE"

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class VisConfig:
    """Immutable visualization settings."""

    enabled: bool = True
    output_path: Optional[str] = None
    default_mode: str = "default"


def parse_flag(value: Optional[str], default: bool) -> bool:
    """Interpret an environment flag, keeping ``default`` for unknown words."""
    if value is None:
        return default
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return default


def vis_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return whether the full implementation should be selected."""
    env = os.environ if environ is None else environ
    return parse_flag(env.get(ENABLED_ENV), True)


def load_config(environ: Optional[Mapping[str, str]] = None) -> VisConfig:
    """Load configuration, falling back to defaults on error."""
    env = os.environ if environ is None else environ
    raw: dict[str, Any] = {}
    config_path = env.get(CONFIG_ENV)
    if config_path:
        raw = _read_config_file(Path(config_path))
    cfg = _config_from_mapping(raw)
    return _apply_env(cfg, env)


def save_config(cfg: VisConfig, path: Path) -> None:
    """Persist configuration to ``path`` atomically."""
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(".tmp")
    data = {
        "enabled": cfg.enabled,
        "output_path": cfg.output_path,
        "default_mode": cfg.default_mode,
    }
    temp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    os.replace(temp_path, path)


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.exception("Failed to load config from %s", path)
        return {}
    if not isinstance(raw, dict):
        return {}
    return raw


def _get_bool(raw: Mapping[str, Any], key: str, default: bool) -> bool:
    """Fetch a boolean value with fallback for invalid types."""
    value = raw.get(key, default)
    if isinstance(value, bool):
        return value
    return default


def _get_str(
    raw: Mapping[str, Any],
    key: str,
    default: str,
    *,
    allow_empty: bool = False,
) -> str:
    """Fetch a string value, optionally allowing empty strings."""
    value = raw.get(key, default)
    if not isinstance(value, str):
        return default
    if not value and not allow_empty:
        return default
    return value


def _config_from_mapping(raw: Mapping[str, Any]) -> VisConfig:
    """Normalize raw JSON data into a VisConfig."""
    output_path = raw.get("output_path")
    if output_path is not None and not isinstance(output_path, str):
        output_path = None
    return VisConfig(
        enabled=_get_bool(raw, "enabled", True),
        output_path=output_path or None,
        default_mode=_get_str(raw, "default_mode", "default"),
    )


def _apply_env(cfg: VisConfig, env: Mapping[str, str]) -> VisConfig:
    output_path = env.get(OUTPUT_ENV) or cfg.output_path
    mode = env.get(MODE_ENV) or cfg.default_mode
    return VisConfig(
        enabled=parse_flag(env.get(ENABLED_ENV), cfg.enabled),
        output_path=output_path,
        default_mode=mode,
    )
