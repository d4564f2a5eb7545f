"""admin_dashboard configuration helpers."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from admin_dashboard.paths import repo_file

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class DashboardSettings:
    api_base_url: str = "http://localhost:5000"
    dashboard_path: str = "/admin/dashboard"
    timeout_sec: int = 15
    discord_webhook_url: Optional[str] = None
    notifications_enabled: bool = True


def load_json_config(path: Path) -> dict[str, Any]:
    if not path.is_file():
        logger.debug("no config file at %s, using defaults", path)
        return {}
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _as_timeout(value: Any, default: int) -> int:
    try:
        timeout = int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid timeout %r, using %d seconds", value, default)
        return default
    if timeout <= 0:
        logger.warning("Timeout must be positive, got %d; using %d seconds", timeout, default)
        return default
    return timeout


def resolve_settings(
    config_data: Mapping[str, Any],
    environ: Optional[Mapping[str, str]] = None,
) -> DashboardSettings:
    """Merge config.json values with environment overrides."""
    env = os.environ if environ is None else environ
    defaults = DashboardSettings()

    base_url = env.get("ADMIN_API_BASE_URL") or config_data.get("api_base_url") or defaults.api_base_url
    path = env.get("ADMIN_DASHBOARD_PATH") or config_data.get("dashboard_path") or defaults.dashboard_path
    timeout = env.get("ADMIN_API_TIMEOUT_SEC") or config_data.get("timeout_sec") or defaults.timeout_sec
    webhook = env.get("DISCORD_WEBHOOK_URL") or config_data.get("discord_webhook_url") or None
    enabled = env.get("DISCORD_NOTIFICATIONS_ENABLED")
    if enabled is None:
        enabled = config_data.get("notifications_enabled", defaults.notifications_enabled)

    return DashboardSettings(
        api_base_url=str(base_url),
        dashboard_path=str(path),
        timeout_sec=_as_timeout(timeout, defaults.timeout_sec),
        discord_webhook_url=webhook,
        notifications_enabled=_as_bool(enabled),
    )


def load_settings() -> DashboardSettings:
    return resolve_settings(load_json_config(repo_file("config.json")))
