"""Configuration helpers for debate-stats."""
from __future__ import annotations

from .settings import (
    AppConfig,
    DatasetConfig,
    ReportConfig,
    UIConfig,
    load_config,
    resolve_config_path,
    save_config,
)

__all__ = [
    "AppConfig",
    "DatasetConfig",
    "ReportConfig",
    "UIConfig",
    "load_config",
    "resolve_config_path",
    "save_config",
]
