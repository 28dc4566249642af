"""Application configuration helpers for debate-stats."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, get_type_hints


_ENV_PREFIX = "DEBATE_STATS_"

_DEFAULT_CONFIG_LOCATIONS = (
    Path("debate_stats.json"),
    Path.home() / ".config" / "debate_stats" / "config.json",
)


@dataclass(slots=True)
class DatasetConfig:
    """Location of the transcript CSV file."""

    path: str = "debate_transcripts_v3_2020-02-26.csv"
    encoding: str = "utf8"


@dataclass(slots=True)
class ReportConfig:
    """Initial sort orders of the report views."""

    event_sort: str = "date"
    speaker_sort: str = "name"


@dataclass(slots=True)
class UIConfig:
    """Settings for the NiceGUI browser view."""

    host: str = "127.0.0.1"
    port: int = 8080
    title: str = "Debate Transcript Statistics"


@dataclass(slots=True)
class AppConfig:
    """High level application configuration."""

    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def _load_from_env(prefix: str) -> Dict[str, Any]:
    """Load configuration entries for ``prefix`` from the environment."""

    data: Dict[str, Any] = {}
    for key, value in os.environ.items():
        if key.startswith(prefix):
            normalized_key = key.removeprefix(prefix)
            data[normalized_key.lower()] = value
    return data


def _merge_dict(target: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    merged = target.copy()
    merged.update({k: v for k, v in updates.items() if v is not None})
    return merged


def _load_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf8") as fh:
        return json.load(fh)


T = TypeVar("T")


def _coerce_value(value: Any, annotation: Any) -> Any:
    """Convert ``value`` to the ``int`` or ``str`` field type ``annotation``."""

    if value is None:
        return None

    if annotation is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, (float, str)):
            return int(float(value))
        raise ValueError(f"Cannot convert {value!r} to int")

    if annotation is str:
        if isinstance(value, str):
            return value
        return str(value)

    return value


def _dataclass_from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
    """Create dataclass ``cls`` while coercing ``data`` to the proper types."""

    kwargs: Dict[str, Any] = {}
    type_hints = get_type_hints(cls)
    for item in fields(cls):
        if item.name not in data:
            continue
        try:
            annotation = type_hints.get(item.name, item.type)
            kwargs[item.name] = _coerce_value(data[item.name], annotation)
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Invalid value for {cls.__name__}.{item.name}: {data[item.name]!r}"
            ) from exc
    return cls(**kwargs)


def resolve_config_path(explicit_path: Optional[Path] = None) -> Path:
    """Return the effective configuration file path.

    If ``explicit_path`` is provided it is returned verbatim. Otherwise the
    first existing default location is used, falling back to
    ``~/.config/debate_stats/config.json``.
    """

    if explicit_path:
        return explicit_path

    for candidate in _DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return _DEFAULT_CONFIG_LOCATIONS[-1]


def load_config(explicit_path: Optional[Path] = None) -> AppConfig:
    """Create the application configuration.

    Defaults, an optional JSON file and ``DEBATE_STATS_*`` environment
    variables are combined in that order. Variable names use the format
    ``DEBATE_STATS_SECTION_FIELD`` (e.g. ``DEBATE_STATS_DATASET_PATH``).
    """

    base = asdict(AppConfig())

    file_data: Dict[str, Any] = {}
    if explicit_path:
        file_data = _load_config_file(explicit_path)
    else:
        for candidate in _DEFAULT_CONFIG_LOCATIONS:
            file_data = _load_config_file(candidate)
            if file_data:
                break

    merged = {
        section: _merge_dict(defaults, file_data.get(section) or {})
        for section, defaults in base.items()
    }

    dataset_data = _merge_dict(merged["dataset"], _load_from_env(f"{_ENV_PREFIX}DATASET_"))
    report_data = _merge_dict(merged["report"], _load_from_env(f"{_ENV_PREFIX}REPORT_"))
    ui_data = _merge_dict(merged["ui"], _load_from_env(f"{_ENV_PREFIX}UI_"))

    return AppConfig(
        dataset=_dataclass_from_dict(DatasetConfig, dataset_data),
        report=_dataclass_from_dict(ReportConfig, report_data),
        ui=_dataclass_from_dict(UIConfig, ui_data),
    )


def save_config(config: AppConfig, path: Optional[Path] = None) -> Path:
    """Persist ``config`` as JSON and return the target path."""

    target = resolve_config_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    with target.open("w", encoding="utf8") as fh:
        json.dump(asdict(config), fh, ensure_ascii=False, indent=2, sort_keys=True)
        fh.write("\n")
    return target


__all__ = [
    "AppConfig",
    "DatasetConfig",
    "ReportConfig",
    "UIConfig",
    "load_config",
    "resolve_config_path",
    "save_config",
]
