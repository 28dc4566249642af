"""Browser view for the debate statistics."""
from __future__ import annotations

from importlib import import_module
from typing import Any

try:
    run_ui = import_module("debate_stats.ui.app").run_ui  # type: ignore[attr-defined]
except ModuleNotFoundError as exc:  # pragma: no cover - triggered when nicegui is absent
    if exc.name != "nicegui":
        raise

    def run_ui(*_: Any, **__: Any) -> None:
        raise ModuleNotFoundError(
            "NiceGUI must be installed to start the browser view. "
            "Install debate-stats with `pip install debate-stats` "
            "or directly with `pip install nicegui>=1.4.17`."
        ) from exc

__all__ = ["run_ui"]
