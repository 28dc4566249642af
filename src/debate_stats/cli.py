"""Command line interface for the debate transcript statistics."""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Optional, Type, TypeVar

from .config import AppConfig, load_config, resolve_config_path, save_config
from .menu import InteractiveMenu
from .reporting import (
    EventSortKey,
    SpeakerSortKey,
    format_event_summary,
    format_event_table,
    format_speaker_table,
)
from .runtime import DatasetNotFoundError, DebateSession, create_session

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
LOGGER = logging.getLogger(__name__)

K = TypeVar("K", bound=Enum)

_SORTED_COMMANDS = ("events", "speakers")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sort and view statistics of debate transcripts")
    parser.add_argument(
        "command",
        nargs="?",
        default="menu",
        choices=["menu", "events", "speakers", "ui", "config"],
        help="Which view to open (default: the interactive menu)",
    )
    parser.add_argument("--config", type=Path, help="Path to an explicit configuration file")
    parser.add_argument("--dataset", type=Path, help="Transcript CSV file to read instead of the configured one")
    parser.add_argument(
        "--sort",
        help=(
            "Sort order for 'events' (name, date, speakers) or 'speakers' "
            "(name, words, avg-words, time, avg-time, appearances)"
        ),
    )
    parser.add_argument(
        "--event",
        type=int,
        help="Only list the speakers of event N (1-based, in file order; 'speakers' command)",
    )
    parser.add_argument("--host", help="Host interface for the UI server (only used with the 'ui' command)")
    parser.add_argument("--port", type=int, help="Port for the UI server (only used with the 'ui' command)")
    parser.add_argument(
        "--save",
        action="store_true",
        help="Write the effective configuration to the config file ('config' command)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostic details")
    return parser


def _resolve_sort(parser: argparse.ArgumentParser, key_type: Type[K], value: str) -> K:
    try:
        return key_type(value)
    except ValueError:
        choices = ", ".join(item.value for item in key_type)
        parser.error(f"invalid sort order {value!r} (choose from {choices})")
        raise


def _check_options(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.sort is not None and args.command not in _SORTED_COMMANDS:
        parser.error(f"--sort is only valid with the {' and '.join(_SORTED_COMMANDS)} commands")
    if args.event is not None and args.command != "speakers":
        parser.error("--event is only valid with the speakers command")
    if (args.host is not None or args.port is not None) and args.command != "ui":
        parser.error("--host and --port are only valid with the ui command")
    if args.save and args.command != "config":
        parser.error("--save is only valid with the config command")


def _show_config(config: AppConfig, config_path: Optional[Path], save: bool) -> None:
    target = resolve_config_path(config_path)
    if save:
        target = save_config(config, config_path)
        LOGGER.info("Saved configuration to %s", target)
    print(f"# {target}")
    print(json.dumps(asdict(config), ensure_ascii=False, indent=2, sort_keys=True))


def _print_events(session: DebateSession, sort: EventSortKey) -> None:
    print(format_event_table(session.sorted_events(sort)))


def _print_speakers(session: DebateSession, sort: SpeakerSortKey, event_index: Optional[int]) -> None:
    if event_index is None:
        speakers = session.sorted_speakers(sort)
        print(format_speaker_table(speakers, "All Events", show_appearances=True))
        return
    event = session.event_at(event_index)
    print(format_event_summary(event))
    print(format_speaker_table(session.sorted_speakers(sort, event=event), event.name))


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    _check_options(parser, args)
    config = load_config(args.config)

    if args.command == "config":
        _show_config(config, args.config, args.save)
        return 0

    event_sort: Optional[EventSortKey] = None
    speaker_sort: Optional[SpeakerSortKey] = None
    if args.command in ("menu", "events", "ui"):
        event_sort = _resolve_sort(parser, EventSortKey, args.sort or config.report.event_sort)
    if args.command in ("speakers", "ui"):
        speaker_sort = _resolve_sort(parser, SpeakerSortKey, args.sort or config.report.speaker_sort)

    try:
        session = create_session(config, dataset_path=args.dataset)
    except DatasetNotFoundError as exc:
        LOGGER.error("Failed to open file: %s", exc)
        return 1
    except (OSError, UnicodeError) as exc:
        LOGGER.error("Failed to read file: %s", exc)
        return 1

    if args.command == "menu":
        InteractiveMenu(session, event_sort=event_sort).run()
        return 0
    if args.command == "events":
        _print_events(session, event_sort)
        return 0
    if args.command == "speakers":
        try:
            _print_speakers(session, speaker_sort, args.event)
        except IndexError as exc:
            LOGGER.error("%s", exc)
            return 2
        return 0
    if args.command == "ui":
        from .ui import run_ui

        run_ui(
            config,
            session=session,
            host=args.host or config.ui.host,
            port=args.port or config.ui.port,
        )
        return 0
    parser.error(f"Unknown command {args.command}")
    return 2


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
