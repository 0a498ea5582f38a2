"""CLI entrypoint for voxlist."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from voxlist.config import AppConfig, load_config
from voxlist.core import VoiceListAssistant, run_parse
from voxlist.models import ExecutionReport, ItemOutcome, ListItem, ParseRequest, SessionOutcome
from voxlist.session.source import (
    ScriptedTranscriptionSource,
    ScriptStep,
    load_script,
    parse_event,
)
from voxlist.session.timers import ManualScheduler
from voxlist.store import InMemoryListStore


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="voxlist",
        description="Voice command interpreter for shared shopping lists.",
    )
    subparsers = parser.add_subparsers(dest="command")

    parse = subparsers.add_parser("parse", help="Interpret one utterance")
    parse.add_argument("utterance", help="Utterance text")
    parse.add_argument("--language", default=None, help="Language code (default: config locale)")

    replay = subparsers.add_parser("replay", help="Replay a scripted capture session")
    replay.add_argument("script", help="Path to a JSON replay script")
    replay.add_argument("--language", default=None, help="Language code (default: config locale)")
    replay.add_argument(
        "--item",
        action="append",
        default=[],
        metavar="NAME[:QTY]",
        help="Seed the list with an item (repeatable)",
    )
    replay.add_argument("--direct", action="store_true", help="Execute without the review step")
    replay.add_argument(
        "--allow-clear",
        action="store_true",
        help="Confirm clear-list commands automatically",
    )

    serve = subparsers.add_parser("serve", help="Run the voxlist HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    logging.basicConfig(level=config.log_level.upper(), stream=sys.stderr)

    if args.command == "parse":
        response = run_parse(
            ParseRequest(utterance=args.utterance, language=args.language or config.locale)
        )
        print(response.model_dump_json(indent=2))
        return 0

    if args.command == "replay":
        try:
            steps = load_script(args.script)
            seed = [_parse_seed(raw, position) for position, raw in enumerate(args.item)]
        except (OSError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        return _replay(steps, seed, args, config)

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`voxlist serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        uvicorn.run("voxlist.api:app", host=host, port=port, reload=False)
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def _replay(
    steps: list[ScriptStep],
    seed: list[ListItem],
    args: argparse.Namespace,
    config: AppConfig,
) -> int:
    store = InMemoryListStore(seed)
    source = ScriptedTranscriptionSource()
    scheduler = ManualScheduler()
    settings = config.session_settings()
    if args.direct:
        settings = settings.model_copy(update={"review_mode": "direct"})
    outcomes: list[SessionOutcome] = []
    reports: list[ExecutionReport] = []
    assistant = VoiceListAssistant(
        store,
        source,
        config=config,
        settings=settings,
        scheduler=scheduler,
        locale_provider=lambda: args.language or config.locale,
        confirm_clear=lambda: args.allow_clear,
        on_report=reports.append,
        on_session=outcomes.append,
    )

    undo_results: list[ItemOutcome] = []
    for position, step in enumerate(steps):
        kind = step["type"]
        try:
            if kind == "press":
                assistant.begin()
            elif kind == "release":
                assistant.release()
            elif kind == "cancel":
                assistant.cancel()
            elif kind == "confirm":
                text = step.get("text")
                assistant.confirm(None if text is None else str(text))
            elif kind == "undo":
                undo_results.extend(assistant.undo())
            elif kind == "wait":
                scheduler.advance(float(step.get("seconds", 0.0)))  # type: ignore[arg-type]
            else:
                source.emit(parse_event(step))
        except ValueError as exc:
            print(f"error: step {position}: {exc}", file=sys.stderr)
            return 2

    payload = {
        "sessions": [outcome.model_dump(mode="json") for outcome in outcomes],
        "reports": [report.model_dump(mode="json") for report in reports],
        "undo": [outcome.model_dump(mode="json") for outcome in undo_results],
        "items": [item.model_dump(mode="json") for item in store.all_items()],
    }
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def _parse_seed(raw: str, position: int) -> ListItem:
    name, _, quantity = raw.rpartition(":") if ":" in raw else (raw, "", "1")
    try:
        return ListItem(id=f"seed-{position}", name=name.strip(), quantity=int(quantity))
    except ValueError as exc:
        raise ValueError(f"invalid --item {raw!r}") from exc


if __name__ == "__main__":
    raise SystemExit(main())
