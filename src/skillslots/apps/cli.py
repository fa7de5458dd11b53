"""CLI entry point for skillslots.

Reads a saved request envelope, resolves the requested slots and prints
the first matching value of each as a table or as JSON.

    skillslots request.json --slot city --slot date
    cat request.json | skillslots - --json
"""

import argparse
import json
import logging

from skillslots.core.constants import OUTPUT_FORMATS
from skillslots.core.env import log_level_from_env
from skillslots.core.types import SlotResolution


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Show the matched slot values of a voice intent request"
    )
    parser.add_argument(
        "envelope", help="Path to a JSON request envelope ('-' for stdin)"
    )
    parser.add_argument(
        "--slot",
        dest="slots",
        action="append",
        default=None,
        help="Slot to resolve (repeatable, default: every slot on the intent)",
    )
    parser.add_argument(
        "--format",
        dest="output",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: from config, else table)",
    )
    parser.add_argument(
        "--json",
        dest="output",
        action="store_const",
        const="json",
        help="Shortcut for --format json",
    )
    parser.add_argument(
        "--config", default=None, help="Path to a config.json file"
    )
    return parser


def _print_table(
    results: list[SlotResolution],
    request_type: str | None,
    intent_name: str | None,
) -> None:
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    console = Console()
    title = escape(f"{intent_name or '(no intent)'} ({request_type or 'unknown'})")
    table = Table(title=title)
    table.add_column("Slot", style="cyan")
    table.add_column("ID", style="green")
    table.add_column("Name", style="white")
    table.add_column("Values", justify="right")
    for result in results:
        first_name = result.values[0].name if result.values else ""
        table.add_row(
            escape(result.slot_name),
            escape(result.value_id or ""),
            escape(first_name),
            str(len(result.values)),
        )
    console.print(table)


def _print_json(
    results: list[SlotResolution],
    request_type: str | None,
    intent_name: str | None,
) -> None:
    payload = {
        "request_type": request_type,
        "intent": intent_name,
        "slots": [r.to_dict() for r in results],
    }
    print(json.dumps(payload, indent=2))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code."""
    from rich.console import Console
    from rich.logging import RichHandler

    from skillslots.api import EnvelopeError, load_envelope, resolve_slots
    from skillslots.apps.config import load_config
    from skillslots.core.slots import get_intent_name, get_request_type

    logging.basicConfig(
        level=log_level_from_env(),
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
                rich_tracebacks=False,
            )
        ],
    )
    log = logging.getLogger("skillslots")

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    output = args.output or config.output
    slot_names = args.slots or list(config.slots)

    try:
        envelope = load_envelope(args.envelope)
    except EnvelopeError as e:
        log.error("%s", e)
        return 1

    results = resolve_slots(envelope, slot_names)
    request_type = get_request_type(envelope)
    intent_name = get_intent_name(envelope)

    if output == "json":
        _print_json(results, request_type, intent_name)
    else:
        _print_table(results, request_type, intent_name)
    return 0
