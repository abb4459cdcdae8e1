"""Command-line front door for termmouse.

Decodes mouse-report buffers given as arguments (or piped on stdin) and
prints one line per event. Useful for checking what a terminal actually
sends while mouse reporting is enabled.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .config import OUTPUT_FORMATS, load_output_format, save_output_format
from .errors import MouseParseError
from .events import (
    MOUSE_ACTION_LABELS,
    MOUSE_BUTTON_LABELS,
    MOUSE_EVENT_TYPE_LABELS,
    MouseEvent,
)
from .parser import parse_mouse_events

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _unescape(value: str) -> str:
    """Expand Python backslash escapes such as ``\\x1b`` in a CLI argument."""
    try:
        return value.encode("latin-1", "backslashreplace").decode("unicode_escape")
    except UnicodeDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid escape in buffer: {value!r}") from exc


def _hex_bytes(value: str) -> bytes:
    """argparse-side conversion for ``--hex`` buffers."""
    try:
        return bytes.fromhex("".join(value.split()))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid hex buffer: {value!r}") from exc


def event_record(event: MouseEvent) -> dict[str, object]:
    """Return a JSON-friendly view of ``event`` with enum values as labels."""
    return {
        "protocol": event.protocol,
        "x": event.x,
        "y": event.y,
        "action": MOUSE_ACTION_LABELS.get(event.action, ""),
        "button": MOUSE_BUTTON_LABELS.get(event.button, ""),
        "type": MOUSE_EVENT_TYPE_LABELS.get(event.type, ""),
        "shift": event.shift,
        "alt": event.alt,
        "ctrl": event.ctrl,
    }


def render_event(event: MouseEvent, output_format: str) -> str:
    """Render one event as a ``label``, ``json`` or ``repr`` output line."""
    if output_format == "json":
        return json.dumps(event_record(event), sort_keys=True)
    if output_format == "repr":
        return repr(event)
    return str(event)


def main() -> None:
    """Parse CLI arguments, decode each buffer, and print its events.

    Positional buffers are decoded independently; with none given, all of
    stdin is read as one raw buffer. A decode failure exits non-zero with
    the error message.
    """
    parser = argparse.ArgumentParser(
        description="Decode X10 and SGR terminal mouse reports into readable events."
    )
    parser.add_argument(
        "buffers",
        nargs="*",
        metavar="BUFFER",
        help="Mouse report buffer, with backslash escapes (e.g. '\\x1b[<0;1;1M'). Reads stdin when omitted.",
    )
    parser.add_argument("--hex", action="store_true", help="Read BUFFER arguments as hex digits.")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: saved preference, else label).",
    )
    parser.add_argument("--remember", action="store_true", help="Save --format as the default.")
    parser.add_argument("--verbose", action="store_true", help="Log decoder decisions to stderr.")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format=LOG_FORMAT,
            handlers=[logging.StreamHandler(sys.stderr)],
        )

    if args.remember and args.format is None:
        parser.error("--remember requires --format")
    output_format = args.format or load_output_format() or "label"
    if args.remember:
        save_output_format(args.format)

    buffers: list[bytes | str] = []
    convert = _hex_bytes if args.hex else _unescape
    for value in args.buffers:
        try:
            buffers.append(convert(value))
        except argparse.ArgumentTypeError as exc:
            parser.error(str(exc))
    if not buffers:
        buffers.append(sys.stdin.buffer.read())

    for buf in buffers:
        try:
            events = parse_mouse_events(buf)
        except MouseParseError as exc:
            raise SystemExit(f"error: {exc}") from exc
        for event in events:
            sys.stdout.write(render_event(event, output_format) + "\n")


if __name__ == "__main__":
    main()
