"""Print the layout of a calendar view as JSON.

Developer tool for inspecting what the layout engine produces for a set of
appointments, without any UI.

Run with: python scripts/dump_layout.py appointments.json
Week:     python scripts/dump_layout.py appointments.json --mode week --anchor 2026-03-04
Zoomed:   python scripts/dump_layout.py appointments.json --mode month --zoom 2 3
Boxes:    python scripts/dump_layout.py appointments.json --boxes-only

The appointments file holds a JSON list of objects with "start", "end"
(ISO 8601) and optional "description" / "location".

Exit codes:
  0 = success (JSON on stdout)
  1 = error (message on stderr)
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from calgrid.config import get_config
from calgrid.engine import LayoutEngine
from calgrid.errors import CalendarLayoutError
from calgrid.logging import get_logger, setup_logging
from calgrid.models import Appointment, ViewMode
from calgrid.store import InMemoryAppointmentStore

log = get_logger(__name__)

_APPOINTMENTS = TypeAdapter(list[Appointment])


def load_appointments(path: Path) -> list[Appointment]:
    return _APPOINTMENTS.validate_json(path.read_bytes())


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dump calendar layout geometry as JSON")
    parser.add_argument("appointments", type=Path, help="JSON file with appointments")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ViewMode],
        default=ViewMode.WEEK.value,
        help="View mode (default: week)",
    )
    parser.add_argument(
        "--anchor",
        type=datetime.fromisoformat,
        default=None,
        help="Anchor date/time in ISO format (default: now)",
    )
    parser.add_argument("--width", type=float, default=1024.0)
    parser.add_argument("--height", type=float, default=768.0)
    parser.add_argument(
        "--zoom",
        type=int,
        nargs=2,
        metavar=("ROW", "COL"),
        default=None,
        help="Zoom the given cell",
    )
    parser.add_argument(
        "--boxes-only",
        action="store_true",
        help="Only print appointment boxes",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    try:
        appointments = load_appointments(args.appointments)
    except (OSError, ValidationError) as exc:
        print(f"Cannot read {args.appointments}: {exc}", file=sys.stderr)
        return 1

    store = InMemoryAppointmentStore(appointments)
    try:
        engine = LayoutEngine(
            store,
            args.width,
            args.height,
            mode=ViewMode(args.mode),
            anchor=args.anchor,
            config=config,
        )
        if args.zoom is not None:
            engine.toggle_zoom(*args.zoom)
    except CalendarLayoutError as exc:
        print(f"Layout failed: {exc}", file=sys.stderr)
        return 1

    snapshot = engine.snapshot
    log.info(
        "layout_dumped",
        mode=snapshot.mode.value,
        appointments=len(appointments),
        boxes=len(snapshot.boxes),
    )

    if args.boxes_only:
        payload = [
            {
                "description": box.appointment.description,
                "start": box.fragment.start.isoformat(),
                "end": box.fragment.end.isoformat(),
                "row": box.fragment.row,
                "col": box.fragment.col,
                **box.rect.model_dump(),
            }
            for box in snapshot.boxes
        ]
        print(json.dumps(payload, indent=2))
    else:
        print(snapshot.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
