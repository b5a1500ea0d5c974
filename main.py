"""Simple CLI entry to exercise the visa planner."""

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import List

from visa_planner.config import get_settings
from visa_planner.forms import InvalidTripRequest, trip_request_from_dict
from visa_planner.models import DocumentSlot, TripRequest
from visa_planner.session import PlanStore
from visa_planner.share import build_share_url


def load_request(path: Path) -> TripRequest:
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidTripRequest([f"Could not read {path}: {exc}"]) from exc
    if not isinstance(data, dict):
        raise InvalidTripRequest([f"{path} must contain a JSON object with the trip fields."])
    return trip_request_from_dict(data)


async def build_plan(request: TripRequest, slots: List[DocumentSlot]) -> List[str]:
    session = await PlanStore().create(request)
    await asyncio.gather(*(session.generate(slot) for slot in slots))
    sections = [session.checklist]
    for slot in slots:
        state = session.slots[slot]
        sections.append(state.content if state.content is not None else f"Error: {state.error}\n")
    return sections


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a visa plan from a JSON request.")
    parser.add_argument("request_file", type=Path, help="Path to a JSON file describing the trip request")
    parser.add_argument(
        "--documents",
        nargs="*",
        default=[],
        choices=[slot.value for slot in DocumentSlot],
        help="Supporting documents to generate alongside the checklist",
    )
    parser.add_argument("--output", type=Path, help="Optional path to save the plan as markdown")
    parser.add_argument("--share", action="store_true", help="Print a share link for the checklist")
    args = parser.parse_args()

    logging.basicConfig(level=get_settings().log_level)

    try:
        trip_request = load_request(args.request_file)
    except InvalidTripRequest as exc:
        parser.error(str(exc))

    slots = [DocumentSlot(name) for name in args.documents]
    sections = asyncio.run(build_plan(trip_request, slots))
    result = "\n---\n\n".join(sections)

    if args.output:
        args.output.write_text(result)
        print(f"Visa plan saved to {args.output}")
    else:
        print(result)

    if args.share:
        print(build_share_url(trip_request, sections[0]))


if __name__ == "__main__":
    main()
