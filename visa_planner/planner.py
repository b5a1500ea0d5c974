"""Core orchestration logic for generating visa plans and documents."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .checklist import build_generic_checklist, build_visa_plan
from .config import get_settings
from .document import Document, render_markdown
from .documents import build_budget, build_cover_letter, build_itinerary
from .models import TripRequest, VisaRecord
from .visa_data import lookup_visa_record


logger = logging.getLogger(__name__)


async def simulate_delay() -> None:
    await asyncio.sleep(get_settings().simulated_delay_seconds)


def select_checklist(request: TripRequest, record: Optional[VisaRecord]) -> Document:
    if record is not None and record.has_checklist:
        return build_visa_plan(request, record)
    if record is not None:
        logger.info("Visa record for %s has no checklist; using generic plan", request.destination)
    return build_generic_checklist(request)


async def get_checklist(request: TripRequest) -> str:
    await simulate_delay()
    record = lookup_visa_record(request.destination)
    logger.info(
        "Building checklist for %s -> %s (%s)",
        request.nationality,
        request.destination,
        "specific" if record is not None and record.has_checklist else "generic",
    )
    return render_markdown(select_checklist(request, record))


async def generate_cover_letter(request: TripRequest) -> str:
    await simulate_delay()
    return render_markdown(build_cover_letter(request))


async def generate_itinerary(request: TripRequest) -> str:
    await simulate_delay()
    return render_markdown(build_itinerary(request))


async def calculate_budget(request: TripRequest) -> str:
    await simulate_delay()
    return render_markdown(build_budget(request))
