"""Validation for trip requests submitted through the planning form."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from .constants import COUNTRIES, DESTINATIONS, PURPOSES
from .models import TripRequest
from .utils import parse_iso_date


class InvalidTripRequest(ValueError):
    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


def validate_trip_request(request: TripRequest, today: Optional[date] = None) -> TripRequest:
    problems: List[str] = []
    for name in ("nationality", "destination", "travel_date", "purpose"):
        if not getattr(request, name).strip():
            problems.append(f"{name} is required.")

    if request.nationality.strip() and request.nationality not in COUNTRIES:
        problems.append(f"Unknown nationality: {request.nationality}.")
    if request.destination.strip() and request.destination not in DESTINATIONS:
        problems.append(f"Unknown destination: {request.destination}.")
    if request.purpose.strip() and request.purpose not in PURPOSES:
        problems.append(f"Unknown purpose: {request.purpose}.")

    if request.travel_date.strip():
        travel_date = parse_iso_date(request.travel_date)
        if travel_date is None:
            problems.append("travel_date must be an ISO date (YYYY-MM-DD).")
        elif travel_date < (today or date.today()):
            problems.append("travel_date must not be in the past.")

    if problems:
        raise InvalidTripRequest(problems)
    return request


def trip_request_from_dict(data: Dict[str, Any], today: Optional[date] = None) -> TripRequest:
    """Build and validate a request from form fields."""

    request = TripRequest(
        nationality=str(data.get("nationality") or ""),
        destination=str(data.get("destination") or ""),
        travel_date=str(data.get("travel_date") or ""),
        purpose=str(data.get("purpose") or ""),
    )
    return validate_trip_request(request, today=today)
