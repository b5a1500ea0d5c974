"""Visa checklist and travel document planner."""

from .models import TripRequest, VisaRecord, GenerationResult, DocumentSlot, Tab
from .planner import get_checklist, generate_cover_letter, generate_itinerary, calculate_budget
from .session import PlanSession, PlanStore, PlanningError

__all__ = [
    "TripRequest",
    "VisaRecord",
    "GenerationResult",
    "DocumentSlot",
    "Tab",
    "get_checklist",
    "generate_cover_letter",
    "generate_itinerary",
    "calculate_budget",
    "PlanSession",
    "PlanStore",
    "PlanningError",
]
