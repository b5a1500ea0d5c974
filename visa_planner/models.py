"""Core data models for the visa planner."""

from dataclasses import dataclass, field, asdict, fields
from enum import Enum
from typing import Dict, Any, Optional, Tuple


@dataclass(frozen=True)
class TripRequest:
    nationality: str
    destination: str
    travel_date: str
    purpose: str


# (attribute, heading label, key used by labeled source data)
VISA_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("visa_type", "Visa Type", "Visa Type (tourist/visit)"),
    ("application_channel", "Application Channel", "Application channel (eVisa/Embassy/ETA/VoA)"),
    ("core_documents", "Core Documents Checklist", "Core documents checklist"),
    ("financial_proof", "Financial Proof Requirement", "Financial proof requirement"),
    ("travel_insurance", "Travel Insurance Requirement", "Travel insurance requirement"),
    ("biometrics", "Biometrics / Interview", "Biometrics / Interview"),
    ("processing_time", "Processing Time (Typical)", "Processing time (typical)"),
    ("government_fee", "Government Fee (Approximate)", "Government fee (approx)"),
    ("validity", "Validity / Max Stay", "Validity / Max stay"),
    ("official_sources", "Official Sources", "Official sources (URLs)"),
    ("notes", "Important Notes", "Notes"),
)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    # Separators alone (" ; ;") carry no items.
    if not value.replace(";", "").strip():
        return None
    return value


@dataclass(frozen=True)
class VisaRecord:
    """Visa requirements for one destination.

    Every field is optional; blank text is normalized to ``None`` so that a
    missing value has exactly one representation.
    """

    visa_type: Optional[str] = None
    application_channel: Optional[str] = None
    core_documents: Optional[str] = None
    financial_proof: Optional[str] = None
    travel_insurance: Optional[str] = None
    biometrics: Optional[str] = None
    processing_time: Optional[str] = None
    government_fee: Optional[str] = None
    validity: Optional[str] = None
    official_sources: Optional[str] = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _clean(getattr(self, f.name)))

    @classmethod
    def from_labeled(cls, data: Dict[str, Any]) -> "VisaRecord":
        """Build a record from a mapping keyed by source labels or attribute names."""

        values: Dict[str, Optional[str]] = {}
        for attr, _title, source_key in VISA_FIELDS:
            if source_key in data:
                values[attr] = data[source_key]
            elif attr in data:
                values[attr] = data[attr]
        return cls(**values)

    @property
    def has_checklist(self) -> bool:
        return self.core_documents is not None

    def labeled_fields(self):
        """Yield (label, content) for present fields in display order."""

        for attr, title, _source_key in VISA_FIELDS:
            content = getattr(self, attr)
            if content is not None:
                yield title, content


class DocumentSlot(str, Enum):
    COVER_LETTER = "cover_letter"
    ITINERARY = "itinerary"
    BUDGET = "budget"


class Tab(str, Enum):
    CHECKLIST = "checklist"
    DOCUMENTS = "documents"
    BUDGET = "budget"


TAB_SLOTS: Dict[Tab, Tuple[DocumentSlot, ...]] = {
    Tab.CHECKLIST: (),
    Tab.DOCUMENTS: (DocumentSlot.COVER_LETTER, DocumentSlot.ITINERARY),
    Tab.BUDGET: (DocumentSlot.BUDGET,),
}


class SlotStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class SlotState:
    status: SlotStatus = SlotStatus.NOT_STARTED
    content: Optional[str] = None
    error: Optional[str] = None
    generation_count: int = 0


@dataclass
class GenerationResult:
    checklist: str
    cover_letter: Optional[str] = None
    itinerary: Optional[str] = None
    budget: Optional[str] = None


@dataclass
class PlanSnapshot:
    """Serializable view of a plan session."""

    id: str
    request: TripRequest
    active_tab: Tab
    checklist: str
    slots: Dict[str, SlotState] = field(default_factory=dict)


def to_dict(obj: Any) -> Dict[str, Any]:
    """Convenience helper for serializing models in APIs."""

    return asdict(obj)
