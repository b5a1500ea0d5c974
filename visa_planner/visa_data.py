"""Static visa requirement table keyed by destination name."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from .config import get_settings
from .models import VisaRecord


logger = logging.getLogger(__name__)


# Illustrative entries; rules change often and must be verified with the
# destination's official channels. Destinations missing here (or with a blank
# checklist) use the generic plan.
RAW_VISA_DATA: Dict[str, Dict[str, str]] = {
    "United Arab Emirates": {
        "Visa Type (tourist/visit)": "Tourist visa (30 or 60 days)",
        "Application channel (eVisa/Embassy/ETA/VoA)": "eVisa via ICP smart services or through a UAE-based airline or hotel",
        "Core documents checklist": "Passport valid 6+ months; Passport-style photo with white background; Return ticket; Hotel booking or host address",
        "Financial proof requirement": "Recent bank statement may be requested",
        "Travel insurance requirement": "Recommended; mandatory for some sponsors",
        "Biometrics / Interview": "",
        "Processing time (typical)": "3-5 working days",
        "Government fee (approx)": "USD 90-200 depending on duration",
        "Validity / Max stay": "Single entry, 30 or 60 days",
        "Official sources (URLs)": "https://icp.gov.ae; https://u.ae",
        "Notes": "Some nationalities qualify for visa on arrival; check eligibility first.",
    },
    "United Kingdom": {
        "Visa Type (tourist/visit)": "Standard Visitor visa",
        "Application channel (eVisa/Embassy/ETA/VoA)": "Online application with biometrics at a visa application centre",
        "Core documents checklist": "Valid passport; Bank statements for the last 6 months; Employment letter or proof of studies; Accommodation details; Travel history",
        "Financial proof requirement": "Evidence that you can support yourself for the whole stay",
        "Travel insurance requirement": "Not mandatory but strongly advised",
        "Biometrics / Interview": "Fingerprints and photo at the visa application centre",
        "Processing time (typical)": "3 weeks",
        "Government fee (approx)": "GBP 127 for up to 6 months",
        "Validity / Max stay": "Up to 6 months per visit",
        "Official sources (URLs)": "https://www.gov.uk/standard-visitor",
        "Notes": "Documents not in English or Welsh need certified translations.",
    },
    "Japan": {
        "Visa Type (tourist/visit)": "Temporary Visitor visa",
        "Application channel (eVisa/Embassy/ETA/VoA)": "Embassy or accredited travel agency; eVisa for selected nationalities",
        "Core documents checklist": "Passport; Visa application form; Photo 45mm x 35mm; Flight reservation; Itinerary (Taizai Yoteihyo); Bank certificate",
        "Financial proof requirement": "Bank balance certificate issued within 3 months",
        "Travel insurance requirement": "",
        "Biometrics / Interview": "Not usually required",
        "Processing time (typical)": "5 working days",
        "Government fee (approx)": "JPY 3,000 single entry",
        "Validity / Max stay": "Up to 90 days",
        "Official sources (URLs)": "https://www.mofa.go.jp/j_info/visit/visa/",
        "Notes": "",
    },
    "Thailand": {
        "Visa Type (tourist/visit)": "Tourist visa (TR)",
        "Application channel (eVisa/Embassy/ETA/VoA)": "Thai eVisa portal",
        "Core documents checklist": "Passport; Recent photo; Confirmed onward ticket; Accommodation proof; Bank statement",
        "Financial proof requirement": "Funds of at least THB 20,000 per person",
        "Travel insurance requirement": "Recommended",
        "Biometrics / Interview": "",
        "Processing time (typical)": "3-10 working days",
        "Government fee (approx)": "USD 40",
        "Validity / Max stay": "60 days, extendable once by 30 days",
        "Official sources (URLs)": "https://www.thaievisa.go.th",
        "Notes": "Visa exemption applies to many nationalities.",
    },
    # Record exists but the checklist is not authored yet.
    "Canada": {
        "Visa Type (tourist/visit)": "Visitor visa (TRV)",
        "Application channel (eVisa/Embassy/ETA/VoA)": "IRCC online portal",
        "Core documents checklist": " ",
        "Processing time (typical)": "Varies by country of residence",
    },
}


def _build_table(raw: Dict[str, Dict[str, Any]]) -> Dict[str, VisaRecord]:
    return {destination: VisaRecord.from_labeled(data) for destination, data in raw.items()}


def load_override(path: str) -> Dict[str, VisaRecord]:
    """Read labeled visa records from a JSON file keyed by destination."""

    file_path = Path(path)
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Could not load visa data from {file_path}: {exc}") from exc
    if not isinstance(raw, dict) or not all(isinstance(v, dict) for v in raw.values()):
        raise ValueError(f"Visa data in {file_path} must map destination names to objects.")
    return _build_table(raw)


@lru_cache(maxsize=1)
def get_visa_table() -> Dict[str, VisaRecord]:
    table = _build_table(RAW_VISA_DATA)
    settings = get_settings()
    if settings.visa_data_path:
        override = load_override(settings.visa_data_path)
        logger.info("Loaded %s visa record(s) from %s", len(override), settings.visa_data_path)
        table.update(override)
    return table


def lookup_visa_record(destination: str) -> Optional[VisaRecord]:
    """Exact-match lookup; ``None`` when the destination has no record."""

    return get_visa_table().get(destination)
