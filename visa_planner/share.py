"""Messaging-app share links for a generated plan."""

from typing import Optional
from urllib.parse import quote

from .config import Settings, get_settings
from .models import TripRequest

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def utf16_prefix(text: str, units: int) -> str:
    """First ``units`` UTF-16 code units of ``text``.

    Browsers measure the preview this way. A surrogate pair cut in half is
    dropped entirely.
    """

    encoded = text.encode("utf-16-le")[: units * 2]
    return encoded.decode("utf-16-le", errors="ignore")


def build_share_text(request: TripRequest, checklist: str, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    preview = utf16_prefix(checklist, settings.share_preview_chars)
    return (
        f"Here is my visa plan for {request.destination} from {settings.app_name}:\n\n"
        f"{preview}...\n\n"
        f"Get your own plan at {settings.app_name}!"
    )


def build_share_url(request: TripRequest, checklist: str, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    text = build_share_text(request, checklist, settings)
    return settings.share_base_url + quote(text, safe=_URI_COMPONENT_SAFE)
