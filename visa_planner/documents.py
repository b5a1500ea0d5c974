"""Supporting documents: cover letter, sample itinerary and budget estimate.

None of these consult the visa table; they depend on the trip request only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .document import Document
from .models import TripRequest
from .utils import format_friendly_date, make_date_list, parse_iso_date

TRIP_DAYS = 7


def build_cover_letter(request: TripRequest) -> Document:
    doc = Document()
    doc.paragraph("\n".join(["[Your Name]", "[Your Address]", "[Your Phone Number]", "[Your Email]"]))
    doc.paragraph("[Date]")
    doc.paragraph(
        "\n".join(["The Visa Section", f"[Embassy/Consulate of {request.destination}]", "[Embassy Address]"])
    )
    doc.paragraph(
        f"**Subject: Visa Application for {request.purpose} from a {request.nationality} citizen**"
    )
    doc.paragraph("Dear Sir/Madam,")
    doc.paragraph(
        f"I am writing to apply for a visa to visit **{request.destination}** for the purpose of "
        f"**{request.purpose}**. My intended travel is planned around **{request.travel_date}**."
    )
    doc.paragraph(
        f"I am a citizen of **{request.nationality}** (Passport No: [Your Passport Number]), and I am "
        "very keen to experience the culture and attractions of your country. My visit is planned for "
        "a duration of [Number of days] days."
    )
    doc.paragraph(
        "During my stay, I plan to [Briefly describe your plans, e.g., visit key tourist sites, attend "
        "a conference, visit family]. I have enclosed a detailed travel itinerary for your reference."
    )
    doc.paragraph(
        "I am employed as a [Your Job Title] at [Your Company Name] and have been granted leave for this "
        "trip. I have sufficient funds to cover all my expenses during my stay, and I have attached my "
        "bank statements as proof of my financial standing."
    )
    doc.paragraph(
        f"I have strong social and economic ties to my home country, {request.nationality}, and I assure "
        "you that I will return upon the completion of my visit."
    )
    doc.paragraph(
        "Thank you for your time and consideration of my application. I look forward to your positive "
        "response."
    )
    doc.paragraph("Sincerely,")
    doc.paragraph("[Your Name]")
    return doc


def purpose_activity(purpose: str, tourism_text: str, other_text: str) -> str:
    if purpose.strip().lower() == "tourism":
        return tourism_text
    return other_text


def _itinerary_days(request: TripRequest) -> List[Tuple[str, List[str]]]:
    destination = request.destination
    purpose = request.purpose
    return [
        ("Arrival and Settling In", [
            f"Arrive at [Main Airport in {destination}].",
            "Take a taxi/public transport to your accommodation.",
            "Check into [Hotel Name or Address].",
            "Evening: Relax and have dinner at a local restaurant.",
        ]),
        ("Exploring the Capital", [
            "Morning: " + purpose_activity(
                purpose,
                "Visit the National Museum.",
                f"Attend the opening session or first meetings related to {purpose}.",
            ),
            "Afternoon: Walk through the historic city center.",
            "Evening: Enjoy a traditional dinner.",
        ]),
        ("Cultural Immersion", [
            f"Visit a famous landmark like [Famous Landmark in {destination}].",
            "Explore a local market for souvenirs.",
            "Use local metro/bus for transportation.",
        ]),
        ("Day Trip", [
            "Take a day trip to a nearby town or natural attraction, such as [Nearby Town/Attraction].",
            "Return to your accommodation in the evening.",
        ]),
        ("Continuing with Purpose", [
            purpose_activity(
                purpose,
                "Visit another historical site or gallery.",
                f"Follow-up appointments or a networking event for {purpose}.",
            ),
            "Afternoon: Leisure time.",
        ]),
        ("Last Day of Activities", [
            "Morning: Last-minute souvenir shopping.",
            "Afternoon: Pack and prepare for departure.",
            "Evening: Farewell dinner.",
        ]),
        ("Departure", [
            "Check out from the hotel.",
            "Travel to the airport for your flight back home.",
        ]),
    ]


def build_itinerary(request: TripRequest) -> Document:
    dates: Optional[List[str]] = None
    if parse_iso_date(request.travel_date):
        dates = make_date_list(request.travel_date, TRIP_DAYS)

    doc = Document()
    doc.heading(f"Sample {TRIP_DAYS}-Day Itinerary for {request.destination}")
    doc.paragraph(f"**Purpose of Trip:** {request.purpose}")
    doc.paragraph(
        "**Disclaimer:** This is a generic sample itinerary. You should customize it to reflect your "
        "actual travel plans."
    )
    for index, (title, activities) in enumerate(_itinerary_days(request)):
        heading = f"Day {index + 1}: {title}"
        if dates:
            heading += f" ({format_friendly_date(dates[index])})"
        doc.heading(heading, level=3)
        doc.bullets(activities)
    return doc


@dataclass(frozen=True)
class CostLine:
    label: str
    low: int
    high: int
    unit: str
    note: str

    def trip_range(self, days: int) -> Tuple[int, int]:
        if self.unit in ("per night", "per day"):
            return self.low * days, self.high * days
        return self.low, self.high


@dataclass(frozen=True)
class CityComparison:
    city: str
    country: str
    accommodation_per_night: int
    daily_expenses: int


COST_LINES: Tuple[CostLine, ...] = (
    CostLine("Round-trip Flights", 700, 1600, "", "Varies greatly depending on your departure city in {nationality} and time of booking."),
    CostLine("Accommodation", 90, 200, "per night", "For a mid-range hotel."),
    CostLine("Daily Expenses", 80, 120, "per day", "Covers food, local transport, and minor activities."),
    CostLine("Travel Insurance", 50, 100, "", "For the entire trip."),
    CostLine("Visa Application Fee", 60, 180, "", "This is a typical estimate, check the official embassy website for the exact fee."),
)

COMPARISONS: Tuple[CityComparison, ...] = (
    CityComparison("Dubai", "UAE", 120, 90),
    CityComparison("London", "UK", 150, 100),
    CityComparison("Tokyo", "Japan", 110, 80),
)


def _money(low: int, high: int) -> str:
    return f"${low:,} - ${high:,}"


def estimate_total(days: int = TRIP_DAYS) -> Tuple[int, int]:
    ranges = [line.trip_range(days) for line in COST_LINES]
    return sum(low for low, _ in ranges), sum(high for _, high in ranges)


def build_budget(request: TripRequest) -> Document:
    doc = Document()
    doc.heading(f"Estimated Travel Budget for {request.destination}")
    doc.paragraph(
        f"**Disclaimer:** This is a sample budget for a {TRIP_DAYS}-day trip to provide a general idea of "
        "costs. All figures are estimates in USD and can vary widely."
    )

    doc.heading("Estimated Costs for one person", level=3)
    items = []
    for line in COST_LINES:
        amount = _money(line.low, line.high)
        if line.unit:
            amount += f" {line.unit}"
        items.append(f"**{line.label}:** {amount}. {line.note.format(nationality=request.nationality)}")
    doc.bullets(items)
    low, high = estimate_total()
    doc.paragraph(f"**Estimated total for {TRIP_DAYS} days:** {_money(low, high)}")

    doc.heading("Comparative Travel Costs", level=3)
    doc.paragraph("Here are some general per-day cost estimates for other destinations to give you a perspective:")
    doc.bullets([
        f"**{c.city}, {c.country}:** Accommodation (per night, mid-range) ${c.accommodation_per_night}; "
        f"Daily Expenses (food & transport) ${c.daily_expenses}"
        for c in COMPARISONS
    ])

    doc.heading("Final Note", level=3)
    doc.paragraph(
        "All figures are estimates for planning purposes only. Actual costs can fluctuate based on booking "
        "time, travel style, and specific choices. Please do your own research for precise, up-to-date pricing."
    )
    return doc
