"""Visa checklist documents: destination-specific plan and generic fallback."""

from __future__ import annotations

from typing import List

from .document import Document
from .models import TripRequest, VisaRecord


def split_field(content: str) -> List[str]:
    """Split a semicolon-separated field into trimmed, non-empty items."""

    return [item.strip() for item in content.split(";") if item.strip()]


def build_visa_plan(request: TripRequest, record: VisaRecord) -> Document:
    doc = Document()
    doc.heading(f"Visa Plan for {request.destination}")
    doc.paragraph(
        f"Here is your visa guide for traveling from **{request.nationality}** to "
        f"**{request.destination}** for the purpose of **{request.purpose}**."
    )
    doc.paragraph(
        "**Disclaimer:** This information is for guidance only. Policies can change. "
        f"Always verify all details with the official embassy or consulate of {request.destination}."
    )
    for title, content in record.labeled_fields():
        doc.heading(title, level=3)
        if ";" in content:
            doc.bullets(split_field(content))
        else:
            doc.paragraph(content)
    return doc


def build_generic_checklist(request: TripRequest) -> Document:
    """Destination-agnostic plan used when no usable record exists."""

    nationality = request.nationality
    destination = request.destination

    doc = Document()
    doc.heading(f"Your Visa Plan for {destination}")
    doc.paragraph(
        f"Hello! Here is a general guide for your visa application from {nationality} to {destination}."
    )
    doc.paragraph(
        "**Disclaimer:** We could not find specific data for this route. This is a generic checklist. "
        f"You must verify all information with the official embassy or consulate of {destination}."
    )

    doc.heading("1. Visa Requirements Overview", level=3)
    doc.bullets([
        f"Based on your travel for the purpose of **{request.purpose}**, you will likely need a specific "
        f"type of visitor visa. It is crucial to check the official embassy website of {destination} "
        "for the exact visa category and requirements."
    ])

    doc.heading("2. Required Documents Checklist", level=3)
    doc.checkboxes([
        "**Valid Passport:** Must be valid for at least 6 months beyond your intended stay with at "
        "least two blank pages.",
        "**Visa Application Form:** Completed and signed. Usually available for download from the "
        "official embassy website.",
        "**Passport-sized Photos:** Recent photos meeting specific requirements (e.g., size, "
        "background color).",
        f"**Proof of Accommodation:** Confirmed hotel bookings or a letter of invitation from a host "
        f"in {destination}.",
        "**Flight Itinerary:** Round-trip flight reservations. It is highly recommended not to "
        "purchase actual tickets until the visa is approved.",
        "**Proof of Financial Means:** Recent bank statements (e.g., last 3-6 months) showing "
        "sufficient funds to cover your trip.",
        f"**Travel Insurance:** Health insurance valid for the entire duration of your stay in {destination}.",
        "**Letter from Employer (if applicable):** A letter stating your position, salary, length of "
        "employment, and approved leave for the travel period.",
        "**Proof of Ties to Home Country:** Documents like property ownership, family ties, or a "
        f"stable job to demonstrate your intention to return from {destination}.",
    ])

    doc.heading("3. Application Process", level=3)
    doc.steps([
        f"**Find the Official Embassy/Consulate:** Locate the nearest embassy or consulate of "
        f"{destination} in your country, {nationality}.",
        "**Fill out the Application Form:** Download and complete the correct form accurately. "
        "Double-check all entries.",
        "**Gather Documents:** Collect all the necessary documents as per the checklist above.",
        "**Schedule an Appointment:** Many embassies require you to book an appointment online for "
        "application submission and biometrics.",
        "**Attend Appointment:** Submit your application and provide fingerprints and a photograph "
        "if required.",
        "**Wait for Decision:** Processing times can vary significantly. You can often track your "
        "application status online.",
    ])

    doc.heading("4. Embassy/Consulate Information", level=3)
    doc.bullets([
        f"Please find the official website for the embassy of **{destination}** in your region for the "
        f"most accurate and up-to-date information. A web search for \"Embassy of {destination} in "
        f"{nationality}\" is the best way to start."
    ])

    doc.heading("5. Important Tips for Success", level=3)
    doc.bullets([
        "**Apply Early:** Begin the visa application process well in advance of your intended travel "
        f"date of {request.travel_date}.",
        "**Be Honest and Consistent:** Ensure all information across your documents is accurate and "
        "consistent.",
        "**Organize Your Documents:** Present your application neatly and in the order requested by "
        "the embassy.",
        "**Keep Copies:** Make copies of every document you submit and keep them with you while "
        "travelling.",
        f"**Check Entry Rules Again Before Departure:** Requirements for {destination} can change "
        "between your application and your trip.",
    ])
    return doc
