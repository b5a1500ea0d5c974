"""Option sets offered by the planning form."""

from typing import List

COUNTRIES: List[str] = [
    "Bangladesh",
    "Brazil",
    "Cameroon",
    "Colombia",
    "Egypt",
    "Ethiopia",
    "Ghana",
    "India",
    "Indonesia",
    "Kenya",
    "Morocco",
    "Nepal",
    "Nigeria",
    "Pakistan",
    "Peru",
    "Philippines",
    "Senegal",
    "South Africa",
    "Sri Lanka",
    "Tanzania",
    "Uganda",
    "Vietnam",
    "Zimbabwe",
]

DESTINATIONS: List[str] = [
    "Australia",
    "Canada",
    "China",
    "France",
    "Germany",
    "Italy",
    "Japan",
    "Malaysia",
    "Singapore",
    "South Korea",
    "Spain",
    "Thailand",
    "Turkey",
    "United Arab Emirates",
    "United Kingdom",
    "United States",
]

PURPOSES: List[str] = [
    "Tourism",
    "Business",
    "Visiting Family/Friends",
    "Study",
    "Medical Treatment",
    "Conference/Event",
]
