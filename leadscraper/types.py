from dataclasses import dataclass
from typing import Optional


# CSV header order == field order
LEAD_COLUMNS = ("name", "rating", "reviews", "address", "phone", "url")


@dataclass
class LeadRecord:
    name: str = ""
    rating: str = ""
    reviews: str = ""
    address: str = ""
    phone: str = ""
    url: str = ""  # usually a Google Maps link, not validated


@dataclass
class Coords:
    lat: float
    lng: float


@dataclass
class SearchRequest:
    """
    What the user asked for. `coords` is only a bias hint for the search
    backend, never a filter.
    """

    business_type: str
    location: str
    country: str = "Venezuela"
    coords: Optional[Coords] = None