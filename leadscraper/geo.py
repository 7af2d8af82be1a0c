from typing import Any, Optional

import requests

from .config import config
from .logging import get_logger
from .types import Coords

logger = get_logger(__name__)


def _as_float(v: Any) -> Optional[float]:
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


def locate_by_ip(url: Optional[str] = None, timeout_s: int = 5) -> Optional[Coords]:
    """
    Approximate position of the machine running the app, via an IP lookup
    service. Returns None whenever anything goes wrong; the search then just
    runs without a location hint.
    """
    url = url or config.GEOLOCATION_URL
    if not url:
        return None

    headers = {"Accept": "application/json", "User-Agent": "leadscraper/0.2"}
    try:
        r = requests.get(url, headers=headers, timeout=timeout_s)
    except requests.RequestException as e:
        logger.warning("geolocation_unavailable", url=url, error=str(e))
        return None

    if r.status_code >= 400:
        logger.warning("geolocation_unavailable", url=url, status=r.status_code)
        return None

    try:
        data = r.json()
    except ValueError:
        logger.warning("geolocation_bad_payload", url=url)
        return None
    if not isinstance(data, dict):
        return None

    # ipapi.co uses latitude/longitude, ip-api.com uses lat/lon
    lat = _as_float(data.get("latitude", data.get("lat")))
    lng = _as_float(data.get("longitude", data.get("lon")))
    if lat is None or lng is None:
        logger.warning("geolocation_bad_payload", url=url)
        return None

    return Coords(lat=lat, lng=lng)
