"""
Application state for the lead finder UI.

One AppState per user session, owned by the presentation layer and passed
around explicitly. Status moves idle -> searching -> success | error; a new
search (or "load more") moves it back to searching.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from .config import config
from .errors import LeadScraperError
from .io import merge_leads
from .logging import get_logger
from .search import find_leads
from .types import Coords, LeadRecord, SearchRequest

logger = get_logger(__name__)

MSG_MISSING_INPUT = "Por favor ingresa el tipo de negocio y la ubicación."
MSG_NO_RESULTS = "No se encontraron resultados para esta búsqueda en {country}."
MSG_SERVICE_ERROR = "Error al conectar con el servicio de búsqueda. Por favor intenta de nuevo."


class Status(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class AppState:
    business_type: str = ""
    location: str = ""
    country: str = field(default_factory=lambda: config.LEADS_COUNTRY)
    status: Status = Status.IDLE
    leads: list[LeadRecord] = field(default_factory=list)
    error: Optional[str] = None
    coords: Optional[Coords] = None
    last_request: Optional[SearchRequest] = None

    @property
    def is_searching(self) -> bool:
        return self.status == Status.SEARCHING

    @property
    def can_load_more(self) -> bool:
        return bool(self.leads) and not self.is_searching

    @property
    def can_download(self) -> bool:
        return bool(self.leads) and not self.is_searching

    def reset(self) -> None:
        self.status = Status.IDLE
        self.leads = []
        self.error = None
        self.last_request = None

    def begin_search(self, more: bool = False) -> Optional[SearchRequest]:
        """
        Validate the form and move to SEARCHING.
        Returns the request to run, or None if the input is incomplete.
        """
        if not self.business_type.strip() or not self.location.strip():
            self.status = Status.ERROR
            self.error = MSG_MISSING_INPUT
            return None

        self.status = Status.SEARCHING
        self.error = None
        if not more:
            self.leads = []

        self.last_request = SearchRequest(
            business_type=self.business_type.strip(),
            location=self.location.strip(),
            country=self.country,
            coords=self.coords,
        )
        return self.last_request

    def complete(self, new_leads: list[LeadRecord], more: bool = False) -> None:
        if not new_leads:
            # keep whatever was already on screen after a fruitless "load more"
            self.status = Status.ERROR
            self.error = MSG_NO_RESULTS.format(country=self.country)
            return

        self.leads = merge_leads(self.leads, new_leads) if more else list(new_leads)
        self.status = Status.SUCCESS
        self.error = None

    def fail(self, error: Exception) -> None:
        logger.error("search_failed", error=str(error), error_type=type(error).__name__)
        self.status = Status.ERROR
        self.error = MSG_SERVICE_ERROR


Finder = Callable[..., list[LeadRecord]]


def run_search(state: AppState, more: bool = False, finder: Finder = find_leads) -> AppState:
    """Run one search round-trip and record the outcome on `state`."""
    request = state.begin_search(more=more)
    if request is None:
        return state

    try:
        # fresh answers for "load more", cached ones for a repeated first search
        new_leads = finder(request, more=more, use_cache=not more)
    except LeadScraperError as e:
        state.fail(e)
        return state
    except Exception as e:
        # never leave the UI stuck in SEARCHING
        state.fail(e)
        raise

    state.complete(new_leads, more=more)
    logger.info("search_completed", status=state.status.value, total=len(state.leads), more=more)
    return state
