"""
Incremental list presenter.

States:
    LOADING -> LOADED(results, revealed_count) on a successful fetch
    LOADING -> ERROR(message) on a failed fetch
    any     -> LOADING on a new search

While LOADED, each trigger reveals one more batch until every result is
shown; further triggers are no-ops. Only the response to the most recent
search is applied; older responses that resolve late are discarded.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Awaitable, Callable, List, Optional

from hotel_browser.error_handling import HotelFetchError
from hotel_browser.models import FilterCriteria, Hotel
from .visibility import VisibilityTrigger

logger = logging.getLogger(__name__)


FetchHotels = Callable[[FilterCriteria], Awaitable[List[Hotel]]]


class PresenterStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class PresenterState:
    """Snapshot of what the presenter is showing.

    Attributes:
        status: Current state
        results: Full result set of the latest successful search
        revealed_count: Length of the visible prefix of ``results``
        error: Message shown in place of the list when status is ERROR
    """
    status: PresenterStatus = PresenterStatus.LOADING
    results: List[Hotel] = field(default_factory=list)
    revealed_count: int = 0
    error: Optional[str] = None


class IncrementalListPresenter:
    """Fetches a result set per search and reveals it batch by batch."""

    def __init__(
        self,
        fetch_hotels: FetchHotels,
        batch_size: int = 10,
        trigger: Optional[VisibilityTrigger] = None
    ):
        """Initialize the presenter.

        Args:
            fetch_hotels: Async callable returning the full result set for criteria
            batch_size: Number of results revealed per trigger
            trigger: Visibility trigger driving reveals; one is created if omitted
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be a positive integer, got {batch_size}")

        self.fetch_hotels = fetch_hotels
        self.batch_size = batch_size
        self.trigger = trigger or VisibilityTrigger()
        self.state = PresenterState()
        self._latest_request = 0

        self.trigger.observe(self.reveal_next)

    @property
    def total(self) -> int:
        return len(self.state.results)

    @property
    def visible_hotels(self) -> List[Hotel]:
        return self.state.results[:self.state.revealed_count]

    @property
    def has_more(self) -> bool:
        return (
            self.state.status is PresenterStatus.LOADED
            and self.state.revealed_count < self.total
        )

    async def mount(self) -> PresenterState:
        """Load the unfiltered result set."""
        return await self.submit_search(FilterCriteria())

    async def submit_search(self, criteria: FilterCriteria) -> PresenterState:
        """
        Run a search, replacing any previous results.

        Each call is tagged with a sequence number. When it resolves, the
        outcome is applied only if no newer search was started meanwhile.

        Args:
            criteria: Filters for the search

        Returns:
            The presenter state after this call
        """
        self._latest_request += 1
        request_id = self._latest_request
        self.state = PresenterState(status=PresenterStatus.LOADING)

        try:
            results = await self.fetch_hotels(criteria)
        except HotelFetchError as e:
            if request_id != self._latest_request:
                logger.debug(f"Discarding failure of stale request {request_id}")
                return self.state
            logger.warning(f"Hotel search failed: {e}")
            self.state = PresenterState(status=PresenterStatus.ERROR, error=str(e))
            return self.state

        if request_id != self._latest_request:
            logger.debug(
                f"Discarding stale response {request_id} (latest is {self._latest_request})"
            )
            return self.state

        results = list(results)
        self.state = PresenterState(
            status=PresenterStatus.LOADED,
            results=results,
            revealed_count=min(self.batch_size, len(results))
        )
        return self.state

    def reveal_next(self) -> int:
        """
        Reveal the next batch of results.

        Does nothing unless LOADED with results still hidden.

        Returns:
            Number of results now visible
        """
        if not self.has_more:
            return self.state.revealed_count

        revealed = min(self.state.revealed_count + self.batch_size, self.total)
        self.state = replace(self.state, revealed_count=revealed)
        return revealed

    def teardown(self) -> None:
        """Release the visibility trigger."""
        self.trigger.disconnect()
