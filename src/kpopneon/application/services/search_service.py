"""src/kpopneon/application/services/search_service.py
What: Per-screen search state and the controller that drives searches.
Why: Keep blank-query rejection, off-thread execution and result
     sequencing out of the presentation layer.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, replace
from typing import Protocol, final

from kpopneon.config.settings import (
    BLANK_QUERY_MESSAGE,
    NO_RESULTS_MESSAGE,
    SEARCH_FAILED_MESSAGE,
)
from kpopneon.features.search import (
    Artist,
    ArtistSearchClient,
    SearchFailure,
    SearchOutcome,
    SearchSuccess,
)
from kpopneon.platform.logging import logger


class ArtistSearcher(Protocol):
    """Anything exposing the ``search(query) -> SearchOutcome`` entry point."""

    def search(self, query: str) -> SearchOutcome:
        ...


@dataclass(frozen=True, slots=True)
class SearchScreenState:
    """Snapshot of what the search screen shows."""

    query: str = ""
    is_loading: bool = False
    error_message: str | None = None
    artists: tuple[Artist, ...] = ()


StateListener = Callable[[SearchScreenState], None]


def is_blank(query: str) -> bool:
    """Return True when ``query`` holds nothing but whitespace."""

    return not query.strip()


@final
class ArtistSearchController:
    """Run searches off the caller's thread and fold outcomes into state.

    Every submission gets a generation number. A result arriving for an
    older generation than the latest submission is dropped, so a slow
    stale request can never overwrite a fresher one. In-flight requests
    are not cancelled.
    """

    def __init__(
        self,
        searcher: ArtistSearcher | None = None,
        *,
        max_workers: int = 1,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self._searcher: ArtistSearcher = searcher or ArtistSearchClient()
        self._owns_executor: bool = executor is None
        self._executor: ThreadPoolExecutor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="kpopneon-search"
        )
        self._lock: threading.Lock = threading.Lock()
        self._state: SearchScreenState = SearchScreenState()
        self._generation: int = 0
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SearchScreenState:
        """Current state snapshot."""

        with self._lock:
            return self._state

    @property
    def generation(self) -> int:
        """Number of searches submitted so far."""

        with self._lock:
            return self._generation

    def add_listener(self, listener: StateListener) -> None:
        """Register ``listener`` to receive every new state snapshot."""

        self._listeners.append(listener)

    def submit(self, query: str) -> Future[SearchOutcome] | None:
        """Start a search for ``query``.

        Returns:
            The pending outcome, or ``None`` when the query is blank and no
            search was issued.
        """
        blank = is_blank(query)
        with self._lock:
            # A rejected query still supersedes whatever is in flight.
            self._generation += 1
            generation = self._generation
            if blank:
                self._state = SearchScreenState(query=query, error_message=BLANK_QUERY_MESSAGE)
            else:
                self._state = SearchScreenState(query=query, is_loading=True)
            snapshot = self._state
        self._notify(snapshot)

        if blank:
            logger.info(
                BLANK_QUERY_MESSAGE,
                extra={"search_event": "search.rejected", "reason": "blank query"},
            )
            return None

        return self._executor.submit(self._run, generation, query.strip())

    def search_blocking(self, query: str) -> SearchScreenState:
        """Submit ``query`` and wait for the resulting state."""

        future = self.submit(query)
        if future is not None:
            _ = future.result()
        return self.state

    def _run(self, generation: int, query: str) -> SearchOutcome:
        try:
            outcome = self._searcher.search(query)
        except Exception as exc:
            logger.error("Search worker raised for '%s': %s", query, exc)
            outcome = SearchFailure(SEARCH_FAILED_MESSAGE)
        self._complete(generation, query, outcome)
        return outcome

    def _complete(self, generation: int, query: str, outcome: SearchOutcome) -> None:
        with self._lock:
            stale = generation != self._generation
            if not stale:
                self._state = self._apply(self._state, outcome)
            snapshot = self._state

        if stale:
            logger.debug(
                "Dropping result of superseded search #%d",
                generation,
                extra={"search_event": "search.stale", "query": query},
            )
            return
        self._notify(snapshot)

    @staticmethod
    def _apply(state: SearchScreenState, outcome: SearchOutcome) -> SearchScreenState:
        match outcome:
            case SearchSuccess(artists=artists):
                return replace(
                    state,
                    is_loading=False,
                    artists=artists,
                    error_message=None if artists else NO_RESULTS_MESSAGE,
                )
            case SearchFailure(message=message):
                return replace(state, is_loading=False, artists=(), error_message=message)

    def _notify(self, state: SearchScreenState) -> None:
        for listener in list(self._listeners):
            listener(state)

    def close(self) -> None:
        """Release the worker pool; pending searches are left to finish."""

        if self._owns_executor:
            self._executor.shutdown(wait=False)

    def __enter__(self) -> "ArtistSearchController":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()


__all__ = [
    "ArtistSearchController",
    "ArtistSearcher",
    "SearchScreenState",
    "StateListener",
    "is_blank",
]
