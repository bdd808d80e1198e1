"""Tracking search requests over a sliding window of one day."""

from collections import deque
from dataclasses import dataclass

from searchserver.document import Document, DocumentStatus
from searchserver.search_server import DocumentPredicate, SearchServer

SEC_IN_DAY = 1440


@dataclass(frozen=True)
class _QueryResult:
    timestamp: int
    results: int


class RequestQueue:
    """Forwards queries to a server and counts recent ones that found nothing.

    Each request advances the clock by one tick; requests older than
    ``SEC_IN_DAY`` ticks fall out of the window.
    """

    def __init__(self, search_server: SearchServer) -> None:
        self._search_server = search_server
        self._requests: deque[_QueryResult] = deque()
        self._no_results_requests = 0
        self._current_time = 0

    def add_find_request(
        self,
        raw_query: str,
        criterion: DocumentStatus | DocumentPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """Run the query on the server, record it and return its results."""
        result = self._search_server.find_top_documents(raw_query, criterion)
        self._add_request(len(result))
        return result

    def no_result_requests(self) -> int:
        """Number of requests in the current window that returned nothing."""
        return self._no_results_requests

    def _add_request(self, results_num: int) -> None:
        self._current_time += 1
        while (
            self._requests
            and self._current_time - self._requests[0].timestamp >= SEC_IN_DAY
        ):
            if self._requests.popleft().results == 0:
                self._no_results_requests -= 1
        self._requests.append(_QueryResult(self._current_time, results_num))
        if results_num == 0:
            self._no_results_requests += 1