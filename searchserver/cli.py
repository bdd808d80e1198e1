"""Demonstration run of the search server and its request queue."""

import argparse
from collections.abc import Sequence

from searchserver.document import DocumentStatus
from searchserver.request_queue import RequestQueue
from searchserver.search_server import SearchServer


def main(argv: Sequence[str] | None = None) -> int:
    """Index sample documents, replay a day of queries and report empty ones."""
    parser = argparse.ArgumentParser(
        prog="searchserver",
        description="Count recent search requests that found nothing.",
    )
    parser.parse_args(argv)

    search_server = SearchServer("и в на")
    request_queue = RequestQueue(search_server)

    search_server.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7])
    search_server.add_document(2, "пушистый пёс и модный ошейник", DocumentStatus.ACTUAL, [1, 2, 3])
    search_server.add_document(3, "большой кот модный ошейник ", DocumentStatus.ACTUAL, [1, 2, 8])
    search_server.add_document(4, "большой пёс скворец евгений", DocumentStatus.ACTUAL, [1, 3, 2])
    search_server.add_document(5, "большой пёс скворец василий", DocumentStatus.ACTUAL, [1, 1, 1])

    for _ in range(1439):
        request_queue.add_find_request("пустой запрос")
    request_queue.add_find_request("пушистый пёс")
    request_queue.add_find_request("большой ошейник")
    request_queue.add_find_request("скворец")

    print(f"Запросов, по которым ничего не нашлось {request_queue.no_result_requests()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())