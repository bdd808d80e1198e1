import pytest

from searchserver.document import DocumentStatus
from searchserver.request_queue import SEC_IN_DAY, RequestQueue
from searchserver.search_server import SearchServer


@pytest.fixture
def server():
    search_server = SearchServer("и в на")
    search_server.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7])
    search_server.add_document(2, "пушистый пёс и модный ошейник", DocumentStatus.ACTUAL, [1, 2, 3])
    search_server.add_document(3, "большой кот модный ошейник ", DocumentStatus.ACTUAL, [1, 2, 8])
    search_server.add_document(4, "большой пёс скворец евгений", DocumentStatus.ACTUAL, [1, 3, 2])
    search_server.add_document(5, "большой пёс скворец василий", DocumentStatus.ACTUAL, [1, 1, 1])
    search_server.add_document(6, "пушистый скворец", DocumentStatus.BANNED, [5])
    return search_server


def test_results_match_server(server):
    queue = RequestQueue(server)
    assert queue.add_find_request("пушистый пёс") == server.find_top_documents("пушистый пёс")


def test_empty_result_is_counted(server):
    queue = RequestQueue(server)
    assert queue.add_find_request("пустой запрос") == []
    assert queue.no_result_requests() == 1


def test_non_empty_result_is_not_counted(server):
    queue = RequestQueue(server)
    assert queue.add_find_request("скворец")
    assert queue.no_result_requests() == 0


def test_worked_example_from_source(server):
    queue = RequestQueue(server)
    for _ in range(1439):
        queue.add_find_request("пустой запрос")
    assert queue.no_result_requests() == 1439
    queue.add_find_request("пушистый пёс")
    assert queue.no_result_requests() == 1439
    queue.add_find_request("большой ошейник")
    assert queue.no_result_requests() == 1438
    queue.add_find_request("скворец")
    assert queue.no_result_requests() == 1437


def test_count_never_exceeds_window(server):
    queue = RequestQueue(server)
    for _ in range(SEC_IN_DAY + 300):
        queue.add_find_request("пустой запрос")
        assert queue.no_result_requests() <= SEC_IN_DAY
    assert queue.no_result_requests() == SEC_IN_DAY


def test_old_successful_request_leaves_window(server):
    queue = RequestQueue(server)
    queue.add_find_request("скворец")
    for _ in range(SEC_IN_DAY):
        queue.add_find_request("пустой запрос")
    assert queue.no_result_requests() == SEC_IN_DAY


def test_status_criterion(server):
    queue = RequestQueue(server)
    found = queue.add_find_request("скворец", DocumentStatus.BANNED)
    assert [document.id for document in found] == [6]
    assert queue.no_result_requests() == 0


def test_predicate_criterion(server):
    queue = RequestQueue(server)
    found = queue.add_find_request("большой", lambda doc_id, status, rating: doc_id == 4)
    assert [document.id for document in found] == [4]
    assert queue.add_find_request("большой", lambda doc_id, status, rating: False) == []
    assert queue.no_result_requests() == 1


def test_invalid_query_raises_and_is_not_counted(server):
    queue = RequestQueue(server)
    with pytest.raises(ValueError):
        queue.add_find_request("--кот")
    assert queue.no_result_requests() == 0