"""Tests for the HTTP search client and its fake."""
from unittest.mock import MagicMock

import pytest
import requests

from search_collector.models import SearchResponse
from search_collector.search_client import (
    FakeSearchClient,
    MalformedResponseError,
    SearchClient,
    SearchClientProtocol,
)
from tests.factories import item_payload, make_page, page_payload

BASE = "http://localhost:8787/api/in/search"


def _client_with_response(response):
    session = MagicMock(spec=requests.Session)
    session.get.return_value = response
    return SearchClient(base_url=BASE, timeout=5, session=session), session


def _response(status=200, payload=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


class TestSearchClient:
    def test_implements_protocol(self):
        client, _ = _client_with_response(_response(payload={}))
        assert isinstance(client, SearchClientProtocol)

    def test_query_is_percent_encoded(self):
        client, _ = _client_with_response(_response(payload={}))
        url = client.build_url("samsung galaxy s24 & case/cover", 3)
        assert url == f"{BASE}?query=samsung%20galaxy%20s24%20%26%20case%2Fcover&page=3"

    def test_search_parses_page(self):
        client, session = _client_with_response(_response(payload=page_payload([item_payload()], next_page=None)))
        resp = client.search("phone", 1)
        assert isinstance(resp, SearchResponse)
        assert len(resp.results) == 1
        assert resp.has_next_page is False
        session.get.assert_called_once_with(f"{BASE}?query=phone&page=1", timeout=5)

    def test_http_error_propagates(self):
        client, _ = _client_with_response(_response(status=503))
        with pytest.raises(requests.HTTPError):
            client.search("phone", 1)

    def test_non_json_body(self):
        client, _ = _client_with_response(_response(json_error=ValueError("Expecting value")))
        with pytest.raises(MalformedResponseError):
            client.search("phone", 1)

    def test_wrong_shape(self):
        client, _ = _client_with_response(_response(payload={"results": [{"title": "only a title"}]}))
        with pytest.raises(MalformedResponseError):
            client.search("phone", 1)

    def test_infinite_price_is_malformed(self):
        payload = page_payload([item_payload(price=float("inf"))])
        client, _ = _client_with_response(_response(payload=payload))
        with pytest.raises(MalformedResponseError):
            client.search("phone", 1)

    def test_context_manager_closes_session(self):
        client, session = _client_with_response(_response(payload={}))
        with client:
            pass
        session.close.assert_called_once()


class TestFakeSearchClient:
    def test_implements_protocol(self):
        assert isinstance(FakeSearchClient(), SearchClientProtocol)

    def test_scripted_pages_then_empty(self):
        page = make_page(2)
        client = FakeSearchClient(pages={"phone": [page]})
        assert client.search("phone", 1) is page
        assert client.search("phone", 2).results == []
        assert client.calls == [("phone", 1), ("phone", 2)]

    def test_scripted_error_is_raised(self):
        client = FakeSearchClient(pages={"phone": [requests.ConnectionError("down")]})
        with pytest.raises(requests.ConnectionError):
            client.search("phone", 1)
