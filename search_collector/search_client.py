import requests
from typing import Callable, Dict, List, Optional, Protocol, Tuple, Union, runtime_checkable
from urllib.parse import quote, urlencode

from pydantic import ValidationError

from .config import REQUEST_TIMEOUT, SEARCH_API_URL
from .models import SearchResponse


class MalformedResponseError(ValueError):
    """The body was not JSON or did not have the shape of a search page."""


@runtime_checkable
class SearchClientProtocol(Protocol):
    def search(self, query: str, page: int = 1) -> SearchResponse: ...


class SearchClient:
    """
    Client for the product search endpoint.

    Endpoint location:
      - Environment variable: SEARCH_API_URL
    """
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url or SEARCH_API_URL
        if not self.base_url:
            raise RuntimeError("Missing SEARCH_API_URL env var")
        self.timeout = timeout
        self.session = session or requests.Session()

    def build_url(self, query: str, page: int) -> str:
        # quote, not quote_plus: spaces go out as %20
        params = urlencode({"query": query, "page": page}, quote_via=quote)
        return f"{self.base_url}?{params}"

    def search(self, query: str, page: int = 1) -> SearchResponse:
        r = self.session.get(self.build_url(query, page), timeout=self.timeout)
        r.raise_for_status()
        try:
            payload = r.json()
        except ValueError as e:
            raise MalformedResponseError(f"response is not JSON: {e}") from e
        try:
            return SearchResponse.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(f"unexpected response shape: {e}") from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "SearchClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


PageOrError = Union[SearchResponse, Exception]


class FakeSearchClient:
    """Test double for SearchClient.

    Pages are scripted per query; pages past the end of a script come back empty.
    A ``factory(query, page)`` can be given instead for unbounded scripts.
    """

    def __init__(
        self,
        pages: Optional[Dict[str, List[PageOrError]]] = None,
        factory: Optional[Callable[[str, int], PageOrError]] = None,
    ):
        self._pages = pages or {}
        self._factory = factory
        self.calls: List[Tuple[str, int]] = []

    def search(self, query: str, page: int = 1) -> SearchResponse:
        self.calls.append((query, page))
        if self._factory is not None:
            result = self._factory(query, page)
        else:
            script = self._pages.get(query, [])
            result = script[page - 1] if page <= len(script) else SearchResponse(results=[])
        if isinstance(result, Exception):
            raise result
        return result
