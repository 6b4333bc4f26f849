"""Shared fixtures: a stand-in OpenSearch client and a service wired to it."""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from corpus_search.search.config import SearchServiceConfig
from corpus_search.search.search_service import SearchService


def make_response(*hits: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "took": 3,
        "timed_out": False,
        "hits": {"total": {"value": len(hits), "relation": "eq"}, "max_score": 1.0, "hits": list(hits)},
    }


def make_hit(doc_id: str, source: Dict[str, Any], score: float = 1.0, index: str = "arabic-poems-index"):
    return {"_index": index, "_id": doc_id, "_score": score, "_source": source}


class FakeOpenSearchClient:
    def __init__(self, response: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.response = response if response is not None else make_response()
        self.error = error
        self.healthy = True
        self.reachable = True
        self.closed = False
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def search(self, index: str, search_body: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append((index, search_body))
        if self.error is not None:
            raise self.error
        return self.response

    async def ping(self) -> bool:
        return self.reachable

    async def health_check(self) -> bool:
        return self.healthy

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_client() -> FakeOpenSearchClient:
    return FakeOpenSearchClient()


@pytest.fixture
def service(fake_client: FakeOpenSearchClient) -> SearchService:
    return SearchService(SearchServiceConfig(model_id="test-model"), client=fake_client)
