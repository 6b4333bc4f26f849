"""
Main search service running neural searches against the collection indices.
"""

import time
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..schema.search import RawHit, SearchRequest
from ..utils.logging import get_logger, log_search_event
from .collections import Collection, get_collection_spec
from .config import SearchServiceConfig
from .exceptions import ConfigurationException, ResponseShapeException, SearchServiceException
from .opensearch_client import OpenSearchClient
from .postprocess import process_hits, serialize
from .query_builder import build_query

logger = get_logger(__name__)


def extract_hits(response: Dict[str, Any]) -> List[RawHit]:
    """
    Unwrap the ranked hits from a search response envelope.

    Raises:
        ResponseShapeException: if `hits.hits` is missing or not a list, or a
            hit lacks a string `_id` or an object `_source`
    """
    hits_envelope = response.get("hits")
    if not isinstance(hits_envelope, dict):
        raise ResponseShapeException("Search response has no 'hits' object")

    raw_hits = hits_envelope.get("hits")
    if not isinstance(raw_hits, list):
        raise ResponseShapeException("Search response has no 'hits.hits' array")

    hits: List[RawHit] = []
    for position, raw_hit in enumerate(raw_hits):
        if not isinstance(raw_hit, dict) or not isinstance(raw_hit.get("_id"), str):
            raise ResponseShapeException(f"Hit {position} has no string '_id'")
        if not isinstance(raw_hit.get("_source"), dict):
            raise ResponseShapeException(f"Hit {position} has no object '_source'")
        try:
            hits.append(RawHit.model_validate(raw_hit))
        except ValidationError as e:
            raise ResponseShapeException(f"Hit {position} is malformed: {e}") from e
    return hits


class SearchService:
    """
    Neural search over the fixed collection table.
    """

    def __init__(self, config: SearchServiceConfig, client: Optional[OpenSearchClient] = None):
        self.config = config
        self.opensearch_client = client or OpenSearchClient(config.opensearch_config)

    async def start(self):
        """
        Check the cluster is reachable before serving traffic.

        Raises:
            ConfigurationException: if the cluster does not answer and
                `fail_fast` is set
        """
        endpoint = self.config.opensearch_config.endpoint
        if await self.opensearch_client.ping():
            logger.info("opensearch_connected", endpoint=endpoint)
            return

        if self.config.fail_fast:
            raise ConfigurationException(f"OpenSearch at {endpoint} is not reachable")
        logger.warning("opensearch_unreachable_at_startup", endpoint=endpoint)

    async def search(self, collection: Collection, request: SearchRequest) -> List[RawHit]:
        """
        Run a neural search on one collection.

        Args:
            collection: Collection to search
            request: Query text and result counts

        Returns:
            Hits in the order the engine ranked them
        """
        spec = get_collection_spec(collection)
        body = build_query(spec, request.query, request.size, request.k, self.config.model_id)
        response = await self.opensearch_client.search(spec.index_name, body)
        return extract_hits(response)

    async def run(self, collection: Collection, request: SearchRequest) -> bytes:
        """Search, format and serialize; returns the JSON response body."""
        started = time.perf_counter()
        try:
            hits = await self.search(collection, request)
            body = serialize(process_hits(hits, collection))
        except SearchServiceException as e:
            log_search_event(
                logger,
                "search_failed",
                collection.value,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        log_search_event(
            logger,
            "search_completed",
            collection.value,
            size=request.size,
            k=request.k,
            hits=len(hits),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return body

    async def health_check(self) -> bool:
        """Check if search service is healthy."""
        return await self.opensearch_client.health_check()

    async def close(self):
        """Close the search service and clean up resources."""
        if self.opensearch_client:
            await self.opensearch_client.close()
