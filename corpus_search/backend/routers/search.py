"""
Search API router: one POST endpoint per collection.
"""

from typing import Awaitable, Callable

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from ...schema.search import SearchRequest
from ...search.collections import COLLECTIONS, Collection
from ...search.search_service import SearchService

router = APIRouter(tags=["search"])


def get_search_service(request: Request) -> SearchService:
    """Get the search service instance attached to the application."""
    service = getattr(request.app.state, "search_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Search service not initialized")
    return service


def _make_search_endpoint(collection: Collection) -> Callable[..., Awaitable[Response]]:
    async def search(body: SearchRequest, service: SearchService = Depends(get_search_service)) -> Response:
        payload = await service.run(collection, body)
        return Response(content=payload, media_type="application/json")

    search.__name__ = f"search_{collection.name.lower()}"
    return search


for _collection, _spec in COLLECTIONS.items():
    router.add_api_route(
        f"/{_collection.value}",
        _make_search_endpoint(_collection),
        methods=["POST"],
        summary=f"Neural search over {_collection.value}",
        description=f"Runs a k-NN search on the `{_spec.vector_field}` field of `{_spec.index_name}`.",
        response_class=Response,
    )
