"""
Neural query construction.
"""

from typing import Any, Dict

from .collections import CollectionSpec


def build_query(spec: CollectionSpec, query: str, size: int, k: int, model_id: str) -> Dict[str, Any]:
    """
    Build the OpenSearch request body for a neural search on one collection.

    The query text is placed in the body as a value, never spliced into JSON
    text, so quotes and control characters in it stay inside the string.

    Args:
        spec: Collection to search
        query: Free text to embed and search with
        size: Maximum number of hits to return
        k: Number of nearest neighbours to consider

    Returns:
        Request body ready to be sent as JSON
    """
    return {
        # Don't return large embedding vectors
        "_source": {"excludes": [spec.vector_field]},
        "query": {
            "neural": {
                spec.vector_field: {
                    "query_text": query,
                    "model_id": model_id,
                    "k": k,
                }
            }
        },
        "size": size,
    }
