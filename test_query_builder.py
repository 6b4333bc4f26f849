"""Tests for neural query construction."""

import json

from corpus_search.search.collections import Collection, get_collection_spec
from corpus_search.search.query_builder import build_query


def test_build_query_shape():
    spec = get_collection_spec(Collection.ARABIC_POEMS)
    body = build_query(spec, "love and exile", size=5, k=20, model_id="m-1")

    assert body == {
        "_source": {"excludes": ["interpretation_embedding"]},
        "query": {
            "neural": {
                "interpretation_embedding": {"query_text": "love and exile", "model_id": "m-1", "k": 20},
            }
        },
        "size": 5,
    }


def test_build_query_uses_collection_vector_field():
    spec = get_collection_spec(Collection.CLEANED_DUTCHTEXT)
    body = build_query(spec, "q", size=1, k=1, model_id="m")

    assert body["_source"]["excludes"] == ["Raw_Response_embedding"]
    assert list(body["query"]["neural"]) == ["Raw_Response_embedding"]


def test_query_text_is_not_spliced():
    """Quotes and braces in the query stay inside the query_text value."""
    hostile = '"}, "size": 10000, "x": {"'
    spec = get_collection_spec(Collection.LEGALTEXT)
    body = build_query(spec, hostile, size=3, k=4, model_id="m")

    decoded = json.loads(json.dumps(body))
    assert decoded["size"] == 3
    assert decoded["query"]["neural"]["explanation_embedding"]["query_text"] == hostile
    assert set(decoded) == {"_source", "query", "size"}


def test_zero_size_and_k_pass_through():
    spec = get_collection_spec(Collection.OPENALEX)
    body = build_query(spec, "q", size=0, k=0, model_id="m")
    assert body["size"] == 0
    assert body["query"]["neural"]["abstract_embedding"]["k"] == 0
