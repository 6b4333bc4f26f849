"""
The fixed table of searchable collections.

Adding a collection means adding a `Collection` member and one
`CollectionSpec` entry below; routing, querying and formatting all read
from this table.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .formatters import (
    Formatter,
    format_arabic_books,
    format_arabic_poems,
    format_dutch_text,
    format_indian_lit,
    format_legal_text,
    format_libertarian_chunks,
    identity_formatter,
)


class Collection(str, Enum):
    ARABIC_POEMS = "arabic-poems"
    CLEANED_DUTCHTEXT = "cleaned-dutchtext"
    CLEANED_ARABICBOOKS = "cleaned-arabicbooks"
    LIBERTARIAN_CHUNKS = "libertarian-chunks"
    LEGALTEXT = "legaltext"
    INDIAN_LIT = "indian-lit"
    LOC = "loc"
    OPENALEX = "openalex"


@dataclass(frozen=True)
class CollectionSpec:
    """How one collection is queried and displayed."""

    collection: Collection
    index_name: str
    vector_field: str
    formatter: Formatter


def _spec(collection: Collection, vector_field: str, formatter: Formatter) -> CollectionSpec:
    return CollectionSpec(
        collection=collection,
        index_name=f"{collection.value}-index",
        vector_field=vector_field,
        formatter=formatter,
    )


COLLECTIONS: Mapping[Collection, CollectionSpec] = MappingProxyType(
    {
        spec.collection: spec
        for spec in (
            _spec(Collection.ARABIC_POEMS, "interpretation_embedding", format_arabic_poems),
            _spec(Collection.CLEANED_DUTCHTEXT, "Raw_Response_embedding", format_dutch_text),
            _spec(Collection.CLEANED_ARABICBOOKS, "Raw_Response_embedding", format_arabic_books),
            _spec(Collection.LIBERTARIAN_CHUNKS, "text_embedding", format_libertarian_chunks),
            _spec(Collection.LEGALTEXT, "explanation_embedding", format_legal_text),
            _spec(Collection.INDIAN_LIT, "interpretation_embedding", format_indian_lit),
            _spec(Collection.LOC, "text_embedding", identity_formatter),
            _spec(Collection.OPENALEX, "abstract_embedding", identity_formatter),
        )
    }
)


def get_collection_spec(collection: Collection) -> CollectionSpec:
    """Look up the table entry for `collection`."""
    return COLLECTIONS[Collection(collection)]
