"""
Post-processing of search hits: display formatting, id suffixing and JSON encoding.
"""

from typing import List, Sequence

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from ..schema.search import ENVELOPE_FIELDS, ProcessedHit, RawHit, Source
from .collections import Collection, get_collection_spec
from .exceptions import SerializationError
from .formatters import Formatter

RESULTS_ID = "Results_id"

_processed_hits_adapter = TypeAdapter(List[ProcessedHit])


def suffix_strings(source: Source, token: str) -> Source:
    """Append a tab and `token` to every string value of `source`, in place."""
    for key, value in source.items():
        if isinstance(value, str):
            source[key] = f"{value}\t{token}"
    return source


def process_hit(hit: RawHit, formatter: Formatter) -> ProcessedHit:
    """
    Format one hit and tag its string fields with the hit id.

    The returned hit owns a fresh copy of the source; `hit` is left as it was.
    Formatting runs before suffixing so derived fields are built from the
    original values.
    """
    source = formatter(dict(hit.source))
    source[RESULTS_ID] = hit.id
    suffix_strings(source, hit.id)
    envelope = {f"_{name}": getattr(hit, name) for name in ENVELOPE_FIELDS if name in hit.model_fields_set}
    return ProcessedHit(_id=hit.id, _source=source, **envelope)


def process_hits(hits: Sequence[RawHit], collection: Collection) -> List[ProcessedHit]:
    """Process every hit with the collection's formatter, keeping engine order."""
    formatter = get_collection_spec(collection).formatter
    return [process_hit(hit, formatter) for hit in hits]


def serialize(hits: Sequence[ProcessedHit]) -> bytes:
    """
    Encode processed hits as a JSON array in the engine's hit envelope shape.

    Raises:
        SerializationError: if a field value cannot be represented in JSON
    """
    try:
        return _processed_hits_adapter.dump_json(list(hits), by_alias=True)
    except (PydanticSerializationError, ValueError) as e:
        raise SerializationError(f"Failed to serialize search results: {e}") from e
