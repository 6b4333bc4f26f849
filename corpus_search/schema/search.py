from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_serializer

# Values found in a hit's `_source`: strings, numbers and nulls. Anything else
# the engine sends is carried through untouched.
Source = Dict[str, Any]

# Optional parts of the hit envelope, kept only when present in the response
ENVELOPE_FIELDS = ("index", "score")


class SearchRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    query: StrictStr = Field(..., min_length=1)
    size: StrictInt = Field(10, ge=0)
    k: StrictInt = Field(10, ge=0)


class RawHit(BaseModel):
    """One element of the engine's `hits.hits` array."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    source: Source = Field(default_factory=dict, alias="_source")
    index: Optional[str] = Field(None, alias="_index")
    score: Optional[float] = Field(None, alias="_score")

    @model_serializer(mode="wrap")
    def drop_missing_envelope_fields(self, handler: Any) -> Dict[str, Any]:
        # _index and _score are only written back when the engine sent them
        data = handler(self)
        for name in ENVELOPE_FIELDS:
            if name not in self.model_fields_set:
                data.pop(name, None)
                data.pop(f"_{name}", None)
        return data


class ProcessedHit(RawHit):
    """A hit whose source carries the derived display fields and id suffixes."""

    pass
