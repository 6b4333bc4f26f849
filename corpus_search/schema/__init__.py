from .common import HealthStatus
from .search import ProcessedHit, RawHit, SearchRequest, Source

__all__ = [
    # common
    "HealthStatus",
    # search
    "SearchRequest",
    "RawHit",
    "ProcessedHit",
    "Source",
]
