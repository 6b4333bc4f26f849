"""
Custom exceptions for the search service.
"""

from typing import Optional


class SearchServiceException(Exception):
    """Base exception for all search-related errors."""

    pass


class BackendError(SearchServiceException):
    """The search engine call failed or returned something unusable."""

    pass


class OpenSearchException(BackendError):
    """OpenSearch transport or protocol errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseShapeException(BackendError):
    """The search response has no usable `hits.hits` array."""

    pass


class SerializationError(SearchServiceException):
    """Processed hits could not be encoded as JSON."""

    pass


class ConfigurationException(SearchServiceException):
    """Configuration-related errors."""

    pass
