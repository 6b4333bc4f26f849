"""
OpenSearch client for running searches against the collection indices.
"""

import asyncio
import json
from typing import Any, Dict, Optional

import aiohttp

from ..utils.logging import get_logger
from .config import OpenSearchConfig
from .exceptions import OpenSearchException

logger = get_logger(__name__)


class OpenSearchClient:
    """
    Async OpenSearch client for search operations.
    """

    def __init__(self, config: OpenSearchConfig):
        self.config = config
        self.base_url = config.endpoint.rstrip("/")
        self.session: Optional[aiohttp.ClientSession] = None

        # Prepare auth
        self.auth = None
        if config.username and config.password:
            self.auth = aiohttp.BasicAuth(config.username, config.password)

        if not config.verify_certs:
            logger.warning("opensearch_tls_verification_disabled", endpoint=self.base_url)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            # ssl=False skips certificate verification; None keeps aiohttp's default checks
            connector = aiohttp.TCPConnector(ssl=None if self.config.verify_certs else False)
            self.session = aiohttp.ClientSession(timeout=timeout, connector=connector, auth=self.auth)
        return self.session

    async def close(self):
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()

    async def ping(self) -> bool:
        """Check that the cluster root answers."""
        try:
            session = await self._get_session()
            async with session.get(f"{self.base_url}/") as response:
                return response.status == 200
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("opensearch_ping_failed", endpoint=self.base_url, error=str(e))
            return False

    async def health_check(self) -> bool:
        """Check if OpenSearch is accessible."""
        try:
            session = await self._get_session()
            async with session.get(f"{self.base_url}/_cluster/health") as response:
                if response.status == 200:
                    data = await response.json()
                    return data.get("status") in ["green", "yellow"]
                return False
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error("opensearch_health_check_failed", endpoint=self.base_url, error=str(e))
            return False

    async def search(self, index: str, search_body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute a search against `index` and return the decoded response.

        Raises:
            OpenSearchException: on transport errors, timeouts, non-200
                responses or a body that is not a JSON object
        """
        search_url = f"{self.base_url}/{index}/_search"
        try:
            session = await self._get_session()
            async with session.post(search_url, json=search_body) as response:
                if response.status != 200:
                    error_text = await response.text()
                    raise OpenSearchException(
                        f"Search on {index} failed: {response.status} - {error_text}", status_code=response.status
                    )
                text = await response.text()
        except asyncio.TimeoutError as e:
            raise OpenSearchException(f"Search on {index} timed out after {self.config.timeout}s") from e
        except aiohttp.ClientError as e:
            raise OpenSearchException(f"Search on {index} failed: {e}") from e

        try:
            data = json.loads(text)
        except ValueError as e:
            raise OpenSearchException(f"Search on {index} returned invalid JSON: {e}", status_code=200) from e

        if not isinstance(data, dict):
            raise OpenSearchException(f"Search on {index} returned a non-object response", status_code=200)
        return data
