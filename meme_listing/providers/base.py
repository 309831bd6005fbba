"""Base classes for market-data providers."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import httpx

from ..core.exceptions import DataSourceError
from ..core.types import DataSource

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """Abstract base class for HTTP data providers."""

    # Subclasses must define their data source
    SOURCE: DataSource = DataSource.UNKNOWN

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize provider.

        Args:
            base_url: API root, without trailing slash
            timeout: Request timeout in seconds (None waits indefinitely)
            transport: Optional httpx transport, used to fake the provider in tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        """Create a short-lived HTTP client for one request."""
        return httpx.Client(timeout=self.timeout, transport=self._transport)

    def _make_request(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        GET an endpoint and decode its JSON body.

        Error messages carry the endpoint path only; the full URL may hold
        credentials in its query string.

        Raises:
            DataSourceError: On transport failure, non-2xx status or invalid JSON
        """
        source = self.SOURCE.value
        url = f"{self.base_url}{endpoint}"
        start_time = time.time()

        try:
            with self._client() as client:
                response = client.get(url, params=params, headers=headers)

            duration_ms = int((time.time() - start_time) * 1000)
            logger.debug(
                f"[{source}] GET {endpoint} -> {response.status_code} ({duration_ms}ms)"
            )

            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            raise DataSourceError(
                source=source,
                message=f"HTTP {e.response.status_code}",
                endpoint=endpoint,
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise DataSourceError(
                source=source,
                message=f"Request failed ({type(e).__name__})",
                endpoint=endpoint,
            ) from e
        except ValueError as e:
            raise DataSourceError(
                source=source,
                message="Invalid JSON response",
                endpoint=endpoint,
            ) from e

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is reachable."""
        pass
