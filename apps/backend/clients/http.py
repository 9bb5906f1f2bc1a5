import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Generic async HTTP client with a configurable timeout.

    Designed to be injected into API-specific clients (BsaleBaseClient) so
    that transport concerns are handled in one place. It does not retry:
    wrap calls with retry_with_backoff where a retry makes sense.

    Args:
        base_url: Base URL prepended to all request paths.
        client: Optional pre-configured httpx.AsyncClient. If provided, timeout
                configuration is skipped and the caller is responsible. Useful for tests.
        timeout: Timeout in seconds for each phase: connect, read, write, pool (default: 30).
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict | None = None,
        json: Any = None,
    ) -> Any:
        """
        Executes an async HTTP request and returns the parsed JSON response.

        Returns None on 204 No Content without touching the body.
        Raises httpx.HTTPStatusError for non-2xx responses; the response is
        attached to the exception for classification by the caller.
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = await self._client.request(
                method.upper(),
                url,
                headers=headers,
                json=json,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # Callers classify and log status errors with their own context.
            logger.debug("HTTP %s %s returned %d", method.upper(), url, e.response.status_code)
            raise
        except httpx.HTTPError as e:
            logger.error("HTTP %s %s failed: %s", method.upper(), url, e)
            raise
        if response.status_code == 204:
            return None
        return response.json()

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request("POST", path, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()
