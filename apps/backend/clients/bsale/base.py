import asyncio
import json
import logging
from dataclasses import replace
from typing import Any

import httpx

from apps.backend.clients.bsale.config import BsaleConfig, BsaleCredentials
from apps.backend.clients.bsale.errors import (
    BsaleAPIError,
    BsaleAuthenticationError,
    BsaleAuthorizationError,
    BsaleError,
    BsaleNetworkError,
    BsaleNotFoundError,
    BsaleRateLimitError,
    BsaleValidationError,
    ErrorEnvelope,
)
from apps.backend.clients.bsale.query import build_query_string
from apps.backend.clients.http import HttpClient

logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "access_token"


def _parse_envelope(response: httpx.Response) -> ErrorEnvelope | None:
    try:
        text = response.text
        data = json.loads(text) if text else None
    except ValueError:
        # Non-JSON error bodies are classified by status code alone.
        return None
    return data if isinstance(data, dict) else None


def _parse_retry_after(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def classify_error_response(response: httpx.Response) -> BsaleError:
    """Maps a non-2xx response to the matching BsaleError subclass."""
    status_code = response.status_code
    envelope = _parse_envelope(response)
    message = (envelope or {}).get("message") or response.reason_phrase or "API request failed"

    if status_code == 401:
        return BsaleAuthenticationError(message)
    if status_code == 403:
        return BsaleAuthorizationError(message)
    if status_code == 404:
        return BsaleNotFoundError(message)
    if status_code in (400, 422):
        return BsaleValidationError(message, (envelope or {}).get("errors"))
    if status_code == 429:
        return BsaleRateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
    return BsaleAPIError(message, status_code, envelope)


class BsaleBaseClient:
    """
    Authenticated request engine shared by every Bsale resource client.

    Owns the credentials and the per-request timeout. Every call checks token
    expiry before any I/O, sends the access token header and maps failures
    onto the BsaleError hierarchy. It does not refresh tokens or retry.

    Args:
        config: Base URL, credentials and timeout.
        http: Optional HttpClient. One pointed at config.base_url is created
              if omitted. Useful for tests.
    """

    def __init__(self, config: BsaleConfig, http: HttpClient | None = None):
        self.base_url = config.base_url
        self.timeout_ms = config.timeout_ms
        self._credentials = replace(config.credentials)
        self._http = http or HttpClient(config.base_url, timeout=config.timeout_ms / 1000)

    def update_credentials(self, credentials: BsaleCredentials) -> None:
        """Replaces the credentials, e.g. after a token refresh. Expiry is not checked here."""
        self._credentials = replace(credentials)

    def get_credentials(self) -> BsaleCredentials:
        """Returns a copy of the current credentials."""
        return replace(self._credentials)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        """
        Sends an authenticated request and returns the decoded JSON body.

        Returns None on 204. Raises BsaleAuthenticationError without any
        network call if the access token has expired.
        """
        credentials = self._credentials
        if credentials.is_expired():
            raise BsaleAuthenticationError("Access token expired. Please refresh.")

        request_headers = {
            ACCESS_TOKEN_HEADER: credentials.access_token,
            "Accept": "application/json",
        }
        if body is not None:
            request_headers["Content-Type"] = "application/json"
        if headers:
            request_headers.update(headers)

        try:
            return await asyncio.wait_for(
                self._http.request(method, path, headers=request_headers, json=body),
                timeout=self.timeout_ms / 1000,
            )
        except BsaleError:
            raise
        except httpx.HTTPStatusError as e:
            error = classify_error_response(e.response)
            logger.warning(
                "Bsale %s %s returned %d (%s)",
                method.upper(), path, e.response.status_code, error.kind.value,
            )
            raise error from e
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error("Bsale %s %s timed out after %dms", method.upper(), path, self.timeout_ms)
            raise BsaleNetworkError(f"Request timeout after {self.timeout_ms}ms", e) from e
        except (httpx.HTTPError, OSError) as e:
            logger.error("Bsale %s %s failed: %s", method.upper(), path, e)
            raise BsaleNetworkError("Network request failed", e) from e
        except ValueError as e:
            raise BsaleError("Failed to decode JSON response") from e
        except Exception as e:
            raise BsaleError("Unknown error occurred") from e

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", f"{path}{build_query_string(params)}")

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        await self._http.aclose()
