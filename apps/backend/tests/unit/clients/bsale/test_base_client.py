import asyncio
import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from apps.backend.clients.bsale.base import BsaleBaseClient, classify_error_response
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
)


def _make_credentials(expires_in: timedelta = timedelta(hours=1), access_token: str = "test-access-token") -> BsaleCredentials:
    return BsaleCredentials(
        access_token=access_token,
        refresh_token="test-refresh-token",
        expires_at=datetime.now(timezone.utc) + expires_in,
    )


def _make_config(expires_in: timedelta = timedelta(hours=1), timeout_ms: int = 30000) -> BsaleConfig:
    return BsaleConfig(credentials=_make_credentials(expires_in), timeout_ms=timeout_ms)


def _make_response(status_code: int, json_data=None, text: str = "", headers: dict | None = None) -> httpx.Response:
    request = httpx.Request("GET", "https://api.bsale.io/v1/test")
    if json_data is not None:
        return httpx.Response(status_code, json=json_data, headers=headers, request=request)
    return httpx.Response(status_code, text=text, headers=headers, request=request)


def _make_http_error(status_code: int, json_data=None, text: str = "", headers: dict | None = None) -> httpx.HTTPStatusError:
    response = _make_response(status_code, json_data, text, headers)
    return httpx.HTTPStatusError("error", request=response.request, response=response)


class TestBsaleBaseClientInit:
    def test_creates_http_client_for_base_url_when_none_injected(self):
        with patch("apps.backend.clients.bsale.base.HttpClient") as mock_http_cls:
            BsaleBaseClient(_make_config(timeout_ms=5000))
            mock_http_cls.assert_called_once_with("https://api.bsale.io/v1", timeout=5.0)

    def test_uses_defaults_from_config(self):
        client = BsaleBaseClient(BsaleConfig(credentials=_make_credentials()), http=AsyncMock())
        assert client.base_url == "https://api.bsale.io/v1"
        assert client.timeout_ms == 30000


class TestCredentials:
    def setup_method(self):
        self.client = BsaleBaseClient(_make_config(), http=AsyncMock())

    def test_update_replaces_credentials(self):
        self.client.update_credentials(_make_credentials(access_token="new-token"))
        assert self.client.get_credentials().access_token == "new-token"

    def test_get_returns_a_copy(self):
        snapshot = self.client.get_credentials()
        snapshot.access_token = "mutated"
        assert self.client.get_credentials().access_token == "test-access-token"

    def test_update_does_not_keep_callers_reference(self):
        credentials = _make_credentials(access_token="new-token")
        self.client.update_credentials(credentials)
        credentials.access_token = "mutated"
        assert self.client.get_credentials().access_token == "new-token"

    def test_update_accepts_expired_credentials(self):
        self.client.update_credentials(_make_credentials(expires_in=timedelta(hours=-1)))
        assert self.client.get_credentials().is_expired() is True


class TestExpiryGate:
    @pytest.mark.parametrize(
        ("method", "args"),
        [("get", ("/products.json",)), ("post", ("/products.json", {})), ("put", ("/products/1.json", {})), ("delete", ("/products/1.json",))],
    )
    async def test_expired_token_raises_without_network_call(self, method, args):
        mock_http = AsyncMock()
        client = BsaleBaseClient(_make_config(expires_in=timedelta(days=-1)), http=mock_http)

        with pytest.raises(BsaleAuthenticationError, match="Access token expired. Please refresh."):
            await getattr(client, method)(*args)

        mock_http.request.assert_not_called()

    async def test_naive_future_expiry_is_read_as_utc(self):
        mock_http = AsyncMock()
        mock_http.request.return_value = {"count": 1}
        naive_utc_now = datetime.now(timezone.utc).replace(tzinfo=None)
        credentials = BsaleCredentials("naive-token", "r", naive_utc_now + timedelta(hours=1))
        client = BsaleBaseClient(BsaleConfig(credentials=credentials), http=mock_http)

        assert await client.get("/products/count.json") == {"count": 1}
        mock_http.request.assert_awaited_once()

    async def test_naive_past_expiry_raises_authentication_error(self):
        mock_http = AsyncMock()
        naive_utc_now = datetime.now(timezone.utc).replace(tzinfo=None)
        client = BsaleBaseClient(_make_config(), http=mock_http)
        client.update_credentials(BsaleCredentials("naive-token", "r", naive_utc_now - timedelta(hours=1)))

        with pytest.raises(BsaleAuthenticationError, match="Access token expired"):
            await client.get("/products.json")

        mock_http.request.assert_not_called()

    async def test_refreshed_credentials_unblock_requests(self):
        mock_http = AsyncMock()
        mock_http.request.return_value = {"count": 3}
        client = BsaleBaseClient(_make_config(expires_in=timedelta(days=-1)), http=mock_http)

        client.update_credentials(_make_credentials())

        assert await client.get("/products/count.json") == {"count": 3}


class TestBsaleBaseClientRequests:
    def setup_method(self):
        self.mock_http = AsyncMock()
        self.mock_http.request.return_value = {"ok": True}
        self.client = BsaleBaseClient(_make_config(), http=self.mock_http)

    async def test_get_appends_query_string_to_path(self):
        await self.client.get("/products.json", {"limit": 10, "offset": 0})

        self.mock_http.request.assert_called_once_with(
            "GET",
            "/products.json?limit=10&offset=0",
            headers={"access_token": "test-access-token", "Accept": "application/json"},
            json=None,
        )

    async def test_get_without_params_keeps_path(self):
        await self.client.get("/products.json")
        assert self.mock_http.request.call_args.args[1] == "/products.json"

    async def test_post_sends_json_body_and_content_type(self):
        await self.client.post("/products.json", {"name": "Test"})

        self.mock_http.request.assert_called_once_with(
            "POST",
            "/products.json",
            headers={
                "access_token": "test-access-token",
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            json={"name": "Test"},
        )

    async def test_put_sends_json_body_and_content_type(self):
        await self.client.put("/products/1.json", {"name": "Updated"})
        call = self.mock_http.request.call_args
        assert call.args[0] == "PUT"
        assert call.kwargs["headers"]["Content-Type"] == "application/json"
        assert call.kwargs["json"] == {"name": "Updated"}

    async def test_post_without_body_sends_no_payload(self):
        await self.client.post("/documents/1/resend.json")
        call = self.mock_http.request.call_args
        assert call.kwargs["json"] is None
        assert "Content-Type" not in call.kwargs["headers"]

    async def test_delete_sends_no_payload(self):
        await self.client.delete("/products/1.json")
        call = self.mock_http.request.call_args
        assert call.args[0] == "DELETE"
        assert call.kwargs["json"] is None
        assert "Content-Type" not in call.kwargs["headers"]

    async def test_caller_headers_override_defaults(self):
        await self.client.request("GET", "/products.json", headers={"Accept": "text/csv", "x-trace": "1"})
        headers = self.mock_http.request.call_args.kwargs["headers"]
        assert headers["Accept"] == "text/csv"
        assert headers["x-trace"] == "1"
        assert headers["access_token"] == "test-access-token"

    async def test_returns_decoded_body(self):
        self.mock_http.request.return_value = {"id": 1, "name": "Test"}
        assert await self.client.get("/products/1.json") == {"id": 1, "name": "Test"}

    async def test_returns_none_for_no_content(self):
        self.mock_http.request.return_value = None
        assert await self.client.delete("/webhooks/1.json") is None

    async def test_uses_current_credentials_after_update(self):
        self.client.update_credentials(_make_credentials(access_token="refreshed"))
        await self.client.get("/products.json")
        assert self.mock_http.request.call_args.kwargs["headers"]["access_token"] == "refreshed"

    async def test_aclose_closes_http_client(self):
        await self.client.aclose()
        self.mock_http.aclose.assert_awaited_once()


class TestBsaleBaseClientErrorTranslation:
    def setup_method(self):
        self.mock_http = AsyncMock()
        self.client = BsaleBaseClient(_make_config(), http=self.mock_http)

    async def test_401_raises_authentication_error(self):
        self.mock_http.request.side_effect = _make_http_error(401, {"message": "Invalid token"})
        with pytest.raises(BsaleAuthenticationError, match="Invalid token"):
            await self.client.get("/products.json")

    async def test_403_raises_authorization_error(self):
        self.mock_http.request.side_effect = _make_http_error(403, {"message": "Forbidden"})
        with pytest.raises(BsaleAuthorizationError, match="Forbidden"):
            await self.client.get("/products.json")

    async def test_404_raises_not_found_with_resource_text(self):
        self.mock_http.request.side_effect = _make_http_error(404, {"message": "Product 99 does not exist"})
        with pytest.raises(BsaleNotFoundError) as exc_info:
            await self.client.get("/products/99.json")
        assert str(exc_info.value) == "Resource not found: Product 99 does not exist"

    @pytest.mark.parametrize("status_code", [400, 422])
    async def test_400_and_422_raise_validation_error_with_field_errors(self, status_code):
        envelope = {"message": "Validation failed", "errors": [{"field": "name", "message": "Name is required"}]}
        self.mock_http.request.side_effect = _make_http_error(status_code, envelope)

        with pytest.raises(BsaleValidationError) as exc_info:
            await self.client.post("/products.json", {})

        assert str(exc_info.value) == "Validation failed"
        assert exc_info.value.errors == [{"field": "name", "message": "Name is required"}]

    async def test_429_raises_rate_limit_error_with_retry_after(self):
        self.mock_http.request.side_effect = _make_http_error(
            429, {"message": "Too many"}, headers={"Retry-After": "60"}
        )
        with pytest.raises(BsaleRateLimitError) as exc_info:
            await self.client.get("/products.json")
        assert exc_info.value.retry_after == 60
        assert str(exc_info.value) == "Rate limit exceeded. Retry after 60s"

    async def test_429_with_non_numeric_retry_after(self):
        self.mock_http.request.side_effect = _make_http_error(
            429, headers={"Retry-After": "Wed, 21 Oct 2026 07:28:00 GMT"}
        )
        with pytest.raises(BsaleRateLimitError) as exc_info:
            await self.client.get("/products.json")
        assert exc_info.value.retry_after is None
        assert str(exc_info.value) == "Rate limit exceeded"

    @pytest.mark.parametrize("status_code", [500, 502, 503])
    async def test_other_statuses_raise_api_error_with_status_and_envelope(self, status_code):
        envelope = {"code": status_code, "message": "Server exploded"}
        self.mock_http.request.side_effect = _make_http_error(status_code, envelope)

        with pytest.raises(BsaleAPIError) as exc_info:
            await self.client.get("/products.json")

        assert exc_info.value.status_code == status_code
        assert exc_info.value.response == envelope
        assert str(exc_info.value) == "Server exploded"

    async def test_keeps_http_status_error_as_cause(self):
        http_error = _make_http_error(500, {"message": "x"})
        self.mock_http.request.side_effect = http_error
        with pytest.raises(BsaleAPIError) as exc_info:
            await self.client.get("/products.json")
        assert exc_info.value.__cause__ is http_error

    async def test_timeout_raises_network_error_with_configured_ms(self):
        cause = httpx.ReadTimeout("timed out", request=MagicMock())
        self.mock_http.request.side_effect = cause
        with pytest.raises(BsaleNetworkError, match="Request timeout after 30000ms") as exc_info:
            await self.client.get("/products.json")
        assert exc_info.value.original_error is cause

    async def test_slow_response_is_cancelled_by_timeout_guard(self):
        cancelled = asyncio.Event()

        async def slow_request(*args, **kwargs):
            try:
                await asyncio.sleep(5)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        self.mock_http.request.side_effect = slow_request
        client = BsaleBaseClient(_make_config(timeout_ms=20), http=self.mock_http)

        with pytest.raises(BsaleNetworkError, match="Request timeout after 20ms"):
            await client.get("/products.json")
        assert cancelled.is_set()

    async def test_connection_error_raises_network_error_wrapping_cause(self):
        cause = httpx.ConnectError("refused", request=MagicMock())
        self.mock_http.request.side_effect = cause
        with pytest.raises(BsaleNetworkError, match="Network request failed") as exc_info:
            await self.client.post("/products.json", {"name": "x"})
        assert exc_info.value.original_error is cause
        assert exc_info.value.__cause__ is cause

    async def test_os_error_raises_network_error(self):
        self.mock_http.request.side_effect = ConnectionRefusedError("refused")
        with pytest.raises(BsaleNetworkError):
            await self.client.delete("/products/1.json")

    async def test_bsale_errors_propagate_unchanged(self):
        original = BsaleRateLimitError(5)
        self.mock_http.request.side_effect = original
        with pytest.raises(BsaleRateLimitError) as exc_info:
            await self.client.get("/products.json")
        assert exc_info.value is original

    async def test_invalid_json_raises_base_error(self):
        self.mock_http.request.side_effect = ValueError("Expecting value")
        with pytest.raises(BsaleError, match="Failed to decode JSON response") as exc_info:
            await self.client.get("/products.json")
        assert type(exc_info.value) is BsaleError

    async def test_unexpected_error_raises_base_error(self):
        self.mock_http.request.side_effect = RuntimeError("surprise")
        with pytest.raises(BsaleError, match="Unknown error occurred") as exc_info:
            await self.client.get("/products.json")
        assert type(exc_info.value) is BsaleError


class TestClassifyErrorResponse:
    def test_falls_back_to_reason_phrase_for_non_json_body(self):
        error = classify_error_response(_make_response(503, text="<html>down</html>"))
        assert isinstance(error, BsaleAPIError)
        assert str(error) == "Service Unavailable"
        assert error.response is None

    def test_falls_back_to_fixed_message_without_reason_phrase(self):
        error = classify_error_response(_make_response(599))
        assert str(error) == "API request failed"
        assert error.status_code == 599

    def test_ignores_non_object_json_body(self):
        error = classify_error_response(_make_response(500, json_data=["unexpected"]))
        assert error.response is None
        assert str(error) == "Internal Server Error"

    def test_validation_without_errors_list(self):
        error = classify_error_response(_make_response(400, json_data={"message": "Bad"}))
        assert isinstance(error, BsaleValidationError)
        assert error.errors is None

    def test_404_without_envelope_uses_reason_phrase(self):
        error = classify_error_response(_make_response(404))
        assert str(error) == "Resource not found: Not Found"
