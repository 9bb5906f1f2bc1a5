from __future__ import annotations

import logging
from typing import Any

import httpx

from apps.backend.clients.bsale.base import BsaleBaseClient, classify_error_response
from apps.backend.clients.bsale.errors import BsaleError, BsaleNetworkError
from apps.backend.clients.bsale.pagination import PaginatedResponse
from apps.backend.clients.bsale.resource import ResourceClient
from apps.backend.clients.http import HttpClient

logger = logging.getLogger(__name__)

INSTANCE_BASE_URL = "https://credential.bsale.io/v1"


class WebhooksClient(ResourceClient):
    """
    Webhook registrations, plus lookup of the instance a notification came from.

    Instance lookups go to the credential service, which takes no access
    token. Its HttpClient is created on first use unless one is injected.
    """

    def __init__(self, client: BsaleBaseClient, instance_http: HttpClient | None = None):
        super().__init__(client)
        self._instance_http = instance_http

    async def list(self) -> PaginatedResponse:
        return await self._client.get("/webhooks.json")

    async def get_by_id(self, webhook_id: int) -> dict[str, Any]:
        return await self._get_one(f"/webhooks/{webhook_id}.json", "webhook")

    async def create(self, registration: dict[str, Any]) -> dict[str, Any]:
        response = await self._client.post("/webhooks.json", registration)
        return response["webhook"]

    async def update(self, webhook_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        response = await self._client.put(f"/webhooks/{webhook_id}.json", updates)
        return response["webhook"]

    async def delete_webhook(self, webhook_id: int) -> None:
        return await self._client.delete(f"/webhooks/{webhook_id}.json")

    async def get_instance(self, token: str) -> dict[str, Any]:
        """Resolves the instance token sent in a webhook notification."""
        if self._instance_http is None:
            self._instance_http = HttpClient(INSTANCE_BASE_URL, timeout=self._client.timeout_ms / 1000)
        try:
            return await self._instance_http.get(
                f"/instances/basic/{token}.json",
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPStatusError as e:
            raise classify_error_response(e.response) from e
        except httpx.TimeoutException as e:
            raise BsaleNetworkError(f"Request timeout after {self._client.timeout_ms}ms", e) from e
        except (httpx.HTTPError, OSError) as e:
            raise BsaleNetworkError("Network request failed", e) from e
        except ValueError as e:
            raise BsaleError("Failed to decode JSON response") from e

    async def find_by_topic(self, topic: str) -> list[dict[str, Any]]:
        response = await self.list()
        return [webhook for webhook in response["items"] if webhook.get("topic") == topic]

    async def register_multiple(self, registrations: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Registers sequentially; a failure stops the loop and earlier webhooks stay registered."""
        webhooks = []
        for registration in registrations:
            webhooks.append(await self.create(registration))
        logger.info("Registered %d webhooks", len(webhooks))
        return webhooks

    async def set_active(self, webhook_id: int, active: bool) -> dict[str, Any]:
        return await self.update(webhook_id, {"active": 1 if active else 0})

    async def aclose(self) -> None:
        if self._instance_http is not None:
            await self._instance_http.aclose()
