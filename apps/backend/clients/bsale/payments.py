from __future__ import annotations

from typing import Any

from apps.backend.clients.bsale.pagination import PAGE_SIZE, PaginatedResponse
from apps.backend.clients.bsale.resource import ResourceClient, expand_params


class PaymentsClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/payments.json", params)

    async def get_payment(self, payment_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/payments/{payment_id}.json", "payment", expand_params(expand))

    async def count(self, state: int | None = None) -> int:
        return await self._count("/payments/count.json", state)

    async def create(self, payment: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/payments.json", payment)

    async def get_grouped(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        """Payments grouped by payment type, office and date."""
        return await self._client.get("/payments/group_payment_types.json", params)

    async def get_by_date(self, record_date: int) -> list[dict[str, Any]]:
        response = await self.list({"recorddate": record_date, "limit": PAGE_SIZE})
        return response["items"]

    async def get_by_document(self, document_id: int) -> list[dict[str, Any]]:
        response = await self.list({"documentid": document_id, "limit": PAGE_SIZE})
        return response["items"]
