from __future__ import annotations

from typing import Any

from apps.backend.clients.bsale.pagination import PAGE_SIZE, PaginatedResponse, first_item
from apps.backend.clients.bsale.resource import ResourceClient, expand_params


class StocksClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/stocks.json", params)

    async def get_by_id(self, stock_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/stocks/{stock_id}.json", "stock", expand_params(expand))

    async def get_by_variant_and_office(self, variant_id: int, office_id: int) -> dict[str, Any] | None:
        return first_item(await self.list({"variantid": variant_id, "officeid": office_id, "limit": 1}))

    async def get_by_variant(self, variant_id: int) -> list[dict[str, Any]]:
        """Stock of one variant across offices (first page only)."""
        response = await self.list({"variantid": variant_id, "limit": PAGE_SIZE})
        return response["items"]


class StockReceptionsClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/stocks/receptions.json", params)

    async def get_by_id(self, reception_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/stocks/receptions/{reception_id}.json", "reception", expand_params(expand))

    async def get_details(self, reception_id: int) -> PaginatedResponse:
        return await self._client.get(f"/stocks/receptions/{reception_id}/details.json")

    async def get_detail(self, reception_id: int, detail_id: int) -> dict[str, Any]:
        return await self._get_one(f"/stocks/receptions/{reception_id}/details/{detail_id}.json", "detail")

    async def create(self, reception: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/stocks/receptions.json", reception)

    async def update(self, reception_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._client.put(f"/stocks/receptions/{reception_id}.json", {**updates, "id": reception_id})


class StockConsumptionsClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/stocks/consumptions.json", params)

    async def get_by_id(self, consumption_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(
            f"/stocks/consumptions/{consumption_id}.json", "consumption", expand_params(expand)
        )

    async def get_details(self, consumption_id: int) -> PaginatedResponse:
        return await self._client.get(f"/stocks/consumptions/{consumption_id}/details.json")

    async def get_detail(self, consumption_id: int, detail_id: int) -> dict[str, Any]:
        return await self._get_one(f"/stocks/consumptions/{consumption_id}/details/{detail_id}.json", "detail")

    async def create(self, consumption: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/stocks/consumptions.json", consumption)

    async def get_types(self) -> PaginatedResponse:
        return await self._client.get("/stock_consumption_types.json")
