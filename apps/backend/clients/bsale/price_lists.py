from __future__ import annotations

from typing import Any

from apps.backend.clients.bsale.pagination import PaginatedResponse, fetch_all, first_item
from apps.backend.clients.bsale.resource import ResourceClient, expand_params


class PriceListsClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/price_lists.json", params)

    async def get_price_list(self, price_list_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/price_lists/{price_list_id}.json", "price_list", expand_params(expand))

    async def count(self) -> int:
        return await self._count("/price_lists/count.json")

    async def get_details(self, price_list_id: int, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get(f"/price_lists/{price_list_id}/details.json", params)

    async def get_detail(self, price_list_id: int, detail_id: int) -> dict[str, Any]:
        return await self._get_one(f"/price_lists/{price_list_id}/details/{detail_id}.json", "detail")

    async def update_detail(self, price_list_id: int, detail_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        """Changes the price of one variant in the list."""
        return await self._client.put(
            f"/price_lists/{price_list_id}/details/{detail_id}.json",
            {**updates, "id": detail_id},
        )

    async def get_variant_price(self, price_list_id: int, variant_id: int) -> dict[str, Any] | None:
        return first_item(await self.get_details(price_list_id, {"variantid": variant_id, "limit": 1}))

    async def get_all_details(self, price_list_id: int) -> list[dict[str, Any]]:
        async def list_page(params: dict[str, Any]) -> PaginatedResponse:
            return await self.get_details(price_list_id, params)

        return await fetch_all(list_page)
