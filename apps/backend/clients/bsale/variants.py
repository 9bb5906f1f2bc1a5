from __future__ import annotations

from typing import Any

from apps.backend.clients.bsale.pagination import PaginatedResponse, fetch_all, first_item
from apps.backend.clients.bsale.resource import ResourceClient, expand_params


class VariantsClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/variants.json", params)

    async def get_by_id(self, variant_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/variants/{variant_id}.json", "variant", expand_params(expand))

    async def count(self, state: int | None = None) -> int:
        return await self._count("/variants/count.json", state)

    async def create(self, variant: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/variants.json", variant)

    async def update(self, variant_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._client.put(f"/variants/{variant_id}.json", {**updates, "id": variant_id})

    async def delete_variant(self, variant_id: int) -> dict[str, Any]:
        return await self._client.delete(f"/variants/{variant_id}.json")

    async def get_attribute_values(self, variant_id: int) -> PaginatedResponse:
        return await self._client.get(f"/variants/{variant_id}/attribute_values.json")

    async def get_costs(self, variant_id: int) -> dict[str, Any]:
        """Average cost plus FIFO cost history."""
        return await self._client.get(f"/variants/{variant_id}/costs.json")

    async def get_all(self, state: int = 0) -> list[dict[str, Any]]:
        return await fetch_all(self.list, {"state": state})

    async def find_by_code(self, code: str) -> dict[str, Any] | None:
        return first_item(await self.list({"code": code, "limit": 1}))

    async def find_by_barcode(self, barcode: str) -> dict[str, Any] | None:
        return first_item(await self.list({"barcode": barcode, "limit": 1}))
