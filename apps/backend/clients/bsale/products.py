from __future__ import annotations

from typing import Any

from apps.backend.clients.bsale.pagination import PaginatedResponse, fetch_all
from apps.backend.clients.bsale.resource import ResourceClient, expand_params


class ProductsClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/products.json", params)

    async def get_by_id(self, product_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/products/{product_id}.json", "product", expand_params(expand))

    async def count(self, state: int | None = None) -> int:
        return await self._count("/products/count.json", state)

    async def create(self, product: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/products.json", product)

    async def update(self, product_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._client.put(f"/products/{product_id}.json", {**updates, "id": product_id})

    async def delete_product(self, product_id: int) -> dict[str, Any]:
        """Soft delete: Bsale marks the product inactive and returns it."""
        return await self._client.delete(f"/products/{product_id}.json")

    async def create_pack(self, pack: dict[str, Any]) -> dict[str, Any]:
        """Creates a product bundle through the v2 endpoint."""
        return await self._client.post("/v2/products/pack.json", pack)

    async def get_variants(self, product_id: int) -> PaginatedResponse:
        return await self._client.get(f"/products/{product_id}/variants.json")

    async def get_taxes(self, product_id: int) -> PaginatedResponse:
        return await self._client.get(f"/products/{product_id}/product_taxes.json")

    async def get_tax(self, product_id: int, tax_id: int) -> dict[str, Any]:
        return await self._get_one(f"/products/{product_id}/product_taxes/{tax_id}.json", "product_tax")

    async def get_all(self, state: int = 0) -> list[dict[str, Any]]:
        return await fetch_all(self.list, {"state": state, "expand": ["product_type"]})


class ProductTypesClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/product_types.json", params)

    async def get_by_id(self, type_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/product_types/{type_id}.json", "product_type", expand_params(expand))

    async def count(self, state: int | None = None) -> int:
        return await self._count("/product_types/count.json", state)

    async def create(self, product_type: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/product_types.json", product_type)

    async def update(self, type_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._client.put(f"/product_types/{type_id}.json", {**updates, "id": type_id})

    async def delete_type(self, type_id: int) -> dict[str, Any]:
        return await self._client.delete(f"/product_types/{type_id}.json")

    async def get_products(self, type_id: int) -> PaginatedResponse:
        return await self._client.get(f"/product_types/{type_id}/products.json")

    async def get_attributes(self, type_id: int) -> PaginatedResponse:
        return await self._client.get(f"/product_types/{type_id}/attributes.json")

    async def get_attribute(self, type_id: int, attribute_id: int) -> dict[str, Any]:
        return await self._get_one(f"/product_types/{type_id}/attributes/{attribute_id}.json", "attribute")
