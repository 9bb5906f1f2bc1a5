"""Clients for Bsale configuration entities: offices, users, currencies, taxes and the like."""

from __future__ import annotations

from typing import Any

from apps.backend.clients.bsale.pagination import PaginatedResponse
from apps.backend.clients.bsale.resource import ResourceClient, expand_params


class OfficesClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/offices.json", params)

    async def get_by_id(self, office_id: int) -> dict[str, Any]:
        return await self._get_one(f"/offices/{office_id}.json", "office")

    async def count(self, state: int | None = None) -> int:
        return await self._count("/offices/count.json", state)

    async def create(self, office: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/offices.json", office)

    async def update(self, office_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._client.put(f"/offices/{office_id}.json", updates)

    async def delete_office(self, office_id: int) -> dict[str, Any]:
        return await self._client.delete(f"/offices/{office_id}.json")


class UsersClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/users.json", params)

    async def get_by_id(self, user_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/users/{user_id}.json", "user", expand_params(expand))

    async def get_sales_summary(self, params: dict[str, Any]) -> dict[str, Any]:
        return await self._client.get("/users/sales_summary.json", params)

    async def get_sales(self, user_id: int, params: dict[str, Any]) -> PaginatedResponse:
        return await self._client.get(f"/users/{user_id}/sales.json", params)

    async def get_returns(self, user_id: int, params: dict[str, Any]) -> PaginatedResponse:
        return await self._client.get(f"/users/{user_id}/returns.json", params)


class CurrenciesClient(ResourceClient):
    """Bsale calls currencies "coins"."""

    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/coins.json", params)

    async def get_by_id(self, coin_id: int) -> dict[str, Any]:
        return await self._get_one(f"/coins/{coin_id}.json", "coin")

    async def count(self, state: int | None = None) -> int:
        return await self._count("/coins/count.json", state)

    async def get_exchange_rate(self, coin_id: int, timestamp: int) -> float:
        response = await self._client.get(f"/coins/{coin_id}/exchange_rate/{timestamp}.json")
        return response["exchangeRate"]

    async def get_sales(self, coin_id: int, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get(f"/coins/{coin_id}/sales.json", params)


class DocumentTypesClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/document_types.json", params)

    async def get_by_id(self, type_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/document_types/{type_id}.json", "document_type", expand_params(expand))

    async def count(self, state: int | None = None) -> int:
        return await self._count("/document_types/count.json", state)

    async def update(self, type_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._client.put(f"/document_types/{type_id}.json", updates)

    async def get_caf(self, params: dict[str, Any]) -> dict[str, Any]:
        """Folio authorisation file (CAF) for an electronic document type."""
        return await self._client.get("/document_types/caf.json", params)

    async def get_available_folios(self, params: dict[str, Any]) -> dict[str, Any]:
        return await self._client.get("/document_types/number_availables.json", params)


class PaymentMethodsClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/payment_types.json", params)

    async def get_by_id(self, payment_type_id: int) -> dict[str, Any]:
        return await self._get_one(f"/payment_types/{payment_type_id}.json", "payment_type")

    async def count(self, state: int | None = None) -> int:
        return await self._count("/payment_types/count.json", state)

    async def create(self, payment_method: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/payment_types.json", payment_method)

    async def get_dynamic_attributes(self, payment_type_id: int) -> PaginatedResponse:
        return await self._client.get(f"/payment_types/{payment_type_id}/dynamic_attributes.json")


class SaleConditionsClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/sale_conditions.json", params)

    async def get_by_id(self, condition_id: int) -> dict[str, Any]:
        return await self._get_one(f"/sale_conditions/{condition_id}.json", "sale_condition")

    async def count(self, state: int | None = None) -> int:
        return await self._count("/sale_conditions/count.json", state)


class DiscountsClient(ResourceClient):
    # Reads use v1, writes and details only exist under v2.

    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/discounts.json", params)

    async def get_by_id(self, discount_id: int) -> dict[str, Any]:
        return await self._get_one(f"/discounts/{discount_id}.json", "discount")

    async def count(self, state: int | None = None) -> int:
        return await self._count("/discounts/count.json", state)

    async def create(self, discount: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/v2/discounts/new.json", discount)

    async def update(self, discount_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._client.put(f"/v2/discounts/{discount_id}.json", updates)

    async def get_details(self, discount_id: int) -> PaginatedResponse:
        return await self._client.get(f"/v2/discounts/{discount_id}/details.json")

    async def add_detail(self, discount_id: int, detail: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post(f"/v2/discounts/{discount_id}/details.json", detail)

    async def delete_detail(self, detail_id: int) -> dict[str, Any]:
        return await self._client.delete(f"/v2/discounts/details/{detail_id}.json")


class TaxesClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/taxes.json", params)

    async def get_by_id(self, tax_id: int) -> dict[str, Any]:
        return await self._get_one(f"/taxes/{tax_id}.json", "tax")

    async def count(self, state: int | None = None) -> int:
        return await self._count("/taxes/count.json", state)


class ShipmentTypesClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/shipping_types.json", params)

    async def get_by_id(self, shipping_type_id: int) -> dict[str, Any]:
        return await self._get_one(f"/shipping_types/{shipping_type_id}.json", "shipping_type")


class DynamicAttributesClient(ResourceClient):
    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/dynamic_attributes.json", params)

    async def get_by_id(self, attribute_id: int) -> dict[str, Any]:
        return await self._get_one(f"/dynamic_attributes/{attribute_id}.json", "dynamic_attribute")

    async def get_details(self, attribute_id: int) -> PaginatedResponse:
        return await self._client.get(f"/dynamic_attributes/{attribute_id}/details.json")

    async def get_detail(self, attribute_id: int, detail_id: int) -> dict[str, Any]:
        return await self._get_one(f"/dynamic_attributes/{attribute_id}/details/{detail_id}.json", "detail")
