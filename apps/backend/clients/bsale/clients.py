from __future__ import annotations

from typing import Any

from apps.backend.clients.bsale.pagination import PaginatedResponse, first_item
from apps.backend.clients.bsale.resource import ResourceClient, expand_params


class ClientsClient(ResourceClient):
    """Customers, with their contacts, addresses and loyalty points."""

    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/clients.json", params)

    async def get_client(self, client_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/clients/{client_id}.json", "client", expand_params(expand))

    async def count(self, state: int | None = None) -> int:
        """state: 0 active, 1 inactive, 99 deleted."""
        return await self._count("/clients/count.json", state)

    async def create(self, client: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/clients.json", client)

    async def update(self, client_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._client.put(f"/clients/{client_id}.json", updates)

    async def delete_client(self, client_id: int) -> dict[str, Any]:
        return await self._client.delete(f"/clients/{client_id}.json")

    async def get_contacts(self, client_id: int) -> PaginatedResponse:
        return await self._client.get(f"/clients/{client_id}/contacts.json")

    async def get_contact(self, client_id: int, contact_id: int) -> dict[str, Any]:
        return await self._get_one(f"/clients/{client_id}/contacts/{contact_id}.json", "contact")

    async def create_contact(self, client_id: int, contact: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post(f"/clients/{client_id}/contacts.json", contact)

    async def delete_contact(self, client_id: int, contact_id: int) -> None:
        return await self._client.delete(f"/clients/{client_id}/contacts/{contact_id}.json")

    async def get_addresses(self, client_id: int, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get(f"/clients/{client_id}/addresses.json", params)

    async def get_address(self, client_id: int, address_id: int) -> dict[str, Any]:
        return await self._get_one(f"/clients/{client_id}/addresses/{address_id}.json", "address")

    async def create_address(self, client_id: int, address: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post(f"/clients/{client_id}/addresses.json", address)

    async def update_address(self, client_id: int, address_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._client.put(f"/clients/{client_id}/addresses/{address_id}.json", updates)

    async def delete_address(self, client_id: int, address_id: int) -> None:
        return await self._client.delete(f"/clients/{client_id}/addresses/{address_id}.json")

    async def get_attributes(self, client_id: int) -> PaginatedResponse:
        return await self._client.get(f"/clients/{client_id}/attributes.json")

    async def update_points(self, request: dict[str, Any]) -> Any:
        return await self._client.put("/clients/points.json", request)

    async def get_purchases(self, client_id: int | None = None, code: str | None = None) -> PaginatedResponse:
        return await self._client.get("/clients/purchases.json", {"clientid": client_id, "code": code})

    async def get_unpaid_documents(self, client_id: int, comparison_date: int | None = None) -> dict[str, Any]:
        return await self._client.get(
            "/clients/unpaid_documents.json",
            {"clientid": client_id, "comparisondate": comparison_date},
        )

    async def find_by_code(self, code: str) -> dict[str, Any] | None:
        """Looks a client up by tax id (RUT)."""
        return first_item(await self.list({"code": code, "limit": 1}))

    async def find_by_email(self, email: str) -> dict[str, Any] | None:
        return first_item(await self.list({"email": email, "limit": 1}))
