from __future__ import annotations

from typing import Any

from apps.backend.clients.bsale.pagination import PAGE_SIZE, PaginatedResponse, fetch_all
from apps.backend.clients.bsale.query import build_query_string
from apps.backend.clients.bsale.resource import ResourceClient, expand_params


class DocumentsClient(ResourceClient):
    """Sales documents: invoices, receipts, credit notes."""

    async def list(self, params: dict[str, Any] | None = None) -> PaginatedResponse:
        return await self._client.get("/documents.json", params)

    async def get_document(self, document_id: int, expand: list[str] | None = None) -> dict[str, Any]:
        return await self._get_one(f"/documents/{document_id}.json", "document", expand_params(expand))

    async def count(self, state: int | None = None) -> int:
        return await self._count("/documents/count.json", state)

    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/documents.json", document)

    async def delete_document(self, document_id: int, office_id: int) -> None:
        # DELETE carries no params of its own, so the office goes into the path.
        query = build_query_string({"officeId": office_id})
        return await self._client.delete(f"/documents/{document_id}.json{query}")

    async def get_summary(self) -> dict[str, Any]:
        return await self._client.get("/documents/summary.json")

    async def get_ticket_summary(self, start_date: int, end_date: int) -> dict[str, Any]:
        """Summary of electronic tickets between two Unix timestamps."""
        return await self._client.get(
            "/documents/summary/ticket.json", {"rcofdaterange": [start_date, end_date]}
        )

    async def get_costs(self, params: dict[str, Any] | None = None) -> Any:
        return await self._client.get("/documents/costs.json", params)

    async def get_details(self, document_id: int, expand: list[str] | None = None) -> PaginatedResponse:
        return await self._client.get(f"/documents/{document_id}/details.json", expand_params(expand))

    async def get_detail(self, document_id: int, detail_id: int) -> dict[str, Any]:
        return await self._get_one(f"/documents/{document_id}/details/{detail_id}.json", "detail")

    async def get_references(self, document_id: int) -> PaginatedResponse:
        return await self._client.get(f"/documents/{document_id}/references.json")

    async def get_taxes(self, document_id: int) -> PaginatedResponse:
        return await self._client.get(f"/documents/{document_id}/document_taxes.json")

    async def get_sellers(self, document_id: int) -> PaginatedResponse:
        return await self._client.get(f"/documents/{document_id}/sellers.json")

    async def get_attributes(self, document_id: int) -> PaginatedResponse:
        return await self._client.get(f"/documents/{document_id}/attributes.json")

    async def get_by_date_range(
        self,
        start_date: int,
        end_date: int,
        document_type_id: int | None = None,
    ) -> list[dict[str, Any]]:
        return await fetch_all(
            self.list,
            {"emissiondaterange": [start_date, end_date], "documenttypeid": document_type_id},
        )

    async def get_by_client(self, client_id: int) -> list[dict[str, Any]]:
        response = await self.list({"clientid": client_id, "limit": PAGE_SIZE})
        return response["items"]

    async def get_by_office(self, office_id: int) -> list[dict[str, Any]]:
        response = await self.list({"officeid": office_id, "limit": PAGE_SIZE})
        return response["items"]
