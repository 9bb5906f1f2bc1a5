from typing import Any

from apps.backend.clients.bsale.base import BsaleBaseClient


class ResourceClient:
    """
    Base for Bsale resource clients.

    Holds a reference to the shared BsaleBaseClient rather than extending it,
    so every resource sees the same credentials.
    """

    def __init__(self, client: BsaleBaseClient):
        self._client = client

    async def _get_one(self, path: str, key: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GETs a single entity and unwraps it from its named envelope field."""
        response = await self._client.get(path, params)
        return response[key]

    async def _count(self, path: str, state: int | None = None) -> int:
        response = await self._client.get(path, {"state": state} if state is not None else None)
        return response["count"]


def expand_params(expand: list[str] | None) -> dict[str, Any] | None:
    return {"expand": expand} if expand else None
