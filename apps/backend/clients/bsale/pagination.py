from collections.abc import Awaitable, Callable
from typing import Any, NotRequired, TypedDict

PAGE_SIZE = 50


class PaginatedResponse(TypedDict):
    """ List envelope returned by every Bsale collection endpoint. """
    href: str
    count: int
    limit: int
    offset: int
    items: list[dict[str, Any]]
    next: NotRequired[str]


async def fetch_all(
    list_page: Callable[[dict[str, Any]], Awaitable[PaginatedResponse]],
    params: dict[str, Any] | None = None,
    limit: int = PAGE_SIZE,
) -> list[dict[str, Any]]:
    """
    Calls `list_page` with increasing offsets and returns every item.

    Stops once offset + limit reaches the reported count. The count is read
    from each page, so items added or removed on the server while paginating
    can be skipped or returned twice.
    """
    items: list[dict[str, Any]] = []
    offset = 0
    while True:
        response = await list_page({**(params or {}), "limit": limit, "offset": offset})
        items.extend(response["items"])
        if offset + limit >= response["count"]:
            return items
        offset += limit


def first_item(response: PaginatedResponse) -> dict[str, Any] | None:
    items = response["items"]
    return items[0] if items else None
