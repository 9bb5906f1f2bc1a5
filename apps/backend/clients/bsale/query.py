import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode


def _encode_value(value: Any) -> str:
    # Bsale expects arrays and objects (expand, date ranges) as JSON text.
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"))
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(params: Mapping[str, Any] | None) -> str:
    """
    Builds a query string ("?a=1&b=2") from a parameter mapping.

    None values are dropped. Keys keep the mapping's iteration order, so the
    same mapping always encodes to the same string. Returns "" when nothing
    is left to encode.
    """
    if not params:
        return ""
    pairs = [(key, _encode_value(value)) for key, value in params.items() if value is not None]
    query = urlencode(pairs)
    return f"?{query}" if query else ""
