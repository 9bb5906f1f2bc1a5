import httpx

from apps.backend.clients.bsale.base import BsaleBaseClient
from apps.backend.clients.bsale.client import BsaleClient
from apps.backend.clients.bsale.config import BsaleConfig, load_bsale_config
from apps.backend.clients.http import HttpClient


def build_bsale_client(config: BsaleConfig, client: httpx.AsyncClient | None = None) -> BsaleClient:
    """
    Wires all Bsale dependencies together and returns a ready-to-use BsaleClient.

    Accepts an optional httpx.AsyncClient so callers can supply their own
    transport (proxies, mock transports in tests) without touching internal wiring.
    """
    http = HttpClient(config.base_url, client=client, timeout=config.timeout_ms / 1000)
    base = BsaleBaseClient(config, http=http)
    return BsaleClient(base)


def create_bsale_client(client: httpx.AsyncClient | None = None) -> BsaleClient:
    """
    Convenience function that loads config from environment variables
    and returns a ready-to-use BsaleClient.

    Raises ValueError if any required environment variable is missing.
    """
    config = load_bsale_config()
    return build_bsale_client(config, client=client)
