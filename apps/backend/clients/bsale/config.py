import os
from dataclasses import dataclass
from datetime import datetime, timezone

DEFAULT_BASE_URL = "https://api.bsale.io/v1"
DEFAULT_TIMEOUT_MS = 30000


@dataclass
class BsaleCredentials:
    """ OAuth credentials for Bsale. Token acquisition and refresh happen elsewhere. """
    access_token: str
    refresh_token: str
    expires_at: datetime

    def is_expired(self) -> bool:
        # Naive datetimes are taken as UTC, as in load_bsale_config.
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return datetime.now(timezone.utc) >= expires_at


@dataclass(frozen=True)
class BsaleConfig:
    """ Configuration for the Bsale client. """
    credentials: BsaleCredentials
    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS


def _require_env(key: str) -> str:
    value = os.getenv(key)
    if value is None:
        raise ValueError(f"Missing required environment variable: {key}")
    return value


def _parse_expires_at(raw: str) -> datetime:
    """ Accepts a Unix timestamp in seconds or an ISO-8601 date. Naive values are taken as UTC. """
    if raw.strip().replace(".", "", 1).isdigit():
        return datetime.fromtimestamp(float(raw), tz=timezone.utc)
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as e:
        raise ValueError(f"Invalid BSALE_EXPIRES_AT value: {raw!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def load_bsale_config() -> BsaleConfig:
    """ Load Bsale configuration from environment variables. """
    credentials = BsaleCredentials(
        access_token=_require_env("BSALE_ACCESS_TOKEN"),
        refresh_token=_require_env("BSALE_REFRESH_TOKEN"),
        expires_at=_parse_expires_at(_require_env("BSALE_EXPIRES_AT")),
    )
    timeout_ms = os.getenv("BSALE_TIMEOUT_MS")
    return BsaleConfig(
        credentials=credentials,
        base_url=os.getenv("BSALE_BASE_URL", DEFAULT_BASE_URL),
        timeout_ms=int(timeout_ms) if timeout_ms else DEFAULT_TIMEOUT_MS,
    )
