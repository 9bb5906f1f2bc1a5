import asyncio
import os
import logging
from dotenv import load_dotenv
from apps.backend.clients.bsale.errors import BsaleError
from apps.backend.clients.bsale.factory import create_bsale_client
from apps.backend.clients.retry import retry_with_backoff

def configure_logging() -> logging.Logger:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger(__name__)

async def main():
    load_dotenv()

    logger = configure_logging()

    try:
        bsale = create_bsale_client()
    except ValueError as e:
        logger.error("Error loading Bsale config: %s", e)
        logger.info("Aborting... Please set the required environment variables and try again.")
        return

    async with bsale:
        try:
            product_count = await retry_with_backoff(bsale.products.count)
            page = await bsale.products.list({"limit": 5, "expand": ["product_type"]})
        except BsaleError as e:
            logger.error("Bsale request failed (%s): %s", e.kind.value, e)
            return

    logger.info("%d products, showing %d:", product_count, len(page["items"]))
    for product in page["items"]:
        logger.info("  - %s (id: %s)", product.get("name"), product.get("id"))


if __name__ == "__main__":
    asyncio.run(main())
