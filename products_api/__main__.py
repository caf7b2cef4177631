"""Run the API with uvicorn: python -m products_api"""

import logging

import uvicorn

from products_api.config import get_settings
from products_api.infrastructure.observability import setup_logging

logger = logging.getLogger("products_api")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server running on port {settings.port}")
    # log_config=None keeps the handler installed above
    uvicorn.run(
        "products_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
