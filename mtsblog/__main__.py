"""Run the API with uvicorn: ``python -m mtsblog``."""

import logging

import uvicorn

from mtsblog.config import settings

logger = logging.getLogger("mtsblog")


def main() -> None:
    from mtsblog.main import app

    logger.info("Server is running on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
