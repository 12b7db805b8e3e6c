"""
Subscriptions API — Server Entry Point
========================================

Usage:
    python -m subscriptions_api
    subscriptions-api                 # console script

Host and port come from APPLICATION_HOST / APPLICATION_PORT (or .env).
"""

import uvicorn

from subscriptions_api.config import settings


def main() -> None:
    uvicorn.run(
        "subscriptions_api.main:app",
        host=settings.application_host,
        port=settings.application_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
