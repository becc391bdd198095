"""
Customer Portal - Process Entry Point
=======================================

Usage:
    python -m customer_portal
    customer-portal              (console script)

Reads Settings once, builds the app and serves it with uvicorn until the
process is terminated (SIGINT / SIGTERM are handled by uvicorn).
"""

import uvicorn

from customer_portal.config import Settings
from customer_portal.main import create_app


def main() -> None:
    settings = Settings()
    app = create_app(settings, port=settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
