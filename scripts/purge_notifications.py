#!/usr/bin/env python3
"""Delete expired notifications.

Expired notifications are already hidden from every read; this reclaims the
rows. Meant to run from a scheduler (cron, k8s CronJob).
"""

import asyncio
import sys

import logfire

from stackit.config import Settings
from stackit.domain.service import NotificationService
from stackit.util.di.container import create_container
from stackit.util.logging import setup_logging
from stackit.util.observability import configure_logfire


async def purge() -> int:
    container = create_container()
    try:
        async with container() as request_container:
            notification_service = await request_container.get(NotificationService)
            return await notification_service.purge_expired()
    finally:
        await container.close()


def main() -> int:
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        count = asyncio.run(purge())
        logfire.info("Notification purge finished", count=count)
        return 0

    except Exception as e:
        logfire.error(
            "Notification purge failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
