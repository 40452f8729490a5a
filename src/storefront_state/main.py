import asyncio

import structlog

from storefront_state.infrastructure.configuration import Settings
from storefront_state.infrastructure.observability import configure_logging
from storefront_state.infrastructure.resolution import build_storefront_session

logger = structlog.get_logger()


async def run(settings: Settings | None = None) -> None:
    """Run a headless storefront session: alerts poll until the task is cancelled."""
    settings = settings or Settings()
    configure_logging(settings.log_level, settings.log_format)

    session = build_storefront_session(settings)
    session.start()
    try:
        await asyncio.Event().wait()
    finally:
        await session.stop()


def main() -> None:
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("Storefront session interrupted")


if __name__ == "__main__":
    main()
