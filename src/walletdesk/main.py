"""Main entry point - runs the API and pages with uvicorn."""

import asyncio
import logging
import signal
import sys

import uvicorn

from walletdesk.circle.errors import ConfigurationError
from walletdesk.config import Settings, get_settings

logger = logging.getLogger(__name__)


class Application:
    """Runs the web server until a shutdown signal arrives."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.server = None

    async def start(self):
        """Start the API server."""
        from walletdesk.api.app import create_app

        logger.info("Starting walletdesk...")
        logger.info(f"Environment: {self.settings.environment}")

        config = uvicorn.Config(
            create_app(),
            host=self.settings.api_host,
            port=self.settings.api_port,
            log_level="debug" if self.settings.debug else "info",
        )
        self.server = uvicorn.Server(config)
        logger.info(f"Starting API server on {self.settings.api_host}:{self.settings.api_port}")
        await self.server.serve()

    def shutdown(self):
        """Signal shutdown."""
        logger.info("Shutdown requested")
        if self.server:
            self.server.should_exit = True


def configure_logging(debug: bool) -> None:
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main():
    """Main entry point."""
    try:
        settings = get_settings()
    except ValueError as e:
        configure_logging(debug=False)
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    configure_logging(settings.debug)
    app = Application(settings)

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, app.shutdown)

    try:
        loop.run_until_complete(app.start())
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)
    finally:
        loop.close()


if __name__ == "__main__":
    main()
