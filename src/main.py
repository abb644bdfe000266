"""Gateway entry point."""

import asyncio
import logging
import signal
import sys

from src.config import SERVICE_NAME, SERVICE_VERSION, Settings, settings
from src.errors import ServiceInitError
from src.integrations.services import init_services
from src.web.server import WebServer, create_app, route_table

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )


async def serve(config: Settings) -> None:
    """Initialize collaborators, serve until SIGTERM/SIGINT, then shut down.

    Raises:
        ServiceInitError: if any collaborator client cannot be built. No
            socket is opened in that case.
    """
    logger.info("%s v%s starting", SERVICE_NAME, SERVICE_VERSION)
    services = init_services(config)

    app = create_app(services, config)
    server = WebServer(app, config.host, config.port)

    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, _request_stop, sig, stop)

    try:
        await server.start()
        logger.info(
            "Environment: %s | Project: %s | Region: %s | Bucket: %s",
            config.environment,
            config.google_cloud_project,
            config.google_cloud_region,
            config.gcs_bucket_name,
        )
        for method, path in route_table(app):
            logger.info("  %-4s %s", method, path)

        await stop.wait()
    finally:
        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.remove_signal_handler(sig)
        await server.stop()
        await services.close()


def _request_stop(sig: signal.Signals, stop: asyncio.Event) -> None:
    logger.info("%s received, shutting down gracefully...", sig.name)
    stop.set()


def main() -> None:
    """Run the gateway. Exits 1 if startup fails, 0 after a termination signal."""
    _configure_logging(settings.log_level)
    try:
        asyncio.run(serve(settings))
    except ServiceInitError as exc:
        logger.error("Failed to initialize services: %s. Check credentials and configuration.", exc)
        sys.exit(1)
    except Exception:
        logger.exception("Failed to start server")
        sys.exit(1)


if __name__ == "__main__":
    main()
