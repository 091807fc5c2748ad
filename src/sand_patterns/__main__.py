"""Pattern API entry point."""

import asyncio
import uvicorn
from loguru import logger

from sand_patterns.api.pattern.pattern_app import create_pattern_service, load_config, setup_logging


async def main():
    """Start pattern service."""
    try:
        config = load_config()
        setup_logging(config.get("log_level", "INFO"), config.get("log_dir", "logs"))

        app = create_pattern_service(config)

        server_config = uvicorn.Config(
            app=app,
            host=config.get("host", "0.0.0.0"),
            port=config.get("port", 8010),
            log_level=config.get("log_level", "info").lower()
        )
        server = uvicorn.Server(server_config)
        await server.serve()

    except Exception as e:
        logger.error(f"Failed to start pattern service: {e}")
        raise


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
