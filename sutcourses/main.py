"""Command that loads the configuration and starts the course API server."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from .config import ConfigError, load_config
from .server import serve

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server; return 1 when the environment is not usable."""
    parser = argparse.ArgumentParser(
        prog="sutcourses",
        description="Serve the course search API configured by COURSE_REG_URL and SERVER_PORT.",
    )
    parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG)

    try:
        config = load_config()
    except ConfigError as exc:
        logger.error("Failed to load ENV %s", exc)
        return 1

    logger.info("ENV has been loaded🎉")
    asyncio.run(serve(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())