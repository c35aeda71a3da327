import argparse
import sys
from typing import Optional

from . import __version__
from .config import ServerConfig
from .logger import get_logger, set_level
from .server import Server

logger = get_logger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> ServerConfig:
    parser = argparse.ArgumentParser(
        prog="rawhttp",
        description="Minimal HTTP/1.1 server on raw asyncio streams",
    )
    parser.add_argument(
        "--directory", "-d",
        default=None,
        help="Directory served and written by /files/<name>",
    )
    parser.add_argument(
        "--host", "-H",
        default="localhost",
        help="Host to bind to (default: localhost)",
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=4221,
        help="Port to listen on (default: 4221)",
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=30,
        help="Seconds to wait for a request before closing (default: 30)",
    )
    parser.add_argument(
        "--log-level", "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"rawhttp {__version__}",
    )
    args = parser.parse_args(argv)
    return ServerConfig(host=args.host,
                        port=args.port,
                        directory=args.directory,
                        connection_timeout=args.timeout,
                        log_level=args.log_level)


def main(argv: Optional[list[str]] = None) -> None:
    config = parse_args(argv)
    set_level(config.log_level)
    try:
        Server(config).run()
    except OSError as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
