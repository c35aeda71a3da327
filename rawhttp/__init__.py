"""
rawhttp - A minimal HTTP/1.1 request/response engine on raw asyncio streams.
"""

__version__ = "0.1.0"

from .config import ServerConfig
from .files import FileStore, PathOutsideBaseError
from .handlers import build_router
from .headers import Headers, normalize_header_name
from .logger import get_logger, logger
from .request import Request
from .response import Response
from .responses import StatusCode
from .router import Router
from .server import Server

__all__ = [
    "FileStore",
    "Headers",
    "PathOutsideBaseError",
    "Request",
    "Response",
    "Router",
    "Server",
    "ServerConfig",
    "StatusCode",
    "build_router",
    "get_logger",
    "logger",
    "normalize_header_name",
]
