from typing import Optional

from .files import FileStore, PathOutsideBaseError
from .logger import get_logger
from .request import Request
from .response import Response
from .responses import StatusCode
from .router import Router

logger = get_logger(__name__)

ECHO_PREFIX = "/echo/"
FILES_PREFIX = "/files/"


def text_response(body: str) -> Response:
    return Response.status(
        StatusCode.OK,
        {
            "Content-Type": "text/plain",
            "Content-Length": str(len(body.encode("utf-8"))),
        },
        body,
    )


async def handle_root(request: Request) -> Response:
    return Response.status(StatusCode.OK)


async def handle_echo(request: Request) -> Response:
    return text_response(request.target[len(ECHO_PREFIX):])


async def handle_user_agent(request: Request) -> Response:
    if not request.headers:
        return Response.status(StatusCode.BAD_REQUEST)
    user_agent = request.get_header("User-Agent")
    if not user_agent:
        return Response.status(StatusCode.BAD_REQUEST)
    return text_response(user_agent)


class FileHandler:
    """Reads and writes ``/files/<name>`` under the configured directory.

    Called synchronously; the router runs it off the event loop.
    """

    def __init__(self, store: Optional[FileStore]) -> None:
        self.store = store

    def __call__(self, request: Request) -> Response:
        name = request.target[len(FILES_PREFIX):]
        if request.method == "GET":
            return self.get(name)
        if request.method == "POST":
            return self.post(name, request.body)
        return Response.status(StatusCode.METHOD_NOT_ALLOWED)

    def get(self, name: str) -> Response:
        if self.store is None:
            return Response.status(StatusCode.NOT_FOUND)
        try:
            data = self.store.read(name)
        except (OSError, PathOutsideBaseError) as e:
            logger.debug(f"Cannot read {name!r}: {e}")
            return Response.status(StatusCode.NOT_FOUND)
        return Response.status(
            StatusCode.OK,
            {
                "Content-Type": "application/octet-stream",
                "Content-Length": str(len(data)),
            },
            data,
        )

    def post(self, name: str, body: str) -> Response:
        if not body:
            return Response.status(StatusCode.BAD_REQUEST)
        if self.store is None:
            logger.error("POST to /files/ with no directory configured")
            return Response.status(StatusCode.INTERNAL_SERVER_ERROR)
        try:
            self.store.write(name, body)
        except PathOutsideBaseError:
            return Response.status(StatusCode.BAD_REQUEST)
        except OSError as e:
            logger.error(f"Failed to write {name!r}: {e}")
            return Response.status(StatusCode.INTERNAL_SERVER_ERROR)
        return Response.status(StatusCode.CREATED)


def build_router(store: Optional[FileStore] = None) -> Router:
    router = Router()
    router.register_handler("/", handle_root)
    router.register_handler(ECHO_PREFIX, handle_echo, prefix=True)
    router.register_handler("/user-agent", handle_user_agent)
    router.register_handler(FILES_PREFIX, FileHandler(store), prefix=True)
    return router
