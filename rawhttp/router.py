import asyncio
import inspect
from dataclasses import dataclass
from typing import Awaitable, Callable, Union

from .logger import get_logger
from .request import Request
from .response import Response
from .responses import StatusCode

logger = get_logger(__name__)

Handler = Callable[[Request], Union[Response, Awaitable[Response]]]


@dataclass
class Route:
    path: str
    handler: Handler
    prefix: bool = False

    def matches(self, target: str) -> bool:
        if self.prefix:
            return target.startswith(self.path)
        return target == self.path


class Router:
    def __init__(self) -> None:
        self.routes: list[Route] = []

    def register_handler(self,
                         path: str,
                         handler: Handler,
                         prefix: bool = False) -> None:
        self.routes.append(Route(path, handler, prefix))

    def match(self, target: str) -> Union[Handler, None]:
        for route in self.routes:
            if route.matches(target):
                return route.handler
        return None

    async def dispatch(self, request: Request) -> Response:
        """Run the first route matching ``request.target``.

        Routes are tried in registration order. Coroutine handlers are
        awaited; plain callables run in the default executor since they
        may block on disk.
        """
        handler = self.match(request.target)
        if not handler:
            logger.debug(f"No handler found for {request.method} {request.target}")
            return Response.status(StatusCode.NOT_FOUND)

        if inspect.iscoroutinefunction(handler):
            return await handler(request)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, handler, request)
