import asyncio
import signal
import sys
from typing import Optional

from .config import ServerConfig
from .files import FileStore
from .handlers import build_router
from .logger import get_logger
from .request import Request
from .response import Response
from .responses import StatusCode
from .router import Router

logger = get_logger(__name__)


class Server:
    def __init__(self,
                 config: Optional[ServerConfig] = None,
                 router: Optional[Router] = None) -> None:
        self.config: ServerConfig = config or ServerConfig()
        if router is None:
            store = FileStore(self.config.directory) if self.config.directory else None
            router = build_router(store)
        self.router: Router = router

    async def __handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        addr = writer.get_extra_info("peername")
        client_id = f"{addr[0]}:{addr[1]}" if addr else "unknown"
        logger.debug(f"New connection from {client_id}")
        written = False
        try:
            r = await asyncio.wait_for(
                Request.from_reader(reader,
                                    self.config.read_size,
                                    self.config.max_request_size),
                timeout=self.config.connection_timeout,
            )
            if r is None:
                logger.debug(f"{client_id} closed without sending a request")
                return

            res = await self.router.dispatch(r)
            logger.info(f"{client_id} {r.method} {r.target} -> {res.status_code}")
            written = True
            writer.write(res.to_bytes())
            await writer.drain()

        except asyncio.TimeoutError:
            logger.warning(f"Connection timeout while reading request from {client_id}")
        except ConnectionError as e:
            logger.warning(f"Connection error with {client_id}: {e}")
        except Exception as e:
            logger.error(f"Unhandled error for {client_id}: {e}")
            if not written:
                await self.__send_error_response(writer)
        finally:
            logger.debug(f"Closing connection with {client_id}")
            writer.close()
            try:
                await writer.wait_closed()
            except ConnectionError:
                pass

    @staticmethod
    async def __send_error_response(writer: asyncio.StreamWriter) -> None:
        try:
            writer.write(Response.status(StatusCode.INTERNAL_SERVER_ERROR).to_bytes())
            await writer.drain()
        except ConnectionError as e:
            logger.error(f"Error sending response: {e}")

    async def start(self) -> asyncio.Server:
        server = await asyncio.start_server(
            self.__handle_connection, self.config.host, self.config.port
        )
        logger.info(f"Server running on {self.config.host}:{self.config.port}")
        return server

    def run(self) -> None:
        try:
            logger.debug("Trying to start server...")
            asyncio.run(self.__run_async())
        except KeyboardInterrupt:
            logger.info("Server shutdown initiated....")
        finally:
            logger.info("Server stopped cleanly....Goodbye!")

    async def __run_async(self) -> None:
        server = await self.start()

        if sys.platform != "win32":
            loop = asyncio.get_running_loop()

            for sig in (signal.SIGINT, signal.SIGTERM):
                loop.add_signal_handler(
                    sig, lambda: asyncio.create_task(self.shutdown(server))
                )

        async with server:
            try:
                await server.serve_forever()
            except asyncio.CancelledError:
                pass

    @staticmethod
    async def shutdown(server: asyncio.Server) -> None:
        logger.info("Shutting down server gracefully...")

        # wait_closed() waits on open connections, so cancel them first
        tasks = [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

        server.close()
        await server.wait_closed()
        logger.info("Server shutdown complete.")
