import asyncio
import tempfile
import unittest
from typing import Optional

from rawhttp.config import ServerConfig
from rawhttp.request import Request
from rawhttp.response import Response
from rawhttp.router import Router
from rawhttp.server import Server


class TestServer(unittest.TestCase):
    def setUp(self) -> None:
        self.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self.loop)
        self.tmp = tempfile.TemporaryDirectory()
        self.config = ServerConfig(host="127.0.0.1",
                                   port=0,
                                   directory=self.tmp.name,
                                   connection_timeout=1)

    def tearDown(self) -> None:
        self.loop.close()
        self.tmp.cleanup()

    def exchange(self, *payloads: bytes, server: Optional[Server] = None) -> list[bytes]:
        async def run() -> list[bytes]:
            listener = await (server or Server(self.config)).start()
            port = listener.sockets[0].getsockname()[1]
            replies = []
            try:
                for payload in payloads:
                    reader, writer = await asyncio.open_connection("127.0.0.1", port)
                    if payload:
                        writer.write(payload)
                        await writer.drain()
                    else:
                        writer.write_eof()
                    replies.append(await reader.read())
                    writer.close()
                    await writer.wait_closed()
            finally:
                listener.close()
                await listener.wait_closed()
            return replies

        return self.loop.run_until_complete(run())

    def test_root(self) -> None:
        reply, = self.exchange(b"GET / HTTP/1.1\r\nHost: localhost\r\n\r\n")
        self.assertEqual(reply, b"HTTP/1.1 200 OK\r\n\r\n")

    def test_echo(self) -> None:
        reply, = self.exchange(b"GET /echo/hello HTTP/1.1\r\n\r\n")
        self.assertEqual(
            reply,
            b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n"
            b"Content-Length: 5\r\n\r\nhello",
        )

    def test_post_then_get_file(self) -> None:
        created, fetched = self.exchange(
            b"POST /files/note.txt HTTP/1.1\r\nContent-Length: 2\r\n\r\nhi",
            b"GET /files/note.txt HTTP/1.1\r\n\r\n",
        )
        self.assertEqual(created, b"HTTP/1.1 201 Created\r\n\r\n")
        self.assertTrue(fetched.startswith(b"HTTP/1.1 200 OK\r\n"))
        self.assertIn(b"Content-Type: application/octet-stream\r\n", fetched)
        self.assertTrue(fetched.endswith(b"\r\n\r\nhi"))

    def test_server_survives_bad_input(self) -> None:
        empty, garbled, ok = self.exchange(
            b"",
            b"\xff\xfe garbage\r\n\r\n",
            b"GET /nope HTTP/1.1\r\n\r\n",
        )
        self.assertEqual(empty, b"")
        self.assertEqual(garbled, b"HTTP/1.1 404 Not Found\r\n\r\n")
        self.assertEqual(ok, b"HTTP/1.1 404 Not Found\r\n\r\n")

    def test_handler_error_returns_500(self) -> None:
        async def broken(request: Request) -> Response:
            raise RuntimeError("boom")

        router = Router()
        router.register_handler("/", broken)
        reply, = self.exchange(b"GET / HTTP/1.1\r\n\r\n",
                               server=Server(self.config, router))
        self.assertEqual(reply, b"HTTP/1.1 500 Internal Server Error\r\n\r\n")

    def test_idle_client_times_out(self) -> None:
        async def run() -> bytes:
            config = ServerConfig(host="127.0.0.1", port=0, connection_timeout=0.2)
            listener = await Server(config).start()
            port = listener.sockets[0].getsockname()[1]
            try:
                reader, writer = await asyncio.open_connection("127.0.0.1", port)
                reply = await asyncio.wait_for(reader.read(), timeout=5)
                writer.close()
                await writer.wait_closed()
            finally:
                listener.close()
                await listener.wait_closed()
            return reply

        self.assertEqual(self.loop.run_until_complete(run()), b"")


    def test_shutdown_does_not_wait_for_idle_clients(self) -> None:
        async def run() -> bytes:
            config = ServerConfig(host="127.0.0.1", port=0, connection_timeout=30)
            listener = await Server(config).start()
            port = listener.sockets[0].getsockname()[1]
            reader, writer = await asyncio.open_connection("127.0.0.1", port)
            await asyncio.sleep(0.1)
            await asyncio.wait_for(Server.shutdown(listener), timeout=5)
            self.assertFalse(listener.is_serving())
            reply = await asyncio.wait_for(reader.read(), timeout=5)
            writer.close()
            return reply

        self.assertEqual(self.loop.run_until_complete(run()), b"")

if __name__ == "__main__":
    unittest.main()
