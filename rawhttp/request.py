import asyncio
from dataclasses import dataclass, field
from typing import Optional

from .headers import Headers

# Constants
CRLF = "\r\n"
HEADER_TERMINATOR = b"\r\n\r\n"
READ_SIZE = 4096
MAX_REQUEST_SIZE = 1024 * 1024


@dataclass
class Request:
    method: str = ""
    target: str = ""
    version: str = ""
    headers: Headers = field(default_factory=Headers)
    body: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, Headers):
            self.headers = Headers(self.headers or {})

    def get_header(self, name: str) -> Optional[str]:
        return self.headers.get(name)

    @classmethod
    def parse(cls, data: bytes) -> "Request":
        """Build a request from the raw bytes of one HTTP/1.1 message.

        Parsing is tolerant: missing request-line tokens become empty
        strings and undecodable bytes are replaced, so any input yields a
        ``Request``. The body is everything after the first blank line,
        CRLFs included.
        """
        text = data.decode("utf-8", errors="replace")
        head, _, body = text.partition(CRLF + CRLF)

        request_line, *field_lines = head.split(CRLF)
        parts = request_line.split(" ")
        method, target, version = (parts + ["", "", ""])[:3]

        headers = Headers()
        for line in field_lines:
            if line:
                headers.parse_line(line)

        return cls(method=method,
                   target=target,
                   version=version,
                   headers=headers,
                   body=body)

    @classmethod
    async def from_reader(cls,
                          reader: asyncio.StreamReader,
                          read_size: int = READ_SIZE,
                          max_size: int = MAX_REQUEST_SIZE) -> Optional["Request"]:
        buf = bytearray(await reader.read(read_size))
        if not buf:
            return None

        idx = buf.find(HEADER_TERMINATOR)
        if idx != -1:
            expected = idx + len(HEADER_TERMINATOR) + _content_length(buf[:idx])
            while len(buf) < min(expected, max_size):
                chunk = await reader.read(read_size)
                if not chunk:
                    break
                buf.extend(chunk)

        return cls.parse(bytes(buf[:max_size]))


def _content_length(head: bytes) -> int:
    headers = Headers()
    for line in head.decode("utf-8", errors="replace").split(CRLF)[1:]:
        if line:
            headers.parse_line(line)
    try:
        return max(int(headers.get("Content-Length") or 0), 0)
    except ValueError:
        return 0
