from typing import Optional, Union

from .headers import Headers
from .responses import HTTP_VERSION, StatusCode, get_status_line

Body = Union[str, bytes]


class Response:
    def __init__(self,
                 version: str = HTTP_VERSION,
                 status_code: int = StatusCode.OK,
                 reason_phrase: str = "",
                 headers: Optional[dict[str, str]] = None,
                 body: Body = "") -> None:
        self.version: str = version
        self.status_code: int = int(status_code)
        self.reason_phrase: str = reason_phrase or ""
        self.headers: Headers = Headers()
        if headers:
            for key, value in headers.items():
                self.set_header(key, value)
        self.body: Body = body if body is not None else ""

    @classmethod
    def status(cls,
               status_code: StatusCode,
               headers: Optional[dict[str, str]] = None,
               body: Body = "") -> "Response":
        return cls(HTTP_VERSION, status_code, status_code.phrase, headers, body)

    def get_header(self, name: str) -> Optional[str]:
        return self.headers.get(name)

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def to_bytes(self) -> bytes:
        """Serialize to wire format.

        Headers are written in insertion order and the body follows the
        blank line unchanged. ``Content-Length`` is never added here.
        """
        out = bytearray(get_status_line(self.status_code,
                                        self.reason_phrase,
                                        self.version))
        for key, value in self.headers.items():
            out.extend(f"{key}: {value}\r\n".encode())
        out.extend(b"\r\n")
        if isinstance(self.body, str):
            out.extend(self.body.encode("utf-8"))
        else:
            out.extend(self.body)
        return bytes(out)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __repr__(self) -> str:
        return f"<Response {self.status_code} {self.reason_phrase!r}>"
