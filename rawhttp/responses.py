from enum import IntEnum

HTTP_VERSION = "HTTP/1.1"


class StatusCode(IntEnum):
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    INTERNAL_SERVER_ERROR = 500

    @property
    def phrase(self) -> str:
        return REASON_PHRASES[self]


REASON_PHRASES = {
    StatusCode.OK: "OK",
    StatusCode.CREATED: "Created",
    StatusCode.BAD_REQUEST: "Bad Request",
    StatusCode.NOT_FOUND: "Not Found",
    StatusCode.METHOD_NOT_ALLOWED: "Method Not Allowed",
    StatusCode.INTERNAL_SERVER_ERROR: "Internal Server Error",
}


def get_status_line(status_code: int,
                    reason_phrase: str = "",
                    version: str = HTTP_VERSION) -> bytes:
    status_line = "%s %d %s\r\n"
    return (status_line % (version, status_code, reason_phrase)).encode("utf-8")
