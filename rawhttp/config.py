from dataclasses import dataclass
from typing import Optional

from .request import MAX_REQUEST_SIZE, READ_SIZE


@dataclass(frozen=True)
class ServerConfig:
    host: str = "localhost"
    port: int = 4221
    directory: Optional[str] = None
    connection_timeout: float = 30
    read_size: int = READ_SIZE
    max_request_size: int = MAX_REQUEST_SIZE
    log_level: str = "INFO"
