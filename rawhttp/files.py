from pathlib import Path
from typing import Union

from .logger import get_logger

logger = get_logger(__name__)


class PathOutsideBaseError(ValueError):
    pass


class FileStore:
    """Blocking file access confined to a single base directory."""

    def __init__(self, base_dir: Union[str, Path]) -> None:
        self.base_dir: Path = Path(base_dir).resolve()

    def resolve(self, name: str) -> Path:
        if "\x00" in name:
            msg = f"invalid file name: {name!r}"
            raise PathOutsideBaseError(msg)
        try:
            path = (self.base_dir / name).resolve()
        except ValueError as err:
            msg = f"invalid file name: {name!r}"
            raise PathOutsideBaseError(msg) from err
        if not path.is_relative_to(self.base_dir) or path == self.base_dir:
            logger.warning(f"Rejected path outside {self.base_dir}: {name}")
            msg = f"path escapes base directory: {name}"
            raise PathOutsideBaseError(msg)
        return path

    def read(self, name: str) -> bytes:
        return self.resolve(name).read_bytes()

    def write(self, name: str, data: Union[str, bytes]) -> None:
        path = self.resolve(name)
        if isinstance(data, str):
            data = data.encode("utf-8")
        path.write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes to {path}")
