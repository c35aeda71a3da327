import logging
from logging import Logger
from typing import Optional, Union

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(asctime)s - %(message)s",
    datefmt="%d-%m-%Y %H-%M-%S",
)


logger = logging.getLogger("rawhttp")

def get_logger(name:Optional[str]=None) -> Logger:
    if name:
        return logging.getLogger(f"rawhttp.{name.removeprefix('rawhttp.')}")
    return logger

def set_level(level: Union[int, str]) -> None:
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
