from .logger import logger, set_level, setup_logger

__all__ = [
    "logger",
    "set_level",
    "setup_logger",
]
