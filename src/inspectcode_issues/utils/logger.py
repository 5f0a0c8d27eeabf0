import logging
import colorlog

PACKAGE_LOGGER = "inspectcode_issues"

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def setup_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Logger for report conversion; skipped findings are logged at DEBUG"""

    logger = colorlog.getLogger(name)
    if logger.handlers:
        return logger

    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        '%(log_color)s%(levelname)-8s%(reset)s %(name)s: %(message)s',
        log_colors=LOG_COLORS,
    ))

    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    return logger


def set_level(verbose: bool) -> None:
    """Show per-finding skip messages when verbose"""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


logger = setup_logger()
