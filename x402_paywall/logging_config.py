"""
Logging configuration for the command line tools
"""

import logging
import sys
from typing import TextIO

# Loggers of the RPC stack, they log every request at DEBUG
RPC_LOGGERS = ("web3", "aiohttp", "asyncio")


def level_for_verbosity(verbosity: int) -> tuple[int, int]:
    """
    Maps the number of -v flags to (package level, RPC stack level).
    RPC requests are only logged from -vvv on.
    """
    if verbosity <= 0:
        return logging.WARNING, logging.WARNING
    if verbosity == 1:
        return logging.INFO, logging.WARNING
    if verbosity == 2:
        return logging.DEBUG, logging.WARNING
    return logging.DEBUG, logging.DEBUG


def setup_logging(
        level: int = logging.INFO,
        *,
        rpc_level: int = logging.WARNING,
        stream: TextIO = None,
) -> None:
    """
    One handler on the root logger, writing to stderr by default so that
    stdout only carries command results.
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)-8s %(name)s %(filename)s:%(lineno)d %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    for name in RPC_LOGGERS:
        logging.getLogger(name).setLevel(rpc_level)
