
"""Logging setup for the "tetris" logger namespace"""
import logging
import sys
from typing import Optional, Union

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Sends "tetris.*" records to stdout, and to log_file when given.

    Safe to call again: earlier handlers are dropped first.
    """
    logger = logging.getLogger("tetris")
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    formatter = logging.Formatter(FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        logger.addHandler(h)

    logger.debug("Logging to %s", log_file or "stdout")
    return logger
