"""
Logging setup for evonet scripts and experiments.

The library itself only creates module-level loggers (logging.getLogger(__name__))
and never configures handlers. Scripts call setup_logging() once at startup.

Usage:
    from evonet.utils.logger import setup_logging

    setup_logging(level=logging.DEBUG)
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT  = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%H:%M:%S'

def setup_logging(level: int = logging.INFO,
                  log_file: str | Path | None = None,
                  console_output: bool = True,
                  name: str | None = None) -> logging.Logger:
    """
    Configure a logger (the root logger by default, so that records from
    evonet and from the calling script end up in the same place).

    Calling it again replaces the handlers installed by a previous call.

    Parameters:
        level:          Minimum level to emit
        log_file:       Optional path of a file to append log records to
        console_output: Whether to write log records to stdout
        name:           Logger to configure (None = root logger)

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
