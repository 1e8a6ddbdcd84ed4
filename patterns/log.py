import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from .constants import CONSOLE_LOG_FORMAT, FILE_LOG_FORMAT, LOG_BACKUP_COUNT, LOG_MAX_BYTES


def _own_handler(root_logger, file_handler):
    for handler in root_logger.handlers:
        if getattr(handler, "_mdpattern", False) and isinstance(handler, RotatingFileHandler) == file_handler:
            return handler
    return None


def setup_logging(level: Union[int, str] = logging.INFO, log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger for scripts and notebooks.

    Loggers created in the package modules inherit this configuration. Handlers
    are only added once, calling this again updates the console level.

    Parameters
    ----------
    level : Union[int, str], default=logging.INFO
        Level of the console handler
    log_dir : str, optional
        If given, debug messages are also written to a rotating, date-stamped
        log file in this directory

    Returns
    -------
    logging.Logger
        The root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    console_handler = _own_handler(root_logger, file_handler=False)
    if console_handler is None:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
        console_handler._mdpattern = True
        root_logger.addHandler(console_handler)
    console_handler.setLevel(level)

    if log_dir is not None and _own_handler(root_logger, file_handler=True) is None:
        os.makedirs(log_dir, exist_ok=True)
        log_filename = f"mdpattern_{datetime.now().strftime('%Y-%m-%d')}.log"
        # file handler logs even debug messages
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, log_filename), maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        file_handler._mdpattern = True
        root_logger.addHandler(file_handler)

    return root_logger
