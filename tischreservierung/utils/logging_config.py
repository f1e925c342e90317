import logging
from logging.handlers import RotatingFileHandler
import os
from typing import Optional

from tischreservierung.config import settings

LOGGER_NAME = "tischreservierung"

CONSOLE_FORMAT = '%(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: Optional[str] = None, debug: Optional[bool] = None) -> logging.Logger:
    """
    Richtet den Anwendungslogger ein: Konsole + rotierende Datei <log_dir>/app.log.
    Das Aktivitätsprotokoll (logs.txt) ist davon getrennt.

    Handler werden nur beim ersten Aufruf angehängt.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    log_dir = log_dir or settings.log_dir
    if debug is None:
        debug = settings.debug
    os.makedirs(log_dir, exist_ok=True)

    # Konsole nur für Warnungen, sonst stört es das Menü
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, settings.app_log_file),
        maxBytes=settings.app_log_max_bytes,
        backupCount=settings.app_log_backup_count,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger
