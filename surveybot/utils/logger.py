"""
Logging setup shared by the polling bot and the one-shot parser.

Diagnostics (API failures, skipped updates, save errors) go to the console
and to a rotating file; extraction results themselves go to RESULT_FILE.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from surveybot.config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Per-request connection chatter from the HTTP stacks under requests and groq
NOISY_LOGGERS = ("urllib3", "httpx", "httpcore")


def setup_logging(settings: Settings, mode: str = "bot") -> None:
    """
    Configure root logging once per process.

    `mode` only labels the startup line so bot and CLI runs can be told
    apart in a shared log file.
    """
    log_level = settings.LOG_LEVEL.upper()
    if log_level not in VALID_LEVELS:
        raise ValueError(f"Invalid LOG_LEVEL: {settings.LOG_LEVEL}")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if root_logger.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = Path(settings.LOG_FILE_PATH)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        filename=log_file_path,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    quiet_level = max(logging.getLevelName(log_level), logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    root_logger.info(
        "surveybot %s logging to %s (level=%s, results -> %s, model=%s)",
        mode,
        log_file_path,
        log_level,
        settings.RESULT_FILE,
        settings.GROQ_MODEL_NAME,
    )
