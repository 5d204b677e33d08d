import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

LOGGER_NAME = "resemblance"

def setup_logging(
    log_dir: Optional[str] = "./logs",
    console: bool = True,
    level: str = "INFO",
) -> Tuple[logging.Logger, logging.Logger]:
    """
    Setup logging with an optional file handler and console handler.

    Args:
        log_dir: Directory for log files; None disables the file handler
        console: Whether to enable console logging
        level: Package logging level

    Returns:
        The package logger and the ``resemblance.summary`` logger.
    """
    handlers = {}
    log_path = None
    if log_dir is not None:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = str(Path(log_dir) / f"{LOGGER_NAME}_{ts}.log")
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "plain",
            "filename": log_path,
            "encoding": "utf-8",
            "mode": "w",
            "level": "DEBUG",   # capture everything in file
        }

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "{asctime} {levelname:<7} {name} - {message}",
                "style": "{",
            },
        },
        "handlers": handlers,
        "loggers": {
            LOGGER_NAME: {
                "level": level.upper(),
                "handlers": list(handlers),
                "propagate": False,
            },
        },
        "root": {"handlers": []},  # keep root empty
    }

    logging.config.dictConfig(config)
    logging.captureWarnings(True)

    logger = logging.getLogger(LOGGER_NAME)
    console_formatter = logging.Formatter("{levelname:<7} {message}", style="{")

    # summary lines go to the console even when the package level is quiet
    summary_logger = logging.getLogger(f"{LOGGER_NAME}.summary")
    summary_logger.setLevel(logging.INFO)
    summary_logger.propagate = False
    for handler in list(summary_logger.handlers):
        summary_logger.removeHandler(handler)
        handler.close()

    if log_path:
        fh_summary = logging.FileHandler(log_path, encoding="utf-8", mode="a")
        fh_summary.setLevel(logging.INFO)
        fh_summary.setFormatter(logging.Formatter("{asctime} SUMMARY - {message}", style="{"))
        summary_logger.addHandler(fh_summary)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, level.upper()))
        logger.addHandler(console_handler)
        console_handler.setFormatter(console_formatter)

        summary_console = logging.StreamHandler()
        summary_console.setLevel(logging.INFO)
        summary_console.setFormatter(console_formatter)
        summary_logger.addHandler(summary_console)

    logger.info("Logging initialised. File: %s", log_path)
    return logger, summary_logger
