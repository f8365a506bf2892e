import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR_ENV = "SALES_REPORT_LOG_DIR"
LOG_FILE_NAME = "sales_report.log"
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def add_file_handler(logger: logging.Logger, log_dir: str) -> bool:
    """Attach a rotating ``sales_report.log`` under ``log_dir``.

    Returns ``False`` and leaves the logger console-only when the directory
    cannot be created or the file cannot be opened.
    """
    log_file = Path(log_dir).expanduser() / LOG_FILE_NAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    except OSError as exc:
        logger.warning("Report log file disabled, cannot open %s: %s", log_file, exc)
        return False

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return True


def _configure_logging() -> logging.Logger:
    logger = logging.getLogger(__name__)
    if logger.handlers:
        return logger

    # INFO run messages reach the file only; the console shows warnings and up
    logger.setLevel(logging.INFO)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.WARNING)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    log_dir = os.environ.get(LOG_DIR_ENV)
    if log_dir:
        add_file_handler(logger, log_dir)
    return logger


log = _configure_logging()

from sales_report.engine import analyze_sales_data  # noqa: E402
from sales_report.strategies import (  # noqa: E402
    ReportOptions,
    calculate_bonus_by_profit,
    calculate_simple_profit,
    calculate_simple_revenue,
)

__all__ = [
    "log",
    "analyze_sales_data",
    "ReportOptions",
    "calculate_bonus_by_profit",
    "calculate_simple_profit",
    "calculate_simple_revenue",
]
