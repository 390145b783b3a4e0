"""Logging configuration and utilities."""

import logging
import sys
from pathlib import Path


class RepeatFilter(logging.Filter):
    """Drops repeats of the same warning within an interval.

    Estimator queries are polled every control tick, so one bad telemetry
    field would otherwise produce the same warning on every poll. Records
    are keyed on logger name, level and unformatted message.
    """

    def __init__(self, interval_s: float = 5.0, min_level: int = logging.WARNING) -> None:
        """Initialize filter.

        Args:
            interval_s: Minimum seconds between two identical records
            min_level: Records below this level always pass
        """
        super().__init__()
        self.interval_s = interval_s
        self.min_level = min_level
        self._last_seen: dict[tuple[str, int, str], float] = {}

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno < self.min_level or self.interval_s <= 0:
            return True

        key = (record.name, record.levelno, str(record.msg))
        last = self._last_seen.get(key)
        if last is not None and record.created - last < self.interval_s:
            return False

        self._last_seen[key] = record.created
        return True


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    repeat_interval_s: float = 5.0,
) -> None:
    """Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        repeat_interval_s: Suppress identical warnings for this long (0 disables)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Shared so console and file drop the same repeats
    repeat_filter = RepeatFilter(repeat_interval_s)

    root_logger = logging.getLogger("limelight_tracker")
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(repeat_filter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(repeat_filter)
        root_logger.addHandler(file_handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger under the limelight_tracker namespace
    """
    if not name.startswith("limelight_tracker"):
        name = f"limelight_tracker.{name}"

    return logging.getLogger(name)
