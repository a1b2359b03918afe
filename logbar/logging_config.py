"""Logging that shares stderr with a running progress bar.

A bar prints its glyphs without a newline until it finishes, so a plain
StreamHandler would glue log records onto the end of the glyph run.
ProgressLogHandler asks the tracked bar to end its line first:

    bar = ProgressBar(len(jobs))
    logger = setup_logging("myapp", bar=bar)
    for job in jobs:
        logger.info("running %s", job)   # starts on its own line
        bar.inc(1)
    bar.finish()

Nothing here runs on import; the library itself only creates module loggers.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from logbar.colors import Colors
from logbar.errors import CounterPoisonedError

DEFAULT_LOG_FILE = "~/.logbar/logs/debug.log"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Sentinel to track whether file logging has already been configured
_file_logging_configured = False


class ColorFormatter(logging.Formatter):
    """One-line ``[LEVEL] message`` records, level prefix colored via Colors."""

    LEVEL_COLORS = {
        logging.DEBUG: ('CYAN', '[DEBUG]'),
        logging.INFO: ('GREEN', '[INFO]'),
        logging.WARNING: ('YELLOW', '[WARN]'),
        logging.ERROR: ('RED', '[ERROR]'),
        logging.CRITICAL: ('RED', '[CRITICAL]'),
    }

    def format(self, record):
        color_name, prefix = self.LEVEL_COLORS.get(record.levelno, ('NC', '[LOG]'))
        text = f"{getattr(Colors, color_name, '')}{prefix}{Colors.NC} {record.getMessage()}"
        if record.exc_info:
            text += "\n" + self.formatException(record.exc_info)
        return text


class ProgressLogHandler(logging.StreamHandler):
    """StreamHandler that keeps records off a bar's glyph line.

    Before each record the tracked bar (if any) gets a chance to end its
    open glyph run. Glyphs printed afterwards continue on the next line.
    """

    def __init__(self, stream=None, bar=None):
        super().__init__(stream if stream is not None else sys.stderr)
        self.bar = bar

    def track(self, bar):
        """Follow *bar*; None stops tracking."""
        self.bar = bar

    def emit(self, record):
        bar = self.bar
        if bar is not None:
            try:
                bar.break_line()
            except CounterPoisonedError:
                # The record itself may be the report of the poisoning
                pass
        super().emit(record)


def setup_logging(name, verbose=False, quiet=False, config=None, bar=None):
    """Configure a logger that writes to stderr next to progress bars.

    Colors are switched off when stderr is not a TTY, so captured logs stay
    free of escape codes.

    Args:
        name: Logger name ("logbar" to see the library's own messages)
        verbose: If True, show DEBUG messages
        quiet: If True, show only WARNING and above
        config: Optional config dict; its ``logging`` section may enable a
                rotating debug log file via configure_file_logging()
        bar: Optional ProgressBar whose glyph line records must not join

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    handler = next(
        (h for h in logger.handlers if isinstance(h, ProgressLogHandler)), None
    )
    if handler is None:
        handler = ProgressLogHandler(sys.stderr)
        handler.setFormatter(ColorFormatter())
        logger.addHandler(handler)
    Colors.auto(handler.stream)
    if bar is not None:
        handler.track(bar)

    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)

    if config is not None:
        configure_file_logging(config)

    return logger


def _file_settings(log_config):
    """(path, level name, level, max bytes, backups) from a ``logging`` section."""
    level_name = str(log_config.get("level", "debug")).upper()
    level = getattr(logging, level_name, logging.DEBUG)
    path = Path(os.path.expanduser(log_config.get("file", DEFAULT_LOG_FILE)))
    max_bytes = log_config.get("max_size_mb", 5) * 1024 * 1024
    backups = log_config.get("backup_count", 3)
    return path, level_name, level, max_bytes, backups


def configure_file_logging(config):
    """Attach a RotatingFileHandler to the root logger if config enables it.

    Bars never write to this file; it only gets log records, in plain text:

        logging:
          enabled: true
          level: debug
          file: ~/.logbar/logs/debug.log
          max_size_mb: 5
          backup_count: 3

    Returns:
        The file handler if logging was enabled, None otherwise.
    """
    global _file_logging_configured

    log_config = config.get("logging") if isinstance(config, dict) else None
    if not isinstance(log_config, dict) or not log_config.get("enabled", False):
        return None
    if _file_logging_configured:
        return None

    path, level_name, level, max_bytes, backups = _file_settings(log_config)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)

    _file_logging_configured = True
    logging.getLogger("logbar").debug(
        "File logging enabled: %s (level=%s)", path, level_name
    )
    return handler
