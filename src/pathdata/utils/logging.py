"""Logging utilities for Pathdata."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from pathdata.domain.segment import Segment

# Marks handlers installed here so reconfiguration replaces them
_HANDLER_FLAG = "_pathdata_handler"


@dataclass
class EncodingStats:
    """Statistics from an encoding run."""

    paths_encoded: int = 0
    segments_encoded: int = 0
    error_count: int = 0
    command_counts: Counter[str] = field(default_factory=Counter)
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def relative_count(self) -> int:
        """Number of relative (lowercase) commands encoded."""
        return sum(n for letter, n in self.command_counts.items() if letter.islower())


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console records go to stderr so that standard output only carries
    path data.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_FLAG, True)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_FLAG, True)
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pathdata")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class EncodingLogger:
    """Logger for tracking encoded paths and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = EncodingStats()

    def log_source_loaded(self, source: str, segment_count: int) -> None:
        """Log a loaded command source."""
        self._logger.debug("Source loaded", source=source, segments=segment_count)

    def log_path_encoded(
        self,
        source: str,
        segments: list[Segment],
        length: int,
    ) -> None:
        """Log a successfully encoded path."""
        self._stats.paths_encoded += 1
        self._stats.segments_encoded += len(segments)
        self._stats.command_counts.update(s.command for s in segments)
        self._logger.info(
            "Path encoded",
            source=source,
            segments=len(segments),
            length=length,
        )

    def log_error(self, source: str, error: Exception) -> None:
        """Log a failed load or encode."""
        self._logger.error(
            "Encoding failed",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((source, str(error)))

    @property
    def stats(self) -> EncodingStats:
        """Get current encoding statistics."""
        return self._stats
