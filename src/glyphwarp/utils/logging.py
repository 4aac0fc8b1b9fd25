"""Logging utilities for Glyphwarp."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class WarpStats:
    """Statistics from a batch warp run."""

    contour_count: int = 0
    segment_count: int = 0
    edits_applied: int = 0
    edits_refused: int = 0
    arrangement_failures: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


@dataclass
class ArrangementStats:
    """Statistics from a stretchy path editing session."""

    arrangement_count: int = 0
    failure_count: int = 0
    refused_edit_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    timings_ms: list[float] = field(default_factory=list)

    @property
    def avg_arrangement_ms(self) -> float | None:
        """Average duration of successful arrangement passes."""
        if not self.timings_ms:
            return None
        return sum(self.timings_ms) / len(self.timings_ms)

    @property
    def max_arrangement_ms(self) -> float | None:
        """Slowest successful arrangement pass."""
        return max(self.timings_ms) if self.timings_ms else None


# Name given to the handlers installed here, so a later call can replace them
HANDLER_NAME = "glyphwarp"

_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _replace_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and, optionally, a file.

    Events are rendered as JSON lines by structlog and routed through the
    standard library handlers. Calling this again replaces the handlers
    installed by the previous call.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, only errors reach the console

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    _replace_handlers(root_logger)
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("glyphwarp")
    logger.debug(
        "Logging configured",
        log_file=str(log_file) if log_file else None,
        console_level=console_level,
        file_level=file_level,
    )
    return logger


class ArrangementLogger:
    """Logger for tracking arrangement passes and frame edits."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ArrangementStats()

    def log_edit(self, kind: str, **details: object) -> None:
        """Log an accepted frame edit."""
        self._logger.debug("Frame edited", edit=kind, **details)

    def log_edit_refused(self, kind: str, error: Exception) -> None:
        """Log a frame edit refused before arrangement."""
        self._logger.warning("Frame edit refused", edit=kind, reason=str(error))
        self._stats.refused_edit_count += 1

    def log_arrangement_complete(
        self,
        generation: int,
        segment_count: int,
        duration_ms: float,
    ) -> None:
        """Log a successful arrangement pass."""
        self._logger.debug(
            "Contents arranged",
            generation=generation,
            segments=segment_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.arrangement_count += 1
        self._stats.timings_ms.append(duration_ms)

    def log_arrangement_failed(self, error: Exception) -> None:
        """Log an aborted arrangement pass."""
        self._logger.warning(
            "Arrangement failed, keeping previous artwork",
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failure_count += 1
        self._stats.errors.append((type(error).__name__, str(error)))

    @property
    def stats(self) -> ArrangementStats:
        """Get current arrangement statistics."""
        return self._stats
