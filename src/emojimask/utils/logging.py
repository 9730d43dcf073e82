"""Logging utilities for EmojiMask."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog


@dataclass
class MaskingStats:
    """Statistics from a masking run."""

    faces_detected: int = 0
    faces_masked: int = 0
    faces_skipped: int = 0
    image_width: int = 0
    image_height: int = 0
    output_path: Path | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Drop handlers from an earlier call so repeated runs do not duplicate output
    for handler in [h for h in root_logger.handlers if getattr(h, "_emojimask", False)]:
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._emojimask = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._emojimask = True  # type: ignore[attr-defined]
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
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("emojimask")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class MaskingLogger:
    """Logger for tracking per-face events and run statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = MaskingStats()

    def log_faces_detected(self, image_path: Path, count: int) -> None:
        """Log the detector result size."""
        self._logger.info("Faces detected", image=str(image_path), count=count)
        self._stats.faces_detected = count

    def log_no_faces(self, image_path: Path, policy: str) -> None:
        """Log that the detector returned no faces."""
        self._logger.info("No faces detected", image=str(image_path), policy=policy)

    def log_face_masked(
        self,
        index: int,
        glyph: str,
        box: dict[str, Any],
        size: int,
    ) -> None:
        """Log a glyph drawn over a face."""
        self._logger.debug("Face masked", face=index, glyph=glyph, box=box, size=size)
        self._stats.faces_masked += 1

    def log_face_skipped(self, index: int, reason: str) -> None:
        """Log a face that could not be masked."""
        self._logger.warning("Face skipped", face=index, reason=reason)
        self._stats.faces_skipped += 1

    def log_output_written(self, output_path: Path, size_bytes: int) -> None:
        """Log the written output file."""
        self._logger.info("Output written", output=str(output_path), bytes=size_bytes)
        self._stats.output_path = output_path

    @property
    def stats(self) -> MaskingStats:
        """Get current masking statistics."""
        return self._stats
