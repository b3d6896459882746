"""
Centralized logging configuration for the hold entry trainer.

All modules log through structlog. Call configure_logging once at program
start (the scripts do this from the loaded LoggingParams); library code only
asks for loggers.
"""
import logging
import sys
from typing import TYPE_CHECKING, Any, Iterable, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from hold_entry.hold.classifier import EntryBoundaries
    from hold_entry.hold.models import HoldEntry


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the whole application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, render JSON lines; otherwise console output
        include_timestamp: Include an ISO timestamp in each event
        include_caller: Include filename and line number of the call site
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # stderr keeps scenario output on stdout clean
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_classifier_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with classifier context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger for entry classification decisions
    """
    # Stays a lazy proxy until first use
    return structlog.get_logger(name, subsystem="classifier")


def log_entry_decision(
    logger: FilteringBoundLogger,
    fix: str,
    course_to_fix: int,
    entries: Iterable["HoldEntry"],
    boundaries: "EntryBoundaries",
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an entry classification with standardized fields.

    Args:
        logger: Structlog logger instance
        fix: Name of the holding fix
        course_to_fix: Aircraft course to the fix in degrees
        entries: Entries the classifier selected
        boundaries: Sector boundary headings used for the decision
        context: Additional context data
    """
    entry_tags = sorted(entry.value for entry in entries)
    bound_logger = logger.bind(
        fix=fix,
        course_to_fix=course_to_fix,
        entries=entry_tags,
        parallel_direct=boundaries.parallel_direct.degrees,
        teardrop_direct=boundaries.teardrop_direct.degrees,
        teardrop_parallel=boundaries.teardrop_parallel.degrees,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if len(entry_tags) == 1:
        bound_logger.debug("entry_decision")
    else:
        bound_logger.warning("entry_decision", ambiguous=True)
