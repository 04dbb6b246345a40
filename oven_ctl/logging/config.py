"""
Centralized logging configuration for the oven controller.

This module provides standardized logging configuration using structlog
for all components. The controller, the hardware stand-ins and the
configuration layer all log through loggers obtained here.
"""
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..config.defaults import LoggingParams


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Configure standard library logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Add timestamp if requested
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Add caller information if requested
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    # Add any extra processors
    if extra_processors:
        processors.extend(extra_processors)

    # Add final formatting processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_params(params: "LoggingParams") -> None:
    """Configure logging from a LoggingParams section of the configuration."""
    configure_logging(
        level=params.level,
        format_json=params.format_json,
        include_timestamp=params.include_timestamp,
        include_caller=params.include_caller,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_controller_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for the program controller.

    The logger is bound with the controller subsystem so that program
    execution events can be filtered out of the combined stream.
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="oven_controller",
        audit_trail=True
    )


def get_hardware_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the hardware subsystem."""
    return get_logger(name).bind(subsystem="hardware")


def log_state_transition(
    logger: FilteringBoundLogger,
    program_id: str,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a controller state transition with standardized format.

    Args:
        logger: Structlog logger instance
        program_id: Identifier of the program run
        from_state: Current state
        to_state: Target state
        trigger: What triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        program_id=program_id,
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")


def log_actuator_command(
    logger: FilteringBoundLogger,
    actuator: str,
    command: str,
    settings: Optional[Any] = None,
    stage_index: Optional[int] = None
) -> None:
    """
    Log a single command issued to an actuator.

    Args:
        logger: Structlog logger instance
        actuator: Actuator name ("heating_module" or "fan")
        command: Command name (e.g. "heater", "on")
        settings: HeatingSettings passed with the command, if any
        stage_index: Index of the program stage, None outside the stage loop
    """
    bound_logger = logger.bind(
        actuator=actuator,
        command=command,
        stage_index=stage_index,
    )

    # Fan commands carry no settings
    if settings is not None:
        bound_logger = bound_logger.bind(
            temperature=settings.temperature,
            time=settings.time,
        )

    bound_logger.debug("Actuator command")
