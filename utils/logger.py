# utils/logger.py
# This file is part of Logic Parser - A propositional-logic formula parser
#
# Logging utility for formula parsing with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula parsing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LogicLogger:
    """Centralized logger for formula parsing with structured output."""

    def __init__(self, name: str = "logic_parser", level: LogLevel = LogLevel.INFO):
        """Initialize the logic parser logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(LogicFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check whether messages at the given level would be emitted."""
        return self.logger.isEnabledFor(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for parsing events
    def formula_normalized(self, source: str, normalized: str):
        """Log input normalization."""
        self.debug(f"Normalized formula {source!r} to {normalized!r}")

    def syntax_tree_built(self, normalized: str):
        """Log a successful grammar derivation."""
        self.debug(f"Grammar derived a syntax tree for {normalized!r}")

    def node_attached(self, parent_name: str, child_name: str, slot: str):
        """Log a child node being attached to its parent."""
        self.debug(f"    Attached {child_name} as {slot} child of {parent_name}")

    def lowercase_atom(self, character: str, position: int):
        """Log a lowercase atom being normalized to uppercase."""
        self.debug(
            f"Lowercase atom '{character}' at position {position} converted to "
            f"'{character.upper()}'; this might cause unintentional atom conflicts"
        )

    def tree_built(self, normalized: str, node_count: int):
        """Log completion of a logic tree."""
        self.debug(f"Built logic tree with {node_count} nodes for {normalized!r}")

    def build_failed(self, error: Exception):
        """Log an aborted build."""
        self.debug(f"Logic tree construction failed: {type(error).__name__}: {error}")


class LogicFormatter(logging.Formatter):
    """Custom formatter for parser logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[LogicLogger] = None


def get_logger(name: str = "logic_parser") -> LogicLogger:
    """Get or create the global logic parser logger instance.

    Args:
        name: Logger name (default: "logic_parser")

    Returns:
        LogicLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = LogicLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on caller flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
