"""
Logging manager for graphql_fetch.

This module provides centralized logging configuration and management.
"""

import logging
import sys
from typing import Dict, Optional

from ..config.models import LoggingConfig, LogLevel
from .filters import SensitiveDataFilter
from .formatters import ColoredFormatter, StructuredFormatter

PACKAGE_LOGGER = "graphql_fetch"


class LoggingManager:
    """Centralized logging manager for the ``graphql_fetch`` logger tree."""

    def __init__(self) -> None:
        """Initialize logging manager."""
        self._configured = False
        self._handlers: Dict[str, logging.Handler] = {}

    def setup_logging(self, config: LoggingConfig) -> None:
        """
        Setup logging based on configuration.

        Args:
            config: Logging configuration
        """
        if self._configured:
            self.cleanup()

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(getattr(logging, config.level.value))

        if config.enable_console:
            self._setup_console_handler(config)

        for component, level in config.component_levels.items():
            logging.getLogger(component).setLevel(getattr(logging, level.value))

        self._configured = True

        logging.getLogger(__name__).debug("Logging system configured")

    def _setup_console_handler(self, config: LoggingConfig) -> None:
        """Setup console logging handler."""
        handler = logging.StreamHandler(sys.stderr)

        formatter: logging.Formatter
        if config.enable_structured:
            formatter = StructuredFormatter()
        else:
            formatter = ColoredFormatter(config.format)

        handler.setFormatter(formatter)
        handler.setLevel(getattr(logging, config.level.value))
        handler.addFilter(SensitiveDataFilter())

        self.add_handler("console", handler)

    def set_level(self, level: LogLevel, component: Optional[str] = None) -> None:
        """
        Set logging level.

        Args:
            level: New logging level
            component: Specific component (None for the package logger)
        """
        log_level = getattr(logging, level.value)
        logging.getLogger(component or PACKAGE_LOGGER).setLevel(log_level)

        if component is None:
            for handler in self._handlers.values():
                handler.setLevel(log_level)

    def add_handler(self, name: str, handler: logging.Handler) -> None:
        """
        Add a named handler to the package logger.

        Args:
            name: Handler name
            handler: Logging handler
        """
        self.remove_handler(name)
        logging.getLogger(PACKAGE_LOGGER).addHandler(handler)
        self._handlers[name] = handler

    def remove_handler(self, name: str) -> None:
        """
        Remove logging handler.

        Args:
            name: Handler name
        """
        handler = self._handlers.pop(name, None)
        if handler is not None:
            logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)
            handler.close()

    def cleanup(self) -> None:
        """Remove every handler this manager installed."""
        for name in list(self._handlers):
            self.remove_handler(name)
        self._configured = False

    def is_configured(self) -> bool:
        """Check if logging is configured."""
        return self._configured


# Global logging manager instance
_logging_manager = LoggingManager()


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Setup logging with configuration.

    Args:
        config: Logging configuration, defaults when omitted
    """
    _logging_manager.setup_logging(config or LoggingConfig())


def cleanup_logging() -> None:
    """Cleanup logging system."""
    _logging_manager.cleanup()
