"""
Logging setup for graphql_fetch.

Library modules log through ``logging.getLogger(__name__)``; applications
call ``setup_logging`` to attach output to the ``graphql_fetch`` logger.
"""

from .filters import SensitiveDataFilter
from .formatters import ColoredFormatter, StructuredFormatter
from .manager import LoggingManager, cleanup_logging, setup_logging

__all__ = [
    "LoggingManager",
    "setup_logging",
    "cleanup_logging",
    "StructuredFormatter",
    "ColoredFormatter",
    "SensitiveDataFilter",
]
