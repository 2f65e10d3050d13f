"""
Configuration management for graphql_fetch.
"""

from .loader import ConfigLoader, load_config
from .models import FetchConfig, LoggingConfig, LogLevel

__all__ = [
    "ConfigLoader",
    "load_config",
    "FetchConfig",
    "LoggingConfig",
    "LogLevel",
]
