"""
Configuration models for graphql_fetch.

This module defines all configuration data models with validation and defaults.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Default logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    enable_console: bool = Field(default=True, description="Enable console logging")
    enable_structured: bool = Field(
        default=False, description="Enable structured JSON logging"
    )

    # Component-specific log levels
    component_levels: Dict[str, LogLevel] = Field(
        default_factory=dict, description="Per-component log levels"
    )


class FetchConfig(BaseModel):
    """Configuration for a GraphQL fetch client."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    # Endpoint settings
    uri: str = Field(default="/graphql", description="GraphQL endpoint")
    base_url: Optional[str] = Field(
        default=None, description="Base URL relative endpoints resolve against"
    )

    # Pluggable collaborators
    custom_fetch: Optional[Callable[..., Any]] = Field(
        default=None, description="Transport used instead of the default aiohttp one"
    )
    construct_options: Optional[Callable[..., Any]] = Field(
        default=None, description="Replaces default transport option construction"
    )

    # Default transport settings
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Headers sent with every request"
    )
    user_agent: str = Field(default="graphql-fetch/1.0", description="User-Agent header")

    @field_validator("uri")
    @classmethod
    def validate_uri(cls, v: str) -> str:
        """Reject empty endpoints."""
        if not v or not v.strip():
            raise ValueError("uri must not be empty")
        return v.strip()
