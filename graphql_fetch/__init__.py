"""
GraphQL-over-HTTP client with middleware and afterware chains.

Features:
- Async/await client built on aiohttp, with a pluggable transport
- Ordered middleware (before the request) and afterware (after the response)
- Batched operations with their own handler chains
- multipart/form-data file uploads
- Structured configuration with Pydantic
"""

from .chain import normalize_handler, run_chain
from .client import GraphQLFetch, create_graphql_fetch
from .config import ConfigLoader, FetchConfig, LoggingConfig, LogLevel, load_config
from .convenience import execute, execute_batch
from .exceptions import (
    BatchShapeError,
    ConfigurationError,
    GraphQLFetchError,
    HTTPError,
    RegistrationError,
    SerializationError,
    TransportConnectionError,
    TransportError,
    TransportTimeoutError,
)
from .logging import setup_logging
from .models import (
    FetchResult,
    GraphQLRequest,
    ParsedResponse,
    RequestAndOptions,
    ResponseAndOptions,
)
from .options import construct_default_options
from .transport import AiohttpTransport, Transport
from .upload import (
    UploadFile,
    construct_upload_options,
    create_graphql_fetch_upload,
    extract_files,
)

__version__ = "1.0.0"

__all__ = [
    # Client
    "GraphQLFetch",
    "create_graphql_fetch",
    "create_graphql_fetch_upload",
    "execute",
    "execute_batch",
    # Pipeline pieces
    "run_chain",
    "normalize_handler",
    "construct_default_options",
    "construct_upload_options",
    "extract_files",
    "AiohttpTransport",
    "Transport",
    # Models
    "GraphQLRequest",
    "FetchResult",
    "ParsedResponse",
    "RequestAndOptions",
    "ResponseAndOptions",
    "UploadFile",
    # Configuration
    "FetchConfig",
    "LoggingConfig",
    "LogLevel",
    "ConfigLoader",
    "load_config",
    "setup_logging",
    # Exceptions
    "GraphQLFetchError",
    "ConfigurationError",
    "RegistrationError",
    "SerializationError",
    "TransportError",
    "TransportTimeoutError",
    "TransportConnectionError",
    "HTTPError",
    "BatchShapeError",
]
