"""
Logging filters for graphql_fetch.

Request options carry headers such as ``Authorization`` that middleware adds;
``SensitiveDataFilter`` keeps their values out of log output.
"""

import logging
import re
from typing import List, Pattern, Tuple


class SensitiveDataFilter(logging.Filter):
    """Filter to mask sensitive data in log messages."""

    MASK = "***MASKED***"

    def __init__(self) -> None:
        """Initialize sensitive data filter."""
        super().__init__()

        self.rules: List[Tuple[Pattern[str], str]] = [
            # Bearer tokens
            (re.compile(r"(bearer\s+)([A-Za-z0-9\-._~+/]+=*)", re.IGNORECASE), rf"\1{self.MASK}"),
            # Authorization headers rendered from dicts
            (
                re.compile(r"""(['"]?authorization['"]?\s*[:=]\s*['"]?)([^'",}\s]+)""", re.IGNORECASE),
                rf"\1{self.MASK}",
            ),
            # API keys and tokens
            (
                re.compile(r"""(api[_-]?key|token|secret)(['"]?\s*[:=]\s*['"]?)([^'",}\s]+)""", re.IGNORECASE),
                rf"\1\2{self.MASK}",
            ),
            # Passwords
            (
                re.compile(r"""(password|passwd|pwd)(['"]?\s*[:=]\s*['"]?)([^'",}\s]+)""", re.IGNORECASE),
                rf"\1\2{self.MASK}",
            ),
            # URLs with credentials
            (re.compile(r"(https?://[^:/\s]+):([^@\s]+)@", re.IGNORECASE), rf"\1:{self.MASK}@"),
        ]

    def mask(self, message: str) -> str:
        """Apply every masking rule to ``message``."""
        for pattern, replacement in self.rules:
            message = pattern.sub(replacement, message)
        return message

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log record to mask sensitive data."""
        masked = self.mask(record.getMessage())
        record.msg = masked
        record.args = ()
        return True

