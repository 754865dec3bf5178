"""
Unkey Client Package

Typed async client for the Unkey key-management API.
"""

import logging

from .client import Client
from .config import SDK_VERSION, Settings, get_settings
from .exceptions import ErrorCode, HttpError, UndefinedSerializationError
from .logging_config import configure_logging
from .response import Result
from .undefined import NULL, UNDEFINED, UndefinedOr

__version__ = SDK_VERSION

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Client",
    "ErrorCode",
    "HttpError",
    "NULL",
    "Result",
    "Settings",
    "UNDEFINED",
    "UndefinedOr",
    "UndefinedSerializationError",
    "configure_logging",
    "get_settings",
]
