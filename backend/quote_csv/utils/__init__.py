"""Utils package."""

from .errors import APIError, ErrorCode, raise_error, log_error
from .path_resolver import resolve_path
from .validators import FileValidator

__all__ = [
    "APIError",
    "ErrorCode",
    "raise_error",
    "log_error",
    "resolve_path",
    "FileValidator",
]
