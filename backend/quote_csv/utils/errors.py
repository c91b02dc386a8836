"""Error handling utilities."""

from enum import Enum
from typing import Optional, Any, Dict
import logging


logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Error code enumeration (繁體中文 messages)."""

    # File errors
    INVALID_FILE_FORMAT = "INVALID_FILE_FORMAT"
    INVALID_FILE_ENCODING = "INVALID_FILE_ENCODING"
    FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"

    # CSV errors
    CSV_FORMAT_UNRECOGNIZED = "CSV_FORMAT_UNRECOGNIZED"
    NO_ACTIVE_PRODUCT = "NO_ACTIVE_PRODUCT"

    # Data validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Server errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


ERROR_MESSAGES: Dict[ErrorCode, str] = {
    # File errors
    ErrorCode.INVALID_FILE_FORMAT: "無效的檔案格式，請上傳 CSV 檔案",
    ErrorCode.INVALID_FILE_ENCODING: "檔案編碼錯誤，請使用 UTF-8 編碼",
    ErrorCode.FILE_SIZE_EXCEEDED: "檔案大小超過限制",

    # CSV errors
    ErrorCode.CSV_FORMAT_UNRECOGNIZED: "無法辨識的 CSV 格式",
    ErrorCode.NO_ACTIVE_PRODUCT: "報價單沒有可匯出的產品項目",

    # Data validation errors
    ErrorCode.VALIDATION_ERROR: "資料驗證失敗",
    ErrorCode.INVALID_REQUEST: "無效的請求",

    # Server errors
    ErrorCode.INTERNAL_ERROR: "伺服器內部錯誤",
}


class APIError(Exception):
    """Custom API error exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: Optional[str] = None,
        status_code: int = 400,
        details: Optional[Any] = None,
    ):
        """
        Initialize APIError.

        Args:
            error_code: Error code from ErrorCode enum
            message: Custom error message (overrides default)
            status_code: HTTP status code
            details: Additional error details
        """
        self.error_code = error_code
        self.message = message or ERROR_MESSAGES.get(error_code, "發生錯誤")
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation."""
        return self.message


def raise_error(
    error_code: ErrorCode,
    message: Optional[str] = None,
    status_code: int = 400,
    details: Optional[Any] = None,
) -> None:
    """
    Raise an API error.

    Args:
        error_code: Error code from ErrorCode enum
        message: Custom error message (overrides default)
        status_code: HTTP status code
        details: Additional error details

    Raises:
        APIError: Always raises APIError with provided parameters
    """
    raise APIError(
        error_code=error_code,
        message=message,
        status_code=status_code,
        details=details,
    )


def log_error(error: Exception, context: str = "") -> None:
    """
    Log an error with context.

    Args:
        error: Exception to log
        context: Context description
    """
    if isinstance(error, APIError):
        logger.error(
            f"APIError [{context}]: {error.error_code} - {error.message}",
            extra={"details": error.details},
        )
    else:
        logger.error(f"Error [{context}]: {str(error)}", exc_info=True)
