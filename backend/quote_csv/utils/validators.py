"""Input validation utilities."""

import logging
import os
from typing import Optional

from .errors import ErrorCode, raise_error


logger = logging.getLogger(__name__)


class FileValidator:
    """Validates uploaded CSV files."""

    ALLOWED_EXTENSIONS = {".csv", ".txt"}
    ALLOWED_MIME_TYPES = {
        "text/csv",
        "text/plain",
        "application/csv",
        "application/vnd.ms-excel",
        "application/octet-stream",
    }

    def __init__(self, max_file_size_mb: int = 5):
        """
        Initialize FileValidator.

        Args:
            max_file_size_mb: Maximum file size in MB
        """
        self.max_file_size_bytes = max_file_size_mb * 1024 * 1024

    def validate_file(
        self,
        filename: str,
        file_size: int,
        mime_type: Optional[str] = None,
    ) -> bool:
        """
        Validate a single file.

        Args:
            filename: Original filename
            file_size: File size in bytes
            mime_type: MIME type of file

        Returns:
            True if valid

        Raises:
            APIError: If validation fails
        """
        if not filename:
            raise_error(ErrorCode.INVALID_REQUEST, "檔名不可為空")

        _, ext = os.path.splitext(filename.lower())
        if ext not in self.ALLOWED_EXTENSIONS:
            raise_error(
                ErrorCode.INVALID_FILE_FORMAT,
                f"不支援的檔案格式：{ext or '(無副檔名)'}，只接受 CSV 檔案",
            )

        if mime_type and mime_type not in self.ALLOWED_MIME_TYPES:
            raise_error(
                ErrorCode.INVALID_FILE_FORMAT,
                f"無效的 MIME 類型：{mime_type}",
            )

        if file_size > self.max_file_size_bytes:
            raise_error(
                ErrorCode.FILE_SIZE_EXCEEDED,
                f"檔案大小超過限制（{file_size / (1024*1024):.1f}MB > {self.max_file_size_bytes / (1024*1024):.0f}MB）",
            )

        if file_size == 0:
            raise_error(ErrorCode.INVALID_REQUEST, "檔案為空")

        logger.info(f"File validation passed: {filename} ({file_size} bytes)")
        return True

    @staticmethod
    def decode_text(content: bytes) -> str:
        """
        Decode uploaded bytes as UTF-8 text (BOM tolerated).

        Args:
            content: Raw file content

        Returns:
            Decoded text

        Raises:
            APIError: If content is not valid UTF-8
        """
        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise_error(
                ErrorCode.INVALID_FILE_ENCODING,
                details={"position": e.start},
            )
