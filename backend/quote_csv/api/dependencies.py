"""API dependencies and injection."""

from typing import Annotated
from fastapi import Depends, UploadFile
import logging

from ..config import settings
from ..services.csv_parser import CsvParserService, get_csv_parser
from ..services.csv_serializer import CsvSerializerService, get_csv_serializer
from ..utils import FileValidator


logger = logging.getLogger(__name__)


def get_file_validator() -> FileValidator:
    """
    Dependency to get file validator.

    Returns:
        FileValidator instance
    """
    return FileValidator(max_file_size_mb=settings.max_file_size_mb)


def get_csv_parser_dependency() -> CsvParserService:
    """Dependency to get the shared CSV parser."""
    return get_csv_parser()


def get_csv_serializer_dependency() -> CsvSerializerService:
    """Dependency to get the shared CSV serializer."""
    return get_csv_serializer()


async def read_csv_upload(file: UploadFile) -> str:
    """
    Validate an uploaded CSV file and decode it as text.

    Args:
        file: Uploaded file

    Returns:
        Decoded CSV text

    Raises:
        APIError: If validation or decoding fails
    """
    validator = get_file_validator()

    content = await file.read()
    validator.validate_file(
        filename=file.filename or "",
        file_size=len(content),
        mime_type=file.content_type,
    )

    text = validator.decode_text(content)
    logger.info(f"Read CSV upload {file.filename} ({len(content)} bytes)")
    return text


# Type aliases for common dependencies
CsvParserDep = Annotated[CsvParserService, Depends(get_csv_parser_dependency)]
CsvSerializerDep = Annotated[CsvSerializerService, Depends(get_csv_serializer_dependency)]
