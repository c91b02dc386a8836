"""Quote CSV export/import API routes."""

import logging
import re

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import Response

from ...api.dependencies import CsvParserDep, CsvSerializerDep, read_csv_upload
from ...config import settings
from ...models import APIResponse, ParseCsvRequest, ParsedQuote, QuoteRecord
from ...utils import ErrorCode, log_error, raise_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Quote CSV"])

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


def _export_filename(record: QuoteRecord) -> str:
    quote_id = _UNSAFE_FILENAME_CHARS.sub("_", str(record.quote_id or "")).strip("_")
    return f"{settings.csv_export_filename_prefix}_{quote_id or 'export'}.csv"


def _parsed_response(parsed: ParsedQuote) -> dict:
    return {
        "success": True,
        "message": f"成功匯入 {len(parsed.items)} 個項目",
        "data": parsed.model_dump(by_alias=True),
    }


@router.post(
    "/quotes/csv",
    summary="匯出報價單 CSV",
    response_class=Response,
)
async def export_quote_csv(record: QuoteRecord, serializer: CsvSerializerDep) -> Response:
    """
    將報價單轉成 CSV 檔案.

    - 只輸出目前產品（currentProduct）的明細
    - 寬、高皆無值的明細不輸出
    """
    try:
        content = serializer.to_csv(record)
        if not content:
            raise_error(ErrorCode.NO_ACTIVE_PRODUCT)

        filename = _export_filename(record)
        return Response(
            content=content,
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    except Exception as e:
        log_error(e, context=f"Export quote CSV: {record.quote_id}")
        raise


@router.post(
    "/quotes/csv/import",
    response_model=APIResponse,
    summary="匯入報價單 CSV 檔案",
)
async def import_quote_csv(
    parser: CsvParserDep,
    file: UploadFile = File(...),
) -> dict:
    """
    上傳 CSV 檔案並解析.

    - 支援目前格式與兩代舊格式，自動判斷
    - 無法辨識時返回 422
    """
    try:
        text = await read_csv_upload(file)

        parsed = parser.from_csv(text)
        if parsed is None:
            raise_error(
                ErrorCode.CSV_FORMAT_UNRECOGNIZED,
                status_code=422,
                details={"filename": file.filename},
            )

        logger.info(f"Imported {file.filename} as {parsed.source_format}")
        return _parsed_response(parsed)

    except Exception as e:
        log_error(e, context=f"Import quote CSV: {file.filename}")
        raise


@router.post(
    "/quotes/csv/parse",
    response_model=APIResponse,
    summary="解析 CSV 文字",
)
async def parse_quote_csv(request: ParseCsvRequest, parser: CsvParserDep) -> dict:
    """解析直接傳入的 CSV 文字（不經檔案上傳）."""
    try:
        parsed = parser.from_csv(request.content)
        if parsed is None:
            raise_error(ErrorCode.CSV_FORMAT_UNRECOGNIZED, status_code=422)

        return _parsed_response(parsed)

    except Exception as e:
        log_error(e, context="Parse quote CSV text")
        raise
