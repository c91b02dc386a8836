"""CSV import service with format auto-detection.

偵測順序: canonical → 舊版標記列 → 舊版嵌入欄位；全部失敗時返回 None。

Canonical layout:
    line 0  專案表頭 (F3 + F1 keys)
    line 1  專案資料
    line 2  空白分隔列（不再檢查）
    line 3  明細表頭 (#,Width,...,IsLF)
    line 4+ 明細資料
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..models import Customer, ParsedQuote, ProjectInfo
from .csv_schema import AGGREGATE_SNAPSHOT_KEYS, CUSTOMER_PREFIX, LEGACY_HEADER_MARKER, PROJECT_INFO_KEYS
from .item_row_reader import ItemRowReader, is_item_data_line
from .legacy_csv_parser import LegacyCsvParserService, get_legacy_csv_parser
from .parse_chain import NamedAttempt, run_attempts
from .service_factory import service_factory
from .value_formatter import coerce_scalar, split_row

logger = logging.getLogger(__name__)

_CANONICAL_MIN_LINES = 4


def _parse_project_section(header_line: str, value_line: str) -> Tuple[Dict, ProjectInfo]:
    """Route project header/value pairs into the F1 snapshot and F3 project info."""
    headers = split_row(header_line)
    values = split_row(value_line)

    snapshot = {}
    info = {}
    customer = {}
    for index, header in enumerate(headers):
        value = values[index] if index < len(values) else ""
        if not value:
            continue

        coerced = coerce_scalar(value)
        if header in AGGREGATE_SNAPSHOT_KEYS:
            snapshot[header] = coerced
        elif header.startswith(CUSTOMER_PREFIX):
            field = header[len(CUSTOMER_PREFIX):]
            if field in Customer.model_fields:
                customer[field] = coerced
        elif header in PROJECT_INFO_KEYS:
            info[header] = coerced

    return snapshot, ProjectInfo.model_validate({**info, "customer": customer})


def parse_canonical(lines: List[str]) -> Optional[ParsedQuote]:
    """
    解析目前世代的 CSV 格式.

    Args:
        lines: 已 strip 的文字列

    Returns:
        ParsedQuote；行數不足或明細表頭不符時返回 None
    """
    if len(lines) < _CANONICAL_MIN_LINES:
        return None

    item_header_line = lines[3]
    if not item_header_line.startswith(LEGACY_HEADER_MARKER):
        return None

    snapshot, project_info = _parse_project_section(lines[0], lines[1])

    reader = ItemRowReader(split_row(item_header_line))
    for line in lines[4:]:
        if is_item_data_line(line):
            reader.read(split_row(line))

    return ParsedQuote(
        items=reader.items,
        lf_indexes=reader.lf_indexes,
        aggregate_snapshot=snapshot,
        project_info=project_info,
        source_format="canonical",
    )


class CsvParserService:
    """Service for importing quote CSV files of any supported generation."""

    def __init__(self, legacy_parser: Optional[LegacyCsvParserService] = None):
        """
        Initialize CSV parser service.

        Args:
            legacy_parser: 舊版格式解析器，None 時使用全域單例
        """
        self._legacy_parser = legacy_parser or get_legacy_csv_parser()

    @property
    def attempts(self) -> Tuple[NamedAttempt, ...]:
        """All parse attempts in detection order."""
        return (("canonical", parse_canonical), *self._legacy_parser.attempts)

    def from_csv(self, text: str) -> Optional[ParsedQuote]:
        """
        解析 CSV 文字，自動判斷格式世代.

        Args:
            text: CSV 文字（已解碼）

        Returns:
            ParsedQuote，所有格式都不符時返回 None
        """
        return run_attempts(self.attempts, text)


@service_factory
def get_csv_parser() -> CsvParserService:
    """取得 CsvParserService 單例實例."""
    return CsvParserService()


def from_csv(text: str) -> Optional[ParsedQuote]:
    """Parse CSV text of any supported generation with the shared parser."""
    return get_csv_parser().from_csv(text)
