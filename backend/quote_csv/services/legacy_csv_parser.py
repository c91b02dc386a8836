"""Legacy CSV import service.

支援兩代舊格式，兩者都以 ``#,Width`` 開頭的明細表頭辨識:

- 標記列格式（最舊）: F1 彙總值寫在獨立的 ``F1_SNAPSHOT,<key>,<value>`` 列，
  這些列不會成為明細。
- 嵌入欄位格式: F1 彙總值以額外欄位附在第一筆明細列上，依表頭名稱找欄位；
  該列仍會被解析為一般明細。

舊格式沒有 F3 專案資訊，結果的 customer 一律為空。
"""

import functools
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..models import ParsedQuote, ProjectInfo
from .csv_schema import AGGREGATE_SNAPSHOT_KEYS, LEGACY_HEADER_MARKER, LEGACY_SNAPSHOT_ROW_MARKER
from .item_row_reader import ItemRowReader, is_item_data_line
from .parse_chain import NamedAttempt, run_attempts
from .service_factory import service_factory
from .value_formatter import coerce_scalar, split_row

logger = logging.getLogger(__name__)


def find_legacy_header(lines: List[str]) -> Optional[int]:
    """Index of the first line starting with ``#,Width``, or None."""
    for index, line in enumerate(lines):
        if line.startswith(LEGACY_HEADER_MARKER):
            return index
    return None


def _is_marker_row(cells: List[str]) -> bool:
    return len(cells) >= 3 and cells[0] == LEGACY_SNAPSHOT_ROW_MARKER


def _legacy_result(reader: ItemRowReader, snapshot: Dict, source_format: str) -> ParsedQuote:
    return ParsedQuote(
        items=reader.items,
        lf_indexes=reader.lf_indexes,
        aggregate_snapshot=snapshot,
        project_info=ProjectInfo(),
        source_format=source_format,
    )


def parse_legacy_marker_rows(lines: List[str], snapshot_keys: Sequence[str]) -> Optional[ParsedQuote]:
    """
    解析最舊的標記列格式.

    Only claims the document when at least one ``F1_SNAPSHOT`` row exists.

    Args:
        lines: 已 strip 的文字列
        snapshot_keys: 可接受的 F1 彙總鍵值

    Returns:
        ParsedQuote，格式不符時返回 None
    """
    header_index = find_legacy_header(lines)
    if header_index is None:
        return None

    rows = [split_row(line) for line in lines[header_index + 1:] if is_item_data_line(line)]
    if not any(_is_marker_row(cells) for cells in rows):
        return None

    reader = ItemRowReader(split_row(lines[header_index]))
    snapshot = {}
    for cells in rows:
        if _is_marker_row(cells):
            key, value = cells[1], cells[2]
            if key in snapshot_keys and value != "":
                snapshot[key] = coerce_scalar(value)
            continue
        reader.read(cells)

    return _legacy_result(reader, snapshot, "legacy_marker_rows")


def parse_legacy_embedded_columns(lines: List[str], snapshot_keys: Sequence[str]) -> Optional[ParsedQuote]:
    """
    解析嵌入欄位格式（F1 值附在第一筆明細列的額外欄位）.

    Args:
        lines: 已 strip 的文字列
        snapshot_keys: 要在表頭中尋找的 F1 彙總鍵值

    Returns:
        ParsedQuote，找不到 ``#,Width`` 表頭時返回 None
    """
    header_index = find_legacy_header(lines)
    if header_index is None:
        return None

    header_cells = split_row(lines[header_index])
    snapshot_columns = {key: header_cells.index(key) for key in snapshot_keys if key in header_cells}

    reader = ItemRowReader(header_cells)
    snapshot = {}
    for line in lines[header_index + 1:]:
        if not is_item_data_line(line):
            continue
        cells = split_row(line)

        if not reader.items:
            for key, column in snapshot_columns.items():
                if column < len(cells) and cells[column] != "":
                    snapshot[key] = coerce_scalar(cells[column])

        reader.read(cells)

    return _legacy_result(reader, snapshot, "legacy_embedded_columns")


class LegacyCsvParserService:
    """Service for importing CSV files saved by earlier versions."""

    def __init__(self, snapshot_keys: Sequence[str] = tuple(AGGREGATE_SNAPSHOT_KEYS)):
        """
        Args:
            snapshot_keys: F1 彙總鍵值（明確傳入，不依賴全域預設狀態）
        """
        self.snapshot_keys: Tuple[str, ...] = tuple(snapshot_keys)

    @property
    def attempts(self) -> Tuple[NamedAttempt, ...]:
        """Legacy attempts in detection order, bound to this schema."""
        return (
            (
                "legacy_marker_rows",
                functools.partial(parse_legacy_marker_rows, snapshot_keys=self.snapshot_keys),
            ),
            (
                "legacy_embedded_columns",
                functools.partial(parse_legacy_embedded_columns, snapshot_keys=self.snapshot_keys),
            ),
        )

    def from_legacy_csv(self, text: str) -> Optional[ParsedQuote]:
        """
        解析舊版 CSV.

        Args:
            text: CSV 文字

        Returns:
            ParsedQuote，無法辨識時返回 None
        """
        return run_attempts(self.attempts, text)


@service_factory
def get_legacy_csv_parser(snapshot_keys: Tuple[str, ...] = tuple(AGGREGATE_SNAPSHOT_KEYS)) -> LegacyCsvParserService:
    """取得 LegacyCsvParserService 實例（依 snapshot_keys 快取）."""
    return LegacyCsvParserService(snapshot_keys=snapshot_keys)


def from_legacy_csv(text: str, snapshot_keys: Optional[Sequence[str]] = None) -> Optional[ParsedQuote]:
    """Parse a legacy-generation CSV document with the shared parser."""
    if snapshot_keys is None:
        return get_legacy_csv_parser().from_legacy_csv(text)
    return get_legacy_csv_parser(tuple(snapshot_keys)).from_legacy_csv(text)
