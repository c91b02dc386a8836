"""CSV export service.

輸出目前世代（canonical）的 CSV 格式，五個部分以換行串接:
1. 專案表頭（F3 識別/客戶欄位 + F1 彙總欄位）
2. 專案資料列
3. 空白分隔列
4. 明細表頭（16 欄，最後一欄為 IsLF）
5. 明細資料列（寬、高皆無值的項目不輸出）
"""

import logging
from collections.abc import Hashable, Mapping
from typing import Any, List, Optional

from pydantic import BaseModel

from ..utils.path_resolver import resolve_path
from .csv_schema import AGGREGATE_SNAPSHOT_KEYS, ITEM_COLUMNS, ITEM_HEADERS, PROJECT_INFO_KEYS, PROJECT_KEYS
from .service_factory import service_factory
from .value_formatter import format_price, join_row

logger = logging.getLogger(__name__)


def _to_wire(value: Any) -> Any:
    """pydantic 模型轉成以 camelCase 別名為鍵的 dict，其他值原樣返回."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    return value


def _has_dimensions(item: Mapping) -> bool:
    """寬或高至少一個有值（0 視為無值）."""
    return bool(item.get("width") or item.get("height"))


class CsvSerializerService:
    """Service for exporting quote records as CSV text."""

    def to_csv(self, record: Any) -> str:
        """
        將報價單轉成 CSV 文字.

        Accepts a QuoteRecord or a plain mapping in wire shape (camelCase keys).
        Never raises: a missing or malformed product, item list or LF list
        yields "" or is treated as empty.

        Args:
            record: 報價單資料

        Returns:
            CSV 文字；沒有目前產品或明細列表時返回空字串
        """
        data = _to_wire(record)
        if not isinstance(data, Mapping):
            logger.debug(f"Cannot serialize record of type {type(record).__name__}")
            return ""

        items = self._active_items(data)
        if items is None:
            logger.debug("No active product items, nothing to export")
            return ""

        item_rows = self._build_item_rows(items, self._lf_index_set(data))

        logger.info(
            f"Serialized quote {resolve_path(data, 'quoteId') or '(no id)'}: "
            f"{len(item_rows)} of {len(items)} items exported"
        )

        return "\n".join(
            [
                ",".join(PROJECT_KEYS),
                join_row(self._build_project_values(data)),
                "",
                ",".join(ITEM_HEADERS),
                *item_rows,
            ]
        )

    @staticmethod
    def _active_items(data: Mapping) -> Optional[List[Any]]:
        products = _to_wire(data.get("products"))
        if not isinstance(products, Mapping):
            return None
        product_key = data.get("currentProduct")
        if not isinstance(product_key, Hashable):
            return None
        product = _to_wire(products.get(product_key))
        if not isinstance(product, Mapping):
            return None
        items = product.get("items")
        if not isinstance(items, (list, tuple)):
            return None
        return list(items)

    @staticmethod
    def _lf_index_set(data: Mapping) -> set:
        lf_indexes = resolve_path(data, "uiMetadata.lfModifiedRowIndexes")
        if not isinstance(lf_indexes, (list, tuple, set)):
            return set()
        return {index for index in lf_indexes if isinstance(index, Hashable)}

    @staticmethod
    def _build_project_values(data: Mapping) -> List[Any]:
        snapshot = _to_wire(data.get("f1Snapshot"))
        if not isinstance(snapshot, Mapping):
            snapshot = {}

        values = [resolve_path(data, key) for key in PROJECT_INFO_KEYS]
        values.extend(snapshot.get(key) for key in AGGREGATE_SNAPSHOT_KEYS)
        return values

    @staticmethod
    def _build_item_rows(items: List[Any], lf_indexes: set) -> List[str]:
        rows = []
        for index, raw_item in enumerate(items):
            item = _to_wire(raw_item)
            if not isinstance(item, Mapping):
                continue
            if not _has_dimensions(item):
                continue

            row = []
            for _, key, kind in ITEM_COLUMNS:
                if kind == "index":
                    row.append(index + 1)
                elif kind == "lf":
                    row.append(1 if index in lf_indexes else 0)
                elif kind == "float":
                    row.append(format_price(item.get(key)))
                else:
                    row.append(item.get(key))
            rows.append(join_row(row))
        return rows


@service_factory
def get_csv_serializer() -> CsvSerializerService:
    """取得 CsvSerializerService 單例實例."""
    return CsvSerializerService()


def to_csv(record: Any) -> str:
    """Serialize a quote record with the shared serializer."""
    return get_csv_serializer().to_csv(record)
