"""Item table row parsing shared by the canonical and legacy parsers."""

import itertools
from typing import List, Optional

from ..models import LineItem
from .csv_schema import ITEM_COLUMNS, LF_COLUMN, SUMMARY_ROW_PREFIX
from .value_formatter import parse_float, parse_int


def is_item_data_line(line: str) -> bool:
    """空白列與合計列（以 total 開頭）不是資料列."""
    stripped = line.strip()
    return bool(stripped) and not stripped.lower().startswith(SUMMARY_ROW_PREFIX)


class ItemRowReader:
    """
    依固定欄位位置把明細列轉成 LineItem.

    每次解析建立一個新的 reader：item_id 計數器與 LF 索引都只在該次解析內有效。
    """

    def __init__(self, header_cells: List[str]):
        """
        Args:
            header_cells: 明細表頭欄位，用來依名稱找出 IsLF 欄位置
        """
        self.lf_column: Optional[int] = (
            header_cells.index(LF_COLUMN) if LF_COLUMN in header_cells else None
        )
        self.items: List[LineItem] = []
        self.lf_indexes: List[int] = []
        self._sequence = itertools.count(1)

    def read(self, cells: List[str]) -> LineItem:
        """
        Parse one item row and append it to ``items``.

        Missing trailing cells count as empty; unparseable numbers become None.

        Args:
            cells: 已切分的欄位

        Returns:
            The parsed LineItem
        """
        values = {"itemId": f"item-{next(self._sequence)}"}
        for position, (_, key, kind) in enumerate(ITEM_COLUMNS):
            if key is None:
                continue
            cell = cells[position] if position < len(cells) else ""
            if kind == "int":
                values[key] = parse_int(cell)
            elif kind == "float":
                values[key] = parse_float(cell)
            elif kind == "text_or_none":
                values[key] = cell or None
            else:
                values[key] = cell

        item = LineItem.model_validate(values)
        self.items.append(item)

        if self._is_lf(cells):
            self.lf_indexes.append(len(self.items) - 1)

        return item

    def _is_lf(self, cells: List[str]) -> bool:
        if self.lf_column is None or self.lf_column >= len(cells):
            return False
        return parse_int(cells[self.lf_column]) == 1
