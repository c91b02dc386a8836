"""CSV cell formatting (write) and value coercion (read).

Dialect: 逗號分隔；只有含逗號的欄位會加上雙引號；不支援欄位內的雙引號
跳脫或換行（換行在輸出前一律換成單一空白）。
"""

import csv
import math
import re
from typing import Any, Iterable, List, Optional, Union

_NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")
_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT_PATTERN = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def format_scalar(value: Any) -> str:
    """Render a value as cell text; None becomes "" and 2.0 becomes "2"."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def format_price(value: Any) -> str:
    """兩位小數；None 或空值輸出空字串."""
    if value is None or value == "":
        return ""
    try:
        return f"{float(value):.2f}"
    except (TypeError, ValueError):
        return format_scalar(value)


def quote_cell(value: Any) -> str:
    """
    轉成可安全放入 CSV 的文字.

    Newlines become a single space; text containing a comma is wrapped in
    double quotes.

    Examples:
        >>> quote_cell("Smith, J.")
        '"Smith, J."'
        >>> quote_cell("12 Harbour St\\nSydney")
        '12 Harbour St Sydney'
    """
    text = _NEWLINE_PATTERN.sub(" ", format_scalar(value))
    if "," in text:
        return f'"{text}"'
    return text


def join_row(values: Iterable[Any]) -> str:
    """Quote every value independently and join with commas."""
    return ",".join(quote_cell(value) for value in values)


def split_row(line: str) -> List[str]:
    """
    Split one CSV line into cells, honoring double-quoted fields.

    Args:
        line: Single line of text (no line terminator)

    Returns:
        List of cell strings; empty list for a blank line
    """
    if not line:
        return []
    # 未閉合的引號會讓 csv 模組在欄位尾端補上換行
    return [cell.rstrip("\r\n") for cell in next(csv.reader([line]), [])]


def coerce_scalar(text: str) -> Union[float, str]:
    """
    數字優先：可完整解析為有限浮點數時返回 float，否則保留原字串.

    Examples:
        >>> coerce_scalar("10")
        10.0
        >>> coerce_scalar("RB-001")
        'RB-001'
    """
    try:
        number = float(text)
    except ValueError:
        return text
    if not math.isfinite(number):
        return text
    return number


def parse_int(text: Optional[str]) -> Optional[int]:
    """Base-10 integer from the leading digits of ``text``; None if there are none."""
    if not text:
        return None
    match = _LEADING_INT_PATTERN.match(text)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # 超過 int 字串轉換位數上限
        return None


def parse_float(text: Optional[str]) -> Optional[float]:
    """Float from the leading numeric part of ``text``; None if there is none."""
    if not text:
        return None
    match = _LEADING_FLOAT_PATTERN.match(text)
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None
