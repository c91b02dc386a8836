"""Dotted-path lookup over nested dicts and objects."""

from collections.abc import Mapping
from typing import Any


def resolve_path(root: Any, dotted_path: str) -> Any:
    """
    讀取巢狀欄位（例如 ``customer.name``），任一段不存在時返回空字串.

    Mappings are walked by key, other objects by attribute.

    Args:
        root: 起點物件（dict 或任意物件）
        dotted_path: 以 "." 分隔的路徑

    Returns:
        找到的值，或空字串

    Examples:
        >>> resolve_path({"customer": {"name": "Amy"}}, "customer.name")
        'Amy'
        >>> resolve_path({"customer": None}, "customer.name")
        ''
    """
    current = root
    for key in dotted_path.split("."):
        if current is None:
            return ""
        if isinstance(current, Mapping):
            if key not in current:
                return ""
            current = current[key]
        else:
            current = getattr(current, key, None)
            if current is None:
                return ""
    return "" if current is None else current
