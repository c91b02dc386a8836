"""Ordered format-detection chain for CSV import.

每個 attempt 是 ``(lines) -> ParsedQuote | None`` 的純函式；依序嘗試，第一個
非 None 的結果勝出。attempt 內部拋出的例外視為該格式不符，繼續下一個。
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from ..models import ParsedQuote

logger = logging.getLogger(__name__)

ParseAttempt = Callable[[List[str]], Optional[ParsedQuote]]
NamedAttempt = Tuple[str, ParseAttempt]


def split_lines(text: str) -> List[str]:
    """Trim the document, split on newlines and strip every line."""
    return [line.strip() for line in text.strip().split("\n")]


def run_attempts(attempts: Sequence[NamedAttempt], text: str) -> Optional[ParsedQuote]:
    """
    Run parse attempts in order and return the first match.

    Args:
        attempts: (名稱, attempt) 的有序序列
        text: CSV 文字

    Returns:
        ParsedQuote，全部失敗時返回 None
    """
    if not isinstance(text, str) or not text.strip():
        logger.warning("CSV content is empty, nothing to parse")
        return None

    lines = split_lines(text)
    for name, attempt in attempts:
        try:
            result = attempt(lines)
        except Exception as e:
            logger.warning(f"CSV parse attempt '{name}' failed: {e}")
            continue

        if result is not None:
            logger.info(
                f"CSV recognized as {name}: {len(result.items)} items, "
                f"{len(result.lf_indexes)} LF rows"
            )
            return result

        logger.debug(f"CSV parse attempt '{name}' did not match")

    logger.warning(f"CSV format not recognized ({len(lines)} lines)")
    return None
