"""Shared column definitions for quote CSV files.

Used by the serializer (write) and by both parsers (read). Column order is
the file contract: changing it breaks files already saved by users.
"""

# F3: 報價單識別與客戶資料（專案表頭前段）
PROJECT_INFO_KEYS = [
    "quoteId",
    "issueDate",
    "dueDate",
    "customer.name",
    "customer.address",
    "customer.phone",
    "customer.email",
]

# F1: 數量彙總與折扣（專案表頭後段）
AGGREGATE_SNAPSHOT_KEYS = [
    "winder_qty",
    "motor_qty",
    "charger_qty",
    "cord_qty",
    "remote_1ch_qty",
    "remote_16ch_qty",
    "dual_combo_qty",
    "dual_slim_qty",
    "discountPercentage",
]

PROJECT_KEYS = PROJECT_INFO_KEYS + AGGREGATE_SNAPSHOT_KEYS

CUSTOMER_PREFIX = "customer."

# Item table column definitions (16 columns)
# Format: (header_text, record_key, kind)
#   index: 1-based display number      int: base-10 integer or None
#   float: price, 2 decimals on write  text: "" when empty
#   text_or_none: None when empty      lf: LF flag, 1 or 0
ITEM_COLUMNS = [
    ("#", None, "index"),
    ("Width", "width", "int"),
    ("Height", "height", "int"),
    ("Type", "fabricType", "text_or_none"),
    ("Price", "linePrice", "float"),
    ("Location", "location", "text"),
    ("F-Name", "fabric", "text"),
    ("F-Color", "color", "text"),
    ("Over", "over", "text"),
    ("O/I", "oi", "text"),
    ("L/R", "lr", "text"),
    ("Dual", "dual", "text"),
    ("Chain", "chain", "int"),
    ("Winder", "winder", "text"),
    ("Motor", "motor", "text"),
    ("IsLF", None, "lf"),
]

ITEM_HEADERS = [header for header, _, _ in ITEM_COLUMNS]

LF_COLUMN = "IsLF"

# 舊版格式標記
LEGACY_HEADER_MARKER = "#,Width"  # 兩代舊格式共同的明細表頭開頭
LEGACY_SNAPSHOT_ROW_MARKER = "F1_SNAPSHOT"  # 最舊格式: F1_SNAPSHOT,<key>,<value>

# 明細區中不屬於資料的列（合計列等）
SUMMARY_ROW_PREFIX = "total"
