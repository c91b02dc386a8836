"""Quote record data model."""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Union

from .line_item import LineItem

# 專案層級欄位可能被解析為數字（例如電話號碼）
ScalarValue = Optional[Union[float, str]]


class Customer(BaseModel):
    """客戶聯絡資訊."""

    name: ScalarValue = None
    address: ScalarValue = None
    phone: ScalarValue = None
    email: ScalarValue = None


class ProductData(BaseModel):
    """單一產品的明細列表."""

    items: List[LineItem] = Field(default_factory=list, description="明細列表（有序）")


class UIMetadata(BaseModel):
    """UI 狀態中與匯出相關的部分."""

    lf_modified_row_indexes: List[int] = Field(
        default_factory=list,
        alias="lfModifiedRowIndexes",
        description="被標記 LF 的明細索引（0-based）",
    )

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class QuoteRecord(BaseModel):
    """報價單資料模型（匯出/匯入 CSV 的根物件）."""

    # F3: 報價單識別與客戶資料
    quote_id: ScalarValue = Field(None, alias="quoteId", description="報價單編號")
    issue_date: ScalarValue = Field(None, alias="issueDate", description="開立日期")
    due_date: ScalarValue = Field(None, alias="dueDate", description="到期日期")
    customer: Customer = Field(default_factory=Customer)

    # F1: 整張報價單的數量彙總與折扣
    aggregate_snapshot: Dict[str, ScalarValue] = Field(
        default_factory=dict, alias="f1Snapshot", description="F1 數量彙總"
    )

    current_product: Optional[str] = Field(None, alias="currentProduct", description="目前產品")
    products: Dict[str, ProductData] = Field(default_factory=dict, description="各產品明細")
    ui_metadata: UIMetadata = Field(default_factory=UIMetadata, alias="uiMetadata")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "quoteId": "RB20251018",
                "issueDate": "2025-10-18",
                "dueDate": "2025-11-01",
                "customer": {
                    "name": "Smith, J.",
                    "address": "12 Harbour St",
                    "phone": "0400 123 456",
                    "email": "j.smith@example.com",
                },
                "f1Snapshot": {"winder_qty": 2, "discountPercentage": 10},
                "currentProduct": "rollerBlind",
                "products": {"rollerBlind": {"items": []}},
                "uiMetadata": {"lfModifiedRowIndexes": []},
            }
        }
