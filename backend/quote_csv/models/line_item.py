"""Line item data model.

報價單明細列（捲簾），對應 CSV 明細表 16 欄中的 15 個資料欄:
#, Width, Height, Type, Price, Location, F-Name, F-Color, Over, O/I, L/R,
Dual, Chain, Winder, Motor（最後一欄 IsLF 由 UI metadata 決定）
"""

from pydantic import BaseModel, Field
from typing import Optional


class LineItem(BaseModel):
    """報價明細資料模型."""

    # 系統產生（解析時以呼叫內計數器編號）
    item_id: Optional[str] = Field(None, alias="itemId", description="項目識別碼")

    # 尺寸
    width: Optional[int] = Field(None, description="寬度 (Width)")
    height: Optional[int] = Field(None, description="高度 (Height)")

    fabric_type: Optional[str] = Field(None, alias="fabricType", description="面料類型 (Type)")
    line_price: Optional[float] = Field(None, alias="linePrice", description="單項價格 (Price)")

    location: str = Field("", description="安裝位置 (Location)")
    fabric: str = Field("", description="面料名稱 (F-Name)")
    color: str = Field("", description="面料顏色 (F-Color)")
    over: str = Field("", description="Over")
    oi: str = Field("", description="內/外 (O/I)")
    lr: str = Field("", description="左/右 (L/R)")
    dual: str = Field("", description="雙層 (Dual)")
    chain: Optional[int] = Field(None, description="拉鍊長度 (Chain)")
    winder: str = Field("", description="捲軸 (Winder)")
    motor: str = Field("", description="馬達 (Motor)")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "itemId": "item-1",
                "width": 1200,
                "height": 1800,
                "fabricType": "BO",
                "linePrice": 356.5,
                "location": "Living room",
                "fabric": "Sunset",
                "color": "Ivory",
                "over": "",
                "oi": "IN",
                "lr": "L",
                "dual": "",
                "chain": 1500,
                "winder": "",
                "motor": "",
            }
        }
