"""API Response models."""

from pydantic import BaseModel, Field
from typing import Optional, Generic, TypeVar
from datetime import datetime


T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    success: bool = Field(..., description="是否成功")
    message: str = Field(..., description="訊息（繁體中文）")
    data: Optional[T] = Field(None, description="回應資料")
    timestamp: datetime = Field(default_factory=datetime.now, description="回應時間")


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = Field(False, description="是否成功")
    message: str = Field(..., description="錯誤訊息（繁體中文）")
    error_code: Optional[str] = Field(None, description="錯誤代碼")
    timestamp: datetime = Field(default_factory=datetime.now, description="回應時間")


class ParseCsvRequest(BaseModel):
    """Request model for parsing raw CSV text."""

    content: str = Field(..., description="CSV 文字內容")
