"""Parsed CSV result model."""

from pydantic import BaseModel, Field
from typing import Dict, List, Literal

from .line_item import LineItem
from .quote import Customer, ProductData, QuoteRecord, ScalarValue, UIMetadata

SourceFormat = Literal["canonical", "legacy_marker_rows", "legacy_embedded_columns"]


class ProjectInfo(BaseModel):
    """F3 專案資訊（舊版格式沒有這些資料，customer 為空）."""

    quote_id: ScalarValue = Field(None, alias="quoteId")
    issue_date: ScalarValue = Field(None, alias="issueDate")
    due_date: ScalarValue = Field(None, alias="dueDate")
    customer: Customer = Field(default_factory=Customer)

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class ParsedQuote(BaseModel):
    """CSV 解析結果."""

    items: List[LineItem] = Field(default_factory=list)
    lf_indexes: List[int] = Field(default_factory=list, alias="lfIndexes")
    aggregate_snapshot: Dict[str, ScalarValue] = Field(default_factory=dict, alias="f1Snapshot")
    project_info: ProjectInfo = Field(default_factory=ProjectInfo, alias="f3Data")
    source_format: SourceFormat = Field("canonical", alias="sourceFormat", description="辨識出的格式世代")

    def to_record(self, product_key: str) -> QuoteRecord:
        """
        將解析結果併回 QuoteRecord.

        Args:
            product_key: 明細要放入的產品鍵值

        Returns:
            以 product_key 為目前產品的 QuoteRecord
        """
        return QuoteRecord(
            quote_id=self.project_info.quote_id,
            issue_date=self.project_info.issue_date,
            due_date=self.project_info.due_date,
            customer=self.project_info.customer.model_copy(),
            aggregate_snapshot=dict(self.aggregate_snapshot),
            current_product=product_key,
            products={product_key: ProductData(items=list(self.items))},
            ui_metadata=UIMetadata(lf_modified_row_indexes=list(self.lf_indexes)),
        )

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
