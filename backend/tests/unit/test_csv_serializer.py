"""Unit tests for CsvSerializerService.

測試報價單匯出為 CSV 的版面、欄位格式與異常輸入處理。
"""

import pytest

from quote_csv.models import QuoteRecord
from quote_csv.services.csv_schema import ITEM_HEADERS, PROJECT_KEYS
from quote_csv.services.csv_serializer import (
    CsvSerializerService,
    get_csv_serializer,
    to_csv,
)
from quote_csv.services.value_formatter import split_row


pytestmark = pytest.mark.unit


@pytest.fixture
def serializer() -> CsvSerializerService:
    """建立測試用服務實例."""
    return CsvSerializerService()


def _single_product(items, **extra) -> dict:
    return {"currentProduct": "p", "products": {"p": {"items": items}}, **extra}


class TestDocumentLayout:
    """五段式輸出."""

    def test_five_parts(self, serializer, sample_quote_record):
        """測試專案表頭、資料列、空白列、明細表頭與明細列."""
        lines = serializer.to_csv(sample_quote_record).split("\n")

        assert lines[0] == ",".join(PROJECT_KEYS)
        assert lines[2] == ""
        assert lines[3] == ",".join(ITEM_HEADERS)
        # 4 items, the last has no dimensions
        assert len(lines) == 4 + 3

    def test_project_header_and_values_align(self, serializer, sample_quote_record):
        """測試專案表頭與資料列欄位對齊."""
        lines = serializer.to_csv(sample_quote_record).split("\n")

        headers = split_row(lines[0])
        values = split_row(lines[1])
        assert len(headers) == len(values) == 16

        row = dict(zip(headers, values))
        assert row["quoteId"] == "RB20251018"
        assert row["customer.name"] == "Smith, J."
        assert row["customer.address"] == "12 Harbour St Sydney"
        assert row["winder_qty"] == "2"
        assert row["charger_qty"] == ""
        assert row["cord_qty"] == ""
        assert row["discountPercentage"] == "12.5"

    def test_project_value_line_text(self, serializer, sample_quote_record):
        """測試專案資料列的實際文字（含引號）."""
        lines = serializer.to_csv(sample_quote_record).split("\n")
        assert lines[1] == (
            'RB20251018,2025-10-18,2025-11-01,"Smith, J.",12 Harbour St Sydney,'
            "0400 123 456,j.smith@example.com,2,1,,,,,,,12.5"
        )


class TestItemRows:
    """明細列."""

    def test_item_rows(self, serializer, sample_quote_record):
        """測試明細列文字與價格格式."""
        lines = serializer.to_csv(sample_quote_record).split("\n")

        assert lines[4] == "1,1200,1800,BO,356.50,Living,Sunset,Ivory,,IN,L,,1500,,,1"
        assert lines[5] == '2,900,1500,SN,210.00,"Bed 1, window",Dawn,Grey,Y,OUT,R,,1200,,M1,0'
        assert lines[6] == "3,600,1000,,,Bath,,,,,,D,,HD,,1"

    def test_every_item_row_has_sixteen_columns(self, serializer, sample_quote_record):
        """測試每一列都是 16 欄."""
        lines = serializer.to_csv(sample_quote_record).split("\n")
        for line in lines[4:]:
            assert len(split_row(line)) == len(ITEM_HEADERS)

    def test_lf_column(self, serializer, sample_quote_record):
        """測試 IsLF 欄依 lfModifiedRowIndexes 輸出."""
        lines = serializer.to_csv(sample_quote_record).split("\n")
        assert [split_row(line)[-1] for line in lines[4:]] == ["1", "0", "1"]

    def test_items_without_dimensions_dropped(self, serializer, sample_quote_record):
        """測試寬高皆無值的項目不輸出，編號保留原位置."""
        items = sample_quote_record["products"]["rollerBlind"]["items"]
        items.insert(0, {"width": None, "height": None, "location": "Skip me"})

        lines = serializer.to_csv(sample_quote_record).split("\n")

        assert "Skip me" not in "\n".join(lines)
        assert [split_row(line)[0] for line in lines[4:]] == ["2", "3", "4"]

    def test_zero_dimensions_dropped(self, serializer):
        """測試寬高皆為 0 的項目視為無尺寸."""
        record = _single_product(
            [
                {"width": 0, "height": 0, "location": "Zero"},
                {"width": 0, "height": 700, "location": "Tall"},
            ]
        )
        lines = serializer.to_csv(record).split("\n")

        assert "Zero" not in "\n".join(lines)
        assert lines[4] == "2,0,700,,,Tall,,,,,,,,,,0"
        assert len(lines) == 5

    def test_width_only_is_enough(self, serializer):
        """測試只有寬度也會輸出."""
        lines = serializer.to_csv(_single_product([{"width": 800}])).split("\n")
        assert lines[4] == "1,800,,,,,,,,,,,,,,0"

    def test_width_only_keeps_lf_flag(self, serializer, sample_quote_record):
        """測試 LF 標記套用在只有寬度的項目."""
        sample_quote_record["products"]["rollerBlind"]["items"] = [{"width": 800}]
        lines = serializer.to_csv(sample_quote_record).split("\n")
        assert lines[4] == "1,800,,,,,,,,,,,,,,1"

    def test_newline_in_item_value(self, serializer, sample_quote_record):
        """測試明細文字中的換行轉為空白."""
        sample_quote_record["products"]["rollerBlind"]["items"][0]["location"] = "Living\nNorth"
        lines = serializer.to_csv(sample_quote_record).split("\n")
        assert split_row(lines[4])[5] == "Living North"


class TestEmptyResults:
    """沒有可輸出的產品時返回空字串."""

    def test_no_current_product(self, serializer, sample_quote_record):
        """測試 currentProduct 不存在."""
        sample_quote_record["currentProduct"] = "missing"
        assert serializer.to_csv(sample_quote_record) == ""

    def test_no_products(self, serializer):
        """測試沒有 products."""
        assert serializer.to_csv({"quoteId": "X"}) == ""

    def test_items_none(self, serializer):
        """測試 items 為 None."""
        assert serializer.to_csv(_single_product(None)) == ""

    def test_not_a_record(self, serializer):
        """測試非報價單輸入."""
        assert serializer.to_csv(None) == ""
        assert serializer.to_csv("text") == ""

    def test_empty_item_list_still_has_headers(self, serializer):
        """測試空明細仍輸出表頭."""
        lines = serializer.to_csv(_single_product([])).split("\n")
        assert len(lines) == 4
        assert lines[1] == "," * 15


class TestMalformedRecords:
    """格式錯誤的報價單不拋出例外."""

    @pytest.mark.parametrize("items", [5, "abc", {"width": 100}])
    def test_items_not_a_list(self, serializer, items):
        """測試 items 不是列表."""
        assert serializer.to_csv(_single_product(items)) == ""

    def test_unhashable_current_product(self, serializer):
        """測試 currentProduct 為不可雜湊的值."""
        record = {"currentProduct": ["p"], "products": {"p": {"items": [{"width": 1}]}}}
        assert serializer.to_csv(record) == ""

    @pytest.mark.parametrize("lf_value", [3, "0", None, {"0": True}])
    def test_lf_value_not_a_list(self, serializer, lf_value):
        """測試 lfModifiedRowIndexes 不是列表時視為空."""
        record = _single_product(
            [{"width": 100, "height": 200}],
            uiMetadata={"lfModifiedRowIndexes": lf_value},
        )
        lines = serializer.to_csv(record).split("\n")
        assert lines[4] == "1,100,200,,,,,,,,,,,,,0"

    def test_unhashable_lf_entries_ignored(self, serializer):
        """測試 LF 列表中不可雜湊的元素被忽略."""
        record = _single_product(
            [{"width": 100}, {"width": 200}],
            uiMetadata={"lfModifiedRowIndexes": [[0], 1]},
        )
        lines = serializer.to_csv(record).split("\n")
        assert [split_row(line)[-1] for line in lines[4:]] == ["0", "1"]

    def test_non_mapping_items_skipped(self, serializer):
        """測試非 dict 的明細被略過."""
        lines = serializer.to_csv(_single_product(["junk", {"width": 300}])).split("\n")
        assert lines[4:] == ["2,300,,,,,,,,,,,,,,0"]


class TestModelInput:
    """QuoteRecord 與 dict 輸入結果相同."""

    def test_model_and_dict_match(self, serializer, sample_quote_record):
        """測試模型與 dict 輸出相同."""
        record = QuoteRecord.model_validate(sample_quote_record)
        assert serializer.to_csv(record) == serializer.to_csv(sample_quote_record)

    def test_snake_case_construction(self, serializer):
        """測試以欄位名稱建立的模型."""
        record = QuoteRecord(
            quote_id="Q1",
            current_product="p",
            products={"p": {"items": [{"width": 100, "height": 200, "line_price": 9}]}},
            ui_metadata={"lf_modified_row_indexes": [0]},
        )
        lines = serializer.to_csv(record).split("\n")
        assert lines[1].startswith("Q1,")
        assert lines[4] == "1,100,200,,9.00,,,,,,,,,,,1"


class TestSingleton:
    """單例模式測試."""

    def test_factory_function(self):
        """測試工廠函式返回同一實例."""
        assert get_csv_serializer() is get_csv_serializer()

    def test_module_function(self, sample_quote_record):
        """測試模組函式與服務結果一致."""
        assert to_csv(sample_quote_record) == CsvSerializerService().to_csv(sample_quote_record)
