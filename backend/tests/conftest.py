"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from quote_csv.main import app
from quote_csv.services.service_factory import clear_all_service_caches


ITEM_HEADER_LINE = "#,Width,Height,Type,Price,Location,F-Name,F-Color,Over,O/I,L/R,Dual,Chain,Winder,Motor,IsLF"


@pytest.fixture(autouse=True)
def reset_service_caches():
    """每個測試使用乾淨的服務單例."""
    clear_all_service_caches()
    yield
    clear_all_service_caches()


@pytest.fixture
def client():
    """Create FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def sample_items():
    """Sample line items (wire shape); the last one has no dimensions."""
    return [
        {
            "width": 1200,
            "height": 1800,
            "fabricType": "BO",
            "linePrice": 356.5,
            "location": "Living",
            "fabric": "Sunset",
            "color": "Ivory",
            "over": "",
            "oi": "IN",
            "lr": "L",
            "dual": "",
            "chain": 1500,
            "winder": "",
            "motor": "",
        },
        {
            "width": 900,
            "height": 1500,
            "fabricType": "SN",
            "linePrice": 210.0,
            "location": "Bed 1, window",
            "fabric": "Dawn",
            "color": "Grey",
            "over": "Y",
            "oi": "OUT",
            "lr": "R",
            "dual": "",
            "chain": 1200,
            "winder": "",
            "motor": "M1",
        },
        {
            "width": 600,
            "height": 1000,
            "fabricType": None,
            "linePrice": None,
            "location": "Bath",
            "fabric": "",
            "color": "",
            "over": "",
            "oi": "",
            "lr": "",
            "dual": "D",
            "chain": None,
            "winder": "HD",
            "motor": "",
        },
        {
            "width": None,
            "height": None,
            "fabricType": None,
            "linePrice": None,
            "location": "",
        },
    ]


@pytest.fixture
def sample_quote_record(sample_items):
    """Sample quote record (wire shape, camelCase keys)."""
    return {
        "quoteId": "RB20251018",
        "issueDate": "2025-10-18",
        "dueDate": "2025-11-01",
        "customer": {
            "name": "Smith, J.",
            "address": "12 Harbour St\nSydney",
            "phone": "0400 123 456",
            "email": "j.smith@example.com",
        },
        "f1Snapshot": {
            "winder_qty": 2,
            "motor_qty": 1,
            "charger_qty": None,
            "discountPercentage": 12.5,
        },
        "currentProduct": "rollerBlind",
        "products": {"rollerBlind": {"items": sample_items}},
        "uiMetadata": {"lfModifiedRowIndexes": [0, 2]},
    }


@pytest.fixture
def legacy_marker_rows_csv():
    """最舊格式：F1 值寫在 F1_SNAPSHOT 標記列."""
    return "\n".join(
        [
            ITEM_HEADER_LINE,
            "1,1200,1800,BO,356.50,Living,Sunset,Ivory,,IN,L,,1500,,,0",
            "2,900,1500,SN,210.00,Bed 1,Dawn,Grey,,OUT,R,,1200,HD,,1",
            "F1_SNAPSHOT,winder_qty,1",
            "F1_SNAPSHOT,discountPercentage,5",
            "F1_SNAPSHOT,unknown_key,9",
            "Total,,,,566.50",
        ]
    )


@pytest.fixture
def legacy_embedded_columns_csv():
    """舊格式：F1 值以額外欄位附在第一筆明細列."""
    return "\n".join(
        [
            ITEM_HEADER_LINE + ",winder_qty,motor_qty,discountPercentage",
            "1,1200,1800,BO,356.50,Living,Sunset,Ivory,,IN,L,,1500,,,1,2,1,10",
            "2,900,1500,SN,210.00,Bed 1,Dawn,Grey,,OUT,R,,1200,HD,,0,,,",
            "3,600,1000,,,Bath,,,,,,,,,,0",
        ]
    )
