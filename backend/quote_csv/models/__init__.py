"""Models package."""

from .line_item import LineItem
from .quote import Customer, ProductData, QuoteRecord, UIMetadata
from .parsed_quote import ParsedQuote, ProjectInfo
from .responses import APIResponse, ErrorResponse, ParseCsvRequest

__all__ = [
    "LineItem",
    "Customer",
    "ProductData",
    "QuoteRecord",
    "UIMetadata",
    "ParsedQuote",
    "ProjectInfo",
    "APIResponse",
    "ErrorResponse",
    "ParseCsvRequest",
]
