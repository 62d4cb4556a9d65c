"""Draft product, variant, price and specification records."""

from .entities import (
    DEFAULT_COUNTRY_ID,
    NO_SHELF,
    REQUIRED_SPEC_NAMES,
    Attribute,
    AttributeValue,
    DeliveryType,
    DraftConfiguration,
    PriceEntry,
    ProductDraft,
    SpecEntry,
    VariantEntry,
    VariantPrices,
    has_single_value_per_attribute,
    missing_spec_names,
    price_entries_from_product,
    select_attribute_value,
)
from .helpers import suggest_slug

__all__ = [
    "Attribute",
    "AttributeValue",
    "DEFAULT_COUNTRY_ID",
    "DeliveryType",
    "DraftConfiguration",
    "NO_SHELF",
    "PriceEntry",
    "ProductDraft",
    "REQUIRED_SPEC_NAMES",
    "SpecEntry",
    "VariantEntry",
    "VariantPrices",
    "has_single_value_per_attribute",
    "missing_spec_names",
    "price_entries_from_product",
    "select_attribute_value",
    "suggest_slug",
]
