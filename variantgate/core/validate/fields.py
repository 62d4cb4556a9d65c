"""Inline field checks run before any blocking rule.

Every function here returns a ``FieldErrors`` mapping. An empty mapping means
the check found nothing; the caller merges them and only moves on to the
blocking checks when the merged mapping is empty.
"""

from typing import Any, Iterable, Mapping

from ..canonical.entities import ProductDraft, VariantEntry
from ..canonical.helpers import is_blank
from .report import FieldErrors

REQUIRED_PRODUCT_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "Product name is required"),
    ("sku", "SKU is required"),
    ("slug", "URL slug is required"),
    ("net_price", "Net price is required"),
    ("cost_price", "Cost price is required"),
)

VARIANTS_REQUIRED_MESSAGE = (
    "At least one variant is required when 'Has Variants' is enabled. "
    "Please add a variant or disable 'Has Variants'."
)
COVER_IMAGE_REQUIRED_MESSAGE = "Cover image is required"

# Order the fields appear in on the product form.
DEFAULT_FIELD_ORDER: tuple[str, ...] = (
    "name",
    "sku",
    "slug",
    "cost_price",
    "net_price",
    "cover_image",
    "delivery_type",
    "delivery_cost",
    "specifications",
    "variants",
)


def validate_basics(product: ProductDraft) -> FieldErrors:
    errors: FieldErrors = {}
    for field_name, message in REQUIRED_PRODUCT_FIELDS:
        if is_blank(getattr(product, field_name)):
            errors[field_name] = [message]
    return errors


def validate_variants_presence(product: ProductDraft, variants: list[VariantEntry]) -> FieldErrors:
    if product.has_variants and not variants:
        return {"variants": [VARIANTS_REQUIRED_MESSAGE]}
    return {}


def validate_cover_image(image: Any, product: ProductDraft) -> FieldErrors:
    if _has_image(image) or _has_image(product.cover_image):
        return {}
    return {"cover_image": [COVER_IMAGE_REQUIRED_MESSAGE]}


def merge_field_errors(*mappings: Mapping[str, Iterable[str]]) -> FieldErrors:
    merged: FieldErrors = {}
    for mapping in mappings:
        for key, messages in mapping.items():
            bucket = merged.setdefault(key, [])
            for message in messages:
                if message not in bucket:
                    bucket.append(message)
    return {key: messages for key, messages in merged.items() if messages}


def field_errors_from_backend(details: Any) -> FieldErrors:
    """Normalize a backend 422 ``details`` map into ``FieldErrors``.

    Values may be a single message or a list of messages; blank entries and
    non-mapping payloads are dropped.
    """
    if not isinstance(details, Mapping):
        return {}

    errors: FieldErrors = {}
    for key, value in details.items():
        field_key = str(key).strip()
        if not field_key:
            continue
        raw_messages = value if isinstance(value, (list, tuple)) else [value]
        messages = [str(item).strip() for item in raw_messages if not is_blank(item)]
        if messages:
            errors[field_key] = messages
    return errors


def first_error_field(errors: Mapping[str, Any], field_order: Iterable[str] = DEFAULT_FIELD_ORDER) -> str | None:
    if not errors:
        return None
    ranks = {name: index for index, name in enumerate(field_order)}
    keys = list(errors)
    return min(keys, key=lambda key: (ranks.get(key, len(ranks)), keys.index(key)))


def _has_image(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


__all__ = [
    "COVER_IMAGE_REQUIRED_MESSAGE",
    "DEFAULT_FIELD_ORDER",
    "REQUIRED_PRODUCT_FIELDS",
    "VARIANTS_REQUIRED_MESSAGE",
    "field_errors_from_backend",
    "first_error_field",
    "merge_field_errors",
    "validate_basics",
    "validate_cover_image",
    "validate_variants_presence",
]
