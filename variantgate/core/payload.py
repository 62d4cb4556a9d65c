"""Submission payload for the product service, built from a validated draft."""

from typing import Any

from .canonical.entities import DraftConfiguration, SpecEntry, VariantEntry
from .canonical.helpers import clean_text, is_blank


def _spec_payload(specs: list[SpecEntry]) -> list[dict[str, str]]:
    return [
        {"name": spec.name.strip(), "value": spec.value.strip()}
        for spec in specs
        if spec.is_filled()
    ]


def _variant_payload(variant: VariantEntry) -> dict[str, Any]:
    data: dict[str, Any] = {
        "variations": list(variant.variations),
        "stock": variant.stock,
    }
    if variant.id is not None:
        data["id"] = variant.id
    if variant.has_own_prices():
        data["net_price"] = variant.variant_prices.net_price.strip()
        data["cost"] = variant.variant_prices.cost.strip()
    specs = _spec_payload(variant.variant_specs)
    if specs:
        data["specifications"] = specs
    if variant.has_own_delivery_type():
        data["delivery_type"] = variant.delivery_type.value
        if variant.has_own_delivery_cost():
            data["delivery_cost"] = variant.delivery_cost.strip()
    if variant.shelf_id is not None:
        data["shelf_id"] = variant.shelf_id
    if variant.image:
        data["image"] = variant.image
    return data


def build_submission_payload(config: DraftConfiguration) -> dict[str, Any]:
    product = config.product
    data: dict[str, Any] = {
        "name": clean_text(product.name),
        "sku": clean_text(product.sku),
        "slug": clean_text(product.slug),
        "has_variants": product.has_variants,
        "delivery_type": product.delivery_type.value if product.delivery_type else None,
        "product_prices": [entry.to_dict() for entry in config.price_entries()],
        "specifications": _spec_payload(config.specifications),
        "variants": [_variant_payload(variant) for variant in config.variants] if product.has_variants else [],
    }
    if product.has_delivery_cost():
        data["delivery_cost"] = product.delivery_cost.strip()
    if product.shelf_id is not None:
        data["shelf_id"] = product.shelf_id

    cover_image = config.main_image if not is_blank(config.main_image) else product.cover_image
    if cover_image:
        data["cover_image"] = cover_image
    return data


__all__ = ["build_submission_payload"]
