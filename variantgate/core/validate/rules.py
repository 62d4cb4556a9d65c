"""Blocking cross-entity checks.

Each check reports at most one message. ``BLOCKING_CHECKS`` lists them in the
order they must run: later checks assume the earlier ones passed.
"""

from dataclasses import dataclass
from typing import Callable, Sequence

from ..canonical.entities import (
    Attribute,
    DeliveryType,
    DraftConfiguration,
    PriceEntry,
    ProductDraft,
    SpecEntry,
    VariantEntry,
    has_single_value_per_attribute,
    missing_spec_names,
)
from ..canonical.helpers import parse_decimal
from .report import CheckResult


def check_delivery_method(product: ProductDraft) -> CheckResult:
    if not product.has_variants and product.delivery_type is None:
        return CheckResult.fail("Delivery method is required")
    return CheckResult.ok()


def check_detailed_variants(
    product: ProductDraft,
    variants: list[VariantEntry],
    attributes: Sequence[Attribute] = (),
) -> CheckResult:
    if not product.has_variants:
        return CheckResult.ok()

    if not variants:
        return CheckResult.fail("At least one variant is required when 'Has Variants' is enabled")

    for position, variant in enumerate(variants, start=1):
        if not variant.variations:
            return CheckResult.fail(f"Variant {position} must have at least one attribute value selected")
        if not has_single_value_per_attribute(variant.variations, list(attributes)):
            return CheckResult.fail(f"Variant {position} must have only one value per attribute")
        if variant.stock is None or variant.stock <= 0:
            return CheckResult.fail(f"Variant {position} must have stock quantity greater than 0")

    unpriced = [position for position, variant in enumerate(variants, start=1) if not variant.has_own_prices()]
    if unpriced and not product.has_prices():
        listed = ", ".join(str(position) for position in unpriced)
        return CheckResult.fail(
            f"Product prices are required as fallback for variants {listed} that don't have pricing"
        )

    return CheckResult.ok()


def check_specifications(
    product: ProductDraft,
    specifications: list[SpecEntry],
    variants: list[VariantEntry],
) -> CheckResult:
    if product.has_variants and variants:
        needs_product_specs = any(variant.missing_required_specs() for variant in variants)
    else:
        needs_product_specs = True

    if not needs_product_specs:
        return CheckResult.ok()

    product_names = {spec.normalized_name() for spec in specifications if spec.is_filled()}
    missing = missing_spec_names(product_names)
    if missing:
        return CheckResult.fail(f"Missing required product specifications: {', '.join(missing)}")
    return CheckResult.ok()


def check_pricing(prices: list[PriceEntry], variants: list[VariantEntry]) -> CheckResult:
    for position, entry in enumerate(prices, start=1):
        if entry.net_price < entry.cost:
            return CheckResult.fail(f"Net price cannot be less than cost in price entry {position}")

    for position, variant in enumerate(variants, start=1):
        if not variant.has_own_prices():
            continue
        net_price = parse_decimal(variant.variant_prices.net_price)
        cost = parse_decimal(variant.variant_prices.cost)
        # Unparseable amounts are left to the backend.
        if net_price is None or cost is None:
            continue
        if net_price < cost:
            return CheckResult.fail(f"Net price cannot be less than cost in variant {position}")

    return CheckResult.ok()


def check_variant_delivery(product: ProductDraft, variants: list[VariantEntry]) -> CheckResult:
    for position, variant in enumerate(variants, start=1):
        delivery_type = variant.delivery_type if variant.has_own_delivery_type() else product.delivery_type

        if delivery_type is DeliveryType.COMPANY and variant.has_own_delivery_cost():
            return CheckResult.fail(
                f"Variant {position}: Delivery cost cannot be set for company delivery type"
            )

        if (
            delivery_type is DeliveryType.MEEMHOME
            and not variant.has_own_delivery_cost()
            and not product.has_delivery_cost()
        ):
            return CheckResult.fail(
                f"Variant {position}: Delivery cost is required for meemhome delivery type"
            )

    return CheckResult.ok()


@dataclass(frozen=True)
class BlockingCheck:
    name: str
    run: Callable[[DraftConfiguration], CheckResult]


BLOCKING_CHECKS: tuple[BlockingCheck, ...] = (
    BlockingCheck("delivery_method", lambda config: check_delivery_method(config.product)),
    BlockingCheck(
        "variants",
        lambda config: check_detailed_variants(config.product, config.variants, config.attributes),
    ),
    BlockingCheck(
        "specifications",
        lambda config: check_specifications(config.product, config.specifications, config.variants),
    ),
    BlockingCheck("pricing", lambda config: check_pricing(config.price_entries(), config.variants)),
    BlockingCheck("variant_delivery", lambda config: check_variant_delivery(config.product, config.variants)),
)


__all__ = [
    "BLOCKING_CHECKS",
    "BlockingCheck",
    "check_delivery_method",
    "check_detailed_variants",
    "check_pricing",
    "check_specifications",
    "check_variant_delivery",
]
