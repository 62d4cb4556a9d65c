"""Effective per-variant values after inheriting from the parent product.

These values only feed "inherits from product" hints; validity is decided by
``variantgate.core.validate`` alone.
"""

from dataclasses import dataclass
from typing import Any, Literal

from .canonical.entities import NO_SHELF, DeliveryType, DraftConfiguration, ProductDraft, VariantEntry

PriceSource = Literal["variant", "product"]


@dataclass(frozen=True)
class EffectiveVariant:
    index: int
    variant_id: Any
    net_price: str | None
    cost: str | None
    price_source: PriceSource
    delivery_type: DeliveryType | None
    delivery_type_inherited: bool
    delivery_cost: str | None
    delivery_cost_inherited: bool
    shelf_id: int | None
    shelf_inherited: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "variant_id": self.variant_id,
            "net_price": self.net_price,
            "cost": self.cost,
            "price_source": self.price_source,
            "delivery_type": self.delivery_type.value if self.delivery_type else None,
            "delivery_type_inherited": self.delivery_type_inherited,
            "delivery_cost": self.delivery_cost,
            "delivery_cost_inherited": self.delivery_cost_inherited,
            "shelf_id": self.shelf_id,
            "shelf_inherited": self.shelf_inherited,
        }


def resolve_variant(product: ProductDraft, variant: VariantEntry, index: int = 1) -> EffectiveVariant:
    if variant.has_own_prices():
        net_price, cost, price_source = variant.variant_prices.net_price, variant.variant_prices.cost, "variant"
    else:
        net_price, cost, price_source = product.net_price, product.cost_price, "product"

    own_type = variant.has_own_delivery_type()
    delivery_type = variant.delivery_type if own_type else product.delivery_type

    own_cost = delivery_type is DeliveryType.MEEMHOME and variant.has_own_delivery_cost()
    delivery_cost = variant.delivery_cost if own_cost else product.delivery_cost

    if variant.shelf_id is None:
        shelf_id, shelf_inherited = product.shelf_id, True
    elif variant.shelf_id == NO_SHELF:
        shelf_id, shelf_inherited = None, False
    else:
        shelf_id, shelf_inherited = variant.shelf_id, False

    return EffectiveVariant(
        index=index,
        variant_id=variant.id,
        net_price=net_price,
        cost=cost,
        price_source=price_source,
        delivery_type=delivery_type,
        delivery_type_inherited=not own_type,
        delivery_cost=delivery_cost,
        delivery_cost_inherited=not own_cost,
        shelf_id=shelf_id,
        shelf_inherited=shelf_inherited,
    )


def resolve_variants(config: DraftConfiguration) -> list[EffectiveVariant]:
    return [
        resolve_variant(config.product, variant, index=position)
        for position, variant in enumerate(config.variants, start=1)
    ]


def inheritance_hints(effective: EffectiveVariant) -> list[str]:
    hints: list[str] = []
    if effective.price_source == "product":
        hints.append(f"Use main product price: {effective.net_price or '0'} (cost {effective.cost or '0'})")
    if effective.delivery_type_inherited:
        method = effective.delivery_type.value if effective.delivery_type else "not set"
        hints.append(f"Use main product delivery method: {method}")
    if effective.delivery_type is DeliveryType.COMPANY:
        hints.append("Delivery cost is handled by the delivery company")
    elif effective.delivery_cost_inherited:
        hints.append(f"Use main product delivery cost: {effective.delivery_cost or '0'}")
    if effective.shelf_inherited:
        hints.append(f"Use main product shelf: {effective.shelf_id}" if effective.shelf_id else "Use main: No shelf")
    return hints


__all__ = ["EffectiveVariant", "PriceSource", "inheritance_hints", "resolve_variant", "resolve_variants"]
