from dataclasses import dataclass, field, fields
from decimal import Decimal
from enum import Enum
from typing import Any

from .helpers import as_text, format_decimal, is_blank, parse_decimal, parse_int, snake_keys

REQUIRED_SPEC_NAMES: tuple[str, ...] = ("weight", "height", "width", "length")
DEFAULT_COUNTRY_ID = 1
NO_SHELF = 0


class DeliveryType(str, Enum):
    COMPANY = "company"
    MEEMHOME = "meemhome"
    INHERIT = "inherit"

    @classmethod
    def parse(cls, value: Any) -> "DeliveryType | None":
        if value is None or isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if not normalized:
            return None
        try:
            return cls(normalized)
        except ValueError:
            allowed = ", ".join(item.value for item in cls)
            raise ValueError(f"Unknown delivery type {value!r}; expected one of: {allowed}") from None


@dataclass
class SpecEntry:
    name: str = ""
    value: str = ""

    def __post_init__(self) -> None:
        self.name = as_text(self.name) or ""
        self.value = as_text(self.value) or ""

    def is_filled(self) -> bool:
        return not is_blank(self.name) and not is_blank(self.value)

    def normalized_name(self) -> str:
        return self.name.strip().lower()

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass
class VariantPrices:
    net_price: str | None = None
    cost: str | None = None

    def __post_init__(self) -> None:
        self.net_price = as_text(self.net_price)
        self.cost = as_text(self.cost)

    def is_complete(self) -> bool:
        return not is_blank(self.net_price) and not is_blank(self.cost)

    def to_dict(self) -> dict[str, str | None]:
        return {"net_price": self.net_price, "cost": self.cost}


@dataclass
class PriceEntry:
    net_price: Decimal
    cost: Decimal
    country_id: int | None = None

    def __post_init__(self) -> None:
        net_price = parse_decimal(self.net_price)
        cost = parse_decimal(self.cost)
        if net_price is None or cost is None:
            raise ValueError("Price entries need numeric net_price and cost")
        self.net_price = net_price
        self.cost = cost
        self.country_id = parse_int(self.country_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "net_price": format_decimal(self.net_price),
            "cost": format_decimal(self.cost),
            "country_id": self.country_id,
        }


@dataclass
class VariantEntry:
    id: Any = None
    variations: list[int] = field(default_factory=list)
    stock: int | None = None
    variant_prices: VariantPrices = field(default_factory=VariantPrices)
    variant_specs: list[SpecEntry] = field(default_factory=list)
    delivery_type: DeliveryType | None = None
    delivery_cost: str | None = None
    shelf_id: int | None = None
    image: str | None = None

    def __post_init__(self) -> None:
        self.variations = [value for value in (parse_int(item) for item in self.variations or []) if value is not None]
        self.stock = parse_int(self.stock)
        if isinstance(self.variant_prices, dict):
            self.variant_prices = VariantPrices(**_known_fields(VariantPrices, self.variant_prices))
        elif self.variant_prices is None:
            self.variant_prices = VariantPrices()
        self.variant_specs = _spec_list(self.variant_specs)
        self.delivery_type = DeliveryType.parse(self.delivery_type)
        self.delivery_cost = _delivery_cost_text(self.delivery_cost)
        self.shelf_id = parse_int(self.shelf_id)

    def has_own_prices(self) -> bool:
        return self.variant_prices.is_complete()

    def has_own_delivery_type(self) -> bool:
        return self.delivery_type is not None and self.delivery_type is not DeliveryType.INHERIT

    def has_own_delivery_cost(self) -> bool:
        return not is_blank(self.delivery_cost)

    def spec_names(self) -> set[str]:
        return {spec.normalized_name() for spec in self.variant_specs if spec.is_filled()}

    def missing_required_specs(self) -> list[str]:
        return missing_spec_names(self.spec_names())

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "variations": list(self.variations),
            "stock": self.stock,
            "variant_prices": self.variant_prices.to_dict(),
            "variant_specs": [spec.to_dict() for spec in self.variant_specs],
            "delivery_type": self.delivery_type.value if self.delivery_type else None,
            "delivery_cost": self.delivery_cost,
            "shelf_id": self.shelf_id,
            "image": self.image,
        }


@dataclass
class ProductDraft:
    name: str | None = None
    sku: str | None = None
    slug: str | None = None
    net_price: str | None = None
    cost_price: str | None = None
    has_variants: bool = False
    delivery_type: DeliveryType | None = None
    delivery_cost: str | None = None
    cover_image: str | None = None
    shelf_id: int | None = None

    def __post_init__(self) -> None:
        self.net_price = as_text(self.net_price)
        self.cost_price = as_text(self.cost_price)
        self.has_variants = bool(self.has_variants)
        delivery_type = DeliveryType.parse(self.delivery_type)
        # Nothing above the product to inherit from.
        self.delivery_type = None if delivery_type is DeliveryType.INHERIT else delivery_type
        self.delivery_cost = _delivery_cost_text(self.delivery_cost)
        self.shelf_id = parse_int(self.shelf_id)

    def has_prices(self) -> bool:
        return not is_blank(self.net_price) and not is_blank(self.cost_price)

    def has_delivery_cost(self) -> bool:
        return not is_blank(self.delivery_cost)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "sku": self.sku,
            "slug": self.slug,
            "net_price": self.net_price,
            "cost_price": self.cost_price,
            "has_variants": self.has_variants,
            "delivery_type": self.delivery_type.value if self.delivery_type else None,
            "delivery_cost": self.delivery_cost,
            "cover_image": self.cover_image,
            "shelf_id": self.shelf_id,
        }


@dataclass(frozen=True)
class AttributeValue:
    id: int
    value: str


@dataclass
class Attribute:
    id: int
    name: str
    values: list[AttributeValue] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.values = [
            item if isinstance(item, AttributeValue) else AttributeValue(id=int(item["id"]), value=str(item["value"]))
            for item in self.values or []
        ]

    def value_ids(self) -> set[int]:
        return {item.id for item in self.values}


def select_attribute_value(variations: list[int], attribute: Attribute, value_id: int | None) -> list[int]:
    """Return ``variations`` with ``attribute`` set to ``value_id``.

    Any value previously selected for the same attribute is dropped so a
    variant never carries two values of one attribute. ``None`` clears it.
    """
    owned = attribute.value_ids()
    if value_id is not None and value_id not in owned:
        raise ValueError(f"Value {value_id} does not belong to attribute {attribute.name!r}")
    kept = [item for item in variations if item not in owned]
    if value_id is not None:
        kept.append(value_id)
    return kept


def has_single_value_per_attribute(variations: list[int], attributes: list[Attribute]) -> bool:
    for attribute in attributes:
        owned = attribute.value_ids()
        if sum(1 for item in variations if item in owned) > 1:
            return False
    return True


def missing_spec_names(names: set[str]) -> list[str]:
    return [required for required in REQUIRED_SPEC_NAMES if required not in names]


def price_entries_from_product(product: ProductDraft, *, country_id: int | None = DEFAULT_COUNTRY_ID) -> list[PriceEntry]:
    net_price = parse_decimal(product.net_price)
    cost = parse_decimal(product.cost_price)
    if net_price is None or cost is None:
        return []
    return [PriceEntry(net_price=net_price, cost=cost, country_id=country_id)]


@dataclass
class DraftConfiguration:
    product: ProductDraft = field(default_factory=ProductDraft)
    main_image: Any = None
    variants: list[VariantEntry] = field(default_factory=list)
    specifications: list[SpecEntry] = field(default_factory=list)
    prices: list[PriceEntry] | None = None
    attributes: list[Attribute] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.product, dict):
            self.product = ProductDraft(**_known_fields(ProductDraft, self.product))
        self.variants = [
            item if isinstance(item, VariantEntry) else VariantEntry(**_known_fields(VariantEntry, item))
            for item in self.variants or []
        ]
        self.specifications = _spec_list(self.specifications)
        if self.prices is not None:
            self.prices = [
                item if isinstance(item, PriceEntry) else PriceEntry(**_known_fields(PriceEntry, item))
                for item in self.prices
            ]
        self.attributes = [
            item if isinstance(item, Attribute) else Attribute(**_known_fields(Attribute, item))
            for item in self.attributes or []
        ]

    def price_entries(self) -> list[PriceEntry]:
        if self.prices is not None:
            return list(self.prices)
        return price_entries_from_product(self.product)

    def product_spec_names(self) -> set[str]:
        return {spec.normalized_name() for spec in self.specifications if spec.is_filled()}

    def to_dict(self) -> dict[str, Any]:
        return {
            "product": self.product.to_dict(),
            "main_image": self.main_image if isinstance(self.main_image, str) else bool(self.main_image),
            "variants": [variant.to_dict() for variant in self.variants],
            "specifications": [spec.to_dict() for spec in self.specifications],
            "prices": [entry.to_dict() for entry in self.price_entries()],
        }


def _known_fields(cls: type, data: dict[str, Any]) -> dict[str, Any]:
    names = {item.name for item in fields(cls)}
    return {key: value for key, value in snake_keys(data).items() if key in names}


def _delivery_cost_text(value: Any) -> str | None:
    # A numeric zero is the untouched form default, not an entered cost.
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool) and parse_decimal(value) == 0:
        return None
    return as_text(value)


def _spec_list(values: list[SpecEntry] | list[dict[str, Any]] | None) -> list[SpecEntry]:
    out: list[SpecEntry] = []
    for item in values or []:
        if isinstance(item, SpecEntry):
            out.append(item)
        elif isinstance(item, dict):
            out.append(SpecEntry(name=item.get("name"), value=item.get("value")))
    return out


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
]
