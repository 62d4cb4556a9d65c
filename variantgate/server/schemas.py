from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Payload(BaseModel):
    # Form state arrives camelCased from the console; snake_case is accepted too.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SpecPayload(_Payload):
    name: str = ""
    value: str = ""


class VariantPricesPayload(_Payload):
    net_price: str | float | None = None
    cost: str | float | None = None


class VariantPayload(_Payload):
    id: int | str | None = None
    variations: list[int] = Field(default_factory=list)
    stock: int | None = None
    variant_prices: VariantPricesPayload = Field(default_factory=VariantPricesPayload)
    variant_specs: list[SpecPayload] = Field(default_factory=list)
    delivery_type: str | None = Field(default=None, examples=["inherit"])
    delivery_cost: str | float | None = None
    shelf_id: int | None = None
    image: str | None = None


class ProductPayload(_Payload):
    name: str = Field(default="", examples=["Mug"])
    sku: str = Field(default="", examples=["M1"])
    slug: str = Field(default="", examples=["mug"])
    net_price: str | float | None = Field(default=None, examples=["10"])
    cost_price: str | float | None = Field(default=None, examples=["5"])
    has_variants: bool = False
    delivery_type: str | None = Field(default=None, examples=["company"])
    delivery_cost: str | float | None = None
    cover_image: str | None = None
    shelf_id: int | None = None


class PricePayload(_Payload):
    net_price: Decimal
    cost: Decimal
    country_id: int | None = None


class AttributeValuePayload(_Payload):
    id: int
    value: str


class AttributePayload(_Payload):
    id: int
    name: str
    values: list[AttributeValuePayload] = Field(default_factory=list)


class DraftRequest(_Payload):
    product: ProductPayload
    main_image: str | None = Field(
        default=None,
        description="Uploaded file name or existing image URL for the cover image.",
    )
    variants: list[VariantPayload] = Field(default_factory=list)
    specifications: list[SpecPayload] = Field(default_factory=list)
    prices: list[PricePayload] | None = Field(
        default=None,
        description="Per-country price entries. Derived from the product prices when omitted.",
    )
    attributes: list[AttributePayload] = Field(
        default_factory=list,
        description="Attribute catalog used to check that a variant picks one value per attribute.",
    )

    def to_draft(self) -> dict[str, Any]:
        return self.model_dump(mode="python")


__all__ = [
    "AttributePayload",
    "AttributeValuePayload",
    "DraftRequest",
    "PricePayload",
    "ProductPayload",
    "SpecPayload",
    "VariantPayload",
    "VariantPricesPayload",
]
