from variantgate.core.canonical import DeliveryType
from variantgate.core.resolve import inheritance_hints, resolve_variant, resolve_variants

from tests.helpers._draft_builders import build_configuration, build_product, build_variant


def test_price_comes_from_variant_only_when_complete() -> None:
    product = build_product()

    own = resolve_variant(product, build_variant())
    partial = resolve_variant(product, build_variant(variant_prices={"net_price": "12", "cost": ""}))

    assert (own.net_price, own.cost, own.price_source) == ("12", "6", "variant")
    assert (partial.net_price, partial.cost, partial.price_source) == ("10", "5", "product")


def test_delivery_type_inherits_when_unset_or_inherit() -> None:
    product = build_product(delivery_type=DeliveryType.MEEMHOME, delivery_cost="5")

    for delivery_type in (None, "inherit"):
        effective = resolve_variant(product, build_variant(delivery_type=delivery_type))
        assert effective.delivery_type is DeliveryType.MEEMHOME
        assert effective.delivery_type_inherited is True
        assert effective.delivery_cost == "5"
        assert effective.delivery_cost_inherited is True


def test_meemhome_variant_cost_overrides_product() -> None:
    product = build_product(delivery_type=DeliveryType.MEEMHOME, delivery_cost="5")

    effective = resolve_variant(product, build_variant(delivery_type="meemhome", delivery_cost="8"))

    assert effective.delivery_type_inherited is False
    assert effective.delivery_cost == "8"
    assert effective.delivery_cost_inherited is False


def test_company_variant_never_uses_own_cost() -> None:
    product = build_product(delivery_type=DeliveryType.MEEMHOME, delivery_cost="5")

    effective = resolve_variant(product, build_variant(delivery_type="company", delivery_cost="8"))

    assert effective.delivery_type is DeliveryType.COMPANY
    assert effective.delivery_cost == "5"
    assert effective.delivery_cost_inherited is True


def test_shelf_inherits_unless_set_or_explicitly_cleared() -> None:
    product = build_product(shelf_id=3)

    inherited = resolve_variant(product, build_variant())
    cleared = resolve_variant(product, build_variant(shelf_id=0))
    own = resolve_variant(product, build_variant(shelf_id=9))

    assert (inherited.shelf_id, inherited.shelf_inherited) == (3, True)
    assert (cleared.shelf_id, cleared.shelf_inherited) == (None, False)
    assert (own.shelf_id, own.shelf_inherited) == (9, False)


def test_resolve_variants_numbers_from_one() -> None:
    config = build_configuration(
        product=build_product(has_variants=True),
        variants=[build_variant(id="a"), build_variant(id="b")],
    )

    resolved = resolve_variants(config)

    assert [(item.index, item.variant_id) for item in resolved] == [(1, "a"), (2, "b")]


def test_inheritance_hints_for_fully_inherited_variant() -> None:
    product = build_product(delivery_type=DeliveryType.MEEMHOME, delivery_cost="5")
    effective = resolve_variant(product, build_variant(variant_prices={}, delivery_type="inherit"))

    assert inheritance_hints(effective) == [
        "Use main product price: 10 (cost 5)",
        "Use main product delivery method: meemhome",
        "Use main product delivery cost: 5",
        "Use main: No shelf",
    ]


def test_inheritance_hints_for_company_override() -> None:
    effective = resolve_variant(build_product(shelf_id=4), build_variant(delivery_type="company", shelf_id=4))

    assert inheritance_hints(effective) == ["Delivery cost is handled by the delivery company"]
