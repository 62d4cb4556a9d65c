import pytest

import variantgate
from variantgate.core import (
    DraftConfiguration,
    DraftParseError,
    DraftValidationError,
    parse_configuration,
    resolve_draft,
    submission_payload,
    validate_draft,
)
from variantgate.core.config import CoreConfig, config_from_env

from tests.helpers._draft_builders import full_specs, mug_payload


def test_parse_configuration_builds_typed_draft() -> None:
    config = parse_configuration(mug_payload())

    assert isinstance(config, DraftConfiguration)
    assert config.product.delivery_type == "company"
    assert [entry.to_dict() for entry in config.prices] == [{"net_price": "10", "cost": "5", "country_id": 1}]


def test_parse_configuration_uses_configured_country(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_COUNTRY_ID", "44")

    config = parse_configuration(mug_payload())

    assert config.prices[0].country_id == 44


def test_parse_configuration_keeps_explicit_prices() -> None:
    payload = mug_payload()
    payload["prices"] = [{"net_price": "10", "cost": "5", "country_id": 1}, {"net_price": 2, "cost": 3, "country_id": 2}]

    outcome = validate_draft(payload)

    assert outcome.blocking.message == "Net price cannot be less than cost in price entry 2"


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"variants": []},
        {"product": {"name": "Mug"}, "variants": {"stock": 1}},
        {"product": {"name": "Mug"}, "specifications": ["weight"]},
        {"product": {"name": "Mug", "delivery_type": "express"}},
        {"product": {"name": "Mug"}, "prices": [{"net_price": "free", "cost": 1}]},
        {"product": {"name": "Mug"}, "attributes": [{"name": "Color"}]},
        {"product": {"name": "Mug"}, "attributes": [{"id": 1, "name": "Color", "values": [{"value": "Red"}]}]},
    ],
)
def test_parse_configuration_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(DraftParseError):
        parse_configuration(payload)


def test_validate_valid_scenario_from_payload() -> None:
    outcome = validate_draft(mug_payload())

    assert outcome.valid is True
    assert outcome.to_dict()["status"] == "valid"


def test_validate_missing_sku_scenario() -> None:
    outcome = validate_draft(mug_payload(sku=""))

    assert outcome.field_errors == {"sku": ["SKU is required"]}
    assert outcome.blocking is None


def test_strict_mode_raises_with_outcome() -> None:
    with pytest.raises(DraftValidationError) as excinfo:
        validate_draft(mug_payload(delivery_type=None), strict=True)

    assert excinfo.value.outcome.blocking.message == "Delivery method is required"
    assert "Delivery method is required" in str(excinfo.value)


def test_strict_mode_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("VARIANTGATE_STRICT", "true")

    assert config_from_env().strict is True
    with pytest.raises(DraftValidationError):
        validate_draft(mug_payload(sku=""))
    assert validate_draft(mug_payload(sku=""), config=CoreConfig()).valid is False


def test_resolve_from_payload() -> None:
    payload = mug_payload(has_variants=True, delivery_type="meemhome", delivery_cost="4")
    payload["variants"] = [{"variations": [1], "stock": 2, "delivery_type": "inherit"}]

    resolved = resolve_draft(payload)

    assert resolved[0].delivery_cost == "4"
    assert resolved[0].price_source == "product"


def test_submission_payload_requires_valid_draft() -> None:
    assert submission_payload(mug_payload())["sku"] == "M1"

    with pytest.raises(DraftValidationError):
        submission_payload(mug_payload(slug=""))


def test_package_level_facade_is_callable() -> None:
    from variantgate.core import resolve_draft as core_resolve
    from variantgate.core import validate_draft as core_validate

    assert callable(core_validate)
    assert callable(core_resolve)
    assert variantgate.validate(mug_payload()).valid is True
    assert variantgate.resolve(mug_payload()) == []


def test_parse_configuration_accepts_camel_case_form_state() -> None:
    payload = {
        "product": {
            "name": "Mug",
            "sku": "M1",
            "slug": "mug",
            "netPrice": "10",
            "costPrice": "5",
            "hasVariants": True,
            "deliveryType": "meemhome",
            "deliveryCost": "4",
        },
        "mainImage": "c.jpg",
        "variants": [
            {
                "variations": [1],
                "stock": 2,
                "variantPrices": {"netPrice": "12", "cost": "6"},
                "deliveryType": "inherit",
                "shelfId": 3,
            }
        ],
        "specifications": [spec.to_dict() for spec in full_specs()],
    }

    config = parse_configuration(payload)

    assert config.product.has_variants is True
    assert config.product.net_price == "10"
    assert config.product.delivery_cost == "4"
    assert config.main_image == "c.jpg"
    assert config.variants[0].variant_prices.net_price == "12"
    assert config.variants[0].shelf_id == 3
    assert validate_draft(payload).valid is True


def test_zero_product_delivery_cost_counts_as_unset() -> None:
    payload = mug_payload(has_variants=True, delivery_type="meemhome", delivery_cost=0)
    payload["variants"] = [{"variations": [1], "stock": 2}]

    outcome = validate_draft(payload)

    assert outcome.blocking.check == "variant_delivery"
    assert outcome.blocking.message == "Variant 1: Delivery cost is required for meemhome delivery type"


def test_attribute_catalog_blocks_two_values_of_one_attribute() -> None:
    payload = mug_payload(has_variants=True)
    payload["attributes"] = [
        {"id": 1, "name": "Color", "values": [{"id": 10, "value": "Red"}, {"id": 11, "value": "Blue"}]}
    ]
    payload["variants"] = [{"variations": [10, 11], "stock": 2, "variant_prices": {"net_price": "12", "cost": "6"}}]

    outcome = validate_draft(payload)

    assert outcome.blocking.check == "variants"
    assert outcome.blocking.message == "Variant 1 must have only one value per attribute"

    payload["variants"][0]["variations"] = [10]
    assert validate_draft(payload).valid is True
