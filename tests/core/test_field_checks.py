from variantgate.core.canonical import ProductDraft
from variantgate.core.validate import (
    field_errors_from_backend,
    first_error_field,
    merge_field_errors,
    validate_basics,
    validate_cover_image,
    validate_variants_presence,
)

from tests.helpers._draft_builders import build_product, build_variant


def test_validate_basics_passes_complete_product() -> None:
    assert validate_basics(build_product()) == {}


def test_validate_basics_reports_every_missing_field() -> None:
    errors = validate_basics(ProductDraft())

    assert errors == {
        "name": ["Product name is required"],
        "sku": ["SKU is required"],
        "slug": ["URL slug is required"],
        "net_price": ["Net price is required"],
        "cost_price": ["Cost price is required"],
    }


def test_validate_basics_treats_whitespace_as_missing() -> None:
    assert validate_basics(build_product(sku="   ")) == {"sku": ["SKU is required"]}


def test_variants_presence_requires_variant_when_flag_is_on() -> None:
    product = build_product(has_variants=True)

    errors = validate_variants_presence(product, [])

    assert list(errors) == ["variants"]
    assert "add a variant or disable" in errors["variants"][0]
    assert validate_variants_presence(product, [build_variant()]) == {}
    assert validate_variants_presence(build_product(), []) == {}


def test_cover_image_accepts_upload_or_existing_url() -> None:
    assert validate_cover_image(b"\x89PNG", build_product()) == {}
    assert validate_cover_image(None, build_product(cover_image="https://cdn.example/mug.jpg")) == {}
    assert validate_cover_image("  ", build_product()) == {"cover_image": ["Cover image is required"]}


def test_merge_field_errors_keeps_order_and_drops_duplicates() -> None:
    merged = merge_field_errors(
        {"sku": ["SKU is required"]},
        {"sku": ["SKU is required", "SKU already taken"], "slug": ["URL slug is required"]},
        {"name": []},
    )

    assert merged == {
        "sku": ["SKU is required", "SKU already taken"],
        "slug": ["URL slug is required"],
    }


def test_field_errors_from_backend_normalizes_details() -> None:
    details = {"slug": "The slug has already been taken.", "sku": ["Duplicate SKU", ""], "": ["x"], "name": []}

    assert field_errors_from_backend(details) == {
        "slug": ["The slug has already been taken."],
        "sku": ["Duplicate SKU"],
    }
    assert field_errors_from_backend("Server error") == {}


def test_first_error_field_follows_form_order() -> None:
    assert first_error_field({"variants": ["x"], "cover_image": ["y"], "sku": ["z"]}) == "sku"
    assert first_error_field({"store_id": ["x"], "cover_image": ["y"]}) == "cover_image"
    assert first_error_field({"b": ["x"], "a": ["y"]}) == "b"
    assert first_error_field({}) is None
