from fastapi.testclient import TestClient

from variantgate.server.main import app

from tests.helpers._draft_builders import mug_payload

client = TestClient(app)


def _camel_mug_payload(**product_overrides) -> dict:
    product = {
        "name": "Mug",
        "sku": "M1",
        "slug": "mug",
        "netPrice": "10",
        "costPrice": "5",
        "hasVariants": False,
        "deliveryType": "company",
    }
    product.update(product_overrides)
    return {
        "product": product,
        "mainImage": "cover.jpg",
        "specifications": mug_payload()["specifications"],
    }


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_validate_endpoint_accepts_camel_case_form_state() -> None:
    response = client.post("/api/v1/products/validate", json=_camel_mug_payload())

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "valid"
    assert payload["field_errors"] == {}
    assert payload["blocking"] is None


def test_validate_endpoint_returns_field_errors() -> None:
    response = client.post("/api/v1/products/validate", json=mug_payload(sku=""))

    assert response.status_code == 200
    assert response.json()["field_errors"] == {"sku": ["SKU is required"]}


def test_validate_endpoint_returns_blocking_message() -> None:
    payload = _camel_mug_payload(hasVariants=True)
    payload["variants"] = [{"variations": [1], "stock": 0}]

    response = client.post("/api/v1/products/validate", json=payload)

    body = response.json()
    assert body["status"] == "blocking"
    assert body["blocking"] == {
        "check": "variants",
        "message": "Variant 1 must have stock quantity greater than 0",
    }


def test_unknown_delivery_type_is_unprocessable() -> None:
    response = client.post("/api/v1/products/validate", json=mug_payload(delivery_type="express"))

    assert response.status_code == 422
    assert "Unknown delivery type" in response.json()["detail"]


def test_resolve_endpoint_returns_hints() -> None:
    payload = _camel_mug_payload(hasVariants=True, deliveryType="meemhome", deliveryCost="5")
    payload["variants"] = [
        {"variations": [1], "stock": 3, "deliveryType": "inherit"},
        {"variations": [2], "stock": 3, "variantPrices": {"netPrice": "14", "cost": "7"}, "shelfId": 2},
    ]

    response = client.post("/api/v1/products/resolve", json=payload)

    assert response.status_code == 200
    first, second = response.json()["variants"]
    assert first["delivery_type"] == "meemhome"
    assert "Use main product delivery cost: 5" in first["hints"]
    assert second["price_source"] == "variant"
    assert second["shelf_id"] == 2


def test_payload_endpoint() -> None:
    ok = client.post("/api/v1/products/payload", json=mug_payload())
    blocked = client.post("/api/v1/products/payload", json=mug_payload(delivery_type=None))

    assert ok.status_code == 200
    assert ok.json()["product_prices"] == [{"net_price": "10", "cost": "5", "country_id": 1}]
    assert blocked.status_code == 422
    assert blocked.json()["detail"]["blocking"]["message"] == "Delivery method is required"


def test_slug_endpoint() -> None:
    response = client.get("/api/v1/slug", params={"name": "Blue Ceramic Mug!"})

    assert response.json() == {"slug": "blue-ceramic-mug"}


def test_validate_endpoint_checks_attribute_catalog_and_zero_cost() -> None:
    payload = _camel_mug_payload(hasVariants=True, deliveryType="meemhome", deliveryCost=0)
    payload["attributes"] = [
        {"id": 1, "name": "Color", "values": [{"id": 10, "value": "Red"}, {"id": 11, "value": "Blue"}]}
    ]
    payload["variants"] = [{"variations": [10, 11], "stock": 2}]

    first = client.post("/api/v1/products/validate", json=payload).json()
    payload["variants"][0]["variations"] = [10]
    second = client.post("/api/v1/products/validate", json=payload).json()

    assert first["blocking"]["message"] == "Variant 1 must have only one value per attribute"
    assert second["blocking"]["message"] == "Variant 1: Delivery cost is required for meemhome delivery type"
