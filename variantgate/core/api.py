"""Stable public API facade for the variantgate core engine."""

from typing import Any, Mapping

from .canonical.entities import DraftConfiguration, price_entries_from_product
from .canonical.helpers import snake_keys
from .config import CoreConfig, config_from_env
from .errors import DraftParseError, DraftValidationError
from .payload import build_submission_payload
from .resolve import EffectiveVariant, resolve_variants
from .validate import Reporter, ValidationOutcome, validate_configuration

DraftInput = DraftConfiguration | Mapping[str, Any]


def parse_configuration(payload: Mapping[str, Any], *, config: CoreConfig | None = None) -> DraftConfiguration:
    """Build a ``DraftConfiguration`` from snake_case or camelCase form state."""
    if not isinstance(payload, Mapping):
        raise DraftParseError("Draft payload must be a JSON object")
    payload = snake_keys(payload)

    product = payload.get("product")
    if not isinstance(product, Mapping):
        raise DraftParseError("Draft payload needs a 'product' object")

    variants = payload.get("variants") or []
    specifications = payload.get("specifications") or []
    attributes = payload.get("attributes") or []
    prices = payload.get("prices")
    for key, value in (
        ("variants", variants),
        ("specifications", specifications),
        ("attributes", attributes),
        ("prices", prices),
    ):
        if value is not None and not isinstance(value, list):
            raise DraftParseError(f"'{key}' must be a list")
        if value is not None and any(not isinstance(item, Mapping) for item in value):
            raise DraftParseError(f"Every entry in '{key}' must be an object")

    try:
        parsed = DraftConfiguration(
            product=dict(product),
            main_image=payload.get("main_image"),
            variants=[dict(item) for item in variants],
            specifications=[dict(item) for item in specifications],
            prices=[dict(item) for item in prices] if prices is not None else None,
            attributes=[dict(item) for item in attributes],
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise DraftParseError(str(exc)) from exc

    if parsed.prices is None:
        resolved_config = config or config_from_env()
        parsed.prices = price_entries_from_product(parsed.product, country_id=resolved_config.default_country_id)
    return parsed


def _coerce_configuration(draft: DraftInput, config: CoreConfig | None) -> DraftConfiguration:
    if isinstance(draft, DraftConfiguration):
        return draft
    return parse_configuration(draft, config=config)


def validate_draft(
    draft: DraftInput,
    *,
    strict: bool | None = None,
    reporter: Reporter | None = None,
    config: CoreConfig | None = None,
) -> ValidationOutcome:
    resolved_config = config or config_from_env(strict=strict)
    configuration = _coerce_configuration(draft, resolved_config)
    outcome = validate_configuration(configuration, reporter=reporter)
    is_strict = resolved_config.strict if strict is None else strict
    if is_strict and not outcome.valid:
        raise DraftValidationError(outcome)
    return outcome


def resolve_draft(draft: DraftInput, *, config: CoreConfig | None = None) -> list[EffectiveVariant]:
    return resolve_variants(_coerce_configuration(draft, config))


def submission_payload(draft: DraftInput, *, config: CoreConfig | None = None) -> dict[str, Any]:
    """Validate strictly, then build the product-service payload."""
    configuration = _coerce_configuration(draft, config)
    validate_draft(configuration, strict=True, config=config)
    return build_submission_payload(configuration)


__all__ = ["DraftInput", "parse_configuration", "resolve_draft", "submission_payload", "validate_draft"]
