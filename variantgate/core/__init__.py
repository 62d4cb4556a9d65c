"""Core engine API.

The core layer is framework-agnostic, performs no I/O, and is safe to import
from scripts, tests, CLI commands, and web frontends.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "CoreConfig": ("variantgate.core.config", "CoreConfig"),
    "DeliveryType": ("variantgate.core.canonical.entities", "DeliveryType"),
    "DraftConfiguration": ("variantgate.core.canonical.entities", "DraftConfiguration"),
    "DraftParseError": ("variantgate.core.errors", "DraftParseError"),
    "DraftValidationError": ("variantgate.core.errors", "DraftValidationError"),
    "EffectiveVariant": ("variantgate.core.resolve", "EffectiveVariant"),
    "PriceEntry": ("variantgate.core.canonical.entities", "PriceEntry"),
    "ProductDraft": ("variantgate.core.canonical.entities", "ProductDraft"),
    "SpecEntry": ("variantgate.core.canonical.entities", "SpecEntry"),
    "ValidationOutcome": ("variantgate.core.validate.report", "ValidationOutcome"),
    "VariantEntry": ("variantgate.core.canonical.entities", "VariantEntry"),
    "build_submission_payload": ("variantgate.core.payload", "build_submission_payload"),
    "config_from_env": ("variantgate.core.config", "config_from_env"),
    "inheritance_hints": ("variantgate.core.resolve", "inheritance_hints"),
    "parse_configuration": ("variantgate.core.api", "parse_configuration"),
    "resolve_draft": ("variantgate.core.api", "resolve_draft"),
    "submission_payload": ("variantgate.core.api", "submission_payload"),
    "suggest_slug": ("variantgate.core.canonical.helpers", "suggest_slug"),
    "validate_configuration": ("variantgate.core.validate.pipeline", "validate_configuration"),
    "validate_draft": ("variantgate.core.api", "validate_draft"),
}

__all__ = [
    "CoreConfig",
    "DeliveryType",
    "DraftConfiguration",
    "DraftParseError",
    "DraftValidationError",
    "EffectiveVariant",
    "PriceEntry",
    "ProductDraft",
    "SpecEntry",
    "ValidationOutcome",
    "VariantEntry",
    "build_submission_payload",
    "config_from_env",
    "inheritance_hints",
    "parse_configuration",
    "resolve_draft",
    "submission_payload",
    "suggest_slug",
    "validate_configuration",
    "validate_draft",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
