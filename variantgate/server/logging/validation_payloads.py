from typing import Any

from ...core.canonical.entities import DraftConfiguration
from ...core.validate.report import ValidationOutcome
from ...config import get_settings

_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def outcome_to_loggable(
    outcome: ValidationOutcome,
    configuration: DraftConfiguration,
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)
    if level == "extrahigh":
        return {"draft": configuration.to_dict(), "outcome": outcome.to_dict()}

    if level == "high":
        data = outcome.to_dict()
        data["product"] = configuration.product.to_dict()
        return data

    summary = {
        "sku": configuration.product.sku,
        "status": outcome.status,
        "has_variants": configuration.product.has_variants,
        "variants_count": len(configuration.variants),
        "field_errors": sorted(outcome.field_errors),
        "blocking": outcome.blocking.message if outcome.blocking is not None else None,
    }

    if level == "low":
        return {"sku": summary["sku"], "status": summary["status"]}

    return summary
