from .fields import (
    DEFAULT_FIELD_ORDER,
    field_errors_from_backend,
    first_error_field,
    merge_field_errors,
    validate_basics,
    validate_cover_image,
    validate_variants_presence,
)
from .pipeline import Reporter, run_blocking_checks, run_field_checks, validate_configuration
from .report import BlockingError, CheckResult, FieldErrors, ValidationOutcome
from .rules import (
    BLOCKING_CHECKS,
    BlockingCheck,
    check_delivery_method,
    check_detailed_variants,
    check_pricing,
    check_specifications,
    check_variant_delivery,
)

__all__ = [
    "BLOCKING_CHECKS",
    "BlockingCheck",
    "BlockingError",
    "CheckResult",
    "DEFAULT_FIELD_ORDER",
    "FieldErrors",
    "Reporter",
    "ValidationOutcome",
    "check_delivery_method",
    "check_detailed_variants",
    "check_pricing",
    "check_specifications",
    "check_variant_delivery",
    "field_errors_from_backend",
    "first_error_field",
    "merge_field_errors",
    "run_blocking_checks",
    "run_field_checks",
    "validate_basics",
    "validate_configuration",
    "validate_cover_image",
    "validate_variants_presence",
]
