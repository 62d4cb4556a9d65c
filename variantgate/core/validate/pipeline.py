"""Two-stage validation of one submit attempt.

Stage A collects every inline field error. Only when it finds none do the
blocking checks run, in order, stopping at the first failure.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from ..canonical.entities import DraftConfiguration
from ..resolve import resolve_variants
from .fields import merge_field_errors, validate_basics, validate_cover_image, validate_variants_presence
from .report import BlockingError, FieldErrors, ValidationOutcome
from .rules import BLOCKING_CHECKS, BlockingCheck

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    def report(self, error: BlockingError) -> None: ...


def run_field_checks(config: DraftConfiguration) -> FieldErrors:
    return merge_field_errors(
        validate_basics(config.product),
        validate_variants_presence(config.product, config.variants),
        validate_cover_image(config.main_image, config.product),
    )


def run_blocking_checks(
    config: DraftConfiguration,
    checks: Iterable[BlockingCheck] = BLOCKING_CHECKS,
) -> BlockingError | None:
    for check in checks:
        result = check.run(config)
        if not result.is_valid:
            return BlockingError(check=check.name, message=result.message or "Validation failed")
    return None


def validate_configuration(
    config: DraftConfiguration,
    *,
    reporter: Reporter | None = None,
    checks: Iterable[BlockingCheck] = BLOCKING_CHECKS,
) -> ValidationOutcome:
    field_errors = run_field_checks(config)
    if field_errors:
        logger.debug("Draft %r rejected with field errors on %s", config.product.sku, sorted(field_errors))
        return ValidationOutcome(field_errors=field_errors)

    blocking = run_blocking_checks(config, checks)
    if blocking is not None:
        logger.debug("Draft %r blocked by %s: %s", config.product.sku, blocking.check, blocking.message)
        if reporter is not None:
            reporter.report(blocking)

    return ValidationOutcome(blocking=blocking, resolved=resolve_variants(config))


__all__ = ["Reporter", "run_blocking_checks", "run_field_checks", "validate_configuration"]
