from typing import Any


class DraftParseError(ValueError):
    """Raised when a draft payload cannot be turned into a configuration."""


class DraftValidationError(ValueError):
    """Raised in strict mode when a draft does not pass validation."""

    def __init__(self, outcome: Any) -> None:
        self.outcome = outcome
        if outcome.blocking is not None:
            detail = outcome.blocking.message
        else:
            detail = f"{len(outcome.field_errors)} field error(s): {', '.join(outcome.field_errors)}"
        super().__init__(f"Draft is not submittable: {detail}")


__all__ = ["DraftParseError", "DraftValidationError"]
