"""Result types shared by the field checks and the blocking checks."""

from dataclasses import dataclass, field
from typing import Any, Literal

FieldErrors = dict[str, list[str]]
OutcomeStatus = Literal["field_errors", "blocking", "valid"]


@dataclass(frozen=True)
class CheckResult:
    is_valid: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> "CheckResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, message: str) -> "CheckResult":
        return cls(is_valid=False, message=message)


@dataclass(frozen=True)
class BlockingError:
    check: str
    message: str


@dataclass
class ValidationOutcome:
    field_errors: FieldErrors = field(default_factory=dict)
    blocking: BlockingError | None = None
    resolved: list[Any] = field(default_factory=list)

    @property
    def status(self) -> OutcomeStatus:
        if self.field_errors:
            return "field_errors"
        if self.blocking is not None:
            return "blocking"
        return "valid"

    @property
    def valid(self) -> bool:
        return self.status == "valid"

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "valid": self.valid,
            "field_errors": {key: list(messages) for key, messages in self.field_errors.items()},
            "blocking": (
                {"check": self.blocking.check, "message": self.blocking.message}
                if self.blocking is not None
                else None
            ),
            "resolved": [item.to_dict() for item in self.resolved],
        }


__all__ = ["BlockingError", "CheckResult", "FieldErrors", "OutcomeStatus", "ValidationOutcome"]
