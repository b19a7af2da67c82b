"""Exception types raised by the order workflow.

Two families:

- ValidationError: the customer can fix it. Carries every Violation found,
  so a caller can show all problems at once.
- IntegrityError: a defect in session tracking. Never recovered from.
"""

from typing import Any

from .models import Violation


class TacoCloudError(Exception):
    """Base class for all workflow errors."""


class ValidationError(TacoCloudError):
    """Raised when a submission fails one or more validation rules.

    Attributes:
        message: human-readable summary
        violations: every rule the submission broke, in check order
    """

    def __init__(self, violations: list[Violation], message: str = "Invalid submission"):
        super().__init__(message)
        self.message = message
        self.violations = list(violations)

    @property
    def codes(self) -> list[str]:
        return [v.code.value for v in self.violations]

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "violations": [v.model_dump(mode="json") for v in self.violations],
        }

    def __str__(self) -> str:
        details = "; ".join(v.message for v in self.violations)
        return f"{self.message}: {details}" if details else self.message


class TacoValidationError(ValidationError):
    def __init__(self, violations: list[Violation], message: str = "Invalid taco"):
        super().__init__(violations, message)


class OrderValidationError(ValidationError):
    def __init__(self, violations: list[Violation], message: str = "Invalid order"):
        super().__init__(violations, message)


class IntegrityError(TacoCloudError):
    """Raised when internal bookkeeping is inconsistent."""


class SessionIntegrityError(IntegrityError):
    """Raised when a request arrives without a usable session id."""
