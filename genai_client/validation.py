"""
Request validation.

Each request type exposes `validate_request() -> ValidationOutcome`. The
RequestValidator runs that contract before any URI is built or any byte is
sent.

Rules:
- Fail-fast: the first violation is returned
- Never raises for an invalid request
- Never mutates the request
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

from genai_client.errors import PayloadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationOutcome:
    """Either valid, or a message plus the implicated field names."""

    is_valid: bool
    message: Optional[str] = None
    fields: Tuple[str, ...] = ()

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, message: str, *fields: str) -> "ValidationOutcome":
        return cls(is_valid=False, message=message, fields=tuple(fields))


Check = Callable[[], Optional[ValidationOutcome]]

_VALID = ValidationOutcome.valid()


# ──────────────────────────────────────────────────────────────
# CHECK HELPERS
# ──────────────────────────────────────────────────────────────


def first_failure(*checks: Check) -> ValidationOutcome:
    """Run checks lazily in order; stop at the first failing one."""
    for check in checks:
        outcome = check()
        if outcome is not None and not outcome.is_valid:
            return outcome
    return _VALID


def require_text(value: Optional[str], field: str) -> Optional[ValidationOutcome]:
    if value is None or not str(value).strip():
        return ValidationOutcome.invalid(f"{field} is required.", field)
    return None


def require_range(
    value: Optional[float],
    field: str,
    minimum: float,
    maximum: float,
) -> Optional[ValidationOutcome]:
    """Optional numeric value must lie in [minimum, maximum] when set."""
    if value is None:
        return None
    if value < minimum or value > maximum:
        return ValidationOutcome.invalid(
            f"{field} must be between {minimum} and {maximum}.", field
        )
    return None


def require_choice(
    value: Optional[str],
    field: str,
    choices: Iterable[str],
) -> Optional[ValidationOutcome]:
    """Optional text value must be one of `choices` when set."""
    if value is None or value == "":
        return None
    allowed = tuple(choices)
    if value not in allowed:
        return ValidationOutcome.invalid(
            f"{field} must be one of: {', '.join(allowed)}.", field
        )
    return None


def require_items(items: Optional[list], field: str) -> Optional[ValidationOutcome]:
    if not items:
        return ValidationOutcome.invalid(f"{field} must contain at least one item.", field)
    return None


def check_file_content(file_content: Any, field: str) -> None:
    """
    Binary payload descriptor preconditions.

    Raises:
        PayloadError: descriptor missing, no buffer nor stream, or blank
            content name.
    """
    if file_content is None:
        raise PayloadError(f"Missing {field} content data.", field)
    if file_content.source_content is None and file_content.source_stream is None:
        raise PayloadError(
            f"No {field} content nor stream defined in file content data.", field
        )
    if not (file_content.content_name or "").strip():
        raise PayloadError(f"Missing {field} name in file content data.", field)


# ──────────────────────────────────────────────────────────────
# VALIDATOR
# ──────────────────────────────────────────────────────────────


class RequestValidator:
    """Stateless validator; one instance can serve every façade."""

    def validate(self, request: Any) -> ValidationOutcome:
        contract = getattr(request, "validate_request", None)
        if contract is None:
            return _VALID

        outcome = contract()
        if not outcome.is_valid:
            logger.info(
                f"Request validation failed: {outcome.message}",
                extra={
                    "request_type": type(request).__name__,
                    "fields": list(outcome.fields),
                },
            )
        return outcome
