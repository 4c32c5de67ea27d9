"""
Request validation for the auth endpoints.

``validate_signup`` / ``validate_login`` never raise on bad input; they
return a ``ValidationResult`` the handler can branch on, so no storage or
hashing work happens for a malformed request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from auth.schemas import LoginRequest, SignupRequest

GENERIC_VALIDATION_MESSAGE = "Validation failed"

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class ValidationResult(Generic[ModelT]):
    success: bool
    data: Optional[ModelT] = None
    error: Optional[ValidationError] = None


def _safe_parse(model: Type[ModelT], payload: Any) -> ValidationResult[ModelT]:
    try:
        return ValidationResult(success=True, data=model.model_validate(payload))
    except ValidationError as exc:
        return ValidationResult(success=False, error=exc)


def validate_signup(payload: Any) -> ValidationResult[SignupRequest]:
    return _safe_parse(SignupRequest, payload)


def validate_login(payload: Any) -> ValidationResult[LoginRequest]:
    return _safe_parse(LoginRequest, payload)


def _issue_message(issue: dict) -> str:
    msg = issue.get("msg", "")
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    field = ".".join(str(part) for part in issue.get("loc", ()))
    return f"{field}: {msg}" if field else msg


def validation_issues(error: Optional[ValidationError]) -> List[str]:
    """One message per violated field, in the order pydantic reported them."""
    if error is None:
        return []
    seen = set()
    issues = []
    for issue in error.errors():
        field = tuple(issue.get("loc", ()))
        if field in seen:
            continue
        seen.add(field)
        issues.append(_issue_message(issue))
    return issues


def format_validation_error(error: Optional[ValidationError]) -> str:
    """Join the issues for display, falling back to a generic message."""
    issues = validation_issues(error)
    if not issues:
        return GENERIC_VALIDATION_MESSAGE
    return ", ".join(issues)
