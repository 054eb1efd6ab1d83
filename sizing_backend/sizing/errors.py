# sizing/errors.py
from typing import List

from pydantic import ValidationError


class SizingError(Exception):
    """Base class for calculator failures."""


class InputValidationError(SizingError, ValueError):
    """A request field is missing, non-numeric, non-finite or out of range."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class ComputationFault(SizingError):
    """Unexpected failure while evaluating the correlations."""


# pydantic error type -> message template
_RANGE_MESSAGES = {
    "greater_than": "Invalid value for '{field}'; must be greater than {limit}",
    "greater_than_equal": "Invalid value for '{field}'; must be at least {limit}",
}

_ENUM_MESSAGES = {
    "suctype": "Invalid value for 'suctype'; expected 1 or 2",
    "num_impellers": "Invalid value for 'num_impellers'; expected a whole number",
}


def from_error_list(errors: List[dict]) -> InputValidationError:
    """
    Reduce a pydantic/FastAPI error report to the first offending wire key.
    """
    first = errors[0] if errors else {}
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = loc[0] if loc else "body"
    err_type = first.get("type", "")

    if err_type == "json_invalid":
        return InputValidationError("body", "Request body is not valid JSON")
    if err_type == "value_error" and field in _ENUM_MESSAGES:
        return InputValidationError(field, _ENUM_MESSAGES[field])
    if err_type in _RANGE_MESSAGES:
        ctx = first.get("ctx") or {}
        limit = ctx.get("gt", ctx.get("ge", 0))
        return InputValidationError(field, _RANGE_MESSAGES[err_type].format(field=field, limit=limit))
    return InputValidationError(field, f"Invalid or missing number for '{field}'")


def from_pydantic(exc: ValidationError) -> InputValidationError:
    return from_error_list(exc.errors())
