"""Masks for part numbers, employee IDs and email addresses."""

import re
from functools import reduce
from typing import NamedTuple

from fleetform.masking.models import ValidationResult

EMPLOYEE_ID_PATTERN = re.compile(r"[A-Z]{3}\d{3}")
EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


def format_part_number(raw_input: str, max_length: int = 20) -> ValidationResult:
    """Uppercase alphanumerics only, clipped to ``max_length``.

    Any non-empty value is valid here; whether a part number is required
    is the owning form's decision.
    """
    cleaned = _NON_ALNUM.sub("", raw_input.upper())[:max_length]
    return ValidationResult(formatted_value=cleaned, is_valid=bool(cleaned))


class EmployeeIdState(NamedTuple):
    letters: str = ""
    digits: str = ""


def employee_id_step(state: EmployeeIdState, char: str) -> EmployeeIdState:
    """Three letters, then three digits."""
    if char.isalpha():
        if len(state.letters) < 3 and not state.digits:
            return state._replace(letters=state.letters + char)
        return state
    if len(state.letters) == 3 and len(state.digits) < 3:
        return state._replace(digits=state.digits + char)
    return state


def format_employee_id(raw_input: str) -> ValidationResult:
    """Mask an employee ID such as ``DRV001``."""
    cleaned = _NON_ALNUM.sub("", raw_input.upper())
    state = reduce(employee_id_step, cleaned, EmployeeIdState())
    formatted = state.letters + state.digits
    return ValidationResult(
        formatted_value=formatted,
        is_valid=EMPLOYEE_ID_PATTERN.fullmatch(formatted) is not None,
    )


def format_email(raw_input: str) -> ValidationResult:
    email = raw_input.strip()
    return ValidationResult(
        formatted_value=email,
        is_valid=EMAIL_PATTERN.fullmatch(email) is not None,
    )
