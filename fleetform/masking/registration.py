"""Vehicle registration masking.

Registration numbers follow ``LL-DD-L{1,2}DDDD``: a two-letter state
code, two district digits, a one- or two-letter series and a four-digit
number (``MH-14-AB1234``, ``MH-14-A1234``).

Input is folded one character at a time through ``step``. Each group
only accepts its own character class; anything else is dropped, so a
value that overflows a group is clipped rather than rejected.
"""

import re
from functools import reduce
from typing import NamedTuple

from fleetform.masking.models import ValidationResult

REGISTRATION_PATTERN = re.compile(r"[A-Z]{2}-\d{2}-[A-Z]{1,2}\d{4}")
MAX_FORMATTED_LENGTH = 12

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


class RegistrationState(NamedTuple):
    """Partial registration, one field per group."""

    state_code: str = ""
    district: str = ""
    series: str = ""
    number: str = ""

    @property
    def hyphens(self) -> int:
        """Separators placed so far."""
        return int(bool(self.district)) + int(bool(self.series))


def step(state: RegistrationState, char: str) -> RegistrationState:
    """Place one uppercase alphanumeric character, or drop it."""
    is_letter = char.isalpha()

    if len(state.state_code) < 2:
        return state._replace(state_code=state.state_code + char) if is_letter else state

    if len(state.district) < 2:
        return state if is_letter else state._replace(district=state.district + char)

    if not state.series:
        return state._replace(series=char) if is_letter else state

    if is_letter:
        # Second series letter: only before the number run starts.
        if len(state.series) == 1 and not state.number and state.hyphens == 2:
            return state._replace(series=state.series + char)
        return state

    if len(state.number) < 4:
        return state._replace(number=state.number + char)
    return state


def render(state: RegistrationState) -> str:
    """Join the groups with hyphens, adding each one once its group starts."""
    groups = [state.state_code]
    if state.district:
        groups.append(state.district)
    if state.series:
        groups.append(state.series + state.number)
    return "-".join(groups)


def format_registration(raw_input: str) -> ValidationResult:
    """Mask a vehicle registration number."""
    cleaned = _NON_ALNUM.sub("", raw_input.upper())
    formatted = render(reduce(step, cleaned, RegistrationState()))
    return ValidationResult(
        formatted_value=formatted,
        is_valid=REGISTRATION_PATTERN.fullmatch(formatted) is not None,
    )
