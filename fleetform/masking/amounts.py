"""Numeric masks: currency amounts and odometer readings."""

import re
from decimal import Decimal, InvalidOperation
from functools import partial, reduce
from typing import NamedTuple

from fleetform.masking.models import ValidationResult

DECIMAL_SEPARATOR = "."

_NON_DIGIT = re.compile(r"[^0-9]")


class AmountState(NamedTuple):
    """Partial amount with its digit count and separator flag."""

    text: str = ""
    digits: int = 0
    has_separator: bool = False


def step(state: AmountState, char: str, max_digits: int = 8) -> AmountState:
    """Append a digit or the first separator; drop everything else.

    Separators after the first are discarded, so ``12.34.56`` becomes
    ``12.3456``.
    """
    if "0" <= char <= "9":
        if state.digits >= max_digits:
            return state
        return AmountState(state.text + char, state.digits + 1, state.has_separator)
    if char == DECIMAL_SEPARATOR and not state.has_separator:
        return AmountState(state.text + char, state.digits, True)
    return state


def is_decimal(value: str) -> bool:
    """True when value parses as a non-negative decimal number."""
    try:
        amount = Decimal(value)
    except InvalidOperation:
        return False
    return amount.is_finite() and amount >= 0


def format_amount(raw_input: str, max_digits: int = 8) -> ValidationResult:
    """Mask a currency amount."""
    text = reduce(partial(step, max_digits=max_digits), raw_input, AmountState()).text
    return ValidationResult(formatted_value=text, is_valid=bool(text) and is_decimal(text))


def format_odometer(raw_input: str, max_digits: int = 7) -> ValidationResult:
    """Mask an odometer reading: digits only."""
    digits = _NON_DIGIT.sub("", raw_input)[:max_digits]
    return ValidationResult(formatted_value=digits, is_valid=bool(digits))
