"""Entry point for per-keystroke formatting.

``format_input`` is called on every input-change event with the raw
text of the field, the field kind and the value currently shown. It is
pure: it never raises on user input, performs no I/O and keeps no
state between calls. Offending characters are silently dropped and the
only failure signal is ``ValidationResult.is_valid``.
"""

from collections.abc import Callable
from typing import Any

from fleetform.masking.amounts import format_amount, format_odometer
from fleetform.masking.enums import FieldKindTag
from fleetform.masking.identifiers import (
    format_email,
    format_employee_id,
    format_part_number,
)
from fleetform.masking.license import format_license
from fleetform.masking.models import FieldKind, ValidationResult
from fleetform.masking.phone import format_phone
from fleetform.masking.registration import format_registration

# Rule functions mapped by field kind
FORMATTERS: dict[FieldKindTag, Callable[[str, Any], ValidationResult]] = {
    FieldKindTag.VEHICLE_REGISTRATION: lambda raw, _kind: format_registration(raw),
    FieldKindTag.DRIVER_LICENSE: lambda raw, _kind: format_license(raw),
    FieldKindTag.PHONE_NUMBER: lambda raw, kind: format_phone(raw, kind.profile),
    FieldKindTag.PART_NUMBER: lambda raw, kind: format_part_number(raw, kind.max_length),
    FieldKindTag.CURRENCY_AMOUNT: lambda raw, kind: format_amount(raw, kind.max_digits),
    FieldKindTag.EMPLOYEE_ID: lambda raw, _kind: format_employee_id(raw),
    FieldKindTag.ODOMETER: lambda raw, kind: format_odometer(raw, kind.max_digits),
    FieldKindTag.EMAIL: lambda raw, _kind: format_email(raw),
}

# Kinds whose formatter inserts separators the user may try to delete.
# Registration groups are positional; a deleted registration hyphen is
# re-inserted instead.
AUTO_SEPARATORS: dict[FieldKindTag, str] = {
    FieldKindTag.DRIVER_LICENSE: "-",
}


def undo_separator_deletion(raw_input: str, previous_value: str, separator: str) -> str:
    """Turn a deleted auto-inserted separator into a real backspace.

    If ``raw_input`` is ``previous_value`` with exactly one separator
    removed, the character before that separator is removed as well.
    Otherwise ``raw_input`` is returned unchanged.

    Args:
        raw_input: Text after the edit
        previous_value: Formatted text before the edit
        separator: The separator the formatter inserts

    Returns:
        The input to format
    """
    if len(raw_input) != len(previous_value) - 1:
        return raw_input

    for index, char in enumerate(previous_value):
        if char != separator or index == 0:
            continue
        if previous_value[:index] + previous_value[index + 1:] == raw_input:
            return previous_value[: index - 1] + previous_value[index + 1:]

    return raw_input


def format_input(
    raw_input: str,
    kind: FieldKind,
    previous_value: str = "",
) -> ValidationResult:
    """Format raw field input for a field kind.

    Args:
        raw_input: The field's text after the latest edit
        kind: Which rule set applies
        previous_value: The formatted value shown before the edit

    Returns:
        ValidationResult with the masked value and its validity;
        ``error_message`` is always None
    """
    if not raw_input:
        return ValidationResult()

    tag = FieldKindTag(kind.kind)
    separator = AUTO_SEPARATORS.get(tag)
    if separator and previous_value:
        raw_input = undo_separator_deletion(raw_input, previous_value, separator)

    return FORMATTERS[tag](raw_input, kind)
