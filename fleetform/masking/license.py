"""Driver license masking: ``LL-DDDDDDDDDDDDD`` (e.g. ``MH-1420110062821``)."""

import re

from fleetform.masking.models import ValidationResult

LICENSE_PATTERN = re.compile(r"[A-Z]{2}-\d{13}")
MAX_MEANINGFUL_CHARS = 15

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


def format_license(raw_input: str) -> ValidationResult:
    """Mask a driver license number.

    Hyphens and other punctuation are dropped, the value is clipped to
    15 characters, and a single hyphen goes back in after the state code
    once there is something to separate.
    """
    cleaned = _NON_ALNUM.sub("", raw_input.upper())[:MAX_MEANINGFUL_CHARS]
    formatted = f"{cleaned[:2]}-{cleaned[2:]}" if len(cleaned) > 2 else cleaned
    return ValidationResult(
        formatted_value=formatted,
        is_valid=LICENSE_PATTERN.fullmatch(formatted) is not None,
    )
