"""Phone number masking localized by country profile.

The stored value is ``"<dial code> <national digits>"``. A value that
already carries a dial-code prefix (``"+91 98765"``) can be fed back in,
either under the same profile or under a newly selected one; in the
latter case the digits are re-truncated to the new profile's limit.
"""

import re

from fleetform.masking.models import CountryPhoneProfile, ValidationResult

# "+<code> " as produced by format_phone; the trailing space is required.
_DISPLAY_PREFIX = re.compile(r"\s*\+\d{1,4}\s+")
_NON_DIGIT = re.compile(r"[^0-9]")


def national_digits(raw_input: str, profile: CountryPhoneProfile) -> str:
    """Extract the national digits from raw or previously formatted input."""
    text = raw_input.lstrip()
    prefix = _DISPLAY_PREFIX.match(text)
    if prefix:
        text = text[prefix.end():]
    elif text.startswith(profile.dial_code):
        text = text[len(profile.dial_code):]
    return _NON_DIGIT.sub("", text)[: profile.national_digit_limit]


def format_phone(raw_input: str, profile: CountryPhoneProfile) -> ValidationResult:
    """Mask a phone number for the given country profile."""
    digits = national_digits(raw_input, profile)
    return ValidationResult(
        formatted_value=f"{profile.dial_code} {digits}" if digits else "",
        is_valid=len(digits) == profile.national_digit_limit,
    )


def switch_profile(current_value: str, profile: CountryPhoneProfile) -> ValidationResult:
    """Re-format an existing value after the user picks another country.

    Existing digits are kept and truncated to the new limit, never cleared.
    """
    return format_phone(current_value, profile)
