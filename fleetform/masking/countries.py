"""Country phone profiles.

A static, immutable table keyed by ISO 3166-1 alpha-2 code. Deployments
can add or override profiles through ``formatting.extra_countries`` in
configuration; ``load_country_profiles`` merges those over the table.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from fleetform.masking.models import CountryPhoneProfile

if TYPE_CHECKING:
    from fleetform.config.models.formatting import FormattingConfig


class UnknownCountryError(KeyError):
    """Raised when a country code has no phone profile."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"No phone profile for country code: {code!r}")


_PROFILES = [
    CountryPhoneProfile(code="IN", name="India", flag="🇮🇳", dial_code="+91", national_digit_limit=10),
    CountryPhoneProfile(code="AE", name="United Arab Emirates", flag="🇦🇪", dial_code="+971", national_digit_limit=9),
    CountryPhoneProfile(code="US", name="United States", flag="🇺🇸", dial_code="+1", national_digit_limit=10),
    CountryPhoneProfile(code="CA", name="Canada", flag="🇨🇦", dial_code="+1", national_digit_limit=10),
    CountryPhoneProfile(code="GB", name="United Kingdom", flag="🇬🇧", dial_code="+44", national_digit_limit=10),
    CountryPhoneProfile(code="AU", name="Australia", flag="🇦🇺", dial_code="+61", national_digit_limit=9),
    CountryPhoneProfile(code="SG", name="Singapore", flag="🇸🇬", dial_code="+65", national_digit_limit=8),
    CountryPhoneProfile(code="SA", name="Saudi Arabia", flag="🇸🇦", dial_code="+966", national_digit_limit=9),
    CountryPhoneProfile(code="QA", name="Qatar", flag="🇶🇦", dial_code="+974", national_digit_limit=8),
    CountryPhoneProfile(code="NP", name="Nepal", flag="🇳🇵", dial_code="+977", national_digit_limit=10),
    CountryPhoneProfile(code="BD", name="Bangladesh", flag="🇧🇩", dial_code="+880", national_digit_limit=10),
    CountryPhoneProfile(code="LK", name="Sri Lanka", flag="🇱🇰", dial_code="+94", national_digit_limit=9),
]

COUNTRY_PROFILES: Mapping[str, CountryPhoneProfile] = MappingProxyType(
    {profile.code: profile for profile in _PROFILES}
)


def load_country_profiles(
    extra: Iterable[CountryPhoneProfile] = (),
) -> Mapping[str, CountryPhoneProfile]:
    """Merge extra profiles over the static table.

    Args:
        extra: Profiles to add; a code already in the table is replaced

    Returns:
        A new read-only mapping; ``COUNTRY_PROFILES`` is left untouched
    """
    merged = dict(COUNTRY_PROFILES)
    for profile in extra:
        merged[profile.code.upper()] = profile
    return MappingProxyType(merged)


def get_country_profile(
    code: str,
    profiles: Mapping[str, CountryPhoneProfile] = COUNTRY_PROFILES,
) -> CountryPhoneProfile:
    """Look up a profile by country code (case-insensitive).

    Raises:
        UnknownCountryError: If no profile exists for the code
    """
    try:
        return profiles[code.strip().upper()]
    except KeyError:
        raise UnknownCountryError(code) from None


def list_country_profiles(
    profiles: Mapping[str, CountryPhoneProfile] = COUNTRY_PROFILES,
) -> list[CountryPhoneProfile]:
    """All profiles sorted by country name, for pickers."""
    return sorted(profiles.values(), key=lambda profile: profile.name)


def default_country_profile(
    formatting: "FormattingConfig | None" = None,
    profiles: Mapping[str, CountryPhoneProfile] | None = None,
) -> CountryPhoneProfile:
    """Profile preselected on phone fields.

    Args:
        formatting: Formatting settings; the loaded settings when omitted
        profiles: Table to look in; the static table plus
            ``formatting.extra_countries`` when omitted

    Raises:
        UnknownCountryError: If ``default_country`` has no profile
    """
    if formatting is None:
        from fleetform.config import get_settings

        formatting = get_settings().formatting
    if profiles is None:
        profiles = load_country_profiles(formatting.extra_countries)
    return get_country_profile(formatting.default_country, profiles)
