"""Input masking and validation for fleet identifiers.

Pure, stateless formatters for vehicle registrations, driver licenses,
country-localized phone numbers, part numbers, currency amounts, employee
IDs, odometer readings and emails.

Usage:
    from fleetform.masking import VehicleRegistration, format_input

    result = format_input("mh14ab1234", VehicleRegistration())
    result.formatted_value  # "MH-14-AB1234"
    result.is_valid  # True
"""

from fleetform.masking.countries import (
    COUNTRY_PROFILES,
    UnknownCountryError,
    default_country_profile,
    get_country_profile,
    list_country_profiles,
    load_country_profiles,
)
from fleetform.masking.enums import FieldKindTag
from fleetform.masking.formatter import format_input
from fleetform.masking.models import (
    CountryPhoneProfile,
    CurrencyAmount,
    DriverLicense,
    Email,
    EmployeeId,
    FieldKind,
    Odometer,
    PartNumber,
    PhoneNumber,
    ValidationResult,
    VehicleRegistration,
)
from fleetform.masking.phone import switch_profile

__all__ = [
    "COUNTRY_PROFILES",
    "CountryPhoneProfile",
    "CurrencyAmount",
    "DriverLicense",
    "Email",
    "EmployeeId",
    "FieldKind",
    "FieldKindTag",
    "Odometer",
    "PartNumber",
    "PhoneNumber",
    "UnknownCountryError",
    "ValidationResult",
    "VehicleRegistration",
    "default_country_profile",
    "format_input",
    "get_country_profile",
    "list_country_profiles",
    "load_country_profiles",
    "switch_profile",
]
