"""Masking domain models.

Contains the Pydantic models describing field kinds, country phone
profiles and formatter results.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class CountryPhoneProfile(BaseModel):
    """Dial code and national number length for one country."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(
        ..., min_length=2, max_length=2, description="ISO 3166-1 alpha-2 code"
    )
    name: str = Field(..., description="Country display name")
    flag: str = Field(default="", description="Flag emoji")
    dial_code: str = Field(
        ..., pattern=r"^\+\d{1,4}$", description="International dial code"
    )
    national_digit_limit: int = Field(
        ..., ge=1, le=15, description="Digits in a complete national number"
    )


class VehicleRegistration(BaseModel):
    """Vehicle number, e.g. ``MH-14-AB1234``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["vehicle_registration"] = "vehicle_registration"


class DriverLicense(BaseModel):
    """Driver license number, e.g. ``MH-1420110062821``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["driver_license"] = "driver_license"


class PhoneNumber(BaseModel):
    """Phone number localized by a country profile."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["phone_number"] = "phone_number"
    profile: CountryPhoneProfile = Field(..., description="Selected country")


class PartNumber(BaseModel):
    """Inventory part number."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["part_number"] = "part_number"
    max_length: int = Field(default=20, ge=1, description="Maximum characters")


class CurrencyAmount(BaseModel):
    """Non-negative decimal amount such as a unit price."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["currency_amount"] = "currency_amount"
    max_digits: int = Field(
        default=8, ge=1, description="Maximum digits, separator excluded"
    )


class EmployeeId(BaseModel):
    """Staff employee ID, e.g. ``DRV001``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["employee_id"] = "employee_id"


class Odometer(BaseModel):
    """Whole-kilometre odometer reading."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["odometer"] = "odometer"
    max_digits: int = Field(default=7, ge=1, description="Maximum digits")


class Email(BaseModel):
    """Contact email address."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["email"] = "email"


FieldKind = Annotated[
    Union[
        VehicleRegistration,
        DriverLicense,
        PhoneNumber,
        PartNumber,
        CurrencyAmount,
        EmployeeId,
        Odometer,
        Email,
    ],
    Field(discriminator="kind"),
]


class ValidationResult(BaseModel):
    """Outcome of formatting one field value.

    The formatter only fills ``formatted_value`` and ``is_valid``;
    ``error_message`` is attached by the caller.
    """

    model_config = ConfigDict(frozen=True)

    formatted_value: str = Field(default="", description="Cleaned, masked value")
    is_valid: bool = Field(default=False, description="Matches the field grammar")
    error_message: str | None = Field(
        default=None, description="Caller-chosen message"
    )

    def with_message(self, message: str | None) -> "ValidationResult":
        """Return a copy carrying a user-facing message."""
        return self.model_copy(update={"error_message": message})
