"""Formatting configuration models."""

from pydantic import BaseModel, Field

from fleetform.masking.models import CountryPhoneProfile


class FormattingConfig(BaseModel):
    """Limits and defaults applied by the forms layer.

    Extra countries are declared as TOML array-of-tables:

        [[formatting.extra_countries]]
        code = "KE"
        name = "Kenya"
        dial_code = "+254"
        national_digit_limit = 9
    """

    default_country: str = Field(
        default="IN",
        min_length=2,
        max_length=2,
        description="Country preselected on phone fields",
    )
    part_number_max_length: int = Field(
        default=20, ge=1, le=64, description="Maximum part number length"
    )
    currency_max_digits: int = Field(
        default=8, ge=1, le=18, description="Maximum digits in an amount"
    )
    odometer_max_digits: int = Field(
        default=7, ge=1, le=10, description="Maximum digits in an odometer reading"
    )
    extra_countries: list[CountryPhoneProfile] = Field(
        default_factory=list,
        description="Phone profiles added to the built-in table",
    )
