"""User-facing validation messages."""

from fleetform.masking.enums import FieldKindTag
from fleetform.masking.models import FieldKind

FULL_NAME_REQUIRED = "Full name is required"

VEHICLE_NUMBER_REQUIRED = "Please enter a vehicle number"
VEHICLE_NUMBER_INVALID = "Vehicle number must look like MH-14-AB1234"
MANUFACTURER_REQUIRED = "Please enter a manufacturer"
MODEL_REQUIRED = "Please enter a vehicle model"
CAPACITY_INVALID = "Please enter a valid capacity"

LICENSE_REQUIRED = "License number is required"
LICENSE_INVALID = (
    "License number must be 2 letters followed by 13 digits (e.g., MH-1420110062821)"
)

PHONE_REQUIRED = "Phone number is required"
PHONE_INVALID = "Please enter a valid {digits}-digit phone number"
COUNTRY_INVALID = "Please select a valid country"

EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Please enter a valid email address"

EMPLOYEE_ID_REQUIRED = "Employee ID is required"
EMPLOYEE_ID_INVALID = "Employee ID must be 3 letters followed by 3 digits (e.g., DRV001)"
EXPERIENCE_INVALID = "Please enter a valid number of years"

PART_NAME_REQUIRED = "Please enter a part name"
PART_NUMBER_REQUIRED = "Please enter a part number"
QUANTITY_INVALID = "Please enter a valid quantity"
MINIMUM_STOCK_INVALID = "Please enter a valid minimum stock level"
PRICE_INVALID = "Please enter a valid price"

ODOMETER_INVALID = "Please enter a valid odometer reading"
FUEL_AMOUNT_INVALID = "Invalid fuel amount"
AMOUNT_INVALID = "Please enter a valid amount"


def invalid_message(kind: FieldKind) -> str:
    """Default message for a value the formatter reports as invalid."""
    tag = FieldKindTag(kind.kind)
    if tag is FieldKindTag.PHONE_NUMBER:
        return PHONE_INVALID.format(digits=kind.profile.national_digit_limit)
    return {
        FieldKindTag.VEHICLE_REGISTRATION: VEHICLE_NUMBER_INVALID,
        FieldKindTag.DRIVER_LICENSE: LICENSE_INVALID,
        FieldKindTag.PART_NUMBER: PART_NUMBER_REQUIRED,
        FieldKindTag.CURRENCY_AMOUNT: AMOUNT_INVALID,
        FieldKindTag.EMPLOYEE_ID: EMPLOYEE_ID_INVALID,
        FieldKindTag.ODOMETER: ODOMETER_INVALID,
        FieldKindTag.EMAIL: EMAIL_INVALID,
    }[tag]
