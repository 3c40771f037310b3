"""Enums for the masking domain."""

from enum import Enum


class FieldKindTag(str, Enum):
    """Which masking/validation rule set applies to a text input."""

    VEHICLE_REGISTRATION = "vehicle_registration"  # MH-14-AB1234
    DRIVER_LICENSE = "driver_license"  # MH-1420110062821
    PHONE_NUMBER = "phone_number"  # +91 9876543210
    PART_NUMBER = "part_number"
    CURRENCY_AMOUNT = "currency_amount"
    EMPLOYEE_ID = "employee_id"  # DRV001
    ODOMETER = "odometer"
    EMAIL = "email"
