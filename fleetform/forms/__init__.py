"""Save-time validation for vehicle, driver, staff, part and refuel forms.

Usage:
    from fleetform.forms import FormValidator, PartForm

    report = FormValidator().validate(PartForm(name="Brake pad", part_number=""))
    report.can_save  # False
    report.messages()  # {"part_number": "Please enter a part number", ...}
"""

from fleetform.forms.models import (
    DriverForm,
    FormModel,
    PartForm,
    RefuelForm,
    StaffForm,
    VehicleForm,
)
from fleetform.forms.validation import FieldError, FormValidationReport, FormValidator

__all__ = [
    "DriverForm",
    "FieldError",
    "FormModel",
    "FormValidationReport",
    "FormValidator",
    "PartForm",
    "RefuelForm",
    "StaffForm",
    "VehicleForm",
]
