"""Save-time validation for fleet forms.

The per-keystroke formatter only reports whether a single value is
complete. This module is the owning form: it decides which fields are
required, parses counts and prices, picks the user-facing message for
each failure and tells the caller whether the record may be saved.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal

from fleetform.config import get_settings
from fleetform.config.models.formatting import FormattingConfig
from fleetform.config.settings import Settings
from fleetform.forms import messages
from fleetform.forms.models import (
    DriverForm,
    FormModel,
    PartForm,
    RefuelForm,
    StaffForm,
    VehicleForm,
)
from fleetform.masking.amounts import is_decimal
from fleetform.masking.countries import (
    UnknownCountryError,
    default_country_profile,
    get_country_profile,
    load_country_profiles,
)
from fleetform.masking.formatter import format_input
from fleetform.masking.models import (
    CurrencyAmount,
    DriverLicense,
    Email,
    EmployeeId,
    FieldKind,
    Odometer,
    PartNumber,
    PhoneNumber,
    VehicleRegistration,
)
from fleetform.observability.logging import get_logger
from fleetform.observability.metrics import FIELD_ERRORS, FORM_VALIDATIONS

logger = get_logger(__name__)

_WHOLE_NUMBER = re.compile(r"[0-9]+")


class FieldError:
    """A single field failure with its user-facing message."""

    def __init__(self, field_name: str, error_type: str, message: str):
        self.field_name = field_name
        self.error_type = error_type
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return (self.field_name, self.error_type, self.message) == (
            other.field_name,
            other.error_type,
            other.message,
        )

    def __repr__(self) -> str:
        return f"FieldError({self.field_name!r}, {self.error_type!r}, {self.message!r})"


@dataclass
class FormValidationReport:
    """Errors and cleaned values for one form submission."""

    form_name: str
    errors: list[FieldError] = field(default_factory=list)
    cleaned: dict[str, str] = field(default_factory=dict)

    @property
    def can_save(self) -> bool:
        return not self.errors

    def add_error(self, field_name: str, error_type: str, message: str) -> None:
        self.errors.append(FieldError(field_name, error_type, message))

    def error_for(self, field_name: str) -> FieldError | None:
        """First error reported for a field, if any."""
        return next((e for e in self.errors if e.field_name == field_name), None)

    def messages(self) -> dict[str, str]:
        """First message per field, for inline display."""
        result: dict[str, str] = {}
        for error in self.errors:
            result.setdefault(error.field_name, error.message)
        return result


class FormValidator:
    """Validates fleet forms before their records are written.

    Error types:
    - required: a mandatory field is empty
    - format_error: the formatter reports the value as incomplete/malformed
    - parse_error: a count, price or quantity does not parse
    """

    # Form validators mapped by form class name
    FORM_VALIDATORS = {
        "VehicleForm": "_validate_vehicle",
        "DriverForm": "_validate_driver",
        "StaffForm": "_validate_staff",
        "PartForm": "_validate_part",
        "RefuelForm": "_validate_refuel",
    }

    def __init__(
        self,
        formatting: FormattingConfig | None = None,
        record_metrics: bool | None = None,
    ) -> None:
        """Create a validator.

        Args:
            formatting: Limits and default country; the loaded settings when omitted
            record_metrics: Count outcomes in Prometheus; the
                ``observability.metrics.enabled`` setting when omitted
        """
        if formatting is None or record_metrics is None:
            settings = get_settings()
            if formatting is None:
                formatting = settings.formatting
            if record_metrics is None:
                record_metrics = settings.observability.metrics.enabled

        self._formatting = formatting
        self._profiles = load_country_profiles(self._formatting.extra_countries)
        self._record_metrics = record_metrics

    @classmethod
    def from_settings(cls, settings: Settings) -> "FormValidator":
        """Build a validator from the formatting and metrics settings."""
        return cls(
            formatting=settings.formatting,
            record_metrics=settings.observability.metrics.enabled,
        )

    def validate(self, form: FormModel) -> FormValidationReport:
        """Validate a form.

        Args:
            form: One of the form models in fleetform.forms.models

        Returns:
            Report with errors (empty if the record may be saved) and the
            cleaned value of every field that passed

        Raises:
            TypeError: If no validator exists for the form type
        """
        validator_name = self.FORM_VALIDATORS.get(type(form).__name__)
        if not validator_name:
            raise TypeError(f"No validator for form type {type(form).__name__}")

        report = FormValidationReport(form_name=validator_name.removeprefix("_validate_"))
        getattr(self, validator_name)(form, report)

        if report.errors:
            logger.warning(
                "form_validation_failed",
                form=report.form_name,
                error_count=len(report.errors),
                fields=[e.field_name for e in report.errors],
                error_types=[e.error_type for e in report.errors],
            )
        else:
            logger.debug("form_validated", form=report.form_name)

        if self._record_metrics:
            self._record(report)

        return report

    def _validate_vehicle(self, form: VehicleForm, report: FormValidationReport) -> None:
        self._check_kind(
            report,
            "registration_number",
            form.registration_number,
            VehicleRegistration(),
            messages.VEHICLE_NUMBER_REQUIRED,
        )
        self._require(report, "manufacturer", form.manufacturer, messages.MANUFACTURER_REQUIRED)
        self._require(report, "model", form.model, messages.MODEL_REQUIRED)
        self._keep(report, "vehicle_type", form.vehicle_type)
        self._keep(report, "fuel_type", form.fuel_type)
        self._check_count(
            report, "capacity", form.capacity, messages.CAPACITY_INVALID, minimum=1
        )

    def _validate_driver(self, form: DriverForm, report: FormValidationReport) -> None:
        self._require(report, "full_name", form.full_name, messages.FULL_NAME_REQUIRED)
        self._check_kind(
            report,
            "license_number",
            form.license_number,
            DriverLicense(),
            messages.LICENSE_REQUIRED,
        )
        self._check_phone(report, form.country_code, form.phone_number)
        self._check_kind(report, "email", form.email, Email(), messages.EMAIL_REQUIRED)
        self._keep(report, "address", form.address)

    def _validate_staff(self, form: StaffForm, report: FormValidationReport) -> None:
        self._require(report, "full_name", form.full_name, messages.FULL_NAME_REQUIRED)
        self._check_kind(
            report,
            "employee_id",
            form.employee_id,
            EmployeeId(),
            messages.EMPLOYEE_ID_REQUIRED,
        )
        self._check_phone(report, form.country_code, form.phone_number)
        self._check_kind(report, "email", form.email, Email(), messages.EMAIL_REQUIRED)
        self._keep(report, "specialization", form.specialization)
        if form.experience_years.strip():
            self._check_count(
                report,
                "experience_years",
                form.experience_years,
                messages.EXPERIENCE_INVALID,
            )

    def _validate_part(self, form: PartForm, report: FormValidationReport) -> None:
        self._require(report, "name", form.name, messages.PART_NAME_REQUIRED)
        self._check_kind(
            report,
            "part_number",
            form.part_number,
            PartNumber(max_length=self._formatting.part_number_max_length),
            messages.PART_NUMBER_REQUIRED,
        )
        self._keep(report, "category", form.category)
        self._check_count(
            report, "quantity_in_stock", form.quantity_in_stock, messages.QUANTITY_INVALID
        )
        self._check_count(
            report,
            "minimum_stock_level",
            form.minimum_stock_level,
            messages.MINIMUM_STOCK_INVALID,
        )
        self._check_amount(report, "unit_price", form.unit_price, messages.PRICE_INVALID)
        self._keep(report, "supplier_name", form.supplier_name)
        self._keep(report, "supplier_contact", form.supplier_contact)

    def _validate_refuel(self, form: RefuelForm, report: FormValidationReport) -> None:
        self._check_kind(
            report,
            "odometer_reading",
            form.odometer_reading,
            Odometer(max_digits=self._formatting.odometer_max_digits),
            messages.ODOMETER_INVALID,
            invalid_message=messages.ODOMETER_INVALID,
        )

        liters = form.liters_added.strip()
        if is_decimal(liters) and Decimal(liters) > 0:
            report.cleaned["liters_added"] = liters
        else:
            report.add_error("liters_added", "parse_error", messages.FUEL_AMOUNT_INVALID)

        if form.amount.strip():
            self._check_amount(report, "amount", form.amount, messages.AMOUNT_INVALID)

    def _require(
        self,
        report: FormValidationReport,
        field_name: str,
        value: str,
        message: str,
    ) -> None:
        """Record a required-field error for blank input."""
        text = value.strip()
        if not text:
            report.add_error(field_name, "required", message)
            return
        report.cleaned[field_name] = text

    def _keep(self, report: FormValidationReport, field_name: str, value: str) -> None:
        """Carry an optional free-text field through, if filled in."""
        text = value.strip()
        if text:
            report.cleaned[field_name] = text

    def _check_kind(
        self,
        report: FormValidationReport,
        field_name: str,
        value: str,
        kind: FieldKind,
        required_message: str,
        invalid_message: str | None = None,
    ) -> None:
        """Run the field formatter and require a complete value."""
        if not value.strip():
            report.add_error(field_name, "required", required_message)
            return

        result = format_input(value, kind)
        if not result.is_valid:
            report.add_error(
                field_name,
                "format_error",
                invalid_message or messages.invalid_message(kind),
            )
            return
        report.cleaned[field_name] = result.formatted_value

    def _check_phone(
        self,
        report: FormValidationReport,
        country_code: str,
        phone_number: str,
    ) -> None:
        code = country_code.strip()
        try:
            if code:
                profile = get_country_profile(code, self._profiles)
            else:
                profile = default_country_profile(self._formatting, self._profiles)
        except UnknownCountryError:
            report.add_error("country_code", "format_error", messages.COUNTRY_INVALID)
            return

        report.cleaned["country_code"] = profile.code
        self._check_kind(
            report,
            "phone_number",
            phone_number,
            PhoneNumber(profile=profile),
            messages.PHONE_REQUIRED,
        )

    def _check_count(
        self,
        report: FormValidationReport,
        field_name: str,
        value: str,
        message: str,
        minimum: int = 0,
    ) -> None:
        """Require a whole number no smaller than ``minimum``."""
        text = value.strip()
        if not _WHOLE_NUMBER.fullmatch(text) or int(text) < minimum:
            report.add_error(field_name, "parse_error", message)
            return
        report.cleaned[field_name] = str(int(text))

    def _check_amount(
        self,
        report: FormValidationReport,
        field_name: str,
        value: str,
        message: str,
    ) -> None:
        result = format_input(
            value, CurrencyAmount(max_digits=self._formatting.currency_max_digits)
        )
        if not result.is_valid:
            report.add_error(field_name, "parse_error", message)
            return
        report.cleaned[field_name] = result.formatted_value

    def _record(self, report: FormValidationReport) -> None:
        outcome = "valid" if report.can_save else "invalid"
        FORM_VALIDATIONS.labels(form=report.form_name, outcome=outcome).inc()
        for error in report.errors:
            FIELD_ERRORS.labels(
                form=report.form_name,
                field=error.field_name,
                error_type=error.error_type,
            ).inc()
