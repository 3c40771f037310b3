"""Prometheus metrics for form validation."""

from prometheus_client import Counter

FORM_VALIDATIONS = Counter(
    "fleetform_form_validations_total",
    "Form validations by outcome",
    labelnames=["form", "outcome"],
)

FIELD_ERRORS = Counter(
    "fleetform_field_errors_total",
    "Field errors reported by form validation",
    labelnames=["form", "field", "error_type"],
)
