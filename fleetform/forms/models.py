"""Form models.

Each form holds the raw text of its fields exactly as typed. Pickers
(vehicle type, fuel type, category, country) are plain strings too.
"""

from pydantic import BaseModel, ConfigDict, Field


class FormModel(BaseModel):
    """Base for raw form input."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)


class VehicleForm(FormModel):
    """Add/edit vehicle form."""

    registration_number: str = Field(default="", description="Vehicle number")
    manufacturer: str = Field(default="", description="e.g. Toyota")
    model: str = Field(default="", description="e.g. Camry")
    vehicle_type: str = Field(default="Car", description="Vehicle type picker")
    fuel_type: str = Field(default="Diesel", description="Fuel type picker")
    capacity: str = Field(default="", description="Seats or load capacity")


class DriverForm(FormModel):
    """Add driver form."""

    full_name: str = Field(default="", description="Full name")
    license_number: str = Field(default="", description="Driver license number")
    country_code: str = Field(default="", description="Phone country, default from settings")
    phone_number: str = Field(default="", description="Phone number")
    email: str = Field(default="", description="Email")
    address: str = Field(default="", description="Postal address")


class StaffForm(FormModel):
    """Add maintenance staff form."""

    full_name: str = Field(default="", description="Full name")
    employee_id: str = Field(default="", description="Employee ID, e.g. EMP001")
    country_code: str = Field(default="", description="Phone country, default from settings")
    phone_number: str = Field(default="", description="Phone number")
    email: str = Field(default="", description="Email")
    specialization: str = Field(default="", description="Optional specialization")
    experience_years: str = Field(default="", description="Optional years of experience")


class PartForm(FormModel):
    """Add/edit inventory part form."""

    name: str = Field(default="", description="Part name")
    part_number: str = Field(default="", description="Part number")
    category: str = Field(default="Other", description="Part category picker")
    quantity_in_stock: str = Field(default="", description="Units in stock")
    minimum_stock_level: str = Field(default="", description="Reorder threshold")
    unit_price: str = Field(default="", description="Price per unit")
    supplier_name: str = Field(default="", description="Optional supplier")
    supplier_contact: str = Field(default="", description="Optional supplier contact")


class RefuelForm(FormModel):
    """Driver refuel log form."""

    odometer_reading: str = Field(default="", description="Odometer in km")
    liters_added: str = Field(default="", description="Fuel added in liters")
    amount: str = Field(default="", description="Optional amount paid")
