"""Fleetform: input masking and validation for fleet-management forms.

Turns raw keystrokes for vehicle registrations, driver licenses, phone
numbers, part numbers and amounts into canonical values, and decides
whether a vehicle, driver, staff, part or refuel record may be saved.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
