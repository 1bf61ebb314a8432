"""
Domain Package
==============
Entities, value objects and the exception hierarchy for household energy
management. Nothing in here knows about persistence or notification delivery.
"""

from .device import Device
from .energy import EnergyPlan, UsageSummary, format_kwh, watts_to_kw
from .exceptions import (
    ConfigurationError,
    HomeEnergyError,
    InvalidArgumentError,
    InvalidStateError,
    OutOfRangeError,
)

__all__ = [
    # Entities
    "Device",
    "EnergyPlan",
    # Reporting
    "UsageSummary",
    "format_kwh",
    "watts_to_kw",
    # Errors
    "HomeEnergyError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "InvalidStateError",
    "ConfigurationError",
]
