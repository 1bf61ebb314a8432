"""
Schemas Module
==============

This module provides Pydantic models for validating household seed data.
Schemas ensure data integrity before anything reaches the repositories.
"""

from app.schemas.household import DeviceSeed, EnergyPlanSeed, HouseholdSeed

__all__ = [
    "DeviceSeed",
    "EnergyPlanSeed",
    "HouseholdSeed",
]
