"""
Household Schemas
=================

Pydantic models validating a household seed file (devices + energy plan)
before it is loaded into the repositories.
"""

import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.domain.device import Device
from app.domain.energy import EnergyPlan
from app.domain.exceptions import ConfigurationError


class DeviceSeed(BaseModel):
    """Seed entry for a single device"""

    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., gt=0, description="Stable device identifier")
    name: str = Field(default="", max_length=100, description="Display label")
    is_on: bool = Field(default=False, description="Initial power state")
    power_usage_watts: float = Field(default=0.0, ge=0, description="Wattage drawn while on")

    def to_domain(self) -> Device:
        return Device(
            id=self.id,
            name=self.name,
            is_on=self.is_on,
            power_usage_watts=self.power_usage_watts,
        )


class EnergyPlanSeed(BaseModel):
    """Seed entry for the household energy plan"""

    model_config = ConfigDict(extra="forbid")

    daily_limit_kwh: float = Field(..., ge=0, allow_inf_nan=False, description="Daily energy budget in kWh")

    def to_domain(self) -> EnergyPlan:
        return EnergyPlan(daily_limit_kwh=self.daily_limit_kwh)


class HouseholdSeed(BaseModel):
    """Complete household seed: devices and an optional current plan"""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "devices": [
                    {"id": 1, "name": "Heater", "is_on": True, "power_usage_watts": 2000},
                    {"id": 2, "name": "Lamp", "is_on": False, "power_usage_watts": 60},
                ],
                "plan": {"daily_limit_kwh": 10.0},
            }
        },
    )

    devices: List[DeviceSeed] = Field(default_factory=list, description="Household devices")
    plan: Optional[EnergyPlanSeed] = Field(default=None, description="Current energy plan")

    @field_validator("devices")
    def _unique_device_ids(cls, v):
        seen = set()
        for device in v:
            if device.id in seen:
                raise ValueError(f"Duplicate device id {device.id}")
            seen.add(device.id)
        return v

    @classmethod
    def from_file(cls, path: str) -> "HouseholdSeed":
        """Load and validate a JSON seed file."""
        seed_path = Path(path)
        try:
            raw = seed_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read household seed {seed_path}: {e}") from e

        try:
            return cls.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigurationError(
                f"Invalid household seed {seed_path}",
                detail={"error": str(e)},
            ) from e
