"""
Device Domain Entity
====================
Controllable household load with an on/off state and a wattage draw.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.domain.exceptions import OutOfRangeError


@dataclass
class Device:
    """A controllable load tracked by the device repository."""

    id: int
    name: str = ""
    is_on: bool = False
    power_usage_watts: float = 0.0  # Watts drawn while on

    def __post_init__(self) -> None:
        if self.power_usage_watts < 0:
            raise OutOfRangeError(
                f"Device {self.id} power usage must be non-negative, got {self.power_usage_watts}W",
                detail={"device_id": self.id, "power_usage_watts": self.power_usage_watts},
            )

    @property
    def active_power_watts(self) -> float:
        """Power currently drawn: the rated wattage when on, otherwise 0."""
        return self.power_usage_watts if self.is_on else 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "is_on": self.is_on,
            "power_usage_watts": self.power_usage_watts,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Device:
        return cls(
            id=int(data["id"]),
            name=str(data.get("name", "")),
            is_on=bool(data.get("is_on", False)),
            power_usage_watts=float(data.get("power_usage_watts", 0.0)),
        )
