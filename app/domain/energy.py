"""
Energy Domain Objects
=====================
Dataclasses for the household energy budget and usage reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

WATTS_PER_KILOWATT = 1000.0


def watts_to_kw(watts: float) -> float:
    """Convert an instantaneous power draw from watts to kilowatts."""
    return watts / WATTS_PER_KILOWATT


def format_kwh(value: float) -> str:
    """
    Render a kWh value as a plain integer-or-decimal string.

    Uses the shortest text that round-trips to ``value``, so no precision is
    lost. Whole numbers drop their ``.0``: ``2.0`` renders as ``"2"`` and
    ``1.5`` as ``"1.5"``.
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return "0" if text == "-0" else text


@dataclass
class EnergyPlan:
    """The household's configured daily energy budget."""

    daily_limit_kwh: float = 0.0

    def is_exceeded_by(self, usage_kwh: float) -> bool:
        """Overload only when usage is strictly above the limit."""
        return usage_kwh > self.daily_limit_kwh

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"daily_limit_kwh": self.daily_limit_kwh}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EnergyPlan:
        return cls(daily_limit_kwh=float(data.get("daily_limit_kwh", 0.0)))


@dataclass
class UsageSummary:
    """Point-in-time comparison of aggregate usage against the plan limit."""

    usage_kwh: float
    daily_limit_kwh: float
    active_device_count: int

    @property
    def headroom_kwh(self) -> float:
        # Negative when overloaded
        return self.daily_limit_kwh - self.usage_kwh

    @property
    def overloaded(self) -> bool:
        return self.usage_kwh > self.daily_limit_kwh

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "usage_kwh": round(self.usage_kwh, 3),
            "daily_limit_kwh": round(self.daily_limit_kwh, 3),
            "headroom_kwh": round(self.headroom_kwh, 3),
            "active_device_count": self.active_device_count,
            "overloaded": self.overloaded,
        }
