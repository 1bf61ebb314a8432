"""
Service protocols (structural typing interfaces).

Protocols let the services declare the *minimal* surface they depend on
without importing a concrete repository or transport, which keeps storage
and delivery swappable and makes tests trivially mockable.

Usage
-----
In a consumer service::

    from __future__ import annotations
    from typing import TYPE_CHECKING
    if TYPE_CHECKING:
        from app.services.protocols import DeviceRepository

    class DeviceControlService:
        def __init__(self, device_repo: "DeviceRepository"): ...

At runtime ``InMemoryDeviceRepository`` already satisfies the protocol via
structural subtyping; no explicit inheritance needed.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from app.domain.device import Device
from app.domain.energy import EnergyPlan


@runtime_checkable
class DeviceRepository(Protocol):
    """Lookup and persistence of household devices."""

    def get_by_id(self, device_id: int) -> Optional[Device]:
        """Return a single device, or ``None`` if the id is unknown.

        Must never raise for a missing id.
        """
        ...

    def get_all(self) -> Sequence[Device]:
        """Return every known device."""
        ...

    def update(self, device: Device) -> None:
        """Persist the full state of ``device``."""
        ...


@runtime_checkable
class EnergyPlanRepository(Protocol):
    """Access to the household's current energy plan."""

    def get_current_plan(self) -> Optional[EnergyPlan]:
        """Return the current plan, or ``None`` if none is configured."""
        ...

    def update_plan(self, plan: EnergyPlan) -> None:
        """Persist ``plan`` as the current plan."""
        ...


@runtime_checkable
class NotificationSender(Protocol):
    """Fire-and-forget alert delivery."""

    def send_alert(self, message: str) -> None:
        ...
