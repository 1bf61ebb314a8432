"""
In-Memory Household Store
=========================

Process-local backend for the device and energy-plan repositories.

Entities are copied on every read and write: callers mutate their own copy
and only publish changes through an explicit save. A re-entrant lock
serializes access, so concurrent toggles against the same device resolve as
last-write-wins instead of interleaving.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional

from app.domain.device import Device
from app.domain.energy import EnergyPlan


class InMemoryStore:
    """Thread-safe holder for household devices and the current plan."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._devices: dict[int, Device] = {}
        self._plan: Optional[EnergyPlan] = None

    # Devices ------------------------------------------------------------------
    def has_device(self, device_id: int) -> bool:
        with self._lock:
            return device_id in self._devices

    def fetch_device(self, device_id: int) -> Optional[Device]:
        with self._lock:
            device = self._devices.get(device_id)
            return replace(device) if device is not None else None

    def fetch_devices(self) -> list[Device]:
        # Insertion order is preserved
        with self._lock:
            return [replace(device) for device in self._devices.values()]

    def save_device(self, device: Device) -> None:
        with self._lock:
            self._devices[device.id] = replace(device)

    # Plan ---------------------------------------------------------------------
    def fetch_plan(self) -> Optional[EnergyPlan]:
        with self._lock:
            return replace(self._plan) if self._plan is not None else None

    def save_plan(self, plan: EnergyPlan) -> None:
        with self._lock:
            self._plan = replace(plan)
