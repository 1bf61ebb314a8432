from __future__ import annotations

import logging

from app.domain.device import Device
from app.domain.exceptions import InvalidArgumentError
from infrastructure.database.memory_store import InMemoryStore

logger = logging.getLogger(__name__)


class InMemoryDeviceRepository:
    """Device persistence over an :class:`InMemoryStore`."""

    def __init__(self, backend: InMemoryStore) -> None:
        self._backend = backend

    def add(self, device: Device) -> None:
        """Register a new device; ids must be unique."""
        if self._backend.has_device(device.id):
            raise InvalidArgumentError(
                f"Device {device.id} already exists",
                detail={"device_id": device.id},
            )
        self._backend.save_device(device)
        logger.debug(f"Registered device {device.id} ({device.name})")

    def get_by_id(self, device_id: int) -> Device | None:
        return self._backend.fetch_device(device_id)

    def get_all(self) -> list[Device]:
        return self._backend.fetch_devices()

    def update(self, device: Device) -> None:
        """
        Persist the full state of an existing device.

        Raises:
            InvalidArgumentError: The device was never registered
        """
        if not self._backend.has_device(device.id):
            raise InvalidArgumentError(
                f"Cannot update unknown device {device.id}",
                detail={"device_id": device.id},
            )
        self._backend.save_device(device)
