"""
Device Control Service
======================

Owns on/off state transitions of household devices and the query for
currently active devices. Devices are resolved and persisted through a
``DeviceRepository``; this service never creates or deletes them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from app.domain.device import Device
from app.domain.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from app.services.protocols import DeviceRepository

logger = logging.getLogger(__name__)


class DeviceControlService:
    """Switches devices on and off and reports which ones are running."""

    def __init__(self, device_repo: "DeviceRepository") -> None:
        """
        Initialize DeviceControlService.

        Args:
            device_repo: Repository used to resolve and persist devices.
        """
        self._device_repo = device_repo

    def toggle(self, device_id: int, desired_on: bool) -> bool:
        """
        Set a device's power state and persist it.

        The write happens even when the device is already in the requested
        state, so every call results in exactly one ``update``.

        Args:
            device_id: Identifier of the device to switch
            desired_on: Requested power state

        Returns:
            The device's resulting ``is_on`` value

        Raises:
            InvalidArgumentError: No device exists with ``device_id``
        """
        device = self._device_repo.get_by_id(device_id)
        if device is None:
            raise InvalidArgumentError(
                f"Device {device_id} not found",
                detail={"device_id": device_id},
            )

        previous = device.is_on
        device.is_on = desired_on
        self._device_repo.update(device)

        logger.info(
            f"Device {device_id} ({device.name or 'unnamed'}) switched "
            f"{'on' if desired_on else 'off'} (was {'on' if previous else 'off'})"
        )
        return device.is_on

    def list_active_devices(self) -> Iterator[Device]:
        """Lazily yield devices that are currently on, in repository order."""
        devices = self._device_repo.get_all()
        return (device for device in devices if device.is_on)
