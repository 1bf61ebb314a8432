"""
Service Organization
====================
**application/**
  Singleton services managed by ServiceContainer. One instance per household.
  Examples: DeviceControlService, EnergyMonitoringService

**protocols.py**
  Structural interfaces for the collaborators the services depend on
  (device repository, energy-plan repository, notification sender).

**container.py**
  ServiceContainer wiring repositories, notifier and services together.
"""

from .application.device_control_service import DeviceControlService
from .application.energy_monitoring_service import EnergyMonitoringService
from .protocols import DeviceRepository, EnergyPlanRepository, NotificationSender

__all__ = [
    "DeviceControlService",
    "EnergyMonitoringService",
    "DeviceRepository",
    "EnergyPlanRepository",
    "NotificationSender",
]
