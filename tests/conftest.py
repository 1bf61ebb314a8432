"""
Shared test fixtures for the home energy manager test suite.

Provides:
- In-memory store and repositories (real implementations)
- MagicMock collaborators for call-count verification
- A recording notification sender
- Service factories wired to either flavour

Usage:
    def test_example(device_repo, device_control_service):
        device_repo.add(Device(id=1))
        assert device_control_service.toggle(1, True) is True
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from app.domain.device import Device
from app.domain.energy import EnergyPlan
from app.services.application.device_control_service import DeviceControlService
from app.services.application.energy_monitoring_service import EnergyMonitoringService
from infrastructure.database.memory_store import InMemoryStore
from infrastructure.database.repositories.devices import InMemoryDeviceRepository
from infrastructure.database.repositories.energy_plans import InMemoryEnergyPlanRepository

# ---------------------------------------------------------------------------
# Logging: keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("infrastructure").setLevel(logging.WARNING)


class RecordingAlertSender:
    """Notification sender that keeps every alert in memory."""

    def __init__(self):
        self.messages: list[str] = []

    def send_alert(self, message: str) -> None:
        self.messages.append(message)


# ========================== Repository Fixtures ============================


@pytest.fixture()
def store():
    """Fresh in-memory store, no cross-test contamination."""
    return InMemoryStore()


@pytest.fixture()
def device_repo(store):
    """InMemoryDeviceRepository backed by the fresh store."""
    return InMemoryDeviceRepository(store)


@pytest.fixture()
def plan_repo(store):
    """InMemoryEnergyPlanRepository backed by the fresh store."""
    return InMemoryEnergyPlanRepository(store)


@pytest.fixture()
def notifier():
    return RecordingAlertSender()


# ========================== Mock Collaborator Fixtures =====================


@pytest.fixture()
def mock_device_repo():
    """Mock device repository; ``get_all`` returns no devices by default."""
    repo = MagicMock()
    repo.get_by_id.return_value = None
    repo.get_all.return_value = []
    return repo


@pytest.fixture()
def mock_plan_repo():
    """Mock plan repository; no current plan by default."""
    repo = MagicMock()
    repo.get_current_plan.return_value = None
    return repo


@pytest.fixture()
def mock_notifier():
    notifier = MagicMock()
    notifier.send_alert = MagicMock()
    return notifier


# ========================== Service Factory Fixtures =======================


@pytest.fixture()
def device_control_service(device_repo):
    """DeviceControlService over the in-memory repository."""
    return DeviceControlService(device_repo)


@pytest.fixture()
def energy_monitoring_service(device_repo, plan_repo, notifier):
    """EnergyMonitoringService over in-memory repositories and a recording notifier."""
    return EnergyMonitoringService(device_repo, plan_repo, notifier)


# ========================== Seed Helpers ===================================


@pytest.fixture()
def seed(device_repo, plan_repo):
    """Helpers for populating the in-memory repositories."""

    class _Seed:
        def device(self, device_id: int, *, is_on: bool = False, watts: float = 0.0, name: str = "") -> Device:
            device = Device(id=device_id, name=name, is_on=is_on, power_usage_watts=watts)
            device_repo.add(device)
            return device

        def plan(self, daily_limit_kwh: float) -> EnergyPlan:
            plan = EnergyPlan(daily_limit_kwh=daily_limit_kwh)
            plan_repo.set_current_plan(plan)
            return plan

    return _Seed()
