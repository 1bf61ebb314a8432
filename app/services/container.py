from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from app.config import AppConfig
from app.schemas.household import HouseholdSeed
from app.services.application.device_control_service import DeviceControlService
from app.services.application.energy_monitoring_service import EnergyMonitoringService
from app.services.protocols import NotificationSender
from infrastructure.database.memory_store import InMemoryStore
from infrastructure.database.repositories.devices import InMemoryDeviceRepository
from infrastructure.database.repositories.energy_plans import InMemoryEnergyPlanRepository
from infrastructure.logging.alert_notifier import LoggingAlertSender

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Aggregate and manage core household energy services."""

    config: AppConfig
    store: InMemoryStore
    device_repo: InMemoryDeviceRepository
    plan_repo: InMemoryEnergyPlanRepository
    notifier: NotificationSender
    device_control_service: DeviceControlService
    energy_monitoring_service: EnergyMonitoringService

    @classmethod
    def build(cls, config: AppConfig, notifier: Optional[NotificationSender] = None) -> "ServiceContainer":
        """
        Wire repositories, notifier and services from configuration.

        Args:
            config: Application configuration
            notifier: Alert sender to use instead of the logging sender

        Returns:
            Fully wired container, seeded when ``config.seed_path`` is set
        """
        store = InMemoryStore()
        device_repo = InMemoryDeviceRepository(store)
        plan_repo = InMemoryEnergyPlanRepository(store)

        if config.seed_path:
            seed = HouseholdSeed.from_file(config.seed_path)
            for device_seed in seed.devices:
                device_repo.add(device_seed.to_domain())
            if seed.plan is not None:
                plan_repo.set_current_plan(seed.plan.to_domain())
            logger.info(
                f"Seeded {len(seed.devices)} device(s) from {config.seed_path} "
                f"(plan: {'yes' if seed.plan else 'no'})"
            )

        if notifier is None:
            notifier = LoggingAlertSender(
                log_path=config.alert_log_path,
                history_size=config.alert_history_size,
            )

        container = cls(
            config=config,
            store=store,
            device_repo=device_repo,
            plan_repo=plan_repo,
            notifier=notifier,
            device_control_service=DeviceControlService(device_repo),
            energy_monitoring_service=EnergyMonitoringService(device_repo, plan_repo, notifier),
        )
        logger.info(f"ServiceContainer built for {config.environment} environment")
        return container
