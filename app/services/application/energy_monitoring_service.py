"""
Energy Monitoring Service

Aggregates the real-time power draw of active devices, enforces the
household's daily energy limit and raises overload alerts. Also manages
updates to that limit.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from app.domain.energy import EnergyPlan, UsageSummary, format_kwh, watts_to_kw
from app.domain.exceptions import InvalidStateError, OutOfRangeError

if TYPE_CHECKING:
    from app.services.protocols import DeviceRepository, EnergyPlanRepository, NotificationSender

logger = logging.getLogger(__name__)

OVERLOAD_MESSAGE = "Overload detected: {usage} kWh used!"


class EnergyMonitoringService:
    """
    Service for monitoring household energy usage against the current plan.

    Features:
    - Aggregate usage of all active devices
    - Overload detection with alerting through a notification sender
    - Daily limit updates with validation
    - Usage summary for reporting layers

    Every call re-reads devices and plan from the repositories; nothing is
    cached between calls, so repeated checks may each fire an alert.
    """

    def __init__(
        self,
        device_repo: "DeviceRepository",
        plan_repo: "EnergyPlanRepository",
        notifier: "NotificationSender",
    ):
        """
        Initialize energy monitoring service.

        Args:
            device_repo: Repository providing the household devices
            plan_repo: Repository holding the current energy plan
            notifier: Sender used for overload alerts
        """
        self._device_repo = device_repo
        self._plan_repo = plan_repo
        self._notifier = notifier

    def compute_current_usage_kwh(self) -> float:
        """
        Get total current usage across all active devices.

        Returns:
            Sum of active wattage divided by 1000; 0.0 when nothing is on
        """
        total_watts = sum(device.active_power_watts for device in self._device_repo.get_all())
        usage = watts_to_kw(float(total_watts))
        logger.debug(f"Current usage: {usage} kWh ({total_watts}W active)")
        return usage

    def check_for_overload(self) -> None:
        """
        Compare current usage with the plan limit and alert on overload.

        An alert is sent only when usage is strictly greater than the limit.

        Raises:
            InvalidStateError: No current energy plan is configured
        """
        usage = self.compute_current_usage_kwh()
        plan = self._require_plan()

        if not plan.is_exceeded_by(usage):
            logger.debug(f"Usage {usage} kWh within limit {plan.daily_limit_kwh} kWh")
            return

        message = OVERLOAD_MESSAGE.format(usage=format_kwh(usage))
        logger.warning(f"Usage {usage} kWh exceeds daily limit {plan.daily_limit_kwh} kWh")
        self._notifier.send_alert(message)

    def update_energy_limit(self, new_limit: float) -> None:
        """
        Set a new daily limit on the current plan and persist it.

        Args:
            new_limit: New daily limit in kWh (zero allowed)

        Raises:
            InvalidStateError: No current energy plan is configured
            OutOfRangeError: ``new_limit`` is negative or not a finite number
        """
        plan = self._require_plan()

        if not math.isfinite(new_limit) or new_limit < 0:
            raise OutOfRangeError(
                f"Daily energy limit must be a non-negative number, got {new_limit}",
                detail={"new_limit": new_limit, "current_limit": plan.daily_limit_kwh},
            )

        previous = plan.daily_limit_kwh
        plan.daily_limit_kwh = new_limit
        self._plan_repo.update_plan(plan)
        logger.info(f"Daily energy limit updated: {previous} -> {new_limit} kWh")

    def get_usage_summary(self) -> UsageSummary:
        """
        Summarize current usage against the plan without side effects.

        Raises:
            InvalidStateError: No current energy plan is configured
        """
        devices = self._device_repo.get_all()
        usage = watts_to_kw(float(sum(device.active_power_watts for device in devices)))
        plan = self._require_plan()
        return UsageSummary(
            usage_kwh=usage,
            daily_limit_kwh=plan.daily_limit_kwh,
            active_device_count=sum(1 for device in devices if device.is_on),
        )

    def _require_plan(self) -> EnergyPlan:
        plan = self._plan_repo.get_current_plan()
        if plan is None:
            raise InvalidStateError("No current energy plan is configured")
        return plan
