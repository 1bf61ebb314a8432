"""Repository for the household's current energy plan."""

from __future__ import annotations

from app.domain.energy import EnergyPlan
from infrastructure.database.memory_store import InMemoryStore


class InMemoryEnergyPlanRepository:
    """Repository providing typed access to the current energy plan."""

    def __init__(self, backend: InMemoryStore) -> None:
        self._backend = backend

    def get_current_plan(self) -> EnergyPlan | None:
        return self._backend.fetch_plan()

    def set_current_plan(self, plan: EnergyPlan) -> None:
        """Install ``plan`` as the household plan, replacing any existing one."""
        self._backend.save_plan(plan)

    def update_plan(self, plan: EnergyPlan) -> None:
        self._backend.save_plan(plan)
