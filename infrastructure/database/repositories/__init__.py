"""Repository facades over the in-memory household store.

Both repositories satisfy the protocols in ``app.services.protocols``::

    from infrastructure.database.repositories import InMemoryDeviceRepository
"""

from infrastructure.database.repositories.devices import InMemoryDeviceRepository
from infrastructure.database.repositories.energy_plans import InMemoryEnergyPlanRepository

__all__ = [
    "InMemoryDeviceRepository",
    "InMemoryEnergyPlanRepository",
]
