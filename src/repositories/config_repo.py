"""Repository for dashboard configuration (role rates and settings)."""

from src.models.rates import DashboardSettings, RoleRate, default_role_rates
from src.repositories.kv_store import ROLE_RATES_KEY, SETTINGS_KEY, KeyValueStore


class ConfigRepository:
    """Reads and replaces the role-rate set and dashboard settings.

    Absent documents read as the built-in defaults. A stored empty rate
    list is returned as empty.
    """

    def __init__(self, store: KeyValueStore):
        """Initialize repository with a key-value store.

        Args:
            store: Store holding the ``config:*`` documents
        """
        self._store = store

    async def get_role_rates(self) -> list[RoleRate]:
        stored = await self._store.get(ROLE_RATES_KEY)
        if stored is None:
            return default_role_rates()
        return [RoleRate.model_validate(r) for r in stored]

    async def save_role_rates(self, rates: list[RoleRate]) -> None:
        await self._store.set(ROLE_RATES_KEY, [r.to_store() for r in rates])

    async def get_settings(self) -> DashboardSettings:
        stored = await self._store.get(SETTINGS_KEY)
        if stored is None:
            return DashboardSettings()
        return DashboardSettings.model_validate(stored)

    async def save_settings(self, dashboard_settings: DashboardSettings) -> None:
        await self._store.set(SETTINGS_KEY, dashboard_settings.to_store())
