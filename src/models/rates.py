"""Role rate configuration and dashboard settings."""

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import Field

from src.models.base import DomainModel

DEFAULT_CURRENCY = "USD"
DEFAULT_WORK_HOURS_PER_DAY = 8


class RoleRate(DomainModel):
    """Hourly cost associated with a role identifier."""

    role_id: str = Field(min_length=1, description="Unique role key")
    role_name: str = Field(default="", description="Display label")
    hourly_rate: float = Field(ge=0.0, description="Cost per hour")
    currency: str = Field(
        default=DEFAULT_CURRENCY,
        description="Currency code (informational only)",
    )


DEFAULT_ROLE_RATES: tuple[RoleRate, ...] = (
    RoleRate(role_id="engineer", role_name="Engineer", hourly_rate=75),
    RoleRate(role_id="senior-engineer", role_name="Senior Engineer", hourly_rate=100),
    RoleRate(role_id="tech-lead", role_name="Tech Lead", hourly_rate=125),
    RoleRate(role_id="pm", role_name="Product Manager", hourly_rate=90),
    RoleRate(role_id="designer", role_name="Designer", hourly_rate=80),
    RoleRate(role_id="manager", role_name="Engineering Manager", hourly_rate=130),
    RoleRate(role_id="exec", role_name="Executive", hourly_rate=200),
)


def default_role_rates() -> list[RoleRate]:
    """Fresh copies of the built-in rate set."""
    return [rate.model_copy() for rate in DEFAULT_ROLE_RATES]


def find_duplicate_role_ids(rates: Iterable[RoleRate]) -> list[str]:
    """Role ids appearing more than once, in first-repeat order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for rate in rates:
        if rate.role_id in seen and rate.role_id not in duplicates:
            duplicates.append(rate.role_id)
        seen.add(rate.role_id)
    return duplicates


@dataclass(frozen=True)
class RateTable:
    """Read-only lookup of role id -> hourly rate.

    Built fresh for each computation from the stored rate list. When a role
    id appears twice the first entry wins.
    """

    rates: tuple[RoleRate, ...] = ()

    @classmethod
    def from_rates(cls, rates: Iterable[RoleRate | dict]) -> "RateTable":
        return cls(
            tuple(
                r if isinstance(r, RoleRate) else RoleRate.model_validate(r)
                for r in rates
            )
        )

    @classmethod
    def from_mapping(
        cls,
        mapping: dict[str, float],
        currency: str = DEFAULT_CURRENCY,
    ) -> "RateTable":
        """Build a table from ``{role_id: hourly_rate}``, names = ids."""
        return cls(
            tuple(
                RoleRate(
                    role_id=role_id,
                    role_name=role_id,
                    hourly_rate=rate,
                    currency=currency,
                )
                for role_id, rate in mapping.items()
            )
        )

    def get(self, role_id: str) -> RoleRate | None:
        for rate in self.rates:
            if rate.role_id == role_id:
                return rate
        return None

    def average_rate(self) -> float:
        """Mean hourly rate, 0 for an empty table."""
        if not self.rates:
            return 0.0
        return sum(r.hourly_rate for r in self.rates) / len(self.rates)

    @property
    def currency(self) -> str:
        return self.rates[0].currency if self.rates else DEFAULT_CURRENCY

    def __len__(self) -> int:
        return len(self.rates)


class DashboardSettings(DomainModel):
    """Dashboard-wide settings, replaced wholesale on save."""

    currency: str = Field(default=DEFAULT_CURRENCY, min_length=1)
    work_hours_per_day: float = Field(default=DEFAULT_WORK_HOURS_PER_DAY, gt=0, le=24)
