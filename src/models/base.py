"""Base model shared by all domain models."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class DomainModel(BaseModel):
    """Base class for domain models.

    Provides:
    - camelCase aliases for the wire and stored format (``durationMinutes``)
    - Construction by either field name or alias
    - Standard serialization config
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_default=True,
        from_attributes=True,
    )

    def to_store(self) -> dict:
        """Serialize to the JSON-compatible dict persisted in the store."""
        return self.model_dump(mode="json", by_alias=True)
