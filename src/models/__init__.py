"""Canonical data models for the meeting cost dashboard.

This module exports all domain models used throughout the application:
- DomainModel: Base class with camelCase wire aliases
- Meeting / MeetingDraft: Logged meetings and creation input
- CostInput: Cost-relevant meeting fields
- RoleRate / RateTable: Hourly rates by role
- DashboardSettings: Currency and working hours
"""

from src.models.base import DomainModel
from src.models.meeting import (
    CostInput,
    Meeting,
    MeetingDraft,
    MeetingType,
    parse_attendee_roles,
)
from src.models.rates import (
    DEFAULT_ROLE_RATES,
    DashboardSettings,
    RateTable,
    RoleRate,
    default_role_rates,
)

__all__ = [
    # Base
    "DomainModel",
    # Meeting
    "CostInput",
    "Meeting",
    "MeetingDraft",
    "MeetingType",
    "parse_attendee_roles",
    # Rates and settings
    "DEFAULT_ROLE_RATES",
    "DashboardSettings",
    "RateTable",
    "RoleRate",
    "default_role_rates",
]
