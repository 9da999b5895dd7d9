"""Meeting cost calculation from attendee roles and hourly rates.

Cost is accrued once per represented role, not per individual: a meeting
with three engineers and ``attendee_roles=["engineer"]`` costs one engineer
hour per hour. When no roles are given the average rate of the table is
applied per attendee instead.
"""

from collections.abc import Mapping
from typing import Any

from src.analytics.formatting import format_currency
from src.analytics.schemas import CostLineItem, CostResult
from src.models.meeting import CostInput, MeetingDraft
from src.models.rates import RateTable

ESTIMATE_LABEL = "Average (estimated)"


def _as_cost_input(meeting: CostInput | MeetingDraft | Mapping[str, Any]) -> CostInput:
    if isinstance(meeting, CostInput):
        return meeting
    if isinstance(meeting, MeetingDraft):
        return meeting.cost_input()
    return CostInput.model_validate(dict(meeting))


def compute_cost(
    meeting: CostInput | MeetingDraft | Mapping[str, Any],
    rate_table: RateTable,
) -> CostResult:
    """Calculate the cost of one meeting.

    Args:
        meeting: Anything carrying durationMinutes, attendeeRoles (list or
            JSON list string) and attendeeCount
        rate_table: Rates in effect for the calculation

    Returns:
        CostResult with total, per-role breakdown and per-minute/per-hour
        rates. Never raises for malformed roles, unknown roles, an empty
        table or a zero duration; those all degrade to zero contributions.
    """
    cost_input = _as_cost_input(meeting)
    duration = cost_input.duration_minutes
    hours = duration / 60

    total_cost = 0.0
    breakdown: list[CostLineItem] = []

    if cost_input.attendee_roles:
        for role_id in cost_input.attendee_roles:
            rate = rate_table.get(role_id)
            if rate is None:
                continue
            cost = hours * rate.hourly_rate
            total_cost += cost
            breakdown.append(
                CostLineItem(
                    role=rate.role_name or rate.role_id,
                    role_id=rate.role_id,
                    hourly_rate=rate.hourly_rate,
                    hours=hours,
                    cost=cost,
                )
            )
    elif cost_input.attendee_count and len(rate_table) > 0:
        avg_rate = rate_table.average_rate()
        total_cost = hours * avg_rate * cost_input.attendee_count
        breakdown.append(
            CostLineItem(
                role=ESTIMATE_LABEL,
                hourly_rate=avg_rate,
                hours=hours,
                cost=total_cost,
                attendee_count=cost_input.attendee_count,
            )
        )

    return CostResult(
        total_cost=total_cost,
        breakdown=breakdown,
        cost_per_minute=total_cost / duration if duration > 0 else 0.0,
        cost_per_hour=total_cost / (hours or 1),
        formatted_cost=format_currency(total_cost, rate_table.currency),
    )
