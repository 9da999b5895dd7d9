"""Tests for meeting cost calculation."""

import pytest

from src.analytics.cost_calculator import ESTIMATE_LABEL, compute_cost
from src.models.meeting import CostInput, MeetingDraft
from src.models.rates import RateTable, default_role_rates


@pytest.fixture
def rate_table() -> RateTable:
    return RateTable.from_mapping({"engineer": 75, "pm": 90})


class TestRoleBasedCost:
    """Cost accrued per represented role."""

    def test_sum_of_role_rates(self, rate_table: RateTable):
        """One hour with an engineer and a PM costs 75 + 90."""
        result = compute_cost(
            {"durationMinutes": 60, "attendeeRoles": ["engineer", "pm"]}, rate_table
        )

        assert result.total_cost == pytest.approx(165.0)
        assert [item.role_id for item in result.breakdown] == ["engineer", "pm"]
        assert result.cost_per_hour == pytest.approx(165.0)
        assert result.cost_per_minute == pytest.approx(2.75)
        assert result.formatted_cost == "$165.00"

    def test_cost_is_additive_over_roles(self):
        """Total equals the sum of hours * rate for every known role."""
        table = RateTable.from_rates(default_role_rates())
        roles = ["engineer", "tech-lead", "designer", "exec"]
        result = compute_cost(
            CostInput(duration_minutes=45, attendee_roles=roles), table
        )

        expected = sum(0.75 * table.get(r).hourly_rate for r in roles)
        assert result.total_cost == pytest.approx(expected)
        assert sum(item.cost for item in result.breakdown) == pytest.approx(expected)

    def test_unknown_role_is_skipped(self, rate_table: RateTable):
        """An unknown role adds nothing and has no breakdown line."""
        with_unknown = compute_cost(
            {"durationMinutes": 60, "attendeeRoles": ["engineer", "wizard"]}, rate_table
        )
        without = compute_cost(
            {"durationMinutes": 60, "attendeeRoles": ["engineer"]}, rate_table
        )

        assert with_unknown.total_cost == pytest.approx(without.total_cost)
        assert [item.role_id for item in with_unknown.breakdown] == ["engineer"]

    def test_roles_as_json_string(self, rate_table: RateTable):
        """Roles stored as a serialized list are parsed."""
        result = compute_cost(
            {"durationMinutes": 30, "attendeeRoles": '["pm"]'}, rate_table
        )
        assert result.total_cost == pytest.approx(45.0)

    def test_malformed_roles_fall_back_to_estimate(self, rate_table: RateTable):
        """Unparseable roles behave like no roles."""
        result = compute_cost(
            {"durationMinutes": 60, "attendeeRoles": "not json", "attendeeCount": 2},
            rate_table,
        )
        assert result.total_cost == pytest.approx(2 * 82.5)
        assert result.breakdown[0].role == ESTIMATE_LABEL

    def test_repeated_role_counts_once(self, rate_table: RateTable):
        result = compute_cost(
            {"durationMinutes": 60, "attendeeRoles": ["engineer", "engineer"]},
            rate_table,
        )
        assert result.total_cost == pytest.approx(75.0)


class TestEstimatedCost:
    """Average-rate estimate when no roles are given."""

    def test_average_rate_per_attendee(self, rate_table: RateTable):
        """Half an hour with 4 attendees at an 82.5 average."""
        result = compute_cost(
            {"durationMinutes": 30, "attendeeRoles": [], "attendeeCount": 4}, rate_table
        )

        assert result.total_cost == pytest.approx(165.0)
        assert len(result.breakdown) == 1
        line = result.breakdown[0]
        assert line.role == ESTIMATE_LABEL
        assert line.role_id is None
        assert line.hourly_rate == pytest.approx(82.5)
        assert line.attendee_count == 4

    def test_empty_rate_table(self):
        """No rates means no cost and no breakdown."""
        result = compute_cost(
            {"durationMinutes": 60, "attendeeCount": 5}, RateTable()
        )
        assert result.total_cost == 0
        assert result.breakdown == []

    def test_zero_attendees(self, rate_table: RateTable):
        result = compute_cost({"durationMinutes": 60, "attendeeCount": 0}, rate_table)
        assert result.total_cost == 0
        assert result.breakdown == []


class TestZeroDuration:
    """Zero-length meetings never divide by zero."""

    @pytest.mark.parametrize(
        "roles,count", [(["engineer", "pm"], 2), ([], 3), (["wizard"], 1)]
    )
    def test_zero_duration_costs_nothing(self, rate_table: RateTable, roles, count):
        result = compute_cost(
            CostInput(duration_minutes=0, attendee_roles=roles, attendee_count=count),
            rate_table,
        )

        assert result.total_cost == 0
        assert result.cost_per_minute == 0
        assert result.cost_per_hour == 0


def test_accepts_meeting_draft(rate_table: RateTable):
    """Drafts are priced with their defaulted fields."""
    draft = MeetingDraft(attendee_roles=["engineer"])
    result = compute_cost(draft, rate_table)
    assert result.total_cost == pytest.approx(37.5)


def test_currency_follows_rate_table():
    table = RateTable.from_mapping({"engineer": 100}, currency="EUR")
    result = compute_cost({"durationMinutes": 90, "attendeeRoles": ["engineer"]}, table)
    assert result.formatted_cost == "€150.00"
