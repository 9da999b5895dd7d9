"""Tests for rule-based optimization suggestions."""

import pytest

from src.analytics.optimization import (
    ad_hoc_overload_rule,
    daily_load_rule,
    generate_optimizations,
    large_spend_rule,
    meeting_count_rule,
    rising_cost_rule,
    standup_overrun_rule,
)
from src.analytics.schemas import StatsSnapshot, SuggestionPriority, TypeBreakdown


def snapshot(**kwargs) -> StatsSnapshot:
    return StatsSnapshot(**kwargs)


class TestRules:
    """Each rule fires strictly above its threshold."""

    def test_rising_cost(self):
        assert rising_cost_rule(snapshot(trend_percentage=10, total_cost=1000)) is None

        suggestion = rising_cost_rule(snapshot(trend_percentage=12.5, total_cost=1000))
        assert suggestion.priority is SuggestionPriority.HIGH
        assert suggestion.category == "cost-trend"
        assert "12.5%" in suggestion.description
        assert suggestion.potential_savings == pytest.approx(100)

    def test_standup_at_target_does_not_fire(self):
        """Ten standups over 2.5 hours average exactly 15 minutes."""
        stats = snapshot(
            cost_by_type={"standup": TypeBreakdown(cost=100, count=10, hours=2.5)}
        )
        assert standup_overrun_rule(stats) is None

    def test_standup_overrun(self):
        stats = snapshot(
            cost_by_type={"standup": TypeBreakdown(cost=100, count=10, hours=4)}
        )
        suggestion = standup_overrun_rule(stats)
        assert suggestion.priority is SuggestionPriority.MEDIUM
        assert "24 minutes" in suggestion.description
        assert suggestion.potential_savings == pytest.approx(30)

    def test_ad_hoc_share(self):
        at_threshold = snapshot(
            total_cost=1000, cost_by_type={"ad-hoc": TypeBreakdown(cost=300, count=3)}
        )
        assert ad_hoc_overload_rule(at_threshold) is None

        above = snapshot(
            total_cost=1000, cost_by_type={"ad-hoc": TypeBreakdown(cost=400, count=3)}
        )
        suggestion = ad_hoc_overload_rule(above)
        assert suggestion.category == "ad-hoc"
        assert "40%" in suggestion.description
        assert suggestion.potential_savings == pytest.approx(160)

    def test_ad_hoc_with_zero_total_cost(self):
        stats = snapshot(total_cost=0, cost_by_type={"ad-hoc": TypeBreakdown(count=2)})
        assert ad_hoc_overload_rule(stats) is None

    def test_daily_load(self):
        assert daily_load_rule(snapshot(total_hours=60, total_cost=1000)) is None

        suggestion = daily_load_rule(snapshot(total_hours=80, total_cost=1000))
        assert suggestion.category == "time-spent"
        assert "4.0 hours/day" in suggestion.description
        assert suggestion.potential_savings == pytest.approx(200)

    def test_large_spend(self):
        assert large_spend_rule(snapshot(total_cost=10000)) is None
        suggestion = large_spend_rule(snapshot(total_cost=20000))
        assert suggestion.category == "general"
        assert suggestion.potential_savings == pytest.approx(3000)

    def test_meeting_count(self):
        assert meeting_count_rule(snapshot(meeting_count=30)) is None
        suggestion = meeting_count_rule(snapshot(meeting_count=31, total_cost=500))
        assert suggestion.priority is SuggestionPriority.LOW
        assert suggestion.category == "attendance"


class TestGenerateOptimizations:
    """Ranking and summary."""

    def test_no_suggestions(self):
        report = generate_optimizations(snapshot())
        assert report.suggestions == []
        assert report.total_potential_savings == 0
        assert report.summary == (
            "Found 0 optimization opportunities with potential savings of $0/month."
        )

    def test_suggestions_ordered_by_priority(self):
        stats = snapshot(
            total_cost=20000,
            total_hours=100,
            meeting_count=40,
            trend_percentage=25,
            cost_by_type={
                "standup": TypeBreakdown(cost=1000, count=10, hours=5),
                "ad-hoc": TypeBreakdown(cost=8000, count=10, hours=20),
            },
        )

        report = generate_optimizations(stats)

        ranks = [s.priority.rank for s in report.suggestions]
        assert ranks == sorted(ranks)
        assert [s.category for s in report.suggestions] == [
            "cost-trend",
            "ad-hoc",
            "time-spent",
            "standup",
            "general",
            "attendance",
        ]
        assert report.total_potential_savings == pytest.approx(
            sum(s.potential_savings for s in report.suggestions)
        )

    def test_summary_uses_currency_without_decimals(self):
        report = generate_optimizations(snapshot(total_cost=12345.67), currency="EUR")
        assert report.summary == (
            "Found 1 optimization opportunities with potential savings of €1,852/month."
        )
