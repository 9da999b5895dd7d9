"""Tests for meeting-load vs. velocity statistics."""

import pytest

from src.analytics.correlation import (
    calculate_efficiency_score,
    calculate_sprint_efficiency,
    find_sprint_outliers,
    interpret_correlation,
    pearson,
)
from src.analytics.schemas import SprintSnapshot


def sprints(*pairs: tuple[float, float]) -> list[SprintSnapshot]:
    return [
        SprintSnapshot(
            sprint_name=f"Sprint {i}", total_meeting_hours=hours, completed_points=points
        )
        for i, (hours, points) in enumerate(pairs, start=1)
    ]


class TestPearson:
    def test_fewer_than_three_points(self):
        assert pearson([]) == 0
        assert pearson(sprints((10, 20), (20, 10))) == 0

    def test_perfect_negative(self):
        assert pearson(sprints((10, 30), (20, 20), (30, 10))) == pytest.approx(-1.0)

    def test_perfect_positive(self):
        assert pearson(sprints((1, 2), (2, 4), (3, 6), (4, 8))) == pytest.approx(1.0)

    def test_constant_series(self):
        """Zero variance gives zero, not a division error."""
        assert pearson(sprints((10, 5), (10, 8), (10, 13))) == 0

    @pytest.mark.parametrize(
        "pairs",
        [
            ((1e9, 1), (1e9 + 1, 2), (1e9 + 2, 3)),
            ((0.1, 30), (0.2, 29.9), (40, 0.5), (12, 18)),
            ((5, 5), (6, 7), (100, 1), (7, 6), (3, 2)),
        ],
    )
    def test_bounded(self, pairs):
        assert -1.0 <= pearson(sprints(*pairs)) <= 1.0


class TestInterpretCorrelation:
    def test_negligible(self):
        interpretation, _ = interpret_correlation(0.05)
        assert interpretation.startswith("No meaningful correlation")

    def test_moderate_negative(self):
        interpretation, recommendation = interpret_correlation(-0.35)
        assert interpretation == (
            "Moderate negative correlation - higher meeting hours tend to "
            "correlate with lower sprint velocity."
        )
        assert recommendation == (
            "Consider reducing meeting-heavy weeks to improve delivery."
        )

    @pytest.mark.parametrize(
        "value,strength", [(0.2, "Weak"), (0.3, "Moderate"), (0.5, "Strong"), (0.9, "Strong")]
    )
    def test_strength_labels(self, value, strength):
        interpretation, _ = interpret_correlation(value)
        assert interpretation.startswith(f"{strength} positive correlation")


class TestEfficiency:
    def test_score_needs_two_sprints(self):
        assert calculate_efficiency_score(sprints((10, 20))) is None

    def test_score_relative_to_best(self):
        # 2 and 4 points per hour; average 3 against a best of 4
        assert calculate_efficiency_score(sprints((10, 20), (5, 20))) == 75

    def test_score_half_rounds_up(self):
        # 4 and 1 points per hour; average 2.5 against a best of 4 is 62.5
        assert calculate_efficiency_score(sprints((10, 40), (10, 10))) == 63

    def test_score_without_meetings(self):
        assert calculate_efficiency_score(sprints((0, 20), (0, 30))) is None

    def test_sprint_efficiency_labels(self):
        assert calculate_sprint_efficiency(sprints((10, 40))[0]).efficiency == "excellent"
        assert calculate_sprint_efficiency(sprints((10, 25))[0]).efficiency == "good"
        assert calculate_sprint_efficiency(sprints((10, 15))[0]).efficiency == "normal"
        assert calculate_sprint_efficiency(sprints((10, 5))[0]).efficiency == "poor"

    def test_sprint_efficiency_without_meetings(self):
        result = calculate_sprint_efficiency(sprints((0, 10))[0])
        assert result.efficiency == "unknown"
        assert result.points_per_meeting_hour is None
        assert result.sprint_name == "Sprint 1"

    def test_cost_per_point(self):
        snapshot = SprintSnapshot(
            total_meeting_hours=10, completed_points=20, total_meeting_cost=1000
        )
        assert calculate_sprint_efficiency(snapshot).cost_per_point == pytest.approx(50)


def test_outliers():
    data = sprints((10, 10), (10, 40), (10, 20), (0, 50))
    outliers = find_sprint_outliers(data)

    assert outliers.best.sprint_name == "Sprint 2"
    assert outliers.worst.sprint_name == "Sprint 1"
    assert outliers.median.sprint_name == "Sprint 3"


def test_outliers_need_three_sprints():
    assert find_sprint_outliers(sprints((10, 10), (10, 40))).best is None
