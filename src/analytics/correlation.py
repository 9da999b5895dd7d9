"""Meeting load vs. sprint velocity statistics."""

import math
from collections.abc import Sequence

from src.analytics.schemas import SprintEfficiency, SprintOutliers, SprintSnapshot

MIN_CORRELATION_POINTS = 3


def pearson(sprint_snapshots: Sequence[SprintSnapshot]) -> float:
    """Pearson correlation of meeting hours against completed points.

    Returns 0 for fewer than three sprints or when either series is
    constant. The result is clamped to [-1, 1].
    """
    n = len(sprint_snapshots)
    if n < MIN_CORRELATION_POINTS:
        return 0.0

    xs = [s.total_meeting_hours or 0.0 for s in sprint_snapshots]
    ys = [s.completed_points or 0.0 for s in sprint_snapshots]

    sum_x = math.fsum(xs)
    sum_y = math.fsum(ys)
    sum_xy = math.fsum(x * y for x, y in zip(xs, ys, strict=True))
    sum_x2 = math.fsum(x * x for x in xs)
    sum_y2 = math.fsum(y * y for y in ys)

    numerator = n * sum_xy - sum_x * sum_y
    variance_product = (n * sum_x2 - sum_x**2) * (n * sum_y2 - sum_y**2)
    if variance_product <= 0:
        return 0.0

    denominator = math.sqrt(variance_product)
    if denominator == 0 or not math.isfinite(denominator):
        return 0.0

    return max(-1.0, min(1.0, numerator / denominator))


def interpret_correlation(correlation: float) -> tuple[str, str]:
    """Plain-language interpretation and recommendation for a coefficient."""
    magnitude = abs(correlation)
    if magnitude < 0.1:
        return (
            "No meaningful correlation - meeting hours and sprint velocity move "
            "independently.",
            "Meeting load does not appear to drive velocity; focus optimizations "
            "on meeting cost.",
        )

    if magnitude < 0.3:
        strength = "Weak"
    elif magnitude < 0.5:
        strength = "Moderate"
    else:
        strength = "Strong"

    if correlation < 0:
        return (
            f"{strength} negative correlation - higher meeting hours tend to "
            "correlate with lower sprint velocity.",
            "Consider reducing meeting-heavy weeks to improve delivery.",
        )
    return (
        f"{strength} positive correlation - higher meeting hours tend to "
        "correlate with higher sprint velocity.",
        "Current meetings appear to support delivery; trim cost before cutting "
        "cadence.",
    )


def calculate_efficiency_score(sprint_snapshots: Sequence[SprintSnapshot]) -> int | None:
    """Average points per meeting hour relative to the best sprint, 0-100.

    None with fewer than two sprints or when no sprint had meetings.
    """
    if len(sprint_snapshots) < 2:
        return None

    efficiencies = [
        s.completed_points / s.total_meeting_hours
        for s in sprint_snapshots
        if s.total_meeting_hours > 0
    ]
    if not efficiencies:
        return None

    best = max(efficiencies)
    if best <= 0:
        return 0
    average = sum(efficiencies) / len(efficiencies)
    # Halves round up
    return math.floor(average / best * 100 + 0.5)


def calculate_sprint_efficiency(snapshot: SprintSnapshot) -> SprintEfficiency:
    """Points per meeting hour and cost per point for one sprint."""
    if not snapshot.total_meeting_hours:
        return SprintEfficiency(sprint_name=snapshot.sprint_name)

    points_per_hour = snapshot.completed_points / snapshot.total_meeting_hours
    cost_per_point = (
        snapshot.total_meeting_cost / snapshot.completed_points
        if snapshot.completed_points
        else None
    )

    if points_per_hour > 3:
        efficiency = "excellent"
    elif points_per_hour > 2:
        efficiency = "good"
    elif points_per_hour < 1:
        efficiency = "poor"
    else:
        efficiency = "normal"

    return SprintEfficiency(
        sprint_name=snapshot.sprint_name,
        points_per_meeting_hour=points_per_hour,
        cost_per_point=cost_per_point,
        efficiency=efficiency,
    )


def find_sprint_outliers(sprint_snapshots: Sequence[SprintSnapshot]) -> SprintOutliers:
    """Best, worst and median sprint by points per meeting hour.

    Only sprints with both meeting hours and delivered points are ranked.
    """
    if len(sprint_snapshots) < MIN_CORRELATION_POINTS:
        return SprintOutliers()

    ranked = sorted(
        (s for s in sprint_snapshots if s.total_meeting_hours > 0 and s.completed_points > 0),
        key=lambda s: s.completed_points / s.total_meeting_hours,
        reverse=True,
    )
    if not ranked:
        return SprintOutliers()

    return SprintOutliers(
        best=ranked[0],
        worst=ranked[-1],
        median=ranked[len(ranked) // 2],
    )
