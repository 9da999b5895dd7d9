"""Cost calculation and aggregation engine.

Pure, synchronous functions over fully materialized inputs:
- compute_cost: cost of one meeting from roles and rates
- calculate_cost_trends / group_by_period / summarize: period buckets
- compute_stats: dashboard snapshot for a date range
- generate_optimizations: ranked rule-based suggestions
- pearson and sprint helpers: meeting load vs. velocity
"""

from src.analytics.correlation import (
    calculate_efficiency_score,
    calculate_sprint_efficiency,
    find_sprint_outliers,
    interpret_correlation,
    pearson,
)
from src.analytics.cost_calculator import compute_cost
from src.analytics.optimization import generate_optimizations
from src.analytics.periods import (
    Granularity,
    calculate_cost_trends,
    group_by_period,
    summarize,
)
from src.analytics.schemas import (
    CostLineItem,
    CostResult,
    OptimizationReport,
    PeriodBucket,
    SavingsPotential,
    SprintEfficiency,
    SprintOutliers,
    SprintSnapshot,
    StatsSnapshot,
    Suggestion,
    SuggestionPriority,
    TypeBreakdown,
)
from src.analytics.stats import (
    DateRange,
    calculate_savings_potential,
    compute_stats,
    summarize_meetings,
)

__all__ = [
    # Cost
    "compute_cost",
    "CostLineItem",
    "CostResult",
    # Periods
    "Granularity",
    "PeriodBucket",
    "calculate_cost_trends",
    "group_by_period",
    "summarize",
    # Stats
    "DateRange",
    "StatsSnapshot",
    "TypeBreakdown",
    "SavingsPotential",
    "compute_stats",
    "summarize_meetings",
    "calculate_savings_potential",
    # Optimization
    "OptimizationReport",
    "Suggestion",
    "SuggestionPriority",
    "generate_optimizations",
    # Correlation
    "SprintSnapshot",
    "SprintEfficiency",
    "SprintOutliers",
    "pearson",
    "interpret_correlation",
    "calculate_efficiency_score",
    "calculate_sprint_efficiency",
    "find_sprint_outliers",
]
