"""Rule-based optimization suggestions.

Each rule looks at one aspect of a stats snapshot and proposes at most one
suggestion with its own percentage-of-cost savings estimate. Rules do not
coordinate, so the summed estimate is an upper bound that can count the
same spend more than once.
"""

from collections.abc import Callable

import structlog

from src.analytics.formatting import format_currency
from src.analytics.schemas import (
    OptimizationReport,
    StatsSnapshot,
    Suggestion,
    SuggestionPriority,
)

logger = structlog.get_logger()

# Thresholds
RISING_TREND_PERCENT = 10
STANDUP_TARGET_MINUTES = 15
AD_HOC_SHARE_PERCENT = 30
WORKDAYS_PER_PERIOD = 20
DAILY_MEETING_HOURS_LIMIT = 3
LARGE_SPEND = 10000
HIGH_MEETING_COUNT = 30

Rule = Callable[[StatsSnapshot], Suggestion | None]


def rising_cost_rule(stats: StatsSnapshot) -> Suggestion | None:
    if stats.trend_percentage <= RISING_TREND_PERCENT:
        return None
    return Suggestion(
        priority=SuggestionPriority.HIGH,
        category="cost-trend",
        title="Meeting costs are increasing",
        description=(
            f"Meeting costs have increased by {stats.trend_percentage:.1f}% "
            "compared to the previous period. Consider auditing recurring meetings."
        ),
        potential_savings=stats.total_cost * 0.1,
    )


def standup_overrun_rule(stats: StatsSnapshot) -> Suggestion | None:
    standup = stats.cost_by_type.get("standup")
    if standup is None or standup.count == 0:
        return None
    avg_minutes = standup.hours / standup.count * 60
    # Exactly the target duration is fine
    if avg_minutes <= STANDUP_TARGET_MINUTES:
        return None
    return Suggestion(
        priority=SuggestionPriority.MEDIUM,
        category="standup",
        title="Standups are running long",
        description=(
            f"Average standup duration is {avg_minutes:.0f} minutes. Consider async "
            f"standups or stricter time-boxing to {STANDUP_TARGET_MINUTES} minutes."
        ),
        potential_savings=standup.cost * 0.3,
    )


def ad_hoc_overload_rule(stats: StatsSnapshot) -> Suggestion | None:
    ad_hoc = stats.cost_by_type.get("ad-hoc")
    if ad_hoc is None or stats.total_cost <= 0:
        return None
    share = ad_hoc.cost / stats.total_cost * 100
    if share <= AD_HOC_SHARE_PERCENT:
        return None
    return Suggestion(
        priority=SuggestionPriority.HIGH,
        category="ad-hoc",
        title="High ad-hoc meeting cost",
        description=(
            f"Ad-hoc meetings account for {share:.0f}% of meeting costs. Consider "
            "better async communication or scheduled office hours."
        ),
        potential_savings=ad_hoc.cost * 0.4,
    )


def daily_load_rule(stats: StatsSnapshot) -> Suggestion | None:
    hours_per_day = stats.total_hours / WORKDAYS_PER_PERIOD
    if hours_per_day <= DAILY_MEETING_HOURS_LIMIT:
        return None
    return Suggestion(
        priority=SuggestionPriority.HIGH,
        category="time-spent",
        title="High meeting load",
        description=(
            f"Team averages {hours_per_day:.1f} hours/day in meetings. This leaves "
            'limited time for deep work. Consider "No Meeting Days" or '
            "meeting-free morning blocks."
        ),
        potential_savings=stats.total_cost * 0.2,
    )


def large_spend_rule(stats: StatsSnapshot) -> Suggestion | None:
    if stats.total_cost <= LARGE_SPEND:
        return None
    return Suggestion(
        priority=SuggestionPriority.MEDIUM,
        category="general",
        title="Review recurring meetings",
        description=(
            "Conduct a quarterly audit of recurring meetings. Many recurring "
            "meetings continue long after their original purpose is fulfilled."
        ),
        potential_savings=stats.total_cost * 0.15,
    )


def meeting_count_rule(stats: StatsSnapshot) -> Suggestion | None:
    if stats.meeting_count <= HIGH_MEETING_COUNT:
        return None
    return Suggestion(
        priority=SuggestionPriority.LOW,
        category="attendance",
        title="Consider optional attendees",
        description=(
            "Mark some meeting attendees as optional and encourage them to skip "
            "if not directly needed. Fewer attendees = lower cost per meeting."
        ),
        potential_savings=stats.total_cost * 0.1,
    )


# Evaluation order; ties in priority keep this order
RULES: tuple[Rule, ...] = (
    rising_cost_rule,
    standup_overrun_rule,
    ad_hoc_overload_rule,
    daily_load_rule,
    large_spend_rule,
    meeting_count_rule,
)


def generate_optimizations(
    stats: StatsSnapshot,
    currency: str = "USD",
) -> OptimizationReport:
    """Evaluate every rule and rank the resulting suggestions.

    Args:
        stats: Snapshot to inspect (trend_percentage 0 disables the trend rule)
        currency: Currency used in the summary sentence

    Returns:
        OptimizationReport with suggestions sorted high -> medium -> low
    """
    suggestions = [s for rule in RULES if (s := rule(stats)) is not None]
    suggestions.sort(key=lambda s: s.priority.rank)

    total = sum(s.potential_savings for s in suggestions)
    summary = (
        f"Found {len(suggestions)} optimization opportunities with potential "
        f"savings of {format_currency(total, currency, places=0)}/month."
    )

    logger.info(
        "optimizations generated",
        suggestion_count=len(suggestions),
        categories=[s.category for s in suggestions],
        total_potential_savings=round(total, 2),
    )

    return OptimizationReport(
        suggestions=suggestions,
        total_potential_savings=total,
        summary=summary,
    )
