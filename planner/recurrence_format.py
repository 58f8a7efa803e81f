"""Human-readable descriptions of recurrence patterns."""

from datetime import time

from planner.models.event import EventTemplate, RecurrenceRule, Weekday

_PERIOD_UNITS = {
    RecurrenceRule.DAILY: "day",
    RecurrenceRule.WEEKLY: "week",
    RecurrenceRule.MONTHLY: "month",
    RecurrenceRule.YEARLY: "year",
}


def ordinal(n: int) -> str:
    """Format a positive integer as an English ordinal (1st, 2nd, 11th)."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _every(interval: int, unit: str) -> str:
    if interval == 1:
        return f"Every {unit}"
    return f"Every {interval} {unit}s"


def _describe_custom_days(days: list[Weekday], interval: int) -> str:
    if not days:
        return "Custom days"
    names = ", ".join(d.full_name for d in sorted(set(days), key=lambda d: d.day_number))
    if interval == 1:
        return f"Every {names}"
    return f"Every {interval} weeks on {names}"


def _describe_monthly_nth(
    nth_week: int | None, nth_weekday: Weekday | None, interval: int
) -> str:
    if nth_week is None or nth_weekday is None:
        return "Monthly on a specific weekday"
    position = "last" if nth_week == -1 else ordinal(nth_week)
    if interval == 1:
        return f"Every {position} {nth_weekday.full_name} of the month"
    return f"Every {position} {nth_weekday.full_name} of every {interval} months"


def describe_recurrence(template: EventTemplate) -> str:
    """Describe a template's recurrence as a sentence.

    Examples:
        DAILY, interval 1            -> "Every day"
        WEEKLY, interval 3           -> "Every 3 weeks"
        MONTHLY_NTH, 2nd FRI         -> "Every 2nd Friday of the month"
        WEEKLY, until 2024-06-30     -> "Every week (until 2024-06-30)"
        DAILY, count 5               -> "Every day (5 times)"

    Args:
        template: Template to describe.

    Returns:
        The description; "Does not repeat" for non-recurring templates.
    """
    rule = template.recurrence_rule
    interval = template.recurrence_interval

    if rule == RecurrenceRule.NONE:
        return "Does not repeat"
    if rule == RecurrenceRule.CUSTOM_DAYS:
        text = _describe_custom_days(template.recurrence_days, interval)
    elif rule == RecurrenceRule.MONTHLY_NTH:
        text = _describe_monthly_nth(template.nth_week, template.nth_weekday, interval)
    else:
        text = _every(interval, _PERIOD_UNITS[rule])

    if template.recurrence_end_date:
        text += f" (until {template.recurrence_end_date.isoformat()})"
    elif template.recurrence_count:
        times = "time" if template.recurrence_count == 1 else "times"
        text += f" ({template.recurrence_count} {times})"
    return text


def format_time(value: time | None) -> str:
    """Format a time as a 12-hour label (e.g. "9:00 AM"), or "" if missing."""
    if value is None:
        return ""
    hour = (value.hour + 11) % 12 + 1
    ampm = "PM" if value.hour >= 12 else "AM"
    return f"{hour}:{value.minute:02d} {ampm}"
