"""Recurring event expansion.

Templates are expanded against an inclusive window of naive local dates.
Every call is independent: nothing is cached between calls and the input
templates are never modified.
"""

import calendar
import logging
from datetime import date, timedelta
from itertools import islice
from typing import Callable, Iterable, Iterator, Mapping, Union

from dateutil.relativedelta import relativedelta
from pydantic import ValidationError as PydanticValidationError

from planner.constants import DEFAULT_MAX_OCCURRENCES
from planner.exceptions import RecurrenceError
from planner.models.event import EventTemplate, Occurrence, RecurrenceRule, Weekday
from planner.utils import parse_date

logger = logging.getLogger(__name__)

TemplateLike = Union[EventTemplate, Mapping]

# Step of k natural periods for the fixed-period rules
_PERIOD_STEPS: dict[RecurrenceRule, Callable[[int], relativedelta]] = {
    RecurrenceRule.DAILY: lambda n: relativedelta(days=n),
    RecurrenceRule.WEEKLY: lambda n: relativedelta(weeks=n),
    RecurrenceRule.MONTHLY: lambda n: relativedelta(months=n),
    RecurrenceRule.YEARLY: lambda n: relativedelta(years=n),
}


def nth_weekday_of_month(
    year: int, month: int, weekday: Weekday, nth: int
) -> date | None:
    """Find the nth given weekday of a month.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).
        weekday: Weekday to look for.
        nth: 1-based position, or -1 for the last one.

    Returns:
        The matching date, or None if the month has fewer than ``nth``
        matching weekdays.
    """
    days_in_month = calendar.monthrange(year, month)[1]
    matches = [
        date(year, month, day)
        for day in range(1, days_in_month + 1)
        if date(year, month, day).weekday() == weekday.day_number
    ]
    if nth == -1:
        return matches[-1]
    if 1 <= nth <= len(matches):
        return matches[nth - 1]
    return None


def _period_series(template: EventTemplate, until: date) -> Iterator[date]:
    """DAILY/WEEKLY/MONTHLY/YEARLY: start_date + k * interval periods.

    Each date is computed from start_date rather than from the previous
    date, so month ends clamp without drifting (Jan 31 -> Feb 29 -> Mar 31).
    """
    step = _PERIOD_STEPS[template.recurrence_rule]
    k = 0
    while True:
        current = template.start_date + step(k * template.recurrence_interval)
        if current > until:
            return
        yield current
        k += 1


def _custom_days_series(template: EventTemplate, until: date) -> Iterator[date]:
    """CUSTOM_DAYS: selected weekdays of every ``interval``-th Monday-start week."""
    allowed = set(template.recurrence_days)
    if not allowed:
        logger.debug(f"Template {template.id} has no recurrence days, nothing to expand")
        return

    week_start = template.start_date - timedelta(days=template.start_date.weekday())
    step = timedelta(weeks=template.recurrence_interval)
    while week_start <= until:
        for offset in range(7):
            day = week_start + timedelta(days=offset)
            if day > until:
                return
            if day >= template.start_date and Weekday.from_date(day) in allowed:
                yield day
        week_start += step


def _monthly_nth_series(template: EventTemplate, until: date) -> Iterator[date]:
    """MONTHLY_NTH: the nth (or last) weekday of every ``interval``-th month."""
    if template.nth_week is None or template.nth_weekday is None:
        logger.debug(f"Template {template.id} is missing nth_week/nth_weekday")
        return

    first_month = template.start_date.replace(day=1)
    k = 0
    while True:
        cursor = first_month + relativedelta(months=k * template.recurrence_interval)
        if cursor > until:
            return
        target = nth_weekday_of_month(
            cursor.year, cursor.month, template.nth_weekday, template.nth_week
        )
        # Months without the requested position are skipped
        if target is not None and template.start_date <= target <= until:
            yield target
        k += 1


_SERIES: dict[RecurrenceRule, Callable[[EventTemplate, date], Iterator[date]]] = {
    RecurrenceRule.DAILY: _period_series,
    RecurrenceRule.WEEKLY: _period_series,
    RecurrenceRule.MONTHLY: _period_series,
    RecurrenceRule.YEARLY: _period_series,
    RecurrenceRule.CUSTOM_DAYS: _custom_days_series,
    RecurrenceRule.MONTHLY_NTH: _monthly_nth_series,
}


def iter_series_dates(
    template: EventTemplate,
    until: date,
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
) -> Iterator[date]:
    """Yield the raw series dates of a template up to ``until``.

    Dates come out before window and exclusion filtering, in chronological
    order, so the n-th yielded date is the n-th member of the series. The
    series stops at ``recurrence_end_date`` and after ``recurrence_count``
    dates (or ``max_occurrences`` when no count is set).

    Args:
        template: Validated template.
        until: Last date to consider (inclusive).
        max_occurrences: Safety cap used when the template has no count.

    Raises:
        RecurrenceError: If the rule has no series generator.
    """
    if not template.is_recurring:
        if template.start_date <= until:
            yield template.start_date
        return

    generator = _SERIES.get(template.recurrence_rule)
    if generator is None:
        raise RecurrenceError(
            f"Unsupported recurrence rule: {template.recurrence_rule.value}"
        )

    scan_bound = until
    if template.recurrence_end_date and template.recurrence_end_date < scan_bound:
        scan_bound = template.recurrence_end_date

    limit = template.recurrence_count or max_occurrences
    yield from islice(generator(template, scan_bound), limit)


def expand_template(
    template: EventTemplate,
    window_start: date,
    window_end: date,
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
) -> list[Occurrence]:
    """Expand one template into the occurrences inside [window_start, window_end].

    A non-recurring template yields itself when its date range overlaps the
    window; its excluded_dates are ignored. Recurring templates yield one
    occurrence per series date inside the window that is not excluded.
    """
    if window_start > window_end:
        return []

    if not template.is_recurring:
        occurrence = Occurrence.from_template(
            template, template.start_date, recurring=False
        )
        if occurrence.overlaps(window_start, window_end):
            return [occurrence]
        return []

    excluded = set(template.excluded_dates)
    return [
        Occurrence.from_template(template, day, recurring=True)
        for day in iter_series_dates(template, window_end, max_occurrences)
        if day >= window_start and day not in excluded
    ]


def _coerce_template(item: TemplateLike) -> EventTemplate:
    """Validate a raw store row into an EventTemplate."""
    if isinstance(item, EventTemplate):
        return item
    return EventTemplate.model_validate(item)


def _template_label(item: TemplateLike) -> str:
    """Best-effort id for log messages."""
    if isinstance(item, EventTemplate):
        return item.id
    if isinstance(item, Mapping):
        return str(item.get("id", "<no id>"))
    return repr(item)


def expand(
    templates: Iterable[TemplateLike],
    window_start: date | str,
    window_end: date | str,
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
) -> list[Occurrence]:
    """Expand templates into concrete occurrences for an inclusive window.

    Templates may be EventTemplate instances or raw store rows. A template
    whose row or recurrence metadata cannot be evaluated is logged and
    skipped; the rest of the batch is still expanded.

    Args:
        templates: Templates or rows as returned by the event store.
        window_start: First day of the window (date or YYYY-MM-DD).
        window_end: Last day of the window (date or YYYY-MM-DD).
        max_occurrences: Safety cap per template without a count.

    Returns:
        Occurrences in template order, each template's in date order.
        Empty when window_start is after window_end.
    """
    start = parse_date(window_start)
    end = parse_date(window_end)
    if start > end:
        logger.debug(f"Empty window: {start} is after {end}")
        return []

    occurrences: list[Occurrence] = []
    for item in templates:
        try:
            template = _coerce_template(item)
            occurrences.extend(expand_template(template, start, end, max_occurrences))
        except (
            PydanticValidationError,
            RecurrenceError,
            ValueError,
            TypeError,
            OverflowError,
        ) as e:
            logger.warning(f"Skipping template {_template_label(item)}: {e}")
    return occurrences


def next_occurrence(
    template: EventTemplate,
    after: date,
    horizon_days: int = 366,
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
) -> date | None:
    """Find the first occurrence starting on or after ``after``.

    Only the next ``horizon_days`` days are searched.
    """
    window_end = after + timedelta(days=horizon_days)
    for occurrence in expand_template(template, after, window_end, max_occurrences):
        if occurrence.occurrence_start_date >= after:
            return occurrence.occurrence_start_date
    return None
