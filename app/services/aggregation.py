"""Reusable aggregate queries behind the statistics reports.

Three shapes cover every report:

- ``count_where``: number of rows matching a conjunction of predicates.
- ``monthly_series``: rows grouped by the ``YYYY-MM`` label of a timestamp
  column, ascending, one entry per month that has at least one row.
- ``min_max_by_count``: the smallest and largest month of a series.

Monthly grouping is done in Python over the selected timestamp column only
(avoiding ``to_char``/``strftime`` so PostgreSQL and SQLite behave the same).
"""

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

from dateutil.relativedelta import relativedelta
from sqlmodel import Session, SQLModel, func, select

from app.exceptions import ValidationError
from app.models.stats import MonthlyCount

DATE_PARAM_FORMAT = "%Y-%m-%d"
MONTH_LABEL_FORMAT = "%Y-%m"


def parse_date_param(value: str | None, field: str) -> date | None:
    """
    Parse an optional ``YYYY-MM-DD`` query parameter.

    Parameters:
        value (str | None): Raw query string value; None or empty means "no bound".
        field (str): Parameter name, used in the error message.

    Returns:
        date | None: The parsed date, or None when the parameter was not given.

    Raises:
        ValidationError: If the value is not a valid ``YYYY-MM-DD`` date.
    """
    if not value:
        return None
    try:
        return datetime.strptime(value, DATE_PARAM_FORMAT).date()
    except ValueError as e:
        raise ValidationError(
            f"Invalid {field} format. Use YYYY-MM-DD", field=field
        ) from e


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


def month_window(now: datetime) -> tuple[datetime, datetime]:
    """
    Return the first and last instant of the calendar month containing `now`.

    The last instant is one microsecond before the next month starts, so an
    inclusive ``<=`` comparison covers the whole final day.
    """
    start = datetime(now.year, now.month, 1)
    end = start + relativedelta(months=1) - relativedelta(microseconds=1)
    return start, end


@dataclass(frozen=True)
class DateRange:
    """Optional inclusive bounds on a timestamp column."""

    start: date | None = None
    end: date | None = None

    @classmethod
    def from_params(cls, start_date: str | None, end_date: str | None) -> "DateRange":
        # start_date is validated first so its error wins when both are bad
        start = parse_date_param(start_date, "start_date")
        end = parse_date_param(end_date, "end_date")
        return cls(start=start, end=end)

    def predicates(self, column: Any) -> list[Any]:
        conditions = []
        if self.start is not None:
            conditions.append(column >= start_of_day(self.start))
        if self.end is not None:
            conditions.append(column <= end_of_day(self.end))
        return conditions


def count_where(session: Session, model: type[SQLModel], *predicates: Any) -> int:
    """
    Count rows of `model` matching every predicate.

    Returns:
        int: The number of matching rows (0 when none match).
    """
    statement = select(func.count()).select_from(model)
    if predicates:
        statement = statement.where(*predicates)
    return session.exec(statement).one()


def monthly_series(
    session: Session, timestamp_column: Any, *predicates: Any
) -> list[MonthlyCount]:
    """
    Count matching rows per calendar month of `timestamp_column`.

    Parameters:
        session: Database session.
        timestamp_column: Model column holding the datetime to bucket on.
        *predicates: Filters combined with AND.

    Returns:
        list[MonthlyCount]: One entry per month with at least one row, ordered by
        ascending month label. Empty when nothing matches. Rows with a NULL
        timestamp are ignored.
    """
    statement = select(timestamp_column).where(timestamp_column.is_not(None))
    if predicates:
        statement = statement.where(*predicates)
    timestamps = session.exec(statement).all()

    counts = Counter(ts.strftime(MONTH_LABEL_FORMAT) for ts in timestamps)
    return [MonthlyCount(month=month, count=counts[month]) for month in sorted(counts)]


def min_max_by_count(
    series: list[MonthlyCount],
) -> tuple[MonthlyCount | None, MonthlyCount | None]:
    """
    Find the months with the fewest and the most rows.

    Ties go to the earliest month for both extremes: the series is in ascending
    month order and `min`/`max` keep the first extremal element they meet.

    Returns:
        tuple: ``(min, max)``; both None for an empty series.
    """
    if not series:
        return None, None
    lowest = min(series, key=lambda point: point.count)
    highest = max(series, key=lambda point: point.count)
    return lowest, highest
