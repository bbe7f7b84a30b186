from __future__ import annotations

from datetime import date, datetime
from typing import Iterator, Union


def add_month(month: date) -> date:
    if month.month == 12:
        return date(month.year + 1, 1, 1)
    return date(month.year, month.month + 1, 1)


def iter_months(start: date, now: Union[date, datetime]) -> Iterator[date]:
    """
    Yield the first day of every calendar month from `start` up to, but not
    including, the month that contains `now`. The current month is still in
    progress, so it is left for a later run.
    """
    current = date(start.year, start.month, 1)
    stop = date(now.year, now.month, 1)
    while current < stop:
        yield current
        current = add_month(current)


def month_label(month: date) -> str:
    return month.strftime("%b %Y")
