from datetime import date, datetime

from mmr_export.months import add_month, iter_months, month_label


def test_iter_months_stops_before_current_month():
    months = list(iter_months(date(2005, 1, 1), datetime(2005, 4, 15, 10, 30)))
    assert months == [date(2005, 1, 1), date(2005, 2, 1), date(2005, 3, 1)]


def test_iter_months_steps_one_calendar_month_across_years():
    start = date(2018, 11, 1)
    months = list(iter_months(start, date(2021, 2, 3)))
    assert months[0] == start
    assert len(months) == 27
    for prev, nxt in zip(months, months[1:]):
        assert add_month(prev) == nxt
        assert (nxt.year * 12 + nxt.month) - (prev.year * 12 + prev.month) == 1
    assert all(m < date(2021, 2, 1) for m in months)


def test_iter_months_is_lazy_and_empty_when_start_is_now():
    gen = iter_months(date(2020, 6, 1), date(2020, 6, 30))
    assert iter(gen) is gen
    assert list(gen) == []


def test_start_is_pinned_to_first_of_month():
    assert list(iter_months(date(2020, 1, 20), date(2020, 3, 1))) == [date(2020, 1, 1), date(2020, 2, 1)]


def test_month_label():
    assert month_label(date(2005, 1, 1)) == "Jan 2005"
