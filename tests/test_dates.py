from datetime import date

import pytest

from harga_pangan.domain import DataSourceError
from harga_pangan.domain.prices import (
    DateRange,
    format_date,
    inclusive_day_count,
    next_day,
    parse_date,
    span_days,
    to_path_token,
)


def test_format_date_zero_pads_day_and_month() -> None:
    assert format_date(date(2021, 4, 1)) == "01/04/2021"
    assert format_date(date(2023, 12, 31)) == "31/12/2023"


def test_parse_date_inverts_format_date() -> None:
    parsed = parse_date(format_date(date(2021, 4, 1)))
    assert (parsed.day, parsed.month, parsed.year) == (1, 4, 2021)


@pytest.mark.parametrize("token", ["2021-04-01", "01/04", "32/01/2021", "aa/bb/cccc"])
def test_parse_date_rejects_malformed_tokens(token: str) -> None:
    with pytest.raises(DataSourceError):
        parse_date(token)


def test_to_path_token_uses_hyphens() -> None:
    assert to_path_token("01/04/2021") == "01-04-2021"


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2021, 4, 30), date(2021, 5, 1)),
        (date(2023, 12, 31), date(2024, 1, 1)),
        (date(2024, 2, 28), date(2024, 2, 29)),
        (date(2023, 2, 28), date(2023, 3, 1)),
    ],
)
def test_next_day_rolls_over_calendar_boundaries(
    day: date, expected: date
) -> None:
    assert next_day(day) == expected


def test_inclusive_day_count() -> None:
    assert inclusive_day_count(date(2021, 4, 1), date(2021, 4, 3)) == 3
    assert inclusive_day_count(date(2021, 4, 1), date(2021, 4, 1)) == 1
    assert inclusive_day_count(date(2021, 4, 2), date(2021, 4, 1)) == 0
    assert inclusive_day_count(date(2021, 4, 1), date(2024, 4, 1)) == 1097


def test_span_days_is_whole_day_difference() -> None:
    assert span_days(date(2021, 4, 1), date(2021, 4, 3)) == 2
    assert span_days(date(2021, 4, 1), date(2024, 4, 1)) == 1096
    assert span_days(date(2021, 4, 3), date(2021, 4, 1)) == 0
    date_range = DateRange(start=date(2021, 4, 1), end=date(2021, 4, 3))
    assert date_range.span_days() == date_range.day_count() - 1


def test_date_range_days_covers_every_day_once() -> None:
    date_range = DateRange(start=date(2023, 12, 30), end=date(2024, 1, 2))
    days = list(date_range.days())
    assert days == [
        date(2023, 12, 30),
        date(2023, 12, 31),
        date(2024, 1, 1),
        date(2024, 1, 2),
    ]
    assert date_range.day_count() == len(days)
