import pytest

from betbot.datetimes import DateAndTime
from betbot.errors import InvalidDateFormatError


def test_constructor_valid():
    date = DateAndTime("1995-01-10 18:00")
    assert (date.year, date.month, date.day, date.hour, date.minute) == (1995, 1, 10, 18, 0)


@pytest.mark.parametrize(
    "text",
    ["1995-01-a 18:00", "1995-01 18:00", "1995/01/10 18:00", "1995-01-10 18/00"],
)
def test_constructor_invalid(text):
    with pytest.raises(InvalidDateFormatError) as info:
        DateAndTime(text)
    assert info.value.date == text


def test_out_of_range_month_is_rejected():
    with pytest.raises(InvalidDateFormatError):
        DateAndTime("1995-13-10 18:00")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1995-01-10 18:00", "1995-01-10 18:00"),
        ("1995-01-10 18:00:00", "1995-01-10 18:00"),
        ("2028-01-01 18:00", "2028-01-01 18:00"),
    ],
)
def test_str(text, expected):
    assert str(DateAndTime(text)) == expected


def test_is_in_future():
    assert DateAndTime("1995-01-10 18:00").is_in_future() is False
    assert DateAndTime("2100-01-10 18:00").is_in_future() is True


def test_equal_dates_compare_equal():
    assert DateAndTime("2100-01-31 18:00") == DateAndTime("2100-01-31 18:00:00")
    assert DateAndTime("2100-01-31 18:00") != DateAndTime("2100-01-31 19:00")


def test_round_trip_through_str():
    date = DateAndTime("2028-01-01 18:00")
    assert DateAndTime(str(date)) == date