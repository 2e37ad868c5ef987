# tests/test_identifier.py

from datetime import datetime, timedelta, timezone

import pytest

from dirstamp.naming.identifier import (
	InvalidDateFormat,
	current_timestamp,
	format_identifier,
	is_identifier,
	parse_date,
)


def clock_at(second, minute=20):
	return lambda: datetime(2030, 1, 1, 10, minute, second, 500_000)


def test_format_identifier():
	assert format_identifier(datetime(2022, 6, 16, 14, 30, 0)) == "20220616T143000"


def test_format_identifier_pads_small_years():
	assert format_identifier(datetime(999, 1, 2, 3, 4, 5)) == "09990102T030405"


def test_identifier_order_follows_time_order():
	start = datetime(1999, 12, 31, 23, 59, 58)
	steps = [timedelta(seconds=1), timedelta(minutes=7), timedelta(days=40), timedelta(days=3650)]
	stamps = [start]
	for step in steps:
		stamps.append(stamps[-1] + step)
	idents = [format_identifier(ts) for ts in stamps]
	assert idents == sorted(idents)
	assert len(set(idents)) == len(idents)


def test_aware_timestamp_is_formatted_in_local_time():
	ts = datetime(2022, 6, 16, 12, 0, 0, tzinfo=timezone.utc)
	assert format_identifier(ts) == ts.astimezone().strftime("%Y%m%dT%H%M%S")


def test_current_timestamp_drops_microseconds():
	assert current_timestamp(clock_at(7)) == datetime(2030, 1, 1, 10, 20, 7)


def test_parse_date_adds_current_seconds():
	# date without time: seconds are 00, so the clock's second is added
	assert parse_date("2022-06-16", clock=clock_at(7)) == datetime(2022, 6, 16, 0, 0, 7)


def test_parse_date_with_minutes():
	assert parse_date("2022-06-16 14:30", clock=clock_at(42)) == datetime(2022, 6, 16, 14, 30, 42)


def test_parse_date_explicit_seconds_kept():
	assert parse_date("2022-06-16 14:30:15", clock=clock_at(42)) == datetime(2022, 6, 16, 14, 30, 15)


def test_parse_date_explicit_zero_seconds_get_offset():
	assert parse_date("2022-06-16 14:30:00", clock=clock_at(9)) == datetime(2022, 6, 16, 14, 30, 9)


def test_parse_date_at_second_zero_stays_zero():
	assert parse_date("2022-06-16 14:30", clock=clock_at(0)) == datetime(2022, 6, 16, 14, 30, 0)


def test_parse_date_ignores_surrounding_whitespace():
	assert parse_date("  2022-06-16 14:30:15 ") == datetime(2022, 6, 16, 14, 30, 15)


@pytest.mark.parametrize(
	"text",
	[
		"",
		"2022-13-01",
		"2022-02-30",
		"2022-06-16 25:00",
		"2022-06-16 14:60",
		"16/06/2022",
		"2022-6-16",
		"2022-06-16T14:30",
		"2022-06-16 14",
		"yesterday",
	],
)
def test_parse_date_rejects(text):
	with pytest.raises(InvalidDateFormat):
		parse_date(text, clock=clock_at(1))


def test_invalid_date_format_is_a_value_error():
	assert issubclass(InvalidDateFormat, ValueError)


@pytest.mark.parametrize(
	"text, expected",
	[
		("20220616T143000", True),
		("20221316T143000", False),
		("20220616t143000", False),
		("20220616T1430", False),
		("", False),
	],
)
def test_is_identifier(text, expected):
	assert is_identifier(text) is expected
