# src/dirstamp/naming/identifier.py

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..logutil import get_logger

LOG = get_logger(__name__)

__all__ = [
	"IDENTIFIER_FORMAT",
	"Clock",
	"InvalidDateFormat",
	"current_timestamp",
	"format_identifier",
	"is_identifier",
	"parse_date",
]

# strftime equivalent of what format_identifier() writes
IDENTIFIER_FORMAT = "%Y%m%dT%H%M%S"

Clock = Callable[[], datetime]

_IDENTIFIER_RX = re.compile(r"[0-9]{8}T[0-9]{6}")
_DATE_RX = re.compile(
	r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
	r"(?: (?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})(?::(?P<second>[0-9]{2}))?)?"
)


class InvalidDateFormat(ValueError):
	"""Date text is not ``YYYY-MM-DD[ HH:MM[:SS]]`` or holds an out-of-range component."""


def _local(ts: datetime) -> datetime:
	"""Naive datetimes are local already; aware ones are converted to the local zone."""
	if ts.tzinfo is None:
		return ts
	return ts.astimezone().replace(tzinfo=None)


def current_timestamp(clock: Optional[Clock] = None) -> datetime:
	"""
	Return local "now" truncated to whole seconds.

	:param clock: Optional zero-argument callable returning a datetime (tests pin time with it).
	:return: Naive local datetime with ``microsecond == 0``.
	"""
	now = (clock or datetime.now)()
	return _local(now).replace(microsecond=0)


def format_identifier(ts: datetime) -> str:
	"""
	Format *ts* as ``YYYYMMDDTHHMMSS`` in local time.

	Every field is zero-padded, so string order equals chronological order.

	:param ts: Timestamp (naive = local time).
	:return: 15-character identifier.
	"""
	t = _local(ts)
	return (
		f"{t.year:04d}{t.month:02d}{t.day:02d}"
		f"T{t.hour:02d}{t.minute:02d}{t.second:02d}"
	)


def is_identifier(text: str) -> bool:
	"""Return True when *text* is exactly one identifier naming a real date/time."""
	if not _IDENTIFIER_RX.fullmatch(text or ""):
		return False
	try:
		datetime.strptime(text, IDENTIFIER_FORMAT)
	except ValueError:
		return False
	return True


def parse_date(text: str, *, clock: Optional[Clock] = None) -> datetime:
	"""
	Parse ``YYYY-MM-DD``, ``YYYY-MM-DD HH:MM`` or ``YYYY-MM-DD HH:MM:SS``.

	When the parsed seconds are ``00`` the current second-of-minute (from
	*clock*) is added. Two names made from the same minute-level date then
	rarely collide; it is not a guarantee.

	:param text: Date text; surrounding whitespace is ignored.
	:param clock: Optional "now" provider for the seconds offset.
	:return: Naive local datetime.
	:raises InvalidDateFormat: Unknown format or out-of-range component.
	"""
	raw = (text or "").strip()
	m = _DATE_RX.fullmatch(raw)
	if m is None:
		raise InvalidDateFormat(
			f"Invalid date {text!r}: expected YYYY-MM-DD, YYYY-MM-DD HH:MM or YYYY-MM-DD HH:MM:SS"
		)

	parts = {k: int(v) if v is not None else 0 for k, v in m.groupdict().items()}
	try:
		ts = datetime(**parts)
	except ValueError as exc:
		raise InvalidDateFormat(f"Invalid date {text!r}: {exc}") from exc

	if ts.second == 0:
		offset = current_timestamp(clock).second
		ts += timedelta(seconds=offset)
		LOG.debug("Added %d s to %s to avoid same-minute name clashes", offset, raw)
	return ts
