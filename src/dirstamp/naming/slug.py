# src/dirstamp/naming/slug.py

"""
Text to filename-safe slug.

The slug is produced by a fixed chain of small passes, each usable on its own:

	strip_excluded -> lower -> keep_allowed -> hyphenate -> collapse_hyphens -> trim_hyphens

The result only contains lowercase alphanumerics separated by single hyphens.
"""

from __future__ import annotations

import re
from typing import Optional, Union

__all__ = [
	"EXCLUDED_PUNCTUATION",
	"compile_extra_pattern",
	"strip_excluded",
	"keep_allowed",
	"hyphenate",
	"collapse_hyphens",
	"trim_hyphens",
	"slugify",
]

# brackets, braces and the usual punctuation, typographic quotes included
EXCLUDED_PUNCTUATION = "[]{}!@#$%^&*()=+'\"?,.|;:~`’“”/"

_EXCLUDED_TABLE = str.maketrans("", "", EXCLUDED_PUNCTUATION)
_SEPARATOR_RX = re.compile(r"[_\s]+")
_HYPHENS_RX = re.compile(r"-{2,}")

ExtraPattern = Union[str, "re.Pattern[str]", None]


def compile_extra_pattern(pattern: ExtraPattern) -> Optional["re.Pattern[str]"]:
	"""
	Compile a user supplied pattern of additional characters to strip.

	:param pattern: Regular expression (text or compiled) or ``None``.
	:return: Compiled pattern, or ``None`` for an empty/missing pattern.
	:raises ValueError: The pattern is not a valid regular expression.
	"""
	if pattern is None or pattern == "":
		return None
	if isinstance(pattern, re.Pattern):
		return pattern
	try:
		return re.compile(pattern)
	except re.error as exc:
		raise ValueError(f"Invalid excluded-characters pattern {pattern!r}: {exc}") from exc


def strip_excluded(text: str, extra_pattern: ExtraPattern = None) -> str:
	"""
	Remove the default excluded punctuation and whatever *extra_pattern* matches.

	:param text: Input text.
	:param extra_pattern: Optional additional regular expression to delete.
	:return: Text without the excluded characters.
	"""
	out = text.translate(_EXCLUDED_TABLE)
	extra = compile_extra_pattern(extra_pattern)
	if extra is not None:
		out = extra.sub("", out)
	return out


def keep_allowed(text: str) -> str:
	"""Drop every character that is not alphanumeric, ``-``, ``_`` or whitespace."""
	return "".join(ch for ch in text if ch.isalnum() or ch in "-_" or ch.isspace())


def hyphenate(text: str) -> str:
	"""Replace each run of underscores/whitespace with a single hyphen."""
	return _SEPARATOR_RX.sub("-", text)


def collapse_hyphens(text: str) -> str:
	"""Collapse ``--``, ``---`` ... into ``-``."""
	return _HYPHENS_RX.sub("-", text)


def trim_hyphens(text: str) -> str:
	"""Strip a leading and a trailing hyphen."""
	return text.strip("-")


def slugify(text: str, *, allow_multi_word: bool = True, extra_pattern: ExtraPattern = None) -> str:
	"""
	Turn arbitrary *text* into a slug.

	>>> slugify("My Cool Idea!")
	'my-cool-idea'
	>>> slugify("3D Models", allow_multi_word=False)
	'3dmodels'

	:param text: Input text (empty is fine and yields ``""``).
	:param allow_multi_word: When False, the hyphens between words are removed as well.
	:param extra_pattern: Additional characters to strip (regular expression).
	:return: Lowercase slug without leading/trailing hyphen; may be empty.
	:raises ValueError: *extra_pattern* does not compile.
	"""
	if not text:
		return ""

	# lowered before filtering: some characters lower into non-alphanumerics
	out = strip_excluded(text, extra_pattern).lower()
	out = keep_allowed(out)
	out = trim_hyphens(collapse_hyphens(hyphenate(out)))
	if not allow_multi_word:
		out = out.replace("-", "")
	return out
