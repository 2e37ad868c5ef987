# src/dirstamp/naming/keywords.py

from __future__ import annotations

from typing import Iterable, List, Union

from .slug import ExtraPattern, slugify

__all__ = ["KEYWORD_JOINER", "dedupe", "keyword_slugs", "normalize_keywords"]

KEYWORD_JOINER = "_"


def dedupe(items: Iterable[str]) -> List[str]:
	"""Drop repeated items, keeping the first occurrence order."""
	seen = set()
	out: List[str] = []
	for item in items:
		if item in seen:
			continue
		seen.add(item)
		out.append(item)
	return out


def keyword_slugs(
		raw: Union[str, Iterable[str]],
		*,
		allow_multi_word: bool = True,
		sort: bool = True,
		extra_pattern: ExtraPattern = None
) -> List[str]:
	"""
	Slugify raw keywords into the ordered list used for the keyword field.

	Exact duplicates are removed before slugification. Keywords that slugify
	to an empty string are dropped. Distinct raw keywords that slugify to the
	same slug (``"3D Models"`` vs ``"3d models"``, ``"A"`` vs ``"a"``) are also
	merged, keeping the first; this is stricter than exact-string dedupe and
	keeps the keyword field free of repeated slugs.

	:param raw: Keywords; a single string counts as one keyword.
	:param allow_multi_word: Keep hyphens between words (``3d-models``) or join them (``3dmodels``).
	:param sort: Sort slugs in ascending codepoint order; otherwise keep input order.
	:param extra_pattern: Additional characters to strip (regular expression).
	:return: List of non-empty, unique keyword slugs.
	"""
	if isinstance(raw, str):
		raw = [raw]

	slugs = [
		slugify(word, allow_multi_word=allow_multi_word, extra_pattern=extra_pattern)
		for word in dedupe(raw)
	]
	slugs = dedupe(s for s in slugs if s)
	if sort:
		slugs.sort()
	return [s.lower() for s in slugs]


def normalize_keywords(
		raw: Union[str, Iterable[str]],
		*,
		allow_multi_word: bool = True,
		sort: bool = True,
		extra_pattern: ExtraPattern = None
) -> str:
	"""
	Build the keyword field: keyword slugs joined with ``_``.

	>>> normalize_keywords(["wip", "3D Models"])
	'3d-models_wip'

	:return: Joined field, or ``""`` when no keyword survives.
	"""
	return KEYWORD_JOINER.join(keyword_slugs(
		raw,
		allow_multi_word=allow_multi_word,
		sort=sort,
		extra_pattern=extra_pattern
	))
