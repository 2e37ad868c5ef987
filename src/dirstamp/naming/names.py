# src/dirstamp/naming/names.py

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, TYPE_CHECKING

from .identifier import format_identifier
from .keywords import normalize_keywords
from .slug import slugify

if TYPE_CHECKING:
	from ..config.settings import NamingConfig

__all__ = ["TITLE_SEPARATOR", "KEYWORD_SEPARATOR", "assemble_name", "build_name"]

TITLE_SEPARATOR = "--"
KEYWORD_SEPARATOR = "__"


def assemble_name(identifier: str, title_slug: str = "", keyword_field: str = "") -> str:
	"""
	Join the name pieces: ``IDENTIFIER[--title-slug][__keyword_field]``.

	Inputs are trusted to be slugified already; nothing is validated here.

	:param identifier: Timestamp identifier (``YYYYMMDDTHHMMSS``).
	:param title_slug: Slugified title; omitted together with ``--`` when empty.
	:param keyword_field: Joined keyword slugs; omitted together with ``__`` when empty.
	:return: Final name.
	"""
	name = identifier
	if title_slug:
		name += f"{TITLE_SEPARATOR}{title_slug}"
	if keyword_field:
		name += f"{KEYWORD_SEPARATOR}{keyword_field}"
	return name


def build_name(
		title: str,
		keywords: Iterable[str],
		timestamp: datetime,
		config: Optional["NamingConfig"] = None
) -> str:
	"""
	Run the whole naming pipeline for one directory.

	:param title: Raw title (may be empty).
	:param keywords: Raw keywords (may be empty).
	:param timestamp: Creation time used for the identifier.
	:param config: Naming options; defaults to :class:`~dirstamp.config.settings.NamingConfig()`.
	:return: Final name.
	"""
	if config is None:
		from ..config.settings import NamingConfig
		config = NamingConfig()

	title_slug = slugify(title, extra_pattern=config.extra_excluded_pattern)
	keyword_field = normalize_keywords(
		keywords,
		allow_multi_word=config.allow_multi_word_keywords,
		sort=config.sort_keywords,
		extra_pattern=config.extra_excluded_pattern
	)
	return assemble_name(format_identifier(timestamp), title_slug, keyword_field)
