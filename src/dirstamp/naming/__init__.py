# src/dirstamp/naming/__init__.py

"""
Name construction: slugs, keyword fields, timestamp identifiers and the final name.

    from dirstamp.naming import build_name, slugify, format_identifier
"""

from importlib import import_module
from typing import TYPE_CHECKING

# Map: public name -> "module_path:attr_name"
_MAP = {
	"slugify":            "dirstamp.naming.slug:slugify",
	"EXCLUDED_PUNCTUATION": "dirstamp.naming.slug:EXCLUDED_PUNCTUATION",
	"normalize_keywords": "dirstamp.naming.keywords:normalize_keywords",
	"keyword_slugs":      "dirstamp.naming.keywords:keyword_slugs",
	"format_identifier":  "dirstamp.naming.identifier:format_identifier",
	"parse_date":         "dirstamp.naming.identifier:parse_date",
	"current_timestamp":  "dirstamp.naming.identifier:current_timestamp",
	"is_identifier":      "dirstamp.naming.identifier:is_identifier",
	"InvalidDateFormat":  "dirstamp.naming.identifier:InvalidDateFormat",
	"assemble_name":      "dirstamp.naming.names:assemble_name",
	"build_name":         "dirstamp.naming.names:build_name",
}

__all__ = list(_MAP.keys())


def __getattr__(name: str):
	try:
		spec = _MAP[name]
	except KeyError as exc:
		raise AttributeError(f"module 'dirstamp.naming' has no attribute {name!r}") from exc

	mod_path, _, attr = spec.partition(":")
	return getattr(import_module(mod_path), attr)


if TYPE_CHECKING:
	from .slug import slugify, EXCLUDED_PUNCTUATION  # noqa: F401
	from .keywords import normalize_keywords, keyword_slugs  # noqa: F401
	from .identifier import (  # noqa: F401
		format_identifier, parse_date, current_timestamp, is_identifier, InvalidDateFormat,
	)
	from .names import assemble_name, build_name  # noqa: F401
