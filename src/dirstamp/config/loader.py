from __future__ import annotations

import ast
import json
import logging
import os
import configparser

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, MutableMapping, Optional, Tuple, Union

LOG = logging.getLogger(__name__)

PathLike = Union[str, Path]
ConfigData = Dict[str, Dict[str, Any]]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------
class ConfigError(Exception):
	"""Configuration could not be read, parsed or validated."""


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------
def split_csv(text: str, delimiters: str = ",") -> List[str]:
	"""
	Split *text* on single-character *delimiters*, respecting quotes and escapes.

	Supports both single and double quotes and the backslash escape inside quoted parts.

	:param text: Input string to split.
	:param delimiters: String of delimiter characters.
	:return: List of tokens (untrimmed).
	"""
	delims = set(delimiters)
	out: List[str] = []
	buf: List[str] = []
	quote: Optional[str] = None
	i = 0
	while i < len(text):
		ch = text[i]
		if quote:
			if ch == "\\" and i + 1 < len(text):
				buf.append(text[i + 1])
				i += 2
				continue
			if ch == quote:
				quote = None
			else:
				buf.append(ch)
		elif ch in {"'", '"'}:
			quote = ch
		elif ch in delims:
			out.append("".join(buf))
			buf.clear()
		else:
			buf.append(ch)
		i += 1
	out.append("".join(buf))
	return out


def parse_value(raw: Any, *, csv_delimiters: Optional[str] = None) -> Any:
	"""
	Parse a raw INI/env string into a typed Python value.

	Non-string values (from JSON) are returned unchanged. For strings the parser tries:
	  1) ``ast.literal_eval`` for Python literals (numbers, quoted strings, lists, True/False/None).
	  2) None markers: ``none``, ``null``.
	  3) Booleans: ``true/yes/on/1`` → ``True``, ``false/no/off/0`` → ``False``.
	  4) CSV-like splitting **only if** ``csv_delimiters`` is given and present in the text.
	  5) Otherwise the stripped string.

	:param raw: Source value.
	:param csv_delimiters: Optional single-char delimiters enabling list splitting.
	:return: Best-effort typed value.
	"""
	if not isinstance(raw, str):
		return raw
	s = raw.strip()

	try:
		value = ast.literal_eval(s)
		if isinstance(value, tuple):
			return list(value)
		if isinstance(value, (list, str, bool, type(None))):
			return value
	except (ValueError, SyntaxError, MemoryError, RecursionError):
		pass

	lower = s.lower()
	if lower in {"none", "null"}:
		return None
	if lower in {"true", "yes", "on", "1"}:
		return True
	if lower in {"false", "no", "off", "0"}:
		return False

	if csv_delimiters and any(d in s for d in csv_delimiters):
		return [p.strip() for p in split_csv(s, csv_delimiters)]

	return s


# ---------------------------------------------------------------------------
# Merging
# ---------------------------------------------------------------------------
def merge_layer(base: MutableMapping[str, Dict[str, Any]], layer: Mapping[str, Mapping[str, Any]]) -> None:
	"""
	Deep-merge *layer* into *base* at the section/key level (right wins).

	:param base: Destination mapping (modified in place).
	:param layer: Source mapping to overlay.
	:raises ConfigError: A section of *layer* is not a mapping.
	"""
	for sec, mapping in layer.items():
		if not isinstance(mapping, Mapping):
			raise ConfigError(f"Section '{sec}' must be a mapping, got {type(mapping).__name__}.")
		dest = base.setdefault(str(sec).lower(), {})
		for k, v in mapping.items():
			dest[str(k).lower()] = v


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------
def load_ini_file(path: PathLike) -> ConfigData:
	"""
	Read one INI file into ``section -> key -> raw string``.

	Interpolation is off: regular expressions in values keep their ``$`` and ``%``.

	:param path: INI file path.
	:return: Lowercased sections and keys with unparsed string values.
	:raises ConfigError: On missing file, IO or syntax errors.
	"""
	p = Path(path)
	if not p.is_file():
		raise ConfigError(f"Missing config file: {p}")

	cp = configparser.ConfigParser(interpolation=None)
	try:
		with p.open("r", encoding="utf-8") as fh:
			cp.read_file(fh)
	except (OSError, configparser.Error, UnicodeDecodeError) as exc:
		raise ConfigError(f"Failed reading '{p}': {exc}") from exc

	LOG.info("Loaded INI file: %s", p)
	return {sec.lower(): {k.lower(): v for k, v in cp.items(sec)} for sec in cp.sections()}


def load_json_file(path: PathLike) -> ConfigData:
	"""
	Read one JSON file shaped ``{ "section": { "key": value } }``.

	:param path: JSON file path.
	:return: Lowercased sections and keys with JSON-typed values.
	:raises ConfigError: On missing file, IO/parse errors or an invalid shape.
	"""
	p = Path(path)
	if not p.is_file():
		raise ConfigError(f"Missing JSON config file: {p}")
	try:
		with p.open("r", encoding="utf-8") as fh:
			obj = json.load(fh)
	except (OSError, ValueError) as exc:
		raise ConfigError(f"Failed reading JSON '{p}': {exc}") from exc

	if not isinstance(obj, dict):
		raise ConfigError(f"Top-level JSON in '{p}' must be an object.")

	out: ConfigData = {}
	for sec, mapping in obj.items():
		if not isinstance(mapping, dict):
			raise ConfigError(f"Section '{sec}' in '{p}' must be an object.")
		out[sec.lower()] = {str(k).lower(): v for k, v in mapping.items()}
	LOG.info("Loaded JSON file: %s", p)
	return out


def load_config_files(files: Iterable[PathLike]) -> Tuple[ConfigData, List[Path]]:
	"""
	Load INI and JSON files (by suffix) and merge them; later files win.

	:param files: Config file paths (``.json`` is JSON, anything else INI).
	:return: (merged data, loaded paths)
	:raises ConfigError: On any unreadable file.
	"""
	merged: ConfigData = {}
	loaded: List[Path] = []
	for path_like in files:
		p = Path(path_like).expanduser()
		layer = load_json_file(p) if p.suffix.lower() == ".json" else load_ini_file(p)
		merge_layer(merged, layer)
		loaded.append(p)
	return merged, loaded


# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------
def env_overrides(prefix: str, environ: Optional[Mapping[str, str]] = None) -> ConfigData:
	"""
	Collect overrides from environment variables ``<PREFIX>__<SECTION>__<KEY>=VALUE``.

	Section and key are case-insensitive; values stay raw strings.

	:param prefix: Variable prefix (e.g. ``"DIRSTAMP"``).
	:param environ: Mapping to read instead of :data:`os.environ`.
	:return: Override layer.
	"""
	env = os.environ if environ is None else environ
	head = f"{prefix}__"
	out: ConfigData = {}
	for env_key, raw_value in env.items():
		if not env_key.startswith(head):
			continue
		try:
			section_name, key_name = env_key[len(head):].split("__", 1)
		except ValueError:
			LOG.warning("Ignoring malformed env var override '%s' (expected PREFIX__SECTION__KEY)", env_key)
			continue
		out.setdefault(section_name.lower(), {})[key_name.lower()] = raw_value
		LOG.debug("env override: %s.%s=%r", section_name.lower(), key_name.lower(), raw_value)
	return out


def parse_overrides(items: Iterable[str], *, section: str) -> ConfigData:
	"""
	Turn CLI-style ``key=value`` items into an override layer for *section*.

	Only the first ``=`` separates; ``section.key=value`` is accepted as well.

	:param items: Override strings.
	:param section: Section used when the key has no ``section.`` prefix.
	:return: Override layer.
	:raises ConfigError: An item has no ``=`` or an empty key.
	"""
	out: ConfigData = {}
	for item in items:
		key, sep, value = item.partition("=")
		key = key.strip()
		if not sep or not key:
			raise ConfigError(f"Invalid override {item!r}; expected key=value")
		sec, dot, name = key.rpartition(".")
		out.setdefault((sec if dot else section).lower(), {})[name.lower()] = value
	return out


__all__ = [
	"ConfigData",
	"ConfigError",
	"split_csv",
	"parse_value",
	"merge_layer",
	"load_ini_file",
	"load_json_file",
	"load_config_files",
	"env_overrides",
	"parse_overrides",
]
