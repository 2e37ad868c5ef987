from __future__ import annotations

import ast
import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from . import loader, schema, store
from ..naming.slug import compile_extra_pattern

LOG = logging.getLogger(__name__)
PathLike = Union[str, Path]

SECTION = "dirstamp"
ENV_PREFIX = "DIRSTAMP"


@dataclass(frozen=True)
class NamingConfig:
	"""
	Options read once per invocation and passed explicitly through the pipeline.

	:param allow_multi_word_keywords: Keep hyphens inside keyword slugs; when False they are removed.
	:param sort_keywords: Sort keyword slugs before joining them.
	:param extra_excluded_pattern: Regular expression of extra characters stripped before slugifying.
	:param known_keywords: Candidate keywords for front ends offering completion.
	:param base_directory: Directory under which new directories are created.
	"""
	allow_multi_word_keywords: bool = True
	sort_keywords: bool = True
	extra_excluded_pattern: Optional[str] = None
	known_keywords: Tuple[str, ...] = ()
	base_directory: Path = field(default_factory=Path.cwd)

	def replace(self, **changes: Any) -> "NamingConfig":
		"""Return a copy with *changes* applied."""
		return dataclasses.replace(self, **changes)


# --- coercion of raw (INI/env/CLI) values ---
def _as_bool(value: Any) -> Any:
	return loader.parse_value(value)


def _as_pattern(value: Any) -> Any:
	if isinstance(value, str):
		return value or None
	return value


def _as_keywords(value: Any) -> Any:
	# keywords stay text: "yes", "1" or "none" are keywords, not booleans
	if isinstance(value, str):
		text = value.strip()
		if text.startswith("[") and text.endswith("]"):
			try:
				value = ast.literal_eval(text)
			except (ValueError, SyntaxError) as exc:
				raise ValueError(f"malformed keyword list {text!r}") from exc
		else:
			return tuple(p.strip() for p in loader.split_csv(text) if p.strip())
	if isinstance(value, list):
		return tuple(value)
	return value


def _as_path(value: Any) -> Any:
	if isinstance(value, str):
		if not value.strip():
			raise ValueError("empty path")
		return Path(value.strip()).expanduser()
	return value


def _check_pattern(value: Optional[str]) -> None:
	compile_extra_pattern(value)


def _check_keywords(value: Tuple[Any, ...]) -> None:
	bad = [v for v in value if not isinstance(v, str)]
	if bad:
		raise ValueError(f"keywords must be strings, got {bad!r}")


SCHEMA: Dict[str, schema.KeySpec] = {
	"allow_multi_word_keywords": schema.KeySpec(bool, coerce=_as_bool),
	"sort_keywords": schema.KeySpec(bool, coerce=_as_bool),
	"extra_excluded_pattern": schema.KeySpec(
		(str, type(None)), coerce=_as_pattern, validator=_check_pattern
	),
	"known_keywords": schema.KeySpec(tuple, coerce=_as_keywords, validator=_check_keywords),
	"base_directory": schema.KeySpec(Path, coerce=_as_path),
}


class SettingsLoader:
	"""
	Layered configuration: defaults < files < environment < explicit overrides.

	Typical flow:
		cfg = SettingsLoader().load_default().load_files(["job.ini"]).apply_env().build()
	"""
	def __init__(self, *, section: str = SECTION, env_prefix: str = ENV_PREFIX) -> None:
		self.section = section.lower()
		self.env_prefix = env_prefix
		self._data: loader.ConfigData = {}
		self.sources: list[str] = []

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(section={self.section!r}, sources={self.sources})"

	# --- layers ---
	def load_default(self, *, environ: Optional[Mapping[str, str]] = None) -> "SettingsLoader":
		"""
		Load the user config file (or ``$DIRSTAMP_CONFIG``) when it exists.

		:param environ: Mapping to read instead of :data:`os.environ`.
		:return: self.
		"""
		path = store.resolve_config_path(environ=environ)
		if path.is_file():
			return self.load_files([path])
		LOG.debug("No default config at %s", path)
		return self

	def load_files(self, files: Iterable[PathLike]) -> "SettingsLoader":
		"""
		Merge INI/JSON files (later override earlier).

		:param files: Config file paths.
		:return: self.
		:raises ConfigError: On missing or unreadable files.
		"""
		data, loaded = loader.load_config_files(files)
		loader.merge_layer(self._data, data)
		self.sources.extend(str(p) for p in loaded)
		return self

	def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> "SettingsLoader":
		"""
		Merge ``DIRSTAMP__<SECTION>__<KEY>`` environment overrides.

		:param environ: Mapping to read instead of :data:`os.environ`.
		:return: self.
		"""
		layer = loader.env_overrides(self.env_prefix, environ)
		if layer:
			loader.merge_layer(self._data, layer)
			self.sources.append("env")
		return self

	def apply_overrides(self, overrides: Iterable[str]) -> "SettingsLoader":
		"""
		Merge CLI-style ``key=value`` overrides.

		:param overrides: Override strings.
		:return: self.
		:raises ConfigError: On a malformed item.
		"""
		layer = loader.parse_overrides(overrides, section=self.section)
		if layer:
			loader.merge_layer(self._data, layer)
			self.sources.append("overrides")
		return self

	def set(self, **values: Any) -> "SettingsLoader":
		"""Merge already-typed values (``None`` values are skipped)."""
		layer = {k: v for k, v in values.items() if v is not None}
		if layer:
			loader.merge_layer(self._data, {self.section: layer})
		return self

	# --- result ---
	def build(self) -> NamingConfig:
		"""
		Validate the merged section and freeze it into a :class:`NamingConfig`.

		:return: Immutable configuration value.
		:raises ConfigError: On any validation problem (all problems are reported together).
		"""
		values = dict(self._data.get(self.section, {}))
		unknown = sorted(set(values) - set(SCHEMA))
		if unknown:
			LOG.warning("Ignoring unknown config key(s) in [%s]: %s", self.section, ", ".join(unknown))

		typed = schema.validate_section(self.section, values, SCHEMA)
		if "base_directory" in typed:
			typed["base_directory"] = typed["base_directory"].expanduser()
		config = NamingConfig(**typed)
		LOG.debug("Configuration from %s: %r", self.sources or ["defaults"], config)
		return config


def load_naming_config(
		files: Iterable[PathLike] = (),
		*,
		overrides: Iterable[str] = (),
		use_default: bool = True,
		environ: Optional[Mapping[str, str]] = None,
) -> NamingConfig:
	"""
	Convenience wrapper building a :class:`NamingConfig` from every source.

	:param files: Extra config files, applied after the default one.
	:param overrides: ``key=value`` overrides, applied last.
	:param use_default: Read the user config file when it exists.
	:param environ: Mapping to read instead of :data:`os.environ`.
	:return: Immutable configuration value.
	:raises ConfigError: On unreadable files or invalid values.
	"""
	settings = SettingsLoader()
	if use_default:
		settings.load_default(environ=environ)
	return settings.load_files(files).apply_env(environ).apply_overrides(overrides).build()


__all__ = ["SECTION", "ENV_PREFIX", "NamingConfig", "SCHEMA", "SettingsLoader", "load_naming_config"]
