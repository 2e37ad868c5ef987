# src/dirstamp/maker.py

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from .config.settings import NamingConfig
from .fs.base import PathLike
from .fs.create import Create
from .fs.dirs import Dirs
from .logutil import get_logger
from .naming.identifier import Clock, current_timestamp, parse_date
from .naming.names import build_name

LOG = get_logger(__name__)

__all__ = ["NameRequest", "DirMaker"]


@dataclass(frozen=True)
class NameRequest:
	"""
	Everything one directory creation needs besides the configuration.

	:param title: Raw title; may be empty.
	:param keywords: Raw keywords in the order given.
	:param date: Optional date text (``YYYY-MM-DD[ HH:MM[:SS]]``).
	:param timestamp: Optional datetime; takes precedence over *date*.
	:param base_dir: Optional base directory overriding the configured one;
					 a relative path is taken relative to the working directory.
	"""
	title: str = ""
	keywords: Tuple[str, ...] = ()
	date: Optional[str] = None
	timestamp: Optional[datetime] = None
	base_dir: Optional[PathLike] = None

	def __post_init__(self) -> None:
		if isinstance(self.keywords, str):
			object.__setattr__(self, "keywords", (self.keywords,))
		else:
			object.__setattr__(self, "keywords", tuple(self.keywords))

	def with_title(self, title: str) -> "NameRequest":
		return dataclasses.replace(self, title=title)

	def with_keywords(self, *keywords: str) -> "NameRequest":
		"""Return a copy with *keywords* appended."""
		return dataclasses.replace(self, keywords=self.keywords + tuple(keywords))

	def with_date(self, date: str) -> "NameRequest":
		return dataclasses.replace(self, date=date, timestamp=None)

	def with_timestamp(self, timestamp: datetime) -> "NameRequest":
		return dataclasses.replace(self, timestamp=timestamp)

	def in_dir(self, base_dir: PathLike) -> "NameRequest":
		return dataclasses.replace(self, base_dir=base_dir)


class DirMaker(Dirs, Create):
	"""
	One-stop helper: build the name for a :class:`NameRequest` and create the directory.

	Examples
	--------
	>>> maker = DirMaker(NamingConfig(base_directory=Path("~/notes").expanduser()))
	>>> maker.make(NameRequest(title="My Cool Idea!", keywords=("3D Models", "wip")))  # doctest: +SKIP
	PosixPath('/home/me/notes/20220616T143000--my-cool-idea__3d-models_wip')
	"""

	def __init__(
			self,
			config: Optional[NamingConfig] = None,
			*,
			dry_run: bool = False,
			clock: Optional[Clock] = None,
	) -> None:
		self.config = config or NamingConfig()
		self.clock = clock
		Dirs.__init__(self, base_dir=self.config.base_directory, dry_run=dry_run)

	def __repr__(self) -> str:
		return f"DirMaker(base_dir={str(self.base_dir)!r}, dry_run={self.dry_run}, config={self.config!r})"

	def resolve_timestamp(self, request: NameRequest) -> datetime:
		"""
		Pick the timestamp: explicit datetime, else parsed date text, else now.

		:raises InvalidDateFormat: The date text does not parse.
		"""
		if request.timestamp is not None:
			return request.timestamp
		if request.date:
			return parse_date(request.date, clock=self.clock)
		return current_timestamp(self.clock)

	def name_for(self, request: NameRequest) -> str:
		"""Return the directory name for *request* without touching the disk."""
		return build_name(request.title, request.keywords, self.resolve_timestamp(request), self.config)

	def make(self, request: NameRequest) -> Path:
		"""
		Create the directory for *request* and return its absolute path.

		The base directory is created recursively when missing. The named
		directory itself must not exist yet; nothing is retried.

		:param request: What to create.
		:return: ``base_dir/name`` as an absolute path.
		:raises InvalidDateFormat: The date text does not parse.
		:raises FileExistsError: The target directory already exists.
		:raises NotADirectoryError: The base path exists but is not a directory.
		:raises PermissionError: When permission is denied.
		:raises OSError: For other OS-level errors.
		"""
		name = self.name_for(request)
		# a relative request base is relative to the caller's cwd, not to the configured base
		base = Path(request.base_dir).expanduser().resolve() if request.base_dir is not None else None
		parent = self.require_dir(base, create=True)
		LOG.debug("Name for %r: %s", request.title, name)
		return self.create_directory(name, parent=parent)
