# src/dirstamp/fs/base.py

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..logutil import get_logger

LOG = get_logger(__name__)

__all__ = ["PathLike", "PathOpsBase"]

PathLike = Union[str, Path]


class PathOpsBase:
	"""
	Shared state for filesystem operations.

	Keeps a *base* directory for resolving relative paths and a *dry-run* flag
	(log actions instead of touching the disk). :class:`~dirstamp.fs.dirs.Dirs`
	and :class:`~dirstamp.fs.create.Create` build on it.

	:param base_dir: Base directory used to resolve relative paths. Defaults to ``Path.cwd()``.
	:param dry_run: When True, operations that would modify the filesystem only log
					the intended action and return early.
	"""
	def __init__(
			self,
			base_dir: Optional[PathLike] = None,
			*,
			dry_run: bool = False,
	) -> None:
		self.base_dir = Path(base_dir).expanduser().resolve() if base_dir else Path.cwd()
		self.dry_run = bool(dry_run)

	@classmethod
	def at(cls, base: PathLike, *, dry_run: bool = False) -> "PathOpsBase":
		"""
		Create an instance rooted at a given base directory.

		:param base: Base directory to anchor relative paths.
		:param dry_run: If True, do not modify the filesystem (log-only).
		:return: A new instance with ``base_dir = base``.
		"""
		return cls(base_dir=Path(base), dry_run=dry_run)

	# --- Path utilities ---
	def _abs(self, p: PathLike) -> Path:
		"""
		Resolve *p* relative to :attr:`base_dir` if it's not absolute.

		:param p: Absolute or relative file system path.
		:return: Absolute path.
		"""
		pth = Path(p).expanduser()
		return pth if pth.is_absolute() else (self.base_dir / pth)

	# --- Dunder helpers ---
	def __str__(self) -> str:
		return f"{self.__class__.__name__}[base={self.base_dir}, dry_run={self.dry_run}]"

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(base_dir={str(self.base_dir)!r}, dry_run={self.dry_run!r})"
