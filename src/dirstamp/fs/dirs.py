# src/dirstamp/fs/dirs.py

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..logutil import get_logger
from .base import PathOpsBase, PathLike

LOG = get_logger(__name__)

__all__ = ["Dirs"]


class Dirs(PathOpsBase):
	"""Directory resolution on top of :class:`~dirstamp.fs.base.PathOpsBase`."""

	def require_dir(self, p: Optional[PathLike] = None, *, create: bool = False, mode: int = 0o777) -> Path:
		"""
		Ensure *p* exists and is a directory; optionally create it (with parents).

		:param p: Directory path (absolute or relative). ``None`` means :attr:`base_dir`.
		:param create: If ``True`` and the directory does not exist, it is created
						recursively. Respects :attr:`dry_run`.
		:param mode: Permission bits for newly created directories (ignored on Windows).
		:return: Resolved absolute directory path.
		:raises NotADirectoryError: When the path exists and is not a directory.
		:raises FileNotFoundError: When the directory does not exist and ``create=False``.
		:raises PermissionError: When permission is denied while creating.
		:raises OSError: For other OS-level errors.
		"""
		target = self._abs(p) if p is not None else self.base_dir
		if target.exists():
			if not target.is_dir():
				msg = f"Path exists and is not a directory: {target}"
				LOG.error(msg)
				raise NotADirectoryError(msg)
			return target.resolve()

		if not create:
			msg = f"Directory not found: {target}"
			LOG.error(msg)
			raise FileNotFoundError(msg)

		if self.dry_run:
			LOG.info("[dry-run] mkdir -p %s", target)
			return target.resolve()

		try:
			target.mkdir(parents=True, exist_ok=True, mode=mode)
		except PermissionError:
			LOG.exception("Permission denied while creating directory: %s", target)
			raise
		except OSError as exc:
			LOG.exception("OS error while creating directory '%s': %s", target, exc)
			raise
		LOG.info("Created base directory: %s", target)
		return target.resolve()
