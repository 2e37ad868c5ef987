# src/dirstamp/fs/create.py

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..logutil import get_logger
from .base import PathOpsBase, PathLike

LOG = get_logger(__name__)

__all__ = ["Create"]

_RESERVED_NAMES = {"", ".", ".."}


class Create(PathOpsBase):
	"""
	Creation of the named directory.
	Expects `PathOpsBase` fields+helpers: base_dir, dry_run, _abs(...).
	"""

	@staticmethod
	def check_name(name: str) -> str:
		"""
		Make sure *name* is one path component.

		:param name: Directory name.
		:return: The unchanged name.
		:raises ValueError: Empty, ``.``/``..`` or containing a path separator.
		"""
		if name in _RESERVED_NAMES or "/" in name or "\\" in name or "\0" in name:
			raise ValueError(f"Not a valid directory name: {name!r}")
		return name

	def create_directory(
			self,
			name: str,
			*,
			parent: Optional[PathLike] = None,
			mode: int = 0o777,
	) -> Path:
		"""
		Create exactly one new directory ``parent/name``.

		The parent must already exist; only the last component is created, in a
		single ``mkdir`` call, so a failure leaves nothing behind. There is no
		retry: an existing target is an error.

		:param name: Directory name (one path component).
		:param parent: Parent directory (absolute or relative to ``base_dir``);
						defaults to :attr:`base_dir`.
		:param mode: Permission bits for the new directory (ignored on Windows).
		:return: Resolved absolute path to the new directory.
		:raises ValueError: *name* is not a single path component.
		:raises FileExistsError: Something already exists at the target path.
		:raises FileNotFoundError: The parent directory does not exist.
		:raises PermissionError: When permission is denied.
		:raises OSError: For other OS-level errors.
		"""
		self.check_name(name)
		root = self._abs(parent) if parent is not None else self.base_dir
		target = root / name

		if target.exists() or target.is_symlink():
			msg = f"Directory already exists: {target}"
			LOG.error(msg)
			raise FileExistsError(msg)

		if self.dry_run:
			LOG.info("[dry-run] mkdir %s", target)
			return target.resolve()

		try:
			target.mkdir(mode=mode, parents=False, exist_ok=False)
		except FileExistsError:
			LOG.error("Directory already exists: %s", target)
			raise
		except FileNotFoundError:
			LOG.error("Parent directory does not exist: %s", root)
			raise
		except PermissionError:
			LOG.exception("Permission denied while creating directory: %s", target)
			raise
		except OSError as exc:
			LOG.exception("OS error while creating directory '%s': %s", target, exc)
			raise

		LOG.info("Created directory: %s", target)
		return target.resolve()
