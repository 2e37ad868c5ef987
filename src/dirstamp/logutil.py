# src/dirstamp/logutil.py

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal, Optional, Union

PathLike = Union[str, Path]

ConsoleLevelName = Literal[
	"CRITICAL",
	"ERROR",
	"WARNING",
	"INFO",
	"DEBUG",
]

LevelLike = Union[int, str]

ROOT_LOGGER = "dirstamp"


def normalize_level(value: LevelLike, *, param_name: str = "level") -> int:
	"""
	Turn a level name (``"info"``, ``"DEBUG"``) or number into a logging level.

	:param value: Level name or numeric level.
	:param param_name: Parameter name used in the error message.
	:return: Numeric logging level.
	:raises ValueError: Unknown level name.
	"""
	if isinstance(value, int):
		return value

	resolved = logging.getLevelName(str(value).upper())
	if isinstance(resolved, int):
		return resolved

	raise ValueError(f"Unknown logging level name for {param_name}: {value}")


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
	"""
	Return a package logger.

	Only the package root logger gets a console handler (once); module loggers
	(``dirstamp.fs.create`` ...) propagate to it.

	:param name: Logger name.
	:return: The logger.
	"""
	if name.startswith(f"{ROOT_LOGGER}."):
		get_logger(ROOT_LOGGER)

	log = logging.getLogger(name)
	if name == ROOT_LOGGER and not log.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
		log.addHandler(handler)
		log.setLevel(logging.WARNING)
		log.propagate = False
	return log


def configure_logging(
		*,
		name: str = ROOT_LOGGER,
		console_level: LevelLike = "WARNING",
		file_path: Optional[PathLike] = None,
		file_level: Optional[LevelLike] = None,
		mode: str = "a",
		rotate: bool = False,
		max_bytes: int = 1_000_000,
		backup_count: int = 3,
		formatter: Optional[logging.Formatter] = None,
		propagate: bool = False
) -> logging.Logger:
	"""
	Configure the shared dirstamp logger.

	:param name: Logger name.
	:param console_level: Console handler level.
	:param file_path: Optional log file path to add a file handler.
	:param file_level: File handler level (defaults to the console level).
	:param mode: 'w' for overwriting or 'a' for appending.
	:param rotate: Use RotatingFileHandler when True.
	:param max_bytes: Rotation threshold per file.
	:param backup_count: Number of rotated backups.
	:param formatter: Custom formatter for the file handler; default includes timestamp.
	:param propagate: Whether to propagate to parent loggers.
	:return: The configured logger.
	"""
	console_level_value = normalize_level(console_level, param_name="console_level")
	file_level_value = (
		normalize_level(file_level, param_name="file_level")
		if file_level is not None
		else console_level_value
	)

	log = get_logger(name)
	log.setLevel(min(console_level_value, file_level_value) if file_path else console_level_value)
	log.propagate = propagate

	has_stream = False
	for handler in log.handlers:
		if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
			handler.setLevel(console_level_value)
			has_stream = True
	if not has_stream:
		stream_handler = logging.StreamHandler()
		stream_handler.setLevel(console_level_value)
		stream_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
		log.addHandler(stream_handler)

	if file_path:
		path = Path(file_path).expanduser()
		if any(getattr(h, "baseFilename", None) == str(path.resolve()) for h in log.handlers):
			return log
		path.parent.mkdir(parents=True, exist_ok=True)
		file_handler: logging.Handler
		if rotate:
			file_handler = RotatingFileHandler(
				path,
				mode=mode,
				maxBytes=max_bytes,
				backupCount=backup_count,
				encoding="utf-8"
			)
		else:
			file_handler = logging.FileHandler(path, mode=mode, encoding="utf-8")
		file_handler.setLevel(file_level_value)
		file_handler.setFormatter(formatter or logging.Formatter(
			"%(asctime)s [%(levelname)s] %(name)s: %(message)s",
			datefmt="%Y-%m-%d %H:%M:%S"
		))
		log.addHandler(file_handler)

	return log
