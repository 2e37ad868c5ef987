# src/dirstamp/cli.py

from __future__ import annotations

import argparse
from typing import List, Optional

from .config.loader import ConfigError
from .config.settings import SettingsLoader
from .logutil import configure_logging, get_logger
from .maker import DirMaker, NameRequest
from .naming.identifier import InvalidDateFormat

LOG = get_logger(__name__)

EXIT_OK = 0
EXIT_OS_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INVALID_DATE = 3
EXIT_EXISTS = 4


def _build_arg_parser() -> argparse.ArgumentParser:
	"""
	Build the CLI argument parser.

	:return: Configured ArgumentParser.
	"""
	p = argparse.ArgumentParser(
		prog="dirstamp",
		description="Create a directory named IDENTIFIER--title__keyword_keyword."
	)
	p.add_argument("title", nargs="?", default="", help="Title (may be empty).")
	p.add_argument(
		"-k", "--keyword", dest="keywords", action="append", default=[],
		help="Keyword; repeat for several. Commas also separate keywords."
	)
	p.add_argument(
		"-d", "--date", default=None,
		help="Date as YYYY-MM-DD, 'YYYY-MM-DD HH:MM' or 'YYYY-MM-DD HH:MM:SS' (default: now)."
	)
	p.add_argument("-b", "--base-dir", default=None, help="Directory to create the new directory in.")
	p.add_argument(
		"-c", "--config", action="append", default=[],
		help="INI or JSON config file(s), applied after the user config. May repeat."
	)
	p.add_argument(
		"--no-default-config", action="store_true",
		help="Do not read the user config file ($DIRSTAMP_CONFIG or ~/.config/dirstamp/dirstamp.ini)."
	)
	p.add_argument(
		"-o", "--override", action="append", default=[],
		help="Config override as key=value (may repeat)."
	)
	p.add_argument("--no-sort", action="store_true", help="Keep keywords in the given order.")
	p.add_argument(
		"--single-word-keywords", action="store_true",
		help="Remove hyphens inside keywords ('3D Models' -> '3dmodels')."
	)
	p.add_argument("--exclude-pattern", default=None, help="Regex of extra characters to strip.")
	p.add_argument("--dry-run", action="store_true", help="Log what would be created; touch nothing.")
	p.add_argument("--print-name", action="store_true", help="Only print the generated name.")
	p.add_argument(
		"--log-level", choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
		default="WARNING", help="Console log level (default: WARNING)."
	)
	p.add_argument("--log-file", default=None, help="Also log to this file.")
	return p


def _split_keywords(values: List[str]) -> List[str]:
	return [part.strip() for value in values for part in value.split(",") if part.strip()]


def main(argv: Optional[List[str]] = None) -> int:
	"""
	Entrypoint for the command-line interface.

	:param argv: Optional argv list for testing; defaults to ``sys.argv[1:]``.
	:return: Process exit code (0=OK, 1=filesystem error, 2=config error,
			 3=invalid date, 4=directory already exists).
	"""
	args = _build_arg_parser().parse_args(argv)
	configure_logging(console_level=args.log_level, file_path=args.log_file, file_level="DEBUG")

	try:
		settings = SettingsLoader()
		if not args.no_default_config:
			settings.load_default()
		config = settings.load_files(args.config).apply_env().apply_overrides(args.override).set(
			sort_keywords=False if args.no_sort else None,
			allow_multi_word_keywords=False if args.single_word_keywords else None,
			extra_excluded_pattern=args.exclude_pattern,
		).build()
	except ConfigError as exc:
		LOG.error("Configuration error: %s", exc)
		return EXIT_CONFIG_ERROR

	request = NameRequest(
		title=args.title,
		keywords=tuple(_split_keywords(args.keywords)),
		date=args.date,
		base_dir=args.base_dir,
	)
	maker = DirMaker(config, dry_run=args.dry_run)

	try:
		if args.print_name:
			print(maker.name_for(request))
			return EXIT_OK
		print(maker.make(request))
		return EXIT_OK
	except InvalidDateFormat as exc:
		LOG.error("%s", exc)
		return EXIT_INVALID_DATE
	except FileExistsError as exc:
		LOG.error("%s", exc)
		return EXIT_EXISTS
	except OSError as exc:
		LOG.error("Could not create directory: %s", exc)
		return EXIT_OS_ERROR


if __name__ == "__main__":
	raise SystemExit(main())
