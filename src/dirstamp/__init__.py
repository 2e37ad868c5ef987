"""
dirstamp: create sortable, timestamp-named directories.

Top-level API keeps imports lazy:

    from dirstamp import DirMaker, NameRequest, NamingConfig
    maker = DirMaker(NamingConfig(base_directory="~/notes"))
    maker.make(NameRequest(title="My Cool Idea!", keywords=("3D Models", "wip")))
    # -> ~/notes/20220616T143000--my-cool-idea__3d-models_wip

    from dirstamp import build_name, slugify
"""

from importlib import import_module
from importlib.metadata import version, PackageNotFoundError as _PNF
from typing import TYPE_CHECKING

try:
	__version__ = version("dirstamp")
except _PNF:
	__version__ = "0.0.0+local"

__all__ = [
	"__version__",
	# main facades
	"DirMaker", "NameRequest",
	"NamingConfig", "load_naming_config", "configure_logging",
	# naming convenience (lazy)
	"slugify", "normalize_keywords", "format_identifier", "parse_date",
	"assemble_name", "build_name", "InvalidDateFormat",
	# namespaces
	"config", "fs", "naming", "logutil",
]

_NAMING_EXPORTS = {
	"slugify", "normalize_keywords", "format_identifier", "parse_date",
	"assemble_name", "build_name", "InvalidDateFormat",
}
_NAMESPACES = {"config", "fs", "naming", "logutil"}


def __getattr__(name: str):
	# --- main facades ---
	if name in {"DirMaker", "NameRequest"}:
		return getattr(import_module("dirstamp.maker"), name)
	if name in {"NamingConfig", "load_naming_config"}:
		return getattr(import_module("dirstamp.config.settings"), name)
	if name == "configure_logging":
		return import_module("dirstamp.logutil").configure_logging

	if name in _NAMING_EXPORTS:
		return getattr(import_module("dirstamp.naming"), name)
	if name in _NAMESPACES:
		return import_module(f"dirstamp.{name}")

	raise AttributeError(f"module 'dirstamp' has no attribute {name!r}")


# Help type-checkers without eager imports
if TYPE_CHECKING:
	from . import config, fs, naming, logutil  # noqa: F401
	from .logutil import configure_logging  # noqa: F401
	from .maker import DirMaker, NameRequest  # noqa: F401
	from .config.settings import NamingConfig, load_naming_config  # noqa: F401
	from .naming import (  # noqa: F401
		slugify, normalize_keywords, format_identifier, parse_date,
		assemble_name, build_name, InvalidDateFormat,
	)
