from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

LOG = logging.getLogger(__name__)

APP = "dirstamp"
DEFAULT_CONFIG_NAME = "dirstamp.ini"
CONFIG_ENV_VAR = "DIRSTAMP_CONFIG"


def user_config_dir(app: str = APP, environ: Optional[Mapping[str, str]] = None) -> Path:
	"""
	Return a per-user configuration directory.

	On Windows this is ``%APPDATA%/<app>``, on POSIX ``$XDG_CONFIG_HOME/<app>`` or ``~/.config/<app>``.

	:param app: Application namespace directory name.
	:param environ: Mapping to read instead of :data:`os.environ`.
	:return: Absolute path to the user config directory (not guaranteed to exist).
	"""
	env = os.environ if environ is None else environ
	if os.name == "nt":
		base = Path(env.get("APPDATA") or Path.home() / "AppData" / "Roaming")
	else:
		base = Path(env.get("XDG_CONFIG_HOME") or Path.home() / ".config")
	return (base / app).resolve()


def resolve_config_path(
		name: str = DEFAULT_CONFIG_NAME,
		*,
		env_var: Optional[str] = CONFIG_ENV_VAR,
		app: str = APP,
		environ: Optional[Mapping[str, str]] = None,
) -> Path:
	"""
	Resolve the default config file path.

	Precedence:
		1) ``env_var`` is set in the environment → that path.
		2) ``user_config_dir(app)/name``.

	:param name: File name.
	:param env_var: Environment variable that can override the path (``None`` disables it).
	:param app: Application namespace directory.
	:param environ: Mapping to read instead of :data:`os.environ`.
	:return: The absolute path (may or may not exist yet).
	"""
	env = os.environ if environ is None else environ
	if env_var:
		override = env.get(env_var)
		if override:
			LOG.debug("Config path taken from $%s: %s", env_var, override)
			return Path(override).expanduser().resolve()
	return (user_config_dir(app, environ=env) / name).resolve()


__all__ = ["APP", "DEFAULT_CONFIG_NAME", "CONFIG_ENV_VAR", "user_config_dir", "resolve_config_path"]
