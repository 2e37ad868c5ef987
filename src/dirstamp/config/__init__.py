from .loader import ConfigError
from .schema import KeySpec
from .settings import NamingConfig, SettingsLoader, load_naming_config
from .store import resolve_config_path

__all__ = [
	"ConfigError",
	"KeySpec",
	"NamingConfig",
	"SettingsLoader",
	"load_naming_config",
	"resolve_config_path",
]
