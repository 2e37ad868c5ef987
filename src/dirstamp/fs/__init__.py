# src/dirstamp/fs/__init__.py
from importlib import import_module
from typing import TYPE_CHECKING

# Map: public name -> "module_path:attr_name"
_MAP = {
    "PathOpsBase": "dirstamp.fs.base:PathOpsBase",
    "Dirs":        "dirstamp.fs.dirs:Dirs",
    "Create":      "dirstamp.fs.create:Create",
}

__all__ = list(_MAP.keys())


def __getattr__(name: str):
    try:
        spec = _MAP[name]
    except KeyError as exc:
        raise AttributeError(f"module 'dirstamp.fs' has no attribute {name!r}") from exc

    mod_path, _, attr = spec.partition(":")
    mod = import_module(mod_path)
    return getattr(mod, attr)


# --- help static type checkers without eager imports ---
if TYPE_CHECKING:
    from .base import PathOpsBase
    from .dirs import Dirs
    from .create import Create
