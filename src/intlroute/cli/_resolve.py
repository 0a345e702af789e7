"""Config resolution — turns a CLI target into a ``RoutingConfig``.

Shared by ``intlroute check`` and ``intlroute resolve``. A target is
either a TOML file or a ``"module:attribute"`` import string.
"""

import importlib
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from intlroute.config import RoutingConfig
from intlroute.errors import ConfigurationError
from intlroute.i18n.routing import LocaleRouting


def _from_toml(path: Path) -> RoutingConfig:
    """Load a config table from *path*.

    Reads ``[tool.intlroute]`` (pyproject style), then ``[intlroute]``,
    then the top-level table.
    """
    with path.open("rb") as fh:
        data = tomllib.load(fh)
    if isinstance(data.get("tool"), Mapping) and "intlroute" in data["tool"]:
        data = data["tool"]["intlroute"]
    elif isinstance(data.get("intlroute"), Mapping):
        data = data["intlroute"]
    return RoutingConfig.from_mapping(data)


def _coerce(obj: Any, target: str) -> RoutingConfig:
    if isinstance(obj, RoutingConfig):
        return obj
    if isinstance(obj, LocaleRouting):
        return obj.config
    if isinstance(obj, Mapping):
        return RoutingConfig.from_mapping(obj)
    msg = f"{target!r} resolved to {type(obj).__name__}, not a RoutingConfig"
    raise TypeError(msg)


def resolve_config(target: str) -> RoutingConfig:
    """Resolve *target* to a validated ``RoutingConfig``.

    Accepts a path to a ``.toml`` file, or ``"module:attribute"``. When
    the attribute is omitted it defaults to ``"routing"``. The attribute
    may be a ``RoutingConfig``, a ``LocaleRouting``, a plain mapping, or a
    zero-argument factory returning one of those.

    Raises:
        FileNotFoundError: If a ``.toml`` target does not exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a usable config.
        ConfigurationError: If the config itself is invalid.
    """
    path = Path(target)
    if path.suffix == ".toml" or path.is_file():
        return _from_toml(path)

    module_path, _, attr_name = target.partition(":")
    if not attr_name:
        attr_name = "routing"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    # Support factory functions
    if callable(obj) and not isinstance(obj, (RoutingConfig, LocaleRouting, Mapping)):
        try:
            obj = obj()
        except ConfigurationError:
            raise
        except Exception as exc:
            msg = f"Factory function {target!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    return _coerce(obj, target)
