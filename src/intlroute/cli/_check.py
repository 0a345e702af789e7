"""``intlroute check`` — routing configuration validation command.

Loads the target config, printing a summary to stdout. Exits with
code 1 if it cannot be loaded or fails validation.
"""

import argparse
import sys
import tomllib

from intlroute.cli._resolve import resolve_config
from intlroute.config import RoutingConfig
from intlroute.errors import ConfigurationError

LOAD_ERRORS = (
    ConfigurationError,
    FileNotFoundError,
    tomllib.TOMLDecodeError,
    ModuleNotFoundError,
    AttributeError,
    TypeError,
)


def load_or_exit(target: str) -> RoutingConfig:
    """Resolve *target*, turning load errors into ``SystemExit(1)``."""
    try:
        return resolve_config(target)
    except LOAD_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def describe(config: RoutingConfig) -> list[str]:
    """Human-readable summary lines for *config*."""
    on_off = {True: "on", False: "off"}
    lines = [
        f"locales:         {', '.join(config.locales)}",
        f"default locale:  {config.default_locale}",
        f"locale prefix:   {config.locale_prefix.value}",
        f"detection:       {on_off[config.locale_detection]}",
        f"alternate links: {on_off[config.alternate_links]}",
    ]
    if config.domains:
        lines.append("domains:")
        lines.extend(
            f"  {d.domain} -> {d.default_locale} [{', '.join(d.locales)}]"
            for d in config.domains
        )
    return lines


def run_check(args: argparse.Namespace) -> None:
    config = load_or_exit(args.target)
    for line in describe(config):
        print(line)
    print("OK")
