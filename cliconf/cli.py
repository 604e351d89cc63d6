"""Command line interface for cliconf."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from . import __version__
from .data import JSONConfigData
from .log_utils import configure_logging
from .paths import default_config_path
from .persistor import DiskPersistor
from .repository import ConfigRepository

log = logging.getLogger(__name__)


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="cliconf", description="Inspect and edit the persisted tool configuration.")
    ap.add_argument("--config", type=Path, default=None, help="Config file (default: $CLICONF_HOME/config.json)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("path", help="Print the config file path")
    sub.add_parser("exists", help="Exit 0 if the config file exists, 1 otherwise")
    sub.add_parser("show", help="Print the whole config as JSON")

    p_get = sub.add_parser("get", help="Print one value")
    p_get.add_argument("key")

    p_set = sub.add_parser("set", help="Store one value")
    p_set.add_argument("key")
    p_set.add_argument("value")
    p_set.add_argument("--json", action="store_true", help="Parse VALUE as JSON instead of a plain string")

    p_unset = sub.add_parser("unset", help="Remove one value")
    p_unset.add_argument("key")

    sub.add_parser("reset", help="Overwrite the config with defaults")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    path = args.config if args.config is not None else default_config_path()
    persistor = DiskPersistor(path)
    log.debug("Using config file %s", persistor.path)

    if args.command == "path":
        print(persistor.path)
        return 0
    if args.command == "exists":
        found = persistor.exists()
        print("yes" if found else "no")
        return 0 if found else 1

    repo = ConfigRepository(persistor)
    try:
        if args.command == "show":
            print(json.dumps(repo.all(), indent=2, sort_keys=True))
        elif args.command == "get":
            missing = object()
            value = repo.get(args.key, missing)
            if value is missing:
                print(f"error: {args.key} is not set", file=sys.stderr)
                return 1
            print(_format_value(value))
        elif args.command == "set":
            new_value: Any = json.loads(args.value) if args.json else args.value
            repo.set(args.key, new_value)
        elif args.command == "unset":
            if not repo.unset(args.key):
                print(f"error: {args.key} is not set", file=sys.stderr)
                return 1
        elif args.command == "reset":
            repo.reset()
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
