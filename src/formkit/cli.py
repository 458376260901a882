"""
Command line entry point.

Usage:
  formkit render package.module:Signup [--config PATH] [--template PATH]
  formkit fields package.module:Signup
  formkit init [PATH]
  formkit config install SRC [--output PATH]
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from importlib import import_module
from pathlib import Path
from typing import Any

from formkit.infra.config import (
    ConfigAdapter,
    copy_default_config,
    load_config,
    save_config_file,
)
from formkit.infra.paths import DEFAULT_CONFIG_FILENAME, SETTING_PATH
from formkit.render import FormBuilder

logger = logging.getLogger("formkit")


def import_object(target: str) -> Any:
    """Import ``module:attr`` (attr may be dotted)."""
    modname, sep, attr = target.partition(":")
    if not sep or not modname or not attr:
        raise ValueError(f"Expected 'module:object', got {target!r}")

    obj: Any = import_module(modname)
    for part in attr.split("."):
        obj = getattr(obj, part)
    return obj


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formkit",
        description="Render HTML form inputs for a dataclass record.",
    )
    parser.add_argument("--config", help="Path to a formkit.toml / .json file")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Print the rendered inputs")
    render.add_argument("target", help="module:Object (dataclass type or instance)")
    render.add_argument("--template", help="Jinja2 input template file")
    render.add_argument(
        "--skip", action="append", default=[], metavar="NAME", help="Skip a field"
    )

    fields = sub.add_parser("fields", help="Print field descriptors as JSON")
    fields.add_argument("target", help="module:Object (dataclass type or instance)")

    init = sub.add_parser("init", help="Write a sample formkit.toml")
    init.add_argument("path", nargs="?", default=DEFAULT_CONFIG_FILENAME)

    config = sub.add_parser("config", help="Manage the per-user settings")
    config_sub = config.add_subparsers(dest="config_command", required=True)
    install = config_sub.add_parser(
        "install", help="Install a TOML/JSON file as the per-user settings"
    )
    install.add_argument("source", help="Settings file to install")
    install.add_argument(
        "--output", help="Destination file (default: per-user settings.json)"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "init":
        target = Path(args.path)
        if target.exists():
            logger.error("Refusing to overwrite %s", target)
            return 1
        copy_default_config(target)
        print(f"Wrote {target}")
        return 0

    if args.command == "config":
        output = Path(args.output) if args.output else SETTING_PATH
        save_config_file(args.source, output)
        print(f"Installed {args.source} -> {output}")
        return 0

    adapter = ConfigAdapter(load_config(args.config))
    logging.basicConfig(level=adapter.get_log_level())

    builder_cfg = adapter.get_builder_config()
    if getattr(args, "template", None):
        builder_cfg.template_path = args.template
    builder_cfg.skip.extend(getattr(args, "skip", []))

    builder = FormBuilder.from_config(builder_cfg)
    record = import_object(args.target)

    if args.command == "fields":
        rows = [dataclasses.asdict(fd) for fd in builder.fields(record)]
        json.dump(rows, sys.stdout, indent=2, ensure_ascii=False, default=str)
        sys.stdout.write("\n")
    else:
        sys.stdout.write(builder.inputs(record))
        sys.stdout.write("\n")
    return 0
