"""CLI helpers for viewing and resetting the configuration."""

from __future__ import annotations

import json
from argparse import ArgumentParser, _SubParsersAction

from ...config import PdfileConfig, config_to_dict, get_config_path, reset_config


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("config", help="Display current settings")
    parser.add_argument(
        "action",
        nargs="?",
        choices=["show", "reset"],
        default="show",
        help="'reset' restores the defaults",
    )
    parser.set_defaults(handler=handle_config)


def handle_config(args, settings: PdfileConfig) -> int:
    if args.action == "reset":
        reset_config()
        print("Configuration reset to defaults.")
        return 0
    print("PDFile Configuration")
    print(get_config_path())
    print(json.dumps(config_to_dict(settings), indent=2))
    return 0
