#!/usr/bin/env python3
"""eb CLI entrypoint."""

import sys
import argparse
from pathlib import Path

from epicboard import __version__
from epicboard.errors import ConfigError
from epicboard.lib.config import AppConfig, VALID_LOG_LEVELS, load_config
from epicboard.lib.logging_setup import configure_logging
from epicboard.commands import init as cmd_init_module
from epicboard.commands import list as cmd_list_module
from epicboard.commands import run as cmd_run_module


def get_config(args) -> AppConfig:
    """Load config from env file and environment, then apply command line flags."""
    config = load_config()
    if args.db:
        config.db_path = Path(args.db)
    if args.log_level:
        config.log_level = args.log_level
    if args.log_file:
        config.log_file = Path(args.log_file)
    return config


def cmd_run(args, config: AppConfig) -> int:
    return cmd_run_module.cmd_run(args, config)


def cmd_init(args, config: AppConfig) -> int:
    return cmd_init_module.cmd_init(args, config)


def cmd_list(args, config: AppConfig) -> int:
    return cmd_list_module.cmd_list(args, config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='eb', description='Terminal tracker for epics and stories')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--db', help='Path to the store file (default: data/db.json)')
    parser.add_argument('--log-level', type=str.upper, choices=VALID_LOG_LEVELS, help='Logging level')
    parser.add_argument('--log-file', help='Write logs to this file instead of stderr')
    parser.set_defaults(func=cmd_run)
    subparsers = parser.add_subparsers(dest='command')

    # eb run
    p_run = subparsers.add_parser('run', help='Start the interactive browser (default)')
    p_run.set_defaults(func=cmd_run)

    # eb init
    p_init = subparsers.add_parser('init', help='Create an empty store file')
    p_init.add_argument('--force', action='store_true', help='Replace an existing store')
    p_init.set_defaults(func=cmd_init)

    # eb list
    p_list = subparsers.add_parser('list', help='Print epics and stories')
    p_list.set_defaults(func=cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config(args)
    except ConfigError as e:
        print(f"ERROR: {e}")
        return 2

    configure_logging(config.log_level, config.log_file)
    return args.func(args, config)


if __name__ == '__main__':
    sys.exit(main())
