#!/usr/bin/env python3
""" Command-line entry point for chainsh. """
import argparse
import logging
import sys

from config import ShellConfig
from exceptions import ShellExit
from shell import Shell

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s"


def parse_args(argv=None, config: ShellConfig|None = None):
    config = config or ShellConfig.from_env()
    parser = argparse.ArgumentParser(
        prog="chainsh",
        description="A small interactive shell with quoting, && chaining and output redirection"
    )
    parser.add_argument(
        "-c",
        dest="command",
        metavar="COMMAND",
        help="run COMMAND and exit with its status"
    )
    parser.add_argument(
        "--prompt",
        default=config.prompt,
        help=f"prompt string (default: {config.prompt!r})"
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        default=config.log_file,
        help="append debug records to PATH"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=config.debug,
        help="also print debug records on stderr"
    )
    args = parser.parse_args(argv)
    config.prompt = args.prompt
    config.log_file = args.log_file
    config.debug = args.debug
    return args, config


def setup_logging(config: ShellConfig):
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = []
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    if config.debug:
        handlers.append(logging.StreamHandler(sys.stderr))
    if not handlers:
        handlers.append(logging.NullHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if config.log_file or config.debug else logging.WARNING)


def main(argv=None):
    args, config = parse_args(argv)
    setup_logging(config)

    sh = Shell(config)
    if args.command is not None:
        try:
            rc = sh.run_line(args.command)
        except ShellExit as e:
            rc = e.status
    else:
        rc = sh.run()
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
