"""Root command-line parser for scheduled tasks."""

from __future__ import annotations

import argparse
import csv
import sys
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .runner import ArgType, Runner


class CommandError(Exception):
    """Raised when the command line cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise CommandError(message)


def _split_csv(value: str) -> list[str]:
    if value == "":
        return []
    return next(csv.reader([value]))


class _SliceAction(argparse.Action):
    """Comma-separated values that accumulate over repeated flags."""

    def __call__(self, parser, namespace, values, option_string=None):
        current = list(getattr(namespace, self.dest, None) or [])
        current.extend(_split_csv(values))
        setattr(namespace, self.dest, current)


def _uint8(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid uint8 value: {text!r}") from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"value out of range for uint8: {text!r}")
    return value


def _add_global_flags(parser: argparse.ArgumentParser, suppress: bool) -> None:
    def default(value: Any) -> Any:
        return argparse.SUPPRESS if suppress else value

    parser.add_argument("-d", "--date", default=default(""), help="date, formatted YYYY-MM-DD")
    parser.add_argument(
        "-f",
        "--date-flag",
        type=_uint8,
        default=default(0),
        help="date flag: -1 yesterday, 0 today, 1 the given date",
    )
    parser.add_argument(
        "-a", "--app-list", action=_SliceAction, default=default([]), help="application list"
    )
    parser.add_argument("-c", "--conf", default=default("config.yaml"), help="configuration file")


@dataclass
class _Root:
    parser: _Parser
    parent: _Parser
    commands: Any
    runners: dict[str, Runner] = field(default_factory=dict)


_root: _Root | None = None
_lock = threading.Lock()


def new():
    """Return the root parser, creating it on first use."""
    global _root
    with _lock:
        if _root is None:
            parser = _Parser(prog="crontab", description="Scheduled task system")
            _add_global_flags(parser, suppress=False)
            parent = _Parser(add_help=False)
            _add_global_flags(parent, suppress=True)
            commands = parser.add_subparsers(dest="command", metavar="command")
            _root = _Root(parser=parser, parent=parent, commands=commands)
        return _root.parser


def _require() -> _Root:
    if _root is None:
        raise RuntimeError("root command is not created; call new first")
    return _root


def execute(argv: Sequence[str] | None = None) -> None:
    """Parse the command line and run the chosen command."""
    root = _require()
    arguments = sys.argv[1:] if argv is None else list(argv)
    try:
        namespace = root.parser.parse_args(arguments)
    except SystemExit as exc:
        if exc.code in (0, None):
            return
        raise
    if namespace.command is None:
        root.parser.print_help()
        return
    runner = root.runners[namespace.command]
    positional = vars(namespace).pop("args", [])
    runner.run(namespace, list(positional))


def add_command(runner):
    """Register a runner as a sub-command of the root parser."""
    root = _require()
    words = runner.cmd.split()
    if not words:
        raise ValueError("command name must not be empty")
    name = words[0]
    with _lock:
        if name in root.runners:
            raise ValueError(f"command {name!r} is already registered")
        sub = root.commands.add_parser(
            name, help=runner.remark, description=runner.remark, parents=[root.parent]
        )
        for flag in runner.flags:
            if flag.type is ArgType.INT:
                sub.add_argument(*flag.option_strings, type=int, default=0, help=flag.remark)
            elif flag.type is ArgType.STRING:
                sub.add_argument(*flag.option_strings, default="", help=flag.remark)
            elif flag.type is ArgType.SLICE:
                sub.add_argument(
                    *flag.option_strings, action=_SliceAction, default=[], help=flag.remark
                )
        sub.add_argument("args", nargs="*")
        root.runners[name] = runner