"""Descriptions of scheduled-task commands and their flags."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ArgType(IntEnum):
    """Kind of value a command flag takes."""

    STRING = 1
    INT = 2
    SLICE = 3


@dataclass
class Flag:
    """A command-local flag; ``short_name`` is a single character or empty."""

    name: str
    short_name: str = ""
    type: ArgType = ArgType.STRING
    remark: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("flag name must not be empty")
        if len(self.short_name) > 1:
            raise ValueError(f"flag short name must be one character, got {self.short_name!r}")
        self.type = ArgType(self.type)

    @property
    def option_strings(self) -> list[str]:
        """Command-line spellings of this flag."""
        options = [f"--{self.name}"]
        if self.short_name:
            options.append(f"-{self.short_name}")
        return options


@dataclass
class Runner:
    """A named command with its description, handler and flags.

    ``run`` is called with the parsed namespace and the positional arguments.
    """

    cmd: str
    remark: str
    run: Callable[[argparse.Namespace, list[str]], Any]
    flags: list[Flag] = field(default_factory=list)