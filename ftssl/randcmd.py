"""The ``rand`` command: print a random number of a given byte width."""

from __future__ import annotations

import os
import re
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from ftssl.base64codec import encode
from ftssl.commands import CommandType, option_description

__all__ = [
    "RandOptions",
    "RandArgumentError",
    "genrand",
    "parse_rand",
    "rand_command",
]

_MAX_BYTES = 8
_SILENT_OPTIONS = frozenset({"help", "h", "in", "inkey"})
_LEADING_DIGITS = re.compile(r"[0-9]+")
_TOO_MANY = "too many arguments"


class RandArgumentError(ValueError):
    """Raised when the rand command line cannot be used.

    ``str(error)`` is the diagnostic (possibly empty); ``usage`` follows it.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.usage = option_description(CommandType.RAND)


@dataclass
class RandOptions:
    """What the rand command was asked to do."""

    count: int = 0
    base64: bool = False
    hex: bool = False
    output_path: str | None = None


def genrand(minimum: int, maximum: int) -> int:
    """Return a random integer in ``[minimum, maximum]`` read from the OS.

    As many random bytes as ``maximum`` needs are drawn until the value
    falls inside the range.
    """
    if minimum < 0 or minimum > maximum:
        raise ValueError(f"empty range: [{minimum}, {maximum}]")
    width = (maximum.bit_length() + 7) // 8
    while True:
        value = int.from_bytes(os.urandom(width), "little")
        if minimum <= value <= maximum:
            return value


def _invalid(option: str) -> RandArgumentError:
    if option in _SILENT_OPTIONS:
        return RandArgumentError("")
    return RandArgumentError(f"ft_ssl: Error: invalid option: '{option}'")


def parse_rand(args: Iterable[str]) -> RandOptions:
    """Parse the arguments that follow ``rand`` on the command line."""
    options = RandOptions()
    pending = deque(args)
    have_count = False
    while pending:
        arg = pending.popleft()
        if arg.startswith("-"):
            name = arg[1:]
            if name == "base64":
                options.base64 = True
            elif name == "hex":
                options.hex = True
            elif name == "out" and options.output_path is None:
                if not pending:
                    raise RandArgumentError("missing file argument for -out")
                options.output_path = pending.popleft()
            else:
                raise _invalid(name)
        elif not arg[:1] or arg[0] not in "0123456789":
            raise _invalid(arg)
        elif have_count or (options.base64 and options.hex):
            raise RandArgumentError(_TOO_MANY)
        else:
            options.count = int(_LEADING_DIGITS.match(arg).group())
            have_count = True
    if options.base64 and options.hex:
        raise RandArgumentError(_TOO_MANY)
    if options.count == 0:
        raise RandArgumentError("Specify the number of bytes.")
    if options.count > _MAX_BYTES:
        raise RandArgumentError("")
    return options


def _render(options: RandOptions) -> str:
    bits = options.count * 8
    value = genrand(1 << (bits - 8), (1 << bits) - 1)
    if options.hex:
        return f"{value:0{options.count * 2}x}\n"
    if options.base64:
        return encode(value.to_bytes(options.count, "big"))
    return f"{value}\n"


def rand_command(args: Iterable[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run the rand command; return 0 on success and 1 after reporting an error."""
    try:
        options = parse_rand(args)
    except RandArgumentError as exc:
        message = str(exc)
        if message:
            stderr.write(message + "\n")
        stderr.write(exc.usage)
        return 1
    text = _render(options)
    if options.output_path is not None:
        try:
            with open(options.output_path, "w", encoding="ascii") as target:
                target.write(text)
        except OSError as exc:
            stderr.write(f"{options.output_path}: {exc.strerror}\n")
            return 1
    else:
        stdout.write(text)
    return 0