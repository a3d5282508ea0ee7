"""The message digest commands: md5, sha1, sha224, sha256, sha384, sha512."""

from __future__ import annotations

import enum
import errno
import os
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import BinaryIO, TextIO

from ftssl.commands import CommandType, full_usage, option_description, valid_hash_flag
from ftssl.digest64 import digest

__all__ = [
    "HashFlag",
    "HashOptions",
    "HashArgumentError",
    "parse_hash_args",
    "format_digest",
    "run_hash",
]


class HashFlag(enum.Flag):
    """Single-letter options of the digest commands."""

    NONE = 0
    P = 0x8000
    Q = 0x10000
    R = 0x20000
    S = 0x40000


class HashArgumentError(ValueError):
    """Raised when a digest command line cannot be used.

    ``str(error)`` is the diagnostic (empty for a help request) and
    ``usage`` is the text printed after it.
    """

    def __init__(self, message: str, usage: str) -> None:
        super().__init__(message)
        self.usage = usage


@dataclass
class HashOptions:
    """A parsed digest command line.

    Each string to hash is kept with the flags that were in force when it
    was met on the command line; stdin and files use the final flags.
    """

    flags: HashFlag = HashFlag.NONE
    strings: list[tuple[str, HashFlag]] = field(default_factory=list)
    files: list[str] = field(default_factory=list)

    @property
    def reads_stdin(self) -> bool:
        """True when standard input is to be hashed."""
        return HashFlag.P in self.flags or (not self.strings and not self.files)


def parse_hash_args(command: CommandType, args: Iterable[str]) -> HashOptions:
    """Parse the arguments that follow a digest command's name."""
    name = command.name.lower()
    options = HashOptions()
    pending = deque(args)
    while pending and pending[0].startswith("-") and len(pending[0]) > 1:
        arg = pending.popleft()
        for position, letter in enumerate(arg[1:], start=1):
            try:
                bit = valid_hash_flag(command, letter)
            except ValueError as exc:
                usage = full_usage(name, command)
                if letter == "h":
                    usage += option_description(command)
                raise HashArgumentError(str(exc), usage) from None
            options.flags |= HashFlag(bit)
            if letter != "s":
                continue
            rest = arg[position + 1:]
            if rest:
                options.strings.append((rest, options.flags))
            elif pending and pending[0]:
                options.strings.append((pending.popleft(), options.flags))
            else:
                raise HashArgumentError(
                    f"Error: {name}: option requires an argument -- s",
                    full_usage(name, command),
                )
            break
    options.files = list(pending)
    return options


def format_digest(
    command: CommandType,
    label: str | None,
    text: str,
    digest_hex: str,
    flags: HashFlag,
    quoted: bool,
) -> str:
    """Return the output line for one hashed string or file."""
    shown = f'"{text}"' if quoted else text
    if HashFlag.Q in flags:
        return f"{digest_hex}\n"
    if HashFlag.R in flags:
        return f"{digest_hex} {shown}\n"
    header = (label or command.name).upper()
    return f"{header} ({shown}) = {digest_hex}\n"


def _c_text(data: bytes) -> str:
    return data.split(b"\x00", 1)[0].decode("utf-8", errors="replace")


def _read_file(path: str) -> bytes:
    if os.path.isdir(path):
        raise IsADirectoryError(errno.EISDIR, "Is a directory", path)
    with open(path, "rb") as source:
        return source.read()


def run_hash(
    command: CommandType,
    args: Iterable[str],
    stdin: BinaryIO,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    """Run a digest command; return 0 on success and 1 after reporting an error."""
    try:
        options = parse_hash_args(command, args)
    except HashArgumentError as exc:
        message = str(exc)
        if message:
            stderr.write(message + "\n")
        stderr.write(exc.usage)
        return 1
    algorithm = command.name.lower()
    for text, flags in options.strings:
        stdout.write(
            format_digest(command, command.name, text, digest(algorithm, text), flags, True)
        )
    if options.reads_stdin:
        data = stdin.read()
        echo = HashFlag.P in options.flags and not options.flags & (HashFlag.Q | HashFlag.R)
        if echo:
            stdout.write(_c_text(data))
        stdout.write(digest(algorithm, data) + "\n")
    status = 0
    for path in options.files:
        try:
            data = _read_file(path)
        except OSError as exc:
            stderr.write(f"{algorithm}: {path}: {exc.strerror}\n")
            status = 1
            continue
        stdout.write(
            format_digest(
                command, command.name, path, digest(algorithm, data), options.flags, False
            )
        )
    return status