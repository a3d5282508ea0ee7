"""Command-line entry point: dispatches a command line to its command."""

from __future__ import annotations

import io
import os
import sys
from collections.abc import Iterable, Sequence
from typing import BinaryIO, TextIO

from ftssl.base64codec import Base64ArgumentError, run_base64
from ftssl.commands import CommandType, InvalidCommandError, lookup_command, supported_text
from ftssl.hashcmd import run_hash
from ftssl.randcmd import rand_command

__all__ = ["handle_inputs", "read_files", "main"]

VERSION = "Ft_ssl, version 1.2a-release (x86_64-apple-darwin17)\n"
PROMPT = "ft_ssl> "
_QUIT_WORDS = frozenset({"quit", "exit"})


def read_files(paths: Iterable[str], stderr: TextIO, command: str) -> list[tuple[str, bytes]]:
    """Read each path; report the ones that cannot be read and skip them."""
    loaded = []
    for path in paths:
        if os.path.isdir(path):
            stderr.write(f"{command}: {path}: Is a directory\n")
            continue
        try:
            with open(path, "rb") as source:
                loaded.append((path, source.read()))
        except OSError as exc:
            stderr.write(f"{command}: {path}: {exc.strerror}\n")
    return loaded


def _run_base64(args: Sequence[str], stdin: BinaryIO, stdout: TextIO, stderr: TextIO) -> int:
    target = getattr(stdout, "buffer", None)
    if target is not None:
        stdout.flush()
    sink = io.BytesIO() if target is None else target
    try:
        run_base64(args, stdin, sink)
    except Base64ArgumentError as exc:
        message = str(exc)
        if message:
            stderr.write(message + "\n")
        stderr.write(exc.usage)
        return 1
    except (ValueError, OSError) as exc:
        stderr.write(f"base64: {exc}\n")
        return 1
    if target is None:
        stdout.write(sink.getvalue().decode("latin-1"))
    else:
        target.flush()
    return 0


def handle_inputs(
    argv: Sequence[str], stdin: BinaryIO, stdout: TextIO, stderr: TextIO
) -> int:
    """Run one command line (command name first); return its exit status."""
    if not argv or argv[0] in _QUIT_WORDS:
        return 0
    name, args = argv[0], list(argv[1:])
    try:
        command = lookup_command(name)
    except InvalidCommandError as exc:
        stderr.write(f"{exc}\n\n")
        stderr.write(supported_text())
        return 1
    if command.is_digest:
        return run_hash(command, args, stdin, stdout, stderr)
    if command is CommandType.BASE64:
        return _run_base64(args, stdin, stdout, stderr)
    if command is CommandType.RAND:
        return rand_command(args, stdout, stderr)
    if command is CommandType.VERSION:
        stdout.write(VERSION)
        return 0
    stderr.write(f"ft_ssl: Error: '{name}' is not available.\n")
    return 1


def _interactive(stdin: BinaryIO, stdout: TextIO, stderr: TextIO) -> int:
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return 0
        words = [word for word in line.decode("utf-8", errors="replace").rstrip("\n").split(" ") if word]
        if not words:
            continue
        if words[0] in _QUIT_WORDS:
            return 0
        handle_inputs(words, stdin, stdout, stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool; without arguments, read command lines from a prompt."""
    args = sys.argv[1:] if argv is None else list(argv)
    stdin = sys.stdin.buffer
    if not args:
        return _interactive(stdin, sys.stdout, sys.stderr)
    return handle_inputs(args, stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())