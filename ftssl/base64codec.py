"""Base64 encoding and decoding, and the ``base64`` command."""

from __future__ import annotations

import base64
import binascii
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import BinaryIO

__all__ = [
    "Base64Options",
    "Base64ArgumentError",
    "USAGE",
    "encode",
    "decode",
    "parse_options",
    "run_base64",
]

USAGE = (
    "usage: base64 [-e | -d] [-in file] [-out file]\n"
    " -e\t\tEncode input stream to Base64 (default)\n"
    " -d\t\tDecode incoming Base64 stream to binary data\n"
    " -in file\tInput file (default stdin)\n"
    " -out file\tOutput file (default stdout)\n"
)

_LINE_CHARS = 64
_SILENT_OPTIONS = frozenset({"help", "h", "in", "inkey"})


class Base64ArgumentError(ValueError):
    """Raised when the base64 command line cannot be used.

    ``str(error)`` is the diagnostic to print (possibly empty, as for a
    help request); ``usage`` is the text that follows it.
    """

    def __init__(self, message: str, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option
        self.usage = USAGE


@dataclass
class Base64Options:
    """What the base64 command was asked to do."""

    decode: bool = False
    input_path: str | None = None
    output_path: str | None = None


def encode(data: bytes | bytearray) -> str:
    """Encode ``data`` as Base64 in lines of 64 characters, each ending in a newline."""
    text = base64.b64encode(bytes(data)).decode("ascii")
    return "".join(
        text[start:start + _LINE_CHARS] + "\n"
        for start in range(0, len(text), _LINE_CHARS)
    )


def decode(text: str | bytes | bytearray) -> bytes:
    """Decode Base64 ``text``; whitespace is ignored and padding may be left out."""
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    cleaned = "".join(text.split())
    missing = -len(cleaned) % 4
    if missing == 3:
        raise ValueError("invalid base64 input: bad length")
    cleaned += "=" * missing
    try:
        return base64.b64decode(cleaned, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 input: {exc}") from exc


def _invalid(option: str) -> Base64ArgumentError:
    message = "" if option in _SILENT_OPTIONS else f"ft_ssl: Error: invalid option: '{option}'"
    return Base64ArgumentError(message, option)


def _check_readable(path: str) -> None:
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise Base64ArgumentError(f"{path}: {exc.strerror}", "in") from exc


def parse_options(args: Iterable[str]) -> Base64Options:
    """Parse the arguments that follow ``base64`` on the command line."""
    options = Base64Options()
    pending = deque(args)
    while pending:
        arg = pending.popleft()
        if not arg.startswith("-"):
            raise _invalid(arg)
        name = arg[1:]
        if name in ("out", "o") and options.output_path is None:
            if not pending:
                raise Base64ArgumentError("missing argument for '-out'", name)
            options.output_path = pending.popleft()
        elif name in ("in", "i"):
            if not pending:
                raise Base64ArgumentError("missing argument for '-in'", name)
            _check_readable(pending[0])
            if options.input_path is None:
                options.input_path = pending.popleft()
        elif name in ("d", "-decode"):
            options.decode = True
        elif name in ("e", "-encode"):
            pass
        else:
            raise _invalid(name)
    return options


def run_base64(args: Iterable[str], stdin: BinaryIO, stdout: BinaryIO) -> None:
    """Run the base64 command on binary streams, honouring ``-in`` and ``-out``."""
    options = parse_options(args)
    if options.input_path is not None:
        with open(options.input_path, "rb") as source:
            data = source.read()
    else:
        data = stdin.read()
    result = decode(data) if options.decode else encode(data).encode("ascii")
    if options.output_path is not None:
        with open(options.output_path, "wb") as target:
            target.write(result)
    else:
        stdout.write(result)