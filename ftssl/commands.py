"""Command names, their identifiers, and the help and usage texts."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "CommandType",
    "InvalidCommandError",
    "lookup_command",
    "supported_text",
    "option_description",
    "full_usage",
    "valid_hash_flag",
]

YELLOW = "\033[0;33m"
RESET = "\033[;37m"
UNDERLINE = "\033[4;37m"

_IN_HELP = " -in file\tInput file (default stdin)\n"
_OUT_HELP = " -out file\tOutput file (default stdout)\n"
_USAGE = f"{YELLOW}usage{RESET}: "


class CommandType(Enum):
    """Every command the tool knows, keyed by its numeric identifier."""

    MD5 = 1
    SHA224 = 2
    SHA256 = 3
    SHA384 = 4
    SHA512 = 5
    SHA1 = 6
    BASE64 = 11
    DES = 21
    DES_OFB = 22
    DES_CBC = 23
    DES_ECB = 24
    DES3 = 25
    DES3_OFB = 26
    DES3_CBC = 27
    DES3_ECB = 28
    GENRSA = 31
    RSAUTL = 32
    RSA = 33
    PRIME = 36
    VERSION = 41
    RAND = 42
    DGST = 43

    @property
    def is_digest(self) -> bool:
        """True for the message digest commands."""
        return self.value < 10

    @property
    def is_encoding(self) -> bool:
        """True for the encoding commands."""
        return 10 < self.value < 20

    @property
    def is_cipher(self) -> bool:
        """True for the cipher commands."""
        return 20 < self.value < 30

    @property
    def is_standard(self) -> bool:
        """True for the standard (non digest, non cipher) commands."""
        return self.value > 30


_NAMES: dict[str, CommandType] = {
    "md5": CommandType.MD5,
    "sha224": CommandType.SHA224,
    "sha256": CommandType.SHA256,
    "sha384": CommandType.SHA384,
    "sha512": CommandType.SHA512,
    "sha1": CommandType.SHA1,
    "base64": CommandType.BASE64,
    "des3-ecb": CommandType.DES3_ECB,
    "des3-cbc": CommandType.DES3_CBC,
    "des3-ofb": CommandType.DES3_OFB,
    "des3": CommandType.DES3,
    "des-ecb": CommandType.DES_ECB,
    "des-cbc": CommandType.DES_CBC,
    "des-ofb": CommandType.DES_OFB,
    "des": CommandType.DES,
    "genrsa": CommandType.GENRSA,
    "rsautl": CommandType.RSAUTL,
    "rsa": CommandType.RSA,
    "prime": CommandType.PRIME,
    "version": CommandType.VERSION,
    "rand": CommandType.RAND,
}


class InvalidCommandError(ValueError):
    """Raised when a command name is not one the tool supports."""

    def __init__(self, name: str) -> None:
        super().__init__(f"ft_ssl: Error: '{name}' is an invalid command.")
        self.name = name


def lookup_command(name: str) -> CommandType:
    """Return the command called ``name``; anything after a space is ignored."""
    command_name = name.split(" ", 1)[0]
    try:
        return _NAMES[command_name]
    except KeyError:
        raise InvalidCommandError(command_name) from None


def supported_text() -> str:
    """Return the list of supported commands shown after an invalid one."""
    return (
        f"{UNDERLINE}Standard commands{RESET}:\n"
        "genrsa\t\tprime\t\trand\n"
        "rsa\t\trsautl\t\tversion\n\n"
        f"{UNDERLINE}Message Digest Commands{RESET}:\n"
        "md5\t\tsha1\t\tsha224\t\tsha256\n"
        "sha384\t\tsha512\n\n"
        f"{UNDERLINE}Cipher Commands{RESET}:\n"
    )


_DIGEST_OPTIONS = (
    " -p\tEcho stdin to stdout and append the checksum to stdout\n"
    " -q\tQuiet mode\n"
    " -r\tReverse the format of the output\n"
    " -s\tPrint the sum of the given string\n"
)

_BASE64_OPTIONS = (
    _USAGE
    + "base64 [-e | -d] [-in file] [-out file]\n"
    + " -e\t\tEncode input stream to Base64 (default)\n"
    + " -d\t\tDecode incoming Base64 stream to binary data\n"
    + _IN_HELP
    + _OUT_HELP
)

_CIPHER_OPTIONS = (
    " -a\t\tDecode/encode the input/output in base64\n"
    " -d\t\tDecrypt mode\n"
    " -e\t\tEncrypt mode\n"
    " -p\t\tPassword in ascii is the next argument\n"
    " -k\t\tKey in hex is the next arguement\n"
    " -s\t\tSalt in hex is the next argument\n"
    " -v\t\tInitialization vector in hex is the next argument\n"
    + _IN_HELP
    + _OUT_HELP
)

_PRIME_OPTIONS = (
    _USAGE
    + "prime [-bits n] [-generate] [-hex] p\n"
    + " -bits n\tNumber of bits in the generated prime number\n"
    + " -generate\tGenerate a pseudo-random prime number\n"
    + " -hex\t\tHexadecimal prime numbers (as output)\n"
)

_RAND_OPTIONS = (
    _USAGE
    + "rand [-base64 | -hex] [-out file] num-bytes\n"
    + " -base64\tPerform base64 encoding on output\n"
    + " -hex\t\tHexadecimal output\n"
    + _OUT_HELP
)

_DGST_OPTIONS = (
    _USAGE
    + "dgst [options]\n"
    + " -hex\t\t Hex dump output\n"
    + " -binary\t Binary output\n"
    + " -sign\t file\t Sign digest using private key in file\n"
    + " -verify file\t Verify a signature using public key in file\n"
    + " -prverify file\t Verify a signature using private key in file\n"
    + " -out file\t Output file (default stdout)\n"
    + " -signature file Signature to verify\n"
    + " -md5\t\t To use the md5 message digest algorithm\n"
    + " -sha1\t\t To use the sha1 message digest algorithm\n"
    + " -sha224\t To use the sha224 message digest algorithm\n"
    + " -sha256\t To use the sha256 message digest algorithm\n"
    + " -sha384\t To use the sha384 message digest algorithm\n"
    + " -sha512\t To use the sha512 message digest algorithm\n"
)


def option_description(command: CommandType) -> str:
    """Return the option help for ``command``; empty when there is none."""
    if command.is_digest:
        return _DIGEST_OPTIONS
    if command is CommandType.BASE64:
        return _BASE64_OPTIONS
    if command.is_cipher:
        return _CIPHER_OPTIONS
    return {
        CommandType.PRIME: _PRIME_OPTIONS,
        CommandType.RAND: _RAND_OPTIONS,
        CommandType.DGST: _DGST_OPTIONS,
    }.get(command, "")


def full_usage(name: str, command: CommandType) -> str:
    """Return the one-line usage of ``command`` as invoked under ``name``."""
    if command.is_digest:
        return f"{_USAGE}{name} [-pqr] [-s string] [files ...]\n"
    if command.value < 30:
        return (
            f"{_USAGE}{name} [-a | -d | -e] [-p passwd] [-k key] [-s salt] "
            "[-v vector] [-in file] [-out file]\n"
        )
    return _USAGE


_FLAG_LETTERS = {
    "digest": "pqrs",
    "encoding": "deio",
    "cipher": "adeikopsv",
}


def valid_hash_flag(command: CommandType, flag: str) -> int:
    """Return the bit for the single-letter ``flag`` of ``command``.

    Raises ValueError for a letter the command does not take; its message
    is empty for ``h``, which asks for help rather than being a mistake.
    """
    if command.is_digest:
        allowed = _FLAG_LETTERS["digest"]
    elif command.is_encoding:
        allowed = _FLAG_LETTERS["encoding"]
    elif command.is_cipher:
        allowed = _FLAG_LETTERS["cipher"]
    else:
        allowed = ""
    if len(flag) == 1 and flag in allowed:
        return 1 << (ord(flag) - ord("a"))
    raise ValueError("" if flag[:1] == "h" else f"unknown option '-{flag[:1]}'")