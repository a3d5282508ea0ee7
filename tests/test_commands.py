import pytest

from ftssl.commands import (
    CommandType,
    InvalidCommandError,
    full_usage,
    lookup_command,
    option_description,
    supported_text,
    valid_hash_flag,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("md5", CommandType.MD5),
        ("sha1", CommandType.SHA1),
        ("sha224", CommandType.SHA224),
        ("sha256", CommandType.SHA256),
        ("sha384", CommandType.SHA384),
        ("sha512", CommandType.SHA512),
        ("base64", CommandType.BASE64),
        ("des", CommandType.DES),
        ("des3-cbc", CommandType.DES3_CBC),
        ("genrsa", CommandType.GENRSA),
        ("prime", CommandType.PRIME),
        ("version", CommandType.VERSION),
        ("rand", CommandType.RAND),
    ],
)
def test_lookup_command_known_names(name, expected):
    assert lookup_command(name) is expected


def test_lookup_command_ignores_text_after_space():
    assert lookup_command("sha256 extra words") is CommandType.SHA256


def test_lookup_command_identifiers_match_source():
    assert lookup_command("rand").value == 42
    assert lookup_command("base64").value == 11


@pytest.mark.parametrize("name", ["bogus", "dgst", "MD5", ""])
def test_lookup_command_unknown(name):
    with pytest.raises(InvalidCommandError) as info:
        lookup_command(name)
    assert f"'{name}' is an invalid command." in str(info.value)
    assert info.value.name == name


def test_invalid_command_reports_truncated_name():
    with pytest.raises(InvalidCommandError) as info:
        lookup_command("nope tail")
    assert info.value.name == "nope"


def test_supported_text_lists_commands():
    text = supported_text()
    assert "Message Digest Commands" in text
    assert "md5\t\tsha1\t\tsha224\t\tsha256\n" in text
    assert "sha384\t\tsha512\n" in text
    assert text.index("Standard commands") < text.index("Cipher Commands")


def test_option_description_digest():
    text = option_description(CommandType.MD5)
    assert " -q\tQuiet mode\n" in text
    assert text == option_description(CommandType.SHA512)


def test_option_description_rand():
    text = option_description(CommandType.RAND)
    assert "rand [-base64 | -hex] [-out file] num-bytes\n" in text
    assert text.endswith(" -out file\tOutput file (default stdout)\n")


def test_option_description_base64_and_cipher_differ():
    b64 = option_description(CommandType.BASE64)
    des = option_description(CommandType.DES)
    assert "base64 [-e | -d] [-in file] [-out file]\n" in b64
    assert " -v\t\tInitialization vector in hex is the next argument\n" in des
    assert des == option_description(CommandType.DES3_ECB)


def test_option_description_prime_and_dgst():
    assert "prime [-bits n] [-generate] [-hex] p\n" in option_description(CommandType.PRIME)
    assert "dgst [options]\n" in option_description(CommandType.DGST)


def test_full_usage_digest():
    assert full_usage("md5", CommandType.MD5).endswith("md5 [-pqr] [-s string] [files ...]\n")


def test_full_usage_cipher():
    text = full_usage("des", CommandType.DES)
    assert "des [-a | -d | -e] [-p passwd]" in text
    assert text.endswith("[-v vector] [-in file] [-out file]\n")


def test_full_usage_other_is_prefix_only():
    assert "usage" in full_usage("rand", CommandType.RAND)
    assert "rand" not in full_usage("rand", CommandType.RAND)


@pytest.mark.parametrize(
    "flag, bit", [("p", 0x8000), ("q", 0x10000), ("r", 0x20000), ("s", 0x40000)]
)
def test_valid_hash_flag_digest_bits(flag, bit):
    assert valid_hash_flag(CommandType.MD5, flag) == bit


def test_valid_hash_flag_base64():
    assert valid_hash_flag(CommandType.BASE64, "d") == 0x8
    with pytest.raises(ValueError, match="unknown option '-p'"):
        valid_hash_flag(CommandType.BASE64, "p")


def test_valid_hash_flag_cipher_accepts_key():
    assert valid_hash_flag(CommandType.DES, "k") == 0x400


def test_valid_hash_flag_unknown():
    with pytest.raises(ValueError, match="unknown option '-x'"):
        valid_hash_flag(CommandType.SHA256, "x")


def test_valid_hash_flag_help_is_silent():
    with pytest.raises(ValueError) as info:
        valid_hash_flag(CommandType.MD5, "h")
    assert str(info.value) == ""


def test_valid_hash_flag_standard_takes_none():
    with pytest.raises(ValueError, match="unknown option '-p'"):
        valid_hash_flag(CommandType.RAND, "p")


def test_command_categories():
    assert lookup_command("sha1").is_digest
    assert lookup_command("base64").is_encoding
    assert lookup_command("des3").is_cipher
    assert lookup_command("rand").is_standard
    assert not lookup_command("rand").is_digest