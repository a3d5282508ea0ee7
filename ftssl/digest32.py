"""Message digests built on 32-bit words: MD5, SHA-1, SHA-224 and SHA-256.

Input is treated the way the command line hands it over: as a C-style
string, so hashing stops at the first NUL byte.  Every function returns
the digest as a lowercase hexadecimal string.
"""

from __future__ import annotations

import struct
from collections.abc import Iterator

__all__ = ["md5", "sha1", "sha224", "sha256"]

_MASK = 0xFFFFFFFF

_MD5_S = (
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
)

_MD5_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHA1_K = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

_SHA256_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1,
    0x923F82A4, 0xAB1C5ED5, 0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174, 0xE49B69C1, 0xEFBE4786,
    0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147,
    0x06CA6351, 0x14292967, 0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85, 0xA2BFE8A1, 0xA81A664B,
    0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A,
    0x5B9CCA4F, 0x682E6FF3, 0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_SHA224_INIT = (
    0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
    0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
)

_SHA256_INIT = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _as_message(data: bytes | bytearray | str) -> bytes:
    """Return the bytes to hash: everything before the first NUL."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return raw.split(b"\x00", 1)[0]


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _e0(x: int) -> int:
    return _rotr(x, 2) ^ _rotr(x, 13) ^ _rotr(x, 22)


def _e1(x: int) -> int:
    return _rotr(x, 6) ^ _rotr(x, 11) ^ _rotr(x, 25)


def _s0(x: int) -> int:
    return _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)


def _s1(x: int) -> int:
    return _rotr(x, 17) ^ _rotr(x, 19) ^ (x >> 10)


def _blocks(message: bytes, little_endian: bool) -> Iterator[tuple[int, ...]]:
    """Pad the message and yield its 64-byte blocks as sixteen words."""
    bit_length = (len(message) * 8) & 0xFFFFFFFFFFFFFFFF
    padding = b"\x80" + b"\x00" * ((55 - len(message)) % 64)
    order = "<" if little_endian else ">"
    padded = message + padding + struct.pack(order + "Q", bit_length)
    word_format = order + "16I"
    for offset in range(0, len(padded), 64):
        yield struct.unpack(word_format, padded[offset:offset + 64])


def _md5_compress(state: list[int], words: tuple[int, ...]) -> None:
    a, b, c, d = state
    for i in range(64):
        if i < 16:
            bits = (b & c) | (~b & d)
            index = i
        elif i < 32:
            bits = (d & b) | (~d & c)
            index = (5 * i + 1) % 16
        elif i < 48:
            bits = b ^ c ^ d
            index = (3 * i + 5) % 16
        else:
            bits = c ^ (b | (~d & _MASK))
            index = (7 * i) % 16
        bits = (bits + a + _MD5_K[i] + words[index]) & _MASK
        a, d, c = d, c, b
        b = (b + _rotl(bits, _MD5_S[i])) & _MASK
    state[:] = [(s + v) & _MASK for s, v in zip(state, (a, b, c, d))]


def md5(data: bytes | bytearray | str) -> str:
    """Return the MD5 digest of ``data`` as 32 hexadecimal digits."""
    state = [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476]
    for words in _blocks(_as_message(data), little_endian=True):
        _md5_compress(state, words)
    return struct.pack("<4I", *state).hex()


def _sha1_compress(state: list[int], words: tuple[int, ...]) -> None:
    w = list(words)
    for i in range(16, 80):
        w.append(_rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
    a, b, c, d, e = state
    for i, word in enumerate(w):
        if i < 20:
            f = (b & c) | (~b & d)
        elif i < 40:
            f = b ^ c ^ d
        elif i < 60:
            f = (b & c) | (b & d) | (c & d)
        else:
            f = b ^ c ^ d
        tmp = (_rotl(a, 5) + f + e + _SHA1_K[i // 20] + word) & _MASK
        a, b, c, d, e = tmp, a, _rotl(b, 30), c, d
    state[:] = [(s + v) & _MASK for s, v in zip(state, (a, b, c, d, e))]


def sha1(data: bytes | bytearray | str) -> str:
    """Return the SHA-1 digest of ``data`` as 40 hexadecimal digits."""
    state = [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0]
    for words in _blocks(_as_message(data), little_endian=False):
        _sha1_compress(state, words)
    return "".join(f"{h:08x}" for h in state)


def _sha256_compress(state: list[int], words: tuple[int, ...]) -> None:
    w = list(words)
    for i in range(16, 64):
        w.append((w[i - 16] + _s0(w[i - 15]) + w[i - 7] + _s1(w[i - 2])) & _MASK)
    a, b, c, d, e, f, g, h = state
    for k, word in zip(_SHA256_K, w):
        ch = (e & f) ^ (~e & g)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t1 = (h + _e1(e) + ch + k + word) & _MASK
        t2 = (_e0(a) + maj) & _MASK
        h, g, f, e = g, f, e, (d + t1) & _MASK
        d, c, b, a = c, b, a, (t1 + t2) & _MASK
    state[:] = [(s + v) & _MASK for s, v in zip(state, (a, b, c, d, e, f, g, h))]


def _sha2_32(data: bytes | bytearray | str, initial: tuple[int, ...], words_out: int) -> str:
    state = list(initial)
    for words in _blocks(_as_message(data), little_endian=False):
        _sha256_compress(state, words)
    return "".join(f"{h:08x}" for h in state[:words_out])


def sha224(data: bytes | bytearray | str) -> str:
    """Return the SHA-224 digest of ``data`` as 56 hexadecimal digits."""
    return _sha2_32(data, _SHA224_INIT, 7)


def sha256(data: bytes | bytearray | str) -> str:
    """Return the SHA-256 digest of ``data`` as 64 hexadecimal digits."""
    return _sha2_32(data, _SHA256_INIT, 8)