# ftssl

A small command-line toolkit in the spirit of `openssl`, written in pure
Python with no third-party dependencies. It computes message digests
(MD5, SHA-1, SHA-224, SHA-256, SHA-384, SHA-512), encodes and decodes
Base64, and prints random numbers.

## Installation

```
pip install .
```

## Command line

```
ftssl md5 -s "hello"
ftssl sha256 file.txt
echo "some text" | ftssl sha512 -p
ftssl base64 -e -in file.bin -out file.b64
ftssl base64 -d -in file.b64
ftssl rand -hex 8
ftssl version
```

### Digest commands

`md5`, `sha1`, `sha224`, `sha256`, `sha384` and `sha512` hash strings,
files and standard input. Options come before any file names:

- `-p` echo standard input to standard output and append the checksum
- `-q` quiet mode, print only the digest
- `-r` reverse the format of the output (`digest name` instead of
  `NAME (name) = digest`)
- `-s string` print the sum of the given string

Standard input is hashed when `-p` is given or when there are neither
strings nor files. Input is treated as text, so hashing stops at the
first NUL byte. Files that are missing or are directories are reported
on standard error and skipped.

### base64

`base64 [-e | -d] [-in file] [-out file]` encodes (the default) or
decodes. Encoded output is written in lines of 64 characters; when
decoding, whitespace is ignored and missing padding is tolerated.
`--encode` and `--decode` are accepted as long forms, `-i` and `-o` as
short forms of `-in` and `-out`.

### rand

`rand [-base64 | -hex] [-out file] num-bytes` prints a random number
that is exactly `num-bytes` bytes wide (1 to 8), as a decimal number by
default, as zero-padded hexadecimal with `-hex`, or Base64-encoded with
`-base64`. Random bytes come from the operating system.

### version

`version` prints the version line.

### Interactive mode

Run `ftssl` with no arguments to get an `ft_ssl>` prompt that reads one
command line at a time; type `quit` or `exit`, or end the input, to
leave it.

## Library use

```python
from ftssl.digest32 import md5, sha1, sha224, sha256
from ftssl.digest64 import sha384, sha512, digest
from ftssl.base64codec import encode, decode
from ftssl.maths import powmod, mulmod, mod_inverse

md5(b"abc")            # '900150983cd24fb0d6963f7d28e17f72'
digest("sha384", b"")  # hex digest by algorithm name
encode(b"hi")          # 'aGk=\n'
decode("aGk")          # b'hi'
powmod(4, 13, 497)     # 445
```

Other modules: `ftssl.commands` (command names, `lookup_command`, help
and usage texts), `ftssl.hashcmd` (`parse_hash_args`, `format_digest`,
`run_hash`), `ftssl.randcmd` (`genrand`, `parse_rand`, `rand_command`)
and `ftssl.cli` (`handle_inputs`, `read_files`, `main`).

## What it does not do

The command names `genrsa`, `rsa`, `rsautl`, `prime`, `des`, `des-ecb`,
`des-cbc`, `des-ofb`, `des3`, `des3-ecb`, `des3-cbc` and `des3-ofb` are
recognised, but there is no RSA key handling, prime testing or
generation, or DES encryption: these commands only report that they are
not available.

## Running the tests

```
pip install ".[test]"
pytest
```