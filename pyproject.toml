[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftssl"
version = "1.2.0"
description = "A small command-line toolkit for message digests, Base64 encoding and random numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["md5", "sha1", "sha224", "sha256", "sha384", "sha512", "base64", "digest", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftssl = "ftssl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ftssl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
