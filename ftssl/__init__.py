"""Message digests, Base64 encoding and random numbers from the command line."""

__version__ = "1.2.0"