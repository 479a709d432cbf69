"""Inspect raw disk images: sector dumps, a text screen and FAT32 root directories."""

__version__ = "0.1.0"