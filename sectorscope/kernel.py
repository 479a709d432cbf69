"""Show the first sector of a disk image on a text screen."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .console import Screen
from .disk import DiskImage
from .fat32 import SectorReader
from .textfmt import utoa_hex

PREVIEW_BYTES = 20
BYTES_PER_ROW = 16


def dump_sector(disk: SectorReader, screen: Screen) -> bytes:
    """Read sector 0, write a preview and a full hex dump to ``screen``, and return it."""
    screen.printf("Reading sector 0 from disk...\n\n")
    screen.printf("Reading sector 0...\n")

    buffer = disk.read_sector(0)

    screen.printf("First bytes: ")
    for byte in buffer[:PREVIEW_BYTES]:
        screen.printf("%c", byte)
    screen.printf("\n\n")

    screen.printf("First 20 bytes (hex):\n")
    for byte in buffer[:PREVIEW_BYTES]:
        screen.printf("%02x ", byte)
    screen.printf("\n")

    for count, byte in enumerate(buffer, start=1):
        screen.puts(utoa_hex(byte, 2))
        screen.putchar(" ")
        if count % BYTES_PER_ROW == 0:
            screen.puts("\n")

    screen.printf("Done reading sector 0.\n")
    return buffer


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sectorscope", description="Display sector 0 of a disk image."
    )
    parser.add_argument("image", help="path to the disk image")
    args = parser.parse_args(argv)

    screen = Screen()
    screen.clear()
    try:
        with DiskImage(args.image) as disk:
            dump_sector(disk, screen)
    except (OSError, ValueError) as exc:
        print(f"sectorscope: {exc}", file=sys.stderr)
        return 1
    print(screen.text())
    return 0