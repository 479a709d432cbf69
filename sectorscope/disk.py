"""Sector-level read access to a disk image."""

from __future__ import annotations

import io
import os
from typing import BinaryIO, Union

SECTOR_SIZE = 512
MAX_LBA = 0x0FFFFFFF  # 28-bit LBA addressing

DiskSource = Union[str, "os.PathLike[str]", bytes, bytearray, memoryview, BinaryIO]


class DiskImage:
    """A read-only disk addressed in 512-byte sectors by 28-bit LBA.

    The source may be a path, raw bytes, or an open binary file object.
    Files opened here are closed by :meth:`close`; file objects handed in
    are left open.
    """

    def __init__(self, source: DiskSource) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._file: BinaryIO = io.BytesIO(bytes(source))
            self._owned = True
        elif isinstance(source, (str, os.PathLike)):
            self._file = open(source, "rb")
            self._owned = True
        else:
            self._file = source
            self._owned = False

    def read_sector(self, lba: int) -> bytes:
        """Return the 512 bytes of sector ``lba``.

        A sector cut short by the end of the image is padded with zeros;
        a sector wholly past the end raises ``ValueError``.
        """
        if not 0 <= lba <= MAX_LBA:
            raise ValueError(f"LBA {lba} is outside the 28-bit range")
        self._file.seek(lba * SECTOR_SIZE)
        data = self._file.read(SECTOR_SIZE)
        if not data:
            raise ValueError(f"sector {lba} lies beyond the end of the disk")
        return data.ljust(SECTOR_SIZE, b"\0")

    def close(self) -> None:
        """Release the underlying file if this object opened it."""
        if self._owned:
            self._file.close()

    def __enter__(self) -> "DiskImage":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()