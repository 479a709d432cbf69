"""Reading files and listing the root directory of a FAT32 volume."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, Union

from .disk import SECTOR_SIZE

log = logging.getLogger(__name__)

END_OF_CHAIN = 0x0FFFFFF8
CLUSTER_MASK = 0x0FFFFFFF
DIR_ENTRY_SIZE = 32
ENTRY_END = 0x00
ENTRY_DELETED = 0xE5
ATTR_VOLUME_ID = 0x08
ATTR_LONG_NAME = 0x0F

_DIR_ENTRY = struct.Struct("<11s3B7HI")


class SectorReader(Protocol):
    def read_sector(self, lba: int) -> bytes: ...


class Fat32Error(Exception):
    """Raised when a volume is not a FAT32 volume this reader can handle."""


@dataclass(frozen=True)
class BiosParameterBlock:
    """The boot-sector fields needed to locate the FAT and the data area."""

    bytes_per_sector: int
    sectors_per_cluster: int
    reserved_sector_count: int
    num_fats: int
    fat_size_32: int
    root_cluster: int

    @classmethod
    def from_sector(cls, sector: bytes) -> "BiosParameterBlock":
        """Parse a boot sector, raising ``Fat32Error`` if it is unsupported."""
        if len(sector) < 48:
            raise Fat32Error("boot sector is too short")
        if sector[0] not in (0xEB, 0xE9):
            raise Fat32Error("Invalid boot sector signature")
        bytes_per_sector, per_cluster, reserved, num_fats = struct.unpack_from(
            "<HBHB", sector, 11
        )
        if bytes_per_sector != SECTOR_SIZE:
            raise Fat32Error(f"Unsupported bytes per sector: {bytes_per_sector}")
        (fat_size,) = struct.unpack_from("<I", sector, 36)
        (root_cluster,) = struct.unpack_from("<I", sector, 44)
        return cls(bytes_per_sector, per_cluster, reserved, num_fats, fat_size, root_cluster)

    @property
    def fat_start_lba(self) -> int:
        return self.reserved_sector_count

    @property
    def cluster_start_lba(self) -> int:
        return self.fat_start_lba + self.num_fats * self.fat_size_32


@dataclass(frozen=True)
class DirEntry:
    """One 32-byte short-name directory entry."""

    name: bytes
    attr: int
    nt_reserved: int
    creation_time_tenths: int
    creation_time: int
    creation_date: int
    last_access_date: int
    first_cluster_high: int
    write_time: int
    write_date: int
    first_cluster_low: int
    file_size: int

    @classmethod
    def from_bytes(cls, raw: bytes) -> "DirEntry":
        if len(raw) < DIR_ENTRY_SIZE:
            raise Fat32Error("directory entry is shorter than 32 bytes")
        return cls(*_DIR_ENTRY.unpack_from(raw))

    @property
    def first_cluster(self) -> int:
        return (self.first_cluster_high << 16) | self.first_cluster_low

    @property
    def is_end(self) -> bool:
        return self.name[0] == ENTRY_END

    @property
    def is_deleted(self) -> bool:
        return self.name[0] == ENTRY_DELETED

    @property
    def is_volume_label(self) -> bool:
        return bool(self.attr & ATTR_VOLUME_ID)

    @property
    def is_long_name(self) -> bool:
        return self.attr & ATTR_LONG_NAME == ATTR_LONG_NAME

    def display_name(self) -> str:
        """Return the name as ``BASE.EXT``; the dot is always present."""
        base = self.name[:8].split(b" ", 1)[0]
        ext = self.name[8:11].split(b" ", 1)[0]
        return f"{base.decode('latin-1')}.{ext.decode('latin-1')}"


class Fat32Volume:
    """A FAT32 volume on a sector-addressed disk."""

    def __init__(self, disk: SectorReader) -> None:
        self.disk = disk
        self.bpb = BiosParameterBlock.from_sector(disk.read_sector(0))
        log.info(
            "FAT32 init: sectors_per_cluster=%d, reserved=%d, fats=%d, "
            "sectors_per_fat=%d, root_cluster=%d",
            self.bpb.sectors_per_cluster,
            self.bpb.reserved_sector_count,
            self.bpb.num_fats,
            self.bpb.fat_size_32,
            self.bpb.root_cluster,
        )

    def cluster_to_lba(self, cluster: int) -> int:
        """Return the first sector of a data cluster."""
        if cluster < 2:
            raise Fat32Error(f"invalid data cluster {cluster}")
        return self.bpb.cluster_start_lba + (cluster - 2) * self.bpb.sectors_per_cluster

    def read_cluster(self, cluster: int) -> bytes:
        """Return every sector of a cluster, concatenated."""
        first = self.cluster_to_lba(cluster)
        return b"".join(
            self.disk.read_sector(lba)
            for lba in range(first, first + self.bpb.sectors_per_cluster)
        )

    def next_cluster(self, cluster: int) -> int:
        """Return the FAT entry for ``cluster`` with its top four bits cleared."""
        offset = cluster * 4
        sector = self.disk.read_sector(self.bpb.fat_start_lba + offset // SECTOR_SIZE)
        (entry,) = struct.unpack_from("<I", sector, offset % SECTOR_SIZE)
        return entry & CLUSTER_MASK

    def _chain(self, start: int) -> Iterator[int]:
        seen = set()
        cluster = start
        while cluster != 0 and cluster < END_OF_CHAIN:
            if cluster in seen:
                raise Fat32Error(f"cluster chain loops back to cluster {cluster}")
            seen.add(cluster)
            yield cluster
            cluster = self.next_cluster(cluster)

    def _root_entries(self) -> Iterator[DirEntry]:
        for cluster in self._chain(self.bpb.root_cluster):
            data = self.read_cluster(cluster)
            for offset in range(0, len(data) - DIR_ENTRY_SIZE + 1, DIR_ENTRY_SIZE):
                entry = DirEntry.from_bytes(data[offset:offset + DIR_ENTRY_SIZE])
                if entry.is_end:
                    return
                yield entry

    def read_file(self, filename: Union[str, bytes], limit: Optional[int] = None) -> bytes:
        """Read a root-directory file by its 11-byte 8.3 name, e.g. ``"HELLO   TXT"``.

        At most ``limit`` bytes are returned when it is given. Raises
        ``FileNotFoundError`` when no such entry exists.
        """
        name = filename.encode("latin-1") if isinstance(filename, str) else bytes(filename)
        if len(name) != 11:
            raise ValueError("filename must be an 11-byte 8.3 directory name")
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")
        for entry in self._root_entries():
            if entry.is_deleted or entry.is_volume_label:
                continue
            if entry.name == name:
                log.info(
                    "Found file: %s cluster=%d size=%d",
                    name.decode("latin-1"),
                    entry.first_cluster,
                    entry.file_size,
                )
                wanted = entry.file_size if limit is None else min(entry.file_size, limit)
                return self._read_chain(entry.first_cluster, wanted)
        raise FileNotFoundError(f"no such file in root directory: {filename!r}")

    def _read_chain(self, start: int, wanted: int) -> bytes:
        parts = []
        read = 0
        for cluster in self._chain(start):
            first = self.cluster_to_lba(cluster)
            for lba in range(first, first + self.bpb.sectors_per_cluster):
                if read >= wanted:
                    return b"".join(parts)[:wanted]
                parts.append(self.disk.read_sector(lba))
                read += SECTOR_SIZE
        return b"".join(parts)[:wanted]

    def list_root(self) -> list[str]:
        """Return the display names of the root directory's short-name entries."""
        return [
            entry.display_name()
            for entry in self._root_entries()
            if not entry.is_deleted and not entry.is_long_name
        ]