# sectorscope

Tools for looking inside raw disk images. sectorscope reads 512-byte sectors from an image file and shows what they hold. It can also read the boot sector of a FAT32 volume, list the names in its root directory and read the files stored there.

Output goes to an 80×25 text screen held in memory. This is the layout of a classic VGA text console. A newline moves the cursor to the start of the next row. Output that runs past the last cell wraps back to the top-left cell and overwrites what was there.

## Installation

```
pip install .
```

The package needs only the Python standard library, version 3.10 or later.

## Command line

```
sectorscope disk.img
```

This reads sector 0 of `disk.img` and writes three views of it to the in-memory screen:

- the first 20 bytes as characters
- the first 20 bytes as hexadecimal
- a hex dump of the whole sector, 16 bytes to a row

The screen is then printed to standard output with trailing blanks removed. The full dump is longer than 25 rows, so it wraps and overwrites the top of the screen, as it would on a real console.

If the image cannot be opened or is empty, the command prints an error to standard error and exits with status 1.

## Library use

### Reading sectors

```python
from sectorscope.disk import DiskImage

with DiskImage("disk.img") as disk:
    boot = disk.read_sector(0)   # 512 bytes
```

`DiskImage` accepts any of these:

- a path
- raw bytes
- an open binary file object

It closes only the files it opened itself.

`read_sector(lba)` behaves as follows:

- A sector cut short by the end of the image is padded with zeros.
- A sector that lies wholly past the end raises `ValueError`.
- An LBA outside the 28-bit range also raises `ValueError`.

### Browsing a FAT32 volume

```python
from sectorscope.disk import DiskImage
from sectorscope.fat32 import Fat32Volume, Fat32Error

with DiskImage("disk.img") as disk:
    try:
        volume = Fat32Volume(disk)
    except Fat32Error as exc:
        print("not a usable FAT32 volume:", exc)
    else:
        for name in volume.list_root():
            print(name)                  # e.g. "HELLO.TXT"
        data = volume.read_file("HELLO   TXT", limit=4096)
```

**Opening a volume.** `Fat32Volume` parses sector 0 into a `BiosParameterBlock`. It raises `Fat32Error` in these cases:

- the jump byte is missing
- the sector size is not 512 bytes
- the boot sector is too short

**Listing.** `list_root()` returns the display names of the short-name entries in the root directory. Each name has the form `BASE.EXT`, and the dot is always present. Deleted entries and long-name entries are skipped.

**Reading a file.** `read_file(filename, limit=None)` looks a file up in the root directory by its raw 11-character 8.3 name. That name is the base padded with spaces to eight characters, followed by the extension padded to three.

- It returns at most `file_size` bytes, and never more than `limit` when `limit` is given.
- It raises `FileNotFoundError` if no entry matches.
- It raises `ValueError` if the name is not 11 bytes long or `limit` is negative.

**Low-level access.** `cluster_to_lba`, `read_cluster` and `next_cluster` give direct access to clusters and FAT entries. A cluster chain that loops back on itself raises `Fat32Error`.

**Parsing entries yourself.** `DirEntry.from_bytes` parses a raw 32-byte directory entry.

**Log messages.** Opening a volume and finding a file are reported at INFO level through the `sectorscope.fat32` logger.

### The text screen

```python
from sectorscope.console import Screen

screen = Screen()
screen.printf("value=%d hex=%02x name=%s\n", -42, 7, "boot")
print(screen.text())
```

`printf` understands `%s`, `%d`, `%c` and `%x`. The only width it accepts is `02`. Any other directive is printed as it stands and uses no argument. Passing too few arguments raises `TypeError`.

`putchar` takes a single character or a byte value. `puts` stops at the first NUL. `clear` blanks the screen and moves the cursor home.

### Number formatting

```python
from sectorscope.textfmt import itoa, utoa_hex

itoa(-123)         # "-123"
utoa_hex(0xAB, 4)  # "00ab"
```

`itoa` formats its argument as a signed 32-bit integer. `utoa_hex` formats it as unsigned 32-bit lowercase hex.

## What it does not do

- Access is read-only. Nothing is ever written to an image.
- Only the root directory of a FAT32 volume is searched. Subdirectories and long file names are not supported.
- The command line only dumps sector 0. Listing and reading FAT32 files is available from Python only.