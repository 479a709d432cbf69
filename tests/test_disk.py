import io

import pytest

from sectorscope.disk import MAX_LBA, SECTOR_SIZE, DiskImage


def make_image(sectors):
    return b"".join(bytes([n]) * SECTOR_SIZE for n in range(sectors))


def test_read_sector_returns_whole_sector():
    disk = DiskImage(make_image(3))
    data = disk.read_sector(1)
    assert len(data) == SECTOR_SIZE
    assert set(data) == {1}


def test_each_sector_is_distinct():
    disk = DiskImage(make_image(4))
    assert [disk.read_sector(n)[0] for n in range(4)] == [0, 1, 2, 3]


def test_partial_last_sector_is_zero_padded():
    image = make_image(1) + b"\xaa" * 10
    disk = DiskImage(image)
    data = disk.read_sector(1)
    assert data[:10] == b"\xaa" * 10
    assert data[10:] == bytes(SECTOR_SIZE - 10)


def test_read_past_end_raises():
    disk = DiskImage(make_image(2))
    with pytest.raises(ValueError):
        disk.read_sector(2)


@pytest.mark.parametrize("lba", [-1, MAX_LBA + 1])
def test_lba_out_of_range_raises(lba):
    disk = DiskImage(make_image(1))
    with pytest.raises(ValueError):
        disk.read_sector(lba)


def test_path_source_and_context_manager(tmp_path):
    path = tmp_path / "disk.img"
    path.write_bytes(make_image(2))
    with DiskImage(path) as disk:
        assert disk.read_sector(1) == bytes([1]) * SECTOR_SIZE
    with pytest.raises(ValueError):
        disk.read_sector(0)


def test_borrowed_file_is_left_open():
    handle = io.BytesIO(make_image(1))
    disk = DiskImage(handle)
    disk.close()
    assert handle.closed is False
    assert disk.read_sector(0) == bytes(SECTOR_SIZE)