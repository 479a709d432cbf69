from sectorscope.console import Screen
from sectorscope.disk import DiskImage
from sectorscope.kernel import dump_sector, main

PREVIEW = b"HELLO SECTOR ZERO!!!"
DATA = PREVIEW + bytes(i % 256 for i in range(512 - len(PREVIEW)))


def dumped_rows():
    screen = Screen(height=60)
    returned = dump_sector(DiskImage(DATA), screen)
    return returned, screen.text().split("\n")


def test_returns_sector():
    returned, _ = dumped_rows()
    assert returned == DATA


def test_header_lines():
    _, rows = dumped_rows()
    assert rows[0] == "Reading sector 0 from disk..."
    assert rows[1] == ""
    assert rows[2] == "Reading sector 0..."
    assert rows[3] == "First bytes: " + PREVIEW.decode()
    assert rows[5] == "First 20 bytes (hex):"


def test_hex_preview_matches_first_bytes():
    _, rows = dumped_rows()
    assert [int(token, 16) for token in rows[6].split()] == list(DATA[:20])
    assert all(len(token) == 2 for token in rows[6].split())


def test_full_dump_covers_sector():
    _, rows = dumped_rows()
    dump = rows[7:39]
    assert all(len(row.split()) == 16 for row in dump)
    tokens = [token for row in dump for token in row.split()]
    assert [int(token, 16) for token in tokens] == list(DATA)


def test_done_line_follows_dump():
    _, rows = dumped_rows()
    assert rows[39] == "Done reading sector 0."
    assert all(row == "" for row in rows[40:])


def test_main_prints_screen(tmp_path, capsys):
    path = tmp_path / "disk.img"
    path.write_bytes(DATA)
    assert main([str(path)]) == 0
    assert "Done reading sector 0." in capsys.readouterr().out


def test_main_missing_image(tmp_path, capsys):
    assert main([str(tmp_path / "absent.img")]) == 1
    assert "sectorscope:" in capsys.readouterr().err