import pytest

from saffron.textfile import read_file_without_bom

BOM = b"\xef\xbb\xbf"


def test_leading_bom_is_removed(tmp_path):
    path = tmp_path / "with_bom.json"
    path.write_bytes(BOM + '{"key": "value"}'.encode("utf-8"))
    assert read_file_without_bom(path) == '{"key": "value"}'


def test_plain_file_is_unchanged(tmp_path):
    text = "plain text\nsecond line"
    path = tmp_path / "plain.txt"
    path.write_bytes(text.encode("utf-8"))
    assert read_file_without_bom(str(path)) == text


def test_bom_only_file_reads_empty(tmp_path):
    path = tmp_path / "bom_only.txt"
    path.write_bytes(BOM)
    assert read_file_without_bom(path) == ""


def test_bom_in_middle_is_kept(tmp_path):
    path = tmp_path / "middle.txt"
    path.write_bytes(b"a" + BOM + b"b")
    assert read_file_without_bom(path) == "a\ufeffb"


def test_non_ascii_round_trip(tmp_path):
    text = "café ünïcode"
    path = tmp_path / "unicode.txt"
    path.write_bytes(BOM + text.encode("utf-8"))
    assert read_file_without_bom(path) == text


def test_invalid_utf8_is_replaced(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok\xffok")
    result = read_file_without_bom(path)
    assert result.startswith("ok")
    assert result.endswith("ok")
    assert "\ufffd" in result


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_without_bom(tmp_path / "missing.txt")