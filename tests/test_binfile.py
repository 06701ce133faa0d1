import pytest

from coursehub.binfile import (
    BinaryFile,
    Reader,
    encode_double,
    encode_string,
    encode_uint,
)
from coursehub.config import TEMP_FILE


def _decode(reader):
    return reader.uint(), reader.string()


def _encode(number, text):
    return encode_uint(number) + encode_string(text)


def test_uint_is_little_endian_four_bytes():
    assert encode_uint(1) == b"\x01\x00\x00\x00"


def test_string_is_length_prefixed():
    assert encode_string("abc") == b"\x03\x00\x00\x00abc"


def test_uint_out_of_range_is_refused():
    with pytest.raises(ValueError):
        encode_uint(-1)
    with pytest.raises(ValueError):
        encode_uint(2**32)


def test_reader_round_trip():
    data = encode_uint(42) + encode_double(4.5) + bytes([2]) + encode_string("héllo")
    reader = Reader(data)
    assert reader.uint() == 42
    assert reader.double() == 4.5
    assert reader.byte() == 2
    assert reader.string() == "héllo"
    assert reader.at_end()


def test_reader_truncated_raises():
    reader = Reader(encode_uint(7)[:2])
    with pytest.raises(EOFError):
        reader.uint()


def test_new_file_is_created_empty(tmp_path):
    path = tmp_path / "data.dat"
    with BinaryFile(path, _decode) as file:
        assert path.exists()
        assert file.size() == 0
        assert list(file.records()) == []


def test_append_and_records(tmp_path):
    with BinaryFile(tmp_path / "data.dat", _decode) as file:
        first = _encode(5, "five")
        second = _encode(6, "six")
        file.append(first)
        file.append(second)
        assert file.size() == len(first) + len(second)
        assert list(file.records()) == [((5, "five"), first), ((6, "six"), second)]


def test_truncated_trailing_record_is_ignored(tmp_path):
    with BinaryFile(tmp_path / "data.dat", _decode) as file:
        whole = _encode(1, "one")
        file.append(whole)
        file.append(_encode(2, "two")[:-1])
        assert [record for record, _ in file.records()] == [(1, "one")]


def test_rewrite_replaces_content(tmp_path):
    path = tmp_path / "data.dat"
    with BinaryFile(path, _decode) as file:
        file.append(_encode(1, "one"))
        file.append(_encode(2, "two"))
        file.rewrite(raw for record, raw in file.records() if record[0] != 1)
        assert [record for record, _ in file.records()] == [(2, "two")]
        assert not (tmp_path / TEMP_FILE).exists()
    with BinaryFile(path, _decode) as reopened:
        assert [record for record, _ in reopened.records()] == [(2, "two")]


def test_closed_file_refuses_work(tmp_path):
    file = BinaryFile(tmp_path / "data.dat", _decode)
    file.close()
    with pytest.raises(ValueError):
        file.size()
    with pytest.raises(ValueError):
        file.append(b"x")