import io

import pytest

from house_extractor.parsers import ByteCursor, EndOfStream, SeekError, ShortRead


def test_reads_little_endian_integers() -> None:
    data = bytes([0x7F, 0x34, 0x12, 0x78, 0x56, 0x34, 0x12]) + (0x0102030405060708).to_bytes(8, 'little')
    cursor = ByteCursor(io.BytesIO(data))

    assert cursor.read_u8() == 0x7F
    assert cursor.read_u16() == 0x1234
    assert cursor.read_u32() == 0x12345678
    assert cursor.read_u64() == 0x0102030405060708
    assert cursor.position == len(data)


def test_read_bytes_returns_exact_run() -> None:
    cursor = ByteCursor(io.BytesIO(b'OTBMrest'))
    assert cursor.read_bytes(4) == b'OTBM'
    assert cursor.position == 4


def test_empty_stream_is_end_of_stream() -> None:
    cursor = ByteCursor(io.BytesIO(b''))
    with pytest.raises(EndOfStream) as excinfo:
        cursor.read_u8()
    assert excinfo.value.offset == 0
    assert isinstance(excinfo.value, EOFError)


def test_partial_read_is_short_read() -> None:
    cursor = ByteCursor(io.BytesIO(b'\x01\x02\x03'))
    with pytest.raises(ShortRead) as excinfo:
        cursor.read_u32()
    assert excinfo.value.requested == 4
    assert excinfo.value.received == 3


def test_seek_relative_moves_both_ways() -> None:
    cursor = ByteCursor(io.BytesIO(b'\x00\x01\x02\x03'))
    cursor.seek_relative(3)
    assert cursor.read_u8() == 0x03
    cursor.seek_relative(-2)
    assert cursor.read_u8() == 0x02


def test_seek_before_start_fails() -> None:
    cursor = ByteCursor(io.BytesIO(b'\x00\x01'))
    cursor.read_u8()
    with pytest.raises(SeekError):
        cursor.seek_relative(-2)
    # Position is untouched by the failed seek
    assert cursor.position == 1


def test_seek_past_end_then_read_is_end_of_stream() -> None:
    cursor = ByteCursor(io.BytesIO(b'\x00\x01'))
    cursor.seek_relative(5)
    with pytest.raises(EndOfStream):
        cursor.read_u8()
