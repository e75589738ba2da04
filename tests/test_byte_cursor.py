import io
import struct

import pytest

from vwp48.binary.codecs.bytecursor import ByteCursor
from vwp48.binary.errors import ParseError, TruncatedInput


def test_typed_big_endian_reads():
    data = struct.pack(">BbHhIi", 0xFE, -2, 0xBEEF, -300, 0xDEADBEEF, -70000)
    cur = ByteCursor(data)
    assert cur.u8() == 0xFE
    assert cur.s8() == -2
    assert cur.u16() == 0xBEEF
    assert cur.s16() == -300
    assert cur.u32() == 0xDEADBEEF
    assert cur.s32() == -70000
    assert cur.tell() == len(data)


def test_s16_array():
    cur = ByteCursor(struct.pack(">4h", 1, -1, 300, 0))
    assert cur.s16_array(4) == (1, -1, 300, 0)
    assert cur.tell() == 8


def test_string_maps_bytes_to_code_points():
    cur = ByteCursor(b"VAD \xe9\xff")
    s = cur.string(6)
    assert s == "VAD éÿ"
    assert [ord(c) for c in s[-2:]] == [0xE9, 0xFF]


def test_truncated_read_reports_position():
    cur = ByteCursor(b"\x00\x01\x02")
    cur.u16()
    with pytest.raises(TruncatedInput) as ei:
        cur.u32()
    err = ei.value
    assert isinstance(err, ParseError)
    assert err.offset == 2
    assert err.needed == 4
    assert err.available == 1


def test_stream_source_with_short_reads():
    class Dribble(io.RawIOBase):
        def __init__(self, data):
            self.data = data
        def readable(self):
            return True
        def read(self, n=-1):
            out, self.data = self.data[:1], self.data[1:]
            return out

    cur = ByteCursor(Dribble(struct.pack(">ih", 123456, -5)))
    assert cur.s32() == 123456
    assert cur.s16() == -5
    with pytest.raises(TruncatedInput):
        cur.u8()


def test_skip_advances_and_checks_bounds():
    cur = ByteCursor(b"\x00" * 10)
    cur.skip(8)
    assert cur.tell() == 8
    with pytest.raises(TruncatedInput):
        cur.skip(4)
