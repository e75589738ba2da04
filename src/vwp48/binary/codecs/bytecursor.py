from __future__ import annotations
import io
import struct
from typing import BinaryIO, Union

from vwp48.binary.errors import TruncatedInput

Source = Union[bytes, bytearray, memoryview, BinaryIO]


class ByteCursor:
    """Forward-only big-endian reader over bytes or a readable binary stream."""

    __slots__ = ("stream", "pos")

    def __init__(self, data: Source):
        if isinstance(data, (bytes, bytearray, memoryview)):
            data = io.BytesIO(bytes(data))
        self.stream = data
        self.pos = 0

    def tell(self) -> int: return self.pos

    def take(self, n: int) -> bytes:
        if n < 0: raise ValueError(f"negative read length {n} at {self.pos}")
        out = b""
        # streams may return short reads before EOF
        while len(out) < n:
            chunk = self.stream.read(n - len(out))
            if not chunk:
                raise TruncatedInput(self.pos, n, len(out))
            out += chunk
        self.pos += n
        return out

    def skip(self, n: int) -> None: self.take(n)

    # big-endian scalars
    def _unpack(self, fmt: str, n: int):
        return struct.unpack(fmt, self.take(n))[0]
    def u8(self) -> int:  return self._unpack(">B", 1)
    def s8(self) -> int:  return self._unpack(">b", 1)
    def u16(self) -> int: return self._unpack(">H", 2)
    def s16(self) -> int: return self._unpack(">h", 2)
    def u32(self) -> int: return self._unpack(">I", 4)
    def s32(self) -> int: return self._unpack(">i", 4)

    def s16_array(self, count: int) -> tuple[int, ...]:
        return struct.unpack(f">{count}h", self.take(2 * count))

    def string(self, n: int) -> str:
        # one byte -> one code point, no text decoding
        return self.take(n).decode("latin-1")
