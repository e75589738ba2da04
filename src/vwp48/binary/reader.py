from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, List, Union

from .codecs.bytecursor import ByteCursor
from .codecs.message_header import decode_message_header
from .codecs.description_block import decode_description_block
from .codecs.tabular_block import decode_tabular_block, Page
from .codecs.vad_text import extract_profile

from vwp48.models.common import Station
from vwp48.models.file import VwpFile

BytesLike = Union[str, Path, bytes, bytearray, memoryview, BinaryIO]


# -----------------------------
# Helpers
# -----------------------------

def _open_cursor(inp: BytesLike) -> ByteCursor:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return ByteCursor(inp)
    if isinstance(inp, (str, Path)):
        return ByteCursor(Path(inp).read_bytes())
    return ByteCursor(inp)


# -----------------------------
# Full parse
# -----------------------------

def read_pages(data: BytesLike) -> List[Page]:
    """
    Decode up to the tabular block and return its text pages.
    Products without a tabular block yield no pages.
    """
    cur = _open_cursor(data)
    decode_message_header(cur)
    desc = decode_description_block(cur)
    if not desc.has_tabular:
        return []
    return decode_tabular_block(cur)


def parse_file(data: BytesLike) -> VwpFile:
    """
    Full parse of a VWP (product 48) message into station location,
    valid time and the altitude-sorted wind profile.

    The input is read front to back exactly once. Any framing or field
    error propagates and no partial result is returned.
    """
    cur = _open_cursor(data)
    decode_message_header(cur)
    desc = decode_description_block(cur)

    pages: List[Page] = []
    if desc.has_tabular:
        pages = decode_tabular_block(cur)

    return VwpFile(
        station=Station(lat_deg=desc.latitude, lon_deg=desc.longitude),
        valid_time=desc.valid_time,
        profile=extract_profile(pages),
    )
