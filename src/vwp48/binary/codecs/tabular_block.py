from __future__ import annotations
from typing import List
from .bytecursor import ByteCursor
from .description_block import skip_product_fields
from vwp48.binary.errors import LineLengthError, TabularBlockMismatch

TABULAR_BLOCK_ID = 3
END_OF_PAGE = -1

Page = List[str]


def decode_tabular_block(cur: ByteCursor) -> List[Page]:
    """
    Parse the Tabular Alphanumeric Block into pages of text lines.

    Each page is a run of (s16 length, bytes) lines closed by a length of -1.
    A zero length is an empty line.
    """
    cur.s16()                                      # Block divider
    at = cur.tell()
    block_id = cur.s16()
    if block_id != TABULAR_BLOCK_ID:
        raise TabularBlockMismatch(at, TABULAR_BLOCK_ID, block_id)

    cur.s32()                                      # Block length
    cur.skip(30)                                   # Repeated message header

    # Repeated product description block, all discarded
    cur.s16()                                      # Product code
    skip_product_fields(cur)
    cur.s32()                                      # Symbology offset
    cur.s32()                                      # Graphic offset
    cur.s32()                                      # Tabular offset

    cur.s16()                                      # Block divider
    num_pages = cur.s16()

    pages: List[Page] = []
    for _ in range(num_pages):
        page: Page = []
        at = cur.tell()
        n = cur.s16()
        while n != END_OF_PAGE:
            if n < 0:
                raise LineLengthError(at, END_OF_PAGE, n)
            page.append(cur.string(n))
            at = cur.tell()
            n = cur.s16()
        pages.append(page)

    return pages
