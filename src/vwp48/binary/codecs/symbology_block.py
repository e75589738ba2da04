from __future__ import annotations
from .bytecursor import ByteCursor
from vwp48.binary.errors import SymbologyBlockMismatch

SYMBOLOGY_BLOCK_ID = 1


def decode_symbology_block(cur: ByteCursor) -> int:
    """
    Validate the symbology block id and consume its single layer.
    The image payload is not used for wind extraction; returns the payload
    byte count that was skipped.
    """
    cur.s16()                                      # Block divider
    at = cur.tell()
    block_id = cur.s16()
    if block_id != SYMBOLOGY_BLOCK_ID:
        raise SymbologyBlockMismatch(at, SYMBOLOGY_BLOCK_ID, block_id)

    cur.s32()                                      # Block length
    cur.s16()                                      # Number of layers
    cur.s16()                                      # Layer divider
    layer_bytes = cur.u32()                        # Layer data length
    cur.skip((layer_bytes // 2) * 2)               # halfword payload
    return layer_bytes
