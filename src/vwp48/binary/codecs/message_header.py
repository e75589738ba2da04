from __future__ import annotations
from .bytecursor import ByteCursor

WMO_HEADER_BYTES = 30
MESSAGE_HEADER_BYTES = WMO_HEADER_BYTES + 18


def decode_message_header(cur: ByteCursor) -> dict:
    """
    Consume the 30-byte WMO/AWIPS text header and the 18-byte message header.
    Nothing here is needed downstream; fields are returned for inspection only.
    """
    wmo = cur.string(WMO_HEADER_BYTES)
    m1 = cur.s16()                                 # Message date
    m2 = cur.s16()                                 # Message code
    m3 = cur.s32()                                 # Message time
    m4 = cur.s32()                                 # Message length
    m5 = cur.s16()                                 # Source id
    m6 = cur.s16()                                 # Destination id
    m7 = cur.s16()                                 # Number of blocks

    return {
        "wmo_header": wmo, "message_date": m1, "message_code": m2,
        "message_time": m3, "message_length": m4, "source_id": m5,
        "dest_id": m6, "num_blocks": m7,
    }
