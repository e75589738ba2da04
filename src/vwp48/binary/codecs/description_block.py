from __future__ import annotations
from .bytecursor import ByteCursor
from .symbology_block import decode_symbology_block
from vwp48.binary.errors import ProductCodeMismatch
from vwp48.binary.scale import milli_deg, nexrad_to_datetime
from vwp48.models.description import DescriptionBlock

VWP_PRODUCT_CODE = 48
RESERVED_HALFWORDS = 27


def skip_product_fields(cur: ByteCursor) -> tuple[int, int]:
    """
    Consume operation mode through the spot-blank flag, the stretch shared by
    the description block and its copy inside the tabular block.
    Returns (scan_date, scan_time).
    """
    cur.s16()                                      # Operational mode
    cur.s16()                                      # Volume coverage pattern
    cur.s16()                                      # Request sequence number
    cur.s16()                                      # Volume scan number
    scan_date = cur.s16()
    scan_time = cur.s32()
    cur.s16()                                      # Product generation date
    cur.s32()                                      # Product generation time
    cur.s16_array(RESERVED_HALFWORDS)              # Product dependent / thresholds
    cur.s8()                                       # Version
    cur.s8()                                       # Spot blank
    return scan_date, scan_time


def decode_description_block(cur: ByteCursor) -> DescriptionBlock:
    """
    Parse the Product Description Block.

    Fails with ProductCodeMismatch as soon as the product code is read if it
    is not 48. A present symbology block is consumed inline; a graphic
    alphanumeric block is never consumed, so the cursor is only aligned for
    the tabular block when no graphic block sits between them.
    """
    cur.s16()                                      # Block divider
    lat = milli_deg(cur.s32())
    lon = milli_deg(cur.s32())
    cur.s16()                                      # Radar height (ft)

    at = cur.tell()
    product_code = cur.s16()
    if product_code != VWP_PRODUCT_CODE:
        raise ProductCodeMismatch(at, VWP_PRODUCT_CODE, product_code)

    scan_date, scan_time = skip_product_fields(cur)

    off_symbology = cur.s32()
    off_graphic = cur.s32()
    off_tabular = cur.s32()

    if off_symbology > 0:
        decode_symbology_block(cur)

    return DescriptionBlock(
        latitude=lat,
        longitude=lon,
        product_code=product_code,
        valid_time=nexrad_to_datetime(scan_date, scan_time),
        symbology_offset=off_symbology,
        graphic_offset=off_graphic,
        tabular_offset=off_tabular,
    )
