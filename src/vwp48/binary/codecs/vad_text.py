from __future__ import annotations
import math
from typing import Iterable, Iterator, List, Sequence, Tuple

from vwp48.binary.errors import FieldParseError
from vwp48.binary.scale import nm_to_km
from vwp48.models.profile import WindObservation, WindProfile

VAD_PAGE_TITLE = "VAD Algorithm Output"
HEADER_LINES = 3

# Column positions in a VAD data line:
#   ALT U V W DIR SPD RMS DIV SRNG ELEV
F_DIR, F_SPD, F_SRNG, F_ELEV = 4, 5, 8, 9

# 4/3 effective earth radius (km) for standard beam refraction
EARTH_RADIUS_KM = 6371.0
EFFECTIVE_RADIUS_KM = 4.0 / 3.0 * EARTH_RADIUS_KM


def beam_height_km(slant_range_km: float, elev_deg: float) -> float:
    """Height of the beam above the radar for a slant range and elevation angle."""
    r_e = EFFECTIVE_RADIUS_KM
    r = slant_range_km
    return math.sqrt(r_e**2 + r**2 + 2.0 * r_e * r * math.sin(math.radians(elev_deg))) - r_e


def iter_vad_lines(pages: Sequence[Sequence[str]]) -> Iterator[Tuple[int, int, str]]:
    """Yield (page index, line index, text) for every VAD data line."""
    for p, page in enumerate(pages):
        if not page or not page[0].strip().startswith(VAD_PAGE_TITLE):
            continue
        for n in range(HEADER_LINES, len(page)):
            yield p, n, page[n]


def _number(tokens: List[str], field: int, page: int, line: int) -> float:
    try:
        value = float(tokens[field])
    except IndexError:
        raise FieldParseError(page, line, field, None) from None
    except ValueError:
        raise FieldParseError(page, line, field, tokens[field]) from None
    # float() accepts nan and inf, which the products never carry
    if not math.isfinite(value):
        raise FieldParseError(page, line, field, tokens[field])
    return value


def parse_vad_line(text: str, *, page: int = 0, line: int = 0) -> WindObservation:
    tokens = text.split()
    direction = _number(tokens, F_DIR, page, line)
    speed = _number(tokens, F_SPD, page, line)
    srng_km = nm_to_km(_number(tokens, F_SRNG, page, line))
    elev = _number(tokens, F_ELEV, page, line)
    return WindObservation(
        direction=direction,
        speed=speed,
        altitude=beam_height_km(srng_km, elev),
    )


def extract_profile(pages: Iterable[Sequence[str]]) -> WindProfile:
    """
    Build the wind profile from the tabular pages of a VWP product.

    Any unparseable field aborts the whole extraction. Blank lines are
    skipped.
    """
    obs = [
        parse_vad_line(text, page=p, line=n)
        for p, n, text in iter_vad_lines(list(pages))
        if text.strip()
    ]
    return WindProfile(observations=obs)
