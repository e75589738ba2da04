"""
Byte sources for the decoder and the freshness check applied to results.

Fetching, caching and scheduling live outside the package; they only need
to hand the decoder something that satisfies ``ByteSource``.
"""

from __future__ import annotations

import io
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, runtime_checkable

from vwp48.binary.reader import parse_file
from vwp48.models.file import VwpFile

log = logging.getLogger(__name__)

# Products older than this are normally dropped by callers
DEFAULT_FRESHNESS = timedelta(minutes=20)


@runtime_checkable
class ByteSource(Protocol):
    def open(self) -> BinaryIO:
        """Return a new readable binary stream positioned at the first byte."""
        ...


class PathSource:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def open(self) -> BinaryIO:
        return self.path.open("rb")

    def __repr__(self) -> str:
        return f"PathSource({str(self.path)!r})"


class BytesSource:
    def __init__(self, data: bytes):
        self.data = bytes(data)

    def open(self) -> BinaryIO:
        return io.BytesIO(self.data)

    def __repr__(self) -> str:
        return f"BytesSource(<{len(self.data)} bytes>)"


def decode_source(source: ByteSource) -> VwpFile:
    log.debug("decoding %r", source)
    with source.open() as fh:
        vwp = parse_file(fh)
    log.debug("%r: %d observations valid %s", source, len(vwp.profile), vwp.valid_time)
    return vwp


def is_fresh(
    valid_time: datetime,
    window: timedelta = DEFAULT_FRESHNESS,
    now: Optional[datetime] = None,
) -> bool:
    """True when ``valid_time`` is no older than ``window`` relative to ``now``."""
    now = now or datetime.now(timezone.utc)
    return now - valid_time <= window
