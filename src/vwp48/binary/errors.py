from __future__ import annotations
from typing import Optional


class ParseError(ValueError):
    """Base class for every fatal decode failure.

    ``offset`` is the byte position in the stream where the problem was
    detected, or None for failures found in already-decoded text.
    """

    def __init__(self, message: str, *, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class TruncatedInput(ParseError):
    def __init__(self, offset: int, needed: int, available: int):
        super().__init__(
            f"truncated input: need {needed} bytes at offset {offset}, got {available}",
            offset=offset,
        )
        self.needed = needed
        self.available = available


class BlockMismatch(ParseError):
    """A block id (or product code) did not hold the value the layout requires."""

    what = "block id"

    def __init__(self, offset: int, expected, found):
        super().__init__(
            f"{self.what} mismatch at offset {offset}: expected {expected}, found {found}",
            offset=offset,
        )
        self.expected = expected
        self.found = found


class ProductCodeMismatch(BlockMismatch):
    what = "product code (not a VWP product)"


class SymbologyBlockMismatch(BlockMismatch):
    what = "symbology block id"


class TabularBlockMismatch(BlockMismatch):
    what = "tabular block id"


class LineLengthError(TabularBlockMismatch):
    """A tabular line length below -1, the end-of-page marker."""

    what = "tabular line length (framing error)"


class FieldParseError(ParseError):
    def __init__(self, page: int, line: int, field: int, token: Optional[str]):
        where = f"page {page}, line {line}, field {field}"
        if token is None:
            msg = f"missing field ({where})"
        else:
            msg = f"non-numeric field {token!r} ({where})"
        super().__init__(msg)
        self.page = page
        self.line = line
        self.field = field
        self.token = token
