"""
Frame synchronization scan.

A candidate header starts wherever 11 consecutive bits are set and the two
bits after them are not the reserved version code ``01``. After every sync
match, whether it was emitted or not, the search resumes ``min_span`` bits
further on so a header that was already examined is not matched again.

Known limitation: a sync match whose ``min_span``-bit window runs past the
end of the buffer ends the scan without being emitted, so a real header
starting in the last 26 bits of the buffer is missed. Scan a window with
enough trailing slack (8 KB by default) when that matters.
"""

import logging
from typing import Iterator

import numpy as np

from .bitops import BitBuffer
from .config import MIN_HEADER_SPAN_BITS, SYNC_BITS
from .tables import RESERVED_VERSION_CODE

log = logging.getLogger(__name__)


def sync_positions(buf: BitBuffer) -> np.ndarray:
    """Every bit offset at which SYNC_BITS consecutive set bits start."""
    bits = buf.bits()
    if bits.size < SYNC_BITS:
        return np.empty(0, dtype=np.intp)
    run = np.concatenate(([0], np.cumsum(bits, dtype=np.int64)))
    ones = run[SYNC_BITS:] - run[:-SYNC_BITS]
    return np.flatnonzero(ones == SYNC_BITS)


def iter_sync_offsets(buf: BitBuffer, min_span: int = MIN_HEADER_SPAN_BITS) -> Iterator[int]:
    total = len(buf)
    next_allowed = 0
    for pos in sync_positions(buf):
        pos = int(pos)
        if pos < next_allowed:
            continue
        if pos + min_span > total:
            log.debug("sync at bit %d too close to end of buffer (%d bits)", pos, total)
            return
        next_allowed = pos + min_span
        if buf.read(pos + SYNC_BITS, 2) == RESERVED_VERSION_CODE:
            log.debug("sync at bit %d has reserved version bits", pos)
            continue
        yield pos


class FrameLocator:
    """Restartable iterable of candidate header offsets (in bits)."""

    def __init__(self, buf: BitBuffer, min_span: int = MIN_HEADER_SPAN_BITS):
        self.buf = buf
        self.min_span = min_span

    def __iter__(self) -> Iterator[int]:
        return iter_sync_offsets(self.buf, self.min_span)
