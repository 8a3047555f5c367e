import logging
from collections import Counter
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from .bitops import BitBuffer, ByteLike
from .config import ScanConfig
from .decoder import decode_header
from .header import DecodedHeader
from .locator import FrameLocator
from .source import read_leading_bytes

log = logging.getLogger(__name__)

_DEFAULT_CONFIG = ScanConfig()


def iter_headers(buffer: ByteLike, config: Optional[ScanConfig] = None) -> Iterator[DecodedHeader]:
    cfg = config or _DEFAULT_CONFIG
    buf = BitBuffer(buffer)
    for offset in FrameLocator(buf, cfg.min_span_bits):
        header = decode_header(buf, offset)
        if header is None:
            log.debug("rejected candidate at bit %d", offset)
            continue
        yield header


def scan_headers(buffer: ByteLike, config: Optional[ScanConfig] = None) -> List[DecodedHeader]:
    """Return every valid frame header in ``buffer``, in stream order.

    An empty or too-short buffer, or one with no valid header, gives an
    empty list.
    """
    headers = list(iter_headers(buffer, config))
    log.info("found %d valid header(s) in %d bytes", len(headers), len(buffer))
    return headers


def scan_source(location: Union[str, Path], config: Optional[ScanConfig] = None) -> List[DecodedHeader]:
    cfg = config or _DEFAULT_CONFIG
    data = read_leading_bytes(location, size=cfg.window_bytes, timeout=cfg.timeout)
    return scan_headers(data, cfg)


def get_header_data(location: Union[str, Path], config: Optional[ScanConfig] = None) -> List[dict]:
    return [h.as_dict() for h in scan_source(location, config)]


def summarize(headers: Sequence[DecodedHeader]) -> Optional[dict]:
    """Most common stream parameters among ``headers``; None if there are none."""
    if not headers:
        return None
    common = Counter(
        (h.mpeg_version, h.layer, h.sampling_rate_hz, h.channel_mode) for h in headers
    ).most_common(1)[0][0]
    version, layer, rate, mode = common
    bitrates = {h.bitrate for h in headers if not h.is_free_format}
    return {
        "mpeg_version": version.value,
        "layer": int(layer),
        "sampling_rate_hz": rate,
        "channel_mode": mode.label,
        "total_headers": len(headers),
        "free_format": sum(1 for h in headers if h.is_free_format),
        "distinct_bitrates": sorted(bitrates),
    }
