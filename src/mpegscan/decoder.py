"""
Decoding of the fields of a candidate MPEG audio frame header.

Every decoder takes the buffer and the bit offset of the sync word and
returns None when the field holds a reserved or invalid value. Nothing here
raises for bad input: an invalid candidate is an ordinary outcome.

  AAAAAAAA AAABBCCD EEEEFFGH II
  A sync, B version, C layer, D protection, E bitrate index,
  F sampling rate index, G padding, H private, I channel mode
"""

from typing import Optional

from .bitops import BitBuffer
from .header import Bitrate, DecodedHeader
from .tables import (
    BITRATES,
    FAMILY_OF_VERSION,
    FREE_FORMAT,
    LAYER2_MONO_ONLY,
    LAYER2_STEREO_ONLY,
    LAYER_CODES,
    SAMPLERATES,
    VERSION_CODES,
    ChannelMode,
    Layer,
    MPEGVersion,
)

# (bit offset from the start of the sync word, width)
VERSION_BITS = (11, 2)
LAYER_BITS = (13, 2)
PROTECTION_BITS = (15, 1)
BITRATE_BITS = (16, 4)
SAMPLERATE_BITS = (20, 2)
PADDING_BITS = (22, 1)
PRIVATE_BITS = (23, 1)
CHANNEL_MODE_BITS = (24, 2)


def _field(buf: BitBuffer, offset: int, field) -> Optional[int]:
    start, width = field
    return buf.read(offset + start, width)


def _flag(buf: BitBuffer, offset: int, field) -> Optional[bool]:
    value = _field(buf, offset, field)
    return None if value is None else bool(value)


def decode_version(buf: BitBuffer, offset: int) -> Optional[MPEGVersion]:
    code = _field(buf, offset, VERSION_BITS)
    return None if code is None else VERSION_CODES[code]


def decode_layer(buf: BitBuffer, offset: int) -> Optional[Layer]:
    code = _field(buf, offset, LAYER_BITS)
    return None if code is None else LAYER_CODES[code]


def decode_protection(buf: BitBuffer, offset: int) -> Optional[bool]:
    return _flag(buf, offset, PROTECTION_BITS)


def decode_padding(buf: BitBuffer, offset: int) -> Optional[bool]:
    return _flag(buf, offset, PADDING_BITS)


def decode_private(buf: BitBuffer, offset: int) -> Optional[bool]:
    return _flag(buf, offset, PRIVATE_BITS)


def decode_channel_mode(buf: BitBuffer, offset: int) -> Optional[ChannelMode]:
    code = _field(buf, offset, CHANNEL_MODE_BITS)
    return None if code is None else ChannelMode(code)


def lookup_bitrate(version: MPEGVersion, layer: Layer, index: int) -> Optional[Bitrate]:
    return BITRATES[(FAMILY_OF_VERSION[version], layer)][index]


def layer2_allows(bitrate: Bitrate, channel_mode: ChannelMode) -> bool:
    if bitrate is FREE_FORMAT:
        return True
    if bitrate in LAYER2_MONO_ONLY:
        return channel_mode == ChannelMode.MONO
    if bitrate in LAYER2_STEREO_ONLY:
        return channel_mode != ChannelMode.MONO
    return True


def decode_bitrate(buf: BitBuffer, offset: int, version: Optional[MPEGVersion],
                   layer: Optional[Layer], channel_mode: Optional[ChannelMode]) -> Optional[Bitrate]:
    if version is None or layer is None:
        return None
    index = _field(buf, offset, BITRATE_BITS)
    if index is None:
        return None
    bitrate = lookup_bitrate(version, layer, index)
    if bitrate is None:
        return None
    if layer == Layer.II:
        if channel_mode is None or not layer2_allows(bitrate, channel_mode):
            return None
    return bitrate


def decode_sampling_rate(buf: BitBuffer, offset: int, version: Optional[MPEGVersion]) -> Optional[int]:
    if version is None:
        return None
    index = _field(buf, offset, SAMPLERATE_BITS)
    if index is None:
        return None
    return SAMPLERATES[version][index]


def decode_header(buf: BitBuffer, offset: int) -> Optional[DecodedHeader]:
    """Decode and validate the header whose sync word starts at ``offset``."""
    version = decode_version(buf, offset)
    if version is None:
        return None
    layer = decode_layer(buf, offset)
    if layer is None:
        return None
    channel_mode = decode_channel_mode(buf, offset)
    if channel_mode is None:
        return None
    bitrate = decode_bitrate(buf, offset, version, layer, channel_mode)
    if bitrate is None:
        return None
    sampling_rate = decode_sampling_rate(buf, offset, version)
    if sampling_rate is None:
        return None
    return DecodedHeader(
        mpeg_version=version,
        layer=layer,
        protected=decode_protection(buf, offset),
        bitrate=bitrate,
        sampling_rate_hz=sampling_rate,
        padding=decode_padding(buf, offset),
        private=decode_private(buf, offset),
        channel_mode=channel_mode,
        bit_offset=offset,
    )
