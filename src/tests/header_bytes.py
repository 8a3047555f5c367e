"""Builders for raw MPEG audio frame headers used across the test modules."""

VERSION_2_5 = 0b00
VERSION_RESERVED = 0b01
VERSION_2 = 0b10
VERSION_1 = 0b11

LAYER_RESERVED = 0b00
LAYER_3 = 0b01
LAYER_2 = 0b10
LAYER_1 = 0b11

STEREO = 0b00
JOINT_STEREO = 0b01
DUAL_MONO = 0b10
MONO = 0b11


def make_header(version=VERSION_1, layer=LAYER_3, protected=0, bitrate_index=0b1001,
                samplerate_index=0b00, padding=0, private=0, channel_mode=JOINT_STEREO) -> bytes:
    b1 = 0b11100000 | (version << 3) | (layer << 1) | (protected & 1)
    b2 = (bitrate_index << 4) | (samplerate_index << 2) | ((padding & 1) << 1) | (private & 1)
    b3 = channel_mode << 6
    return bytes([0xFF, b1, b2, b3])


def frames(*headers, gap: int = 28) -> bytes:
    """Concatenate headers, each followed by ``gap`` zero bytes."""
    out = bytearray()
    for h in headers:
        out += h
        out += bytes(gap)
    return bytes(out)
