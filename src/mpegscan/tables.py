"""
Lookup tables for MPEG audio frame headers.

Bitrates are in kbps and indexed by the 4-bit bitrate field, sampling rates
in Hz indexed by the 2-bit sampling-rate field. Index 0 of every bitrate
table is free format, the last entry of every table is reserved.
"""

from enum import Enum, IntEnum


class MPEGVersion(Enum):
    V1 = 1
    V2 = 2
    V2_5 = 2.5

    def __str__(self):
        return "MPEG-%g" % self.value


class Layer(IntEnum):
    I = 1
    II = 2
    III = 3

    def __str__(self):
        return "Layer " + self.name


class ChannelMode(IntEnum):
    STEREO = 0
    JOINT_STEREO = 1
    DUAL_MONO = 2
    MONO = 3

    @property
    def label(self) -> str:
        return self.name.lower()


class _FreeFormat:
    """Bitrate chosen by the encoder and not expressible in the header."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "FREE_FORMAT"

    def __str__(self):
        return "free"

    def __reduce__(self):
        return (_FreeFormat, ())


FREE_FORMAT = _FreeFormat()


class BitrateFamily(Enum):
    MPEG1 = "mpeg1"
    MPEG2 = "mpeg2"  # shared by MPEG-2 and MPEG-2.5


FAMILY_OF_VERSION = {
    MPEGVersion.V1: BitrateFamily.MPEG1,
    MPEGVersion.V2: BitrateFamily.MPEG2,
    MPEGVersion.V2_5: BitrateFamily.MPEG2,
}

F = FREE_FORMAT

_MPEG2_LAYER23 = (F, 8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160, None)

BITRATES = {
    (BitrateFamily.MPEG1, Layer.I):
        (F, 32, 64, 96, 128, 160, 192, 224, 256, 288, 320, 352, 384, 416, 448, None),
    (BitrateFamily.MPEG1, Layer.II):
        (F, 32, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, 384, None),
    (BitrateFamily.MPEG1, Layer.III):
        (F, 32, 40, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, None),
    (BitrateFamily.MPEG2, Layer.I):
        (F, 32, 48, 56, 64, 80, 96, 112, 128, 144, 160, 176, 192, 224, 256, None),
    (BitrateFamily.MPEG2, Layer.II): _MPEG2_LAYER23,
    (BitrateFamily.MPEG2, Layer.III): _MPEG2_LAYER23,
}

del F

SAMPLERATES = {
    MPEGVersion.V1: (44100, 48000, 32000, None),
    MPEGVersion.V2: (22050, 24000, 16000, None),
    MPEGVersion.V2_5: (11025, 12000, 8000, None),
}

# Layer II only allows some bitrates together with some channel modes.
LAYER2_MONO_ONLY = frozenset({32, 48, 56, 80})
LAYER2_STEREO_ONLY = frozenset({224, 256, 320, 384})

VERSION_CODES = {0b00: MPEGVersion.V2_5, 0b01: None, 0b10: MPEGVersion.V2, 0b11: MPEGVersion.V1}
LAYER_CODES = {0b00: None, 0b01: Layer.III, 0b10: Layer.II, 0b11: Layer.I}
RESERVED_VERSION_CODE = 0b01
