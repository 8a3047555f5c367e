from dataclasses import dataclass
from typing import Optional, Union

from .tables import FREE_FORMAT, ChannelMode, Layer, MPEGVersion, _FreeFormat

Bitrate = Union[int, _FreeFormat]


@dataclass(frozen=True)
class DecodedHeader:
    """A validated MPEG audio frame header.

    Attributes:
      mpeg_version: MPEGVersion.V1, V2 or V2_5
      layer: Layer.I, II or III
      protected: True if the protection bit is set
      bitrate: bitrate in kbps, or FREE_FORMAT
      sampling_rate_hz: sampling rate in Hz
      padding: True if the frame carries an extra slot
      private: the private bit, not used for validation
      channel_mode: one of the ChannelMode members
      bit_offset: position of the sync word in the scanned buffer, in bits
    """

    mpeg_version: MPEGVersion
    layer: Layer
    protected: bool
    bitrate: Bitrate
    sampling_rate_hz: int
    padding: bool
    private: bool
    channel_mode: ChannelMode
    bit_offset: int = 0

    @property
    def byte_offset(self) -> int:
        return self.bit_offset // 8

    @property
    def is_free_format(self) -> bool:
        return self.bitrate is FREE_FORMAT

    @property
    def channels(self) -> int:
        return 1 if self.channel_mode == ChannelMode.MONO else 2

    @property
    def samples_per_frame(self) -> int:
        if self.layer == Layer.I:
            return 384
        if self.layer == Layer.III and self.mpeg_version != MPEGVersion.V1:
            return 576
        return 1152

    @property
    def frame_length(self) -> Optional[int]:
        """Frame size in bytes including the header; None for free format."""
        if self.is_free_format:
            return None
        bps = self.bitrate * 1000
        pad = 1 if self.padding else 0
        if self.layer == Layer.I:
            return (12 * bps // self.sampling_rate_hz + pad) * 4
        return self.samples_per_frame // 8 * bps // self.sampling_rate_hz + pad

    @property
    def duration_ms(self) -> float:
        return self.samples_per_frame * 1000.0 / self.sampling_rate_hz

    def as_dict(self) -> dict:
        return {
            "MPEG_VERSION": self.mpeg_version.value,
            "LAYER_DESCRIPTION": int(self.layer),
            "PROTECTION": self.protected,
            "BITRATE": str(self.bitrate) if self.is_free_format else self.bitrate,
            "SAMPLING_RATE": self.sampling_rate_hz,
            "PADDING": self.padding,
            "PRIVATE": self.private,
            "CHANNEL_MODE": self.channel_mode.label,
            "OFFSET": self.bit_offset,
        }

    def __str__(self):
        attributes = [str(self.mpeg_version), str(self.layer)]
        if self.is_free_format:
            attributes.append("free-format")
        else:
            attributes.append("%dkbps" % self.bitrate)
        attributes.append("%gkHz" % (self.sampling_rate_hz / 1000.0))
        attributes.append(self.channel_mode.label)
        if self.protected:
            attributes.append("prot")
        if self.padding:
            attributes.append("pad")
        if self.private:
            attributes.append("priv")
        return "[DecodedHeader %s]" % " ".join(attributes)
