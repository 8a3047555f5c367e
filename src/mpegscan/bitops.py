from typing import Optional, Union

import numpy as np

ByteLike = Union[bytes, bytearray, memoryview]


class BitBuffer:
    """Read-only, bit-addressable view over a byte buffer.

    Bit 0 is the most significant bit of byte 0. Values are read by masking
    and shifting the bytes that cover the requested range.
    """

    __slots__ = ("_data",)

    def __init__(self, data: ByteLike):
        self._data = bytes(data)

    def __len__(self) -> int:
        return len(self._data) * 8

    @property
    def num_bytes(self) -> int:
        return len(self._data)

    def read(self, bit_offset: int, width: int) -> Optional[int]:
        if bit_offset < 0 or width <= 0 or bit_offset + width > len(self):
            return None
        first = bit_offset >> 3
        last = (bit_offset + width - 1) >> 3
        chunk = int.from_bytes(self._data[first:last + 1], "big")
        tail = (last + 1) * 8 - (bit_offset + width)
        return (chunk >> tail) & ((1 << width) - 1)

    def bit(self, bit_offset: int) -> Optional[int]:
        return self.read(bit_offset, 1)

    def bits(self) -> np.ndarray:
        """One uint8 (0 or 1) per bit, MSB first."""
        return np.unpackbits(np.frombuffer(self._data, dtype=np.uint8))
