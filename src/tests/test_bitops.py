import sys
import unittest
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from mpegscan.bitops import BitBuffer


class TestBitBuffer(unittest.TestCase):

    def setUp(self):
        self.buf = BitBuffer(bytes([0b10110011, 0b01011100, 0xFF]))

    def test_length_in_bits(self):
        self.assertEqual(len(self.buf), 24)
        self.assertEqual(self.buf.num_bytes, 3)
        self.assertEqual(len(BitBuffer(b"")), 0)

    def test_read_within_byte(self):
        self.assertEqual(self.buf.read(0, 1), 1)
        self.assertEqual(self.buf.read(1, 1), 0)
        self.assertEqual(self.buf.read(0, 4), 0b1011)
        self.assertEqual(self.buf.read(4, 4), 0b0011)

    def test_read_across_bytes(self):
        self.assertEqual(self.buf.read(6, 4), 0b1101)
        self.assertEqual(self.buf.read(4, 12), 0b001101011100)
        self.assertEqual(self.buf.read(0, 24), 0b101100110101110011111111)

    def test_read_out_of_range(self):
        self.assertIsNone(self.buf.read(20, 5))
        self.assertIsNone(self.buf.read(-1, 2))
        self.assertIsNone(self.buf.read(0, 0))
        self.assertEqual(self.buf.read(23, 1), 1)

    def test_bit(self):
        self.assertEqual([self.buf.bit(i) for i in range(8)], [1, 0, 1, 1, 0, 0, 1, 1])
        self.assertIsNone(self.buf.bit(24))

    def test_bits_array_msb_first(self):
        bits = BitBuffer(bytes([0b10000001])).bits()
        self.assertEqual(bits.tolist(), [1, 0, 0, 0, 0, 0, 0, 1])

    def test_source_is_copied(self):
        data = bytearray(b"\x00\x00")
        buf = BitBuffer(data)
        data[0] = 0xFF
        self.assertEqual(buf.read(0, 8), 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
