import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import requests

BASE_DIR = Path(__file__).resolve().parents[1]
for p in (BASE_DIR, Path(__file__).resolve().parent):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from mpegscan.config import ScanConfig
from mpegscan.exceptions import AcquisitionError, MPEGScanError
from mpegscan.scanner import get_header_data, scan_source
from mpegscan.source import is_url, read_leading_bytes

import header_bytes as hb


def _response(chunks):
    resp = mock.MagicMock()
    resp.iter_content.return_value = iter(chunks)
    resp.__enter__.return_value = resp
    return resp


class TestFileSource(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.mp3 = os.path.join(self.tmpdir.name, 'stream.mp3')
        Path(self.mp3).write_bytes(hb.frames(hb.make_header(), hb.make_header(padding=1)) + bytes(9000))

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_reads_leading_window(self):
        data = read_leading_bytes(self.mp3)
        self.assertEqual(len(data), 8192)
        self.assertEqual(data[:4], hb.make_header())

    def test_short_file_is_not_an_error(self):
        small = os.path.join(self.tmpdir.name, 'small.mp3')
        Path(small).write_bytes(b"\xff\xfb")
        self.assertEqual(read_leading_bytes(small), b"\xff\xfb")

    def test_missing_file(self):
        missing = os.path.join(self.tmpdir.name, 'missing.mp3')
        with self.assertRaises(AcquisitionError) as ctx:
            read_leading_bytes(missing)
        self.assertEqual(ctx.exception.location, missing)
        self.assertIsInstance(ctx.exception, MPEGScanError)
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_directory_is_an_acquisition_error(self):
        with self.assertRaises(AcquisitionError):
            read_leading_bytes(self.tmpdir.name)

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            read_leading_bytes(self.mp3, size=0)

    def test_scan_source(self):
        headers = scan_source(self.mp3)
        self.assertEqual(len(headers), 2)
        self.assertTrue(headers[1].padding)

    def test_window_size_from_config(self):
        # The second header starts at byte 32 and is cut off by a 34-byte window.
        self.assertEqual(len(scan_source(self.mp3, ScanConfig(window_bytes=34))), 1)

    def test_get_header_data(self):
        rows = get_header_data(Path(self.mp3))
        self.assertEqual([r["OFFSET"] for r in rows], [0, 256])
        self.assertEqual(rows[0]["BITRATE"], 128)


class TestUrlSource(unittest.TestCase):

    def test_is_url(self):
        self.assertTrue(is_url("http://example.com/a.mp3"))
        self.assertTrue(is_url("HTTPS://example.com/a.mp3"))
        self.assertFalse(is_url("/tmp/a.mp3"))
        self.assertFalse(is_url(Path("a.mp3")))

    @mock.patch("mpegscan.source.requests.get")
    def test_reads_at_most_size_bytes(self, get):
        get.return_value = _response([b"\xff" * 3000, b"\x00" * 3000, b"\x11" * 3000])
        data = read_leading_bytes("http://example.com/a.mp3", size=5000, timeout=3.0)
        self.assertEqual(len(data), 5000)
        self.assertEqual(data[:3000], b"\xff" * 3000)
        args, kwargs = get.call_args
        self.assertEqual(args[0], "http://example.com/a.mp3")
        self.assertEqual(kwargs["timeout"], 3.0)
        self.assertTrue(kwargs["stream"])
        self.assertEqual(kwargs["headers"]["Range"], "bytes=0-4999")

    @mock.patch("mpegscan.source.requests.get")
    def test_http_error(self, get):
        resp = _response([])
        resp.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        get.return_value = resp
        with self.assertRaises(AcquisitionError) as ctx:
            read_leading_bytes("http://example.com/missing.mp3")
        self.assertIn("404", str(ctx.exception))

    @mock.patch("mpegscan.source.requests.get")
    def test_connection_error(self, get):
        get.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(AcquisitionError):
            read_leading_bytes("https://example.com/a.mp3")

    @mock.patch("mpegscan.source.requests.get")
    def test_scan_source_over_http(self, get):
        get.return_value = _response([hb.frames(hb.make_header(channel_mode=hb.MONO))])
        headers = scan_source("http://example.com/a.mp3")
        self.assertEqual(len(headers), 1)
        self.assertEqual(headers[0].channels, 1)


if __name__ == '__main__':
    unittest.main(verbosity=2)
