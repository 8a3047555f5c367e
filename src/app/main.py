import argparse
import json
import sys
from typing import List, Optional

from mpegscan.config import ScanConfig
from mpegscan.exceptions import AcquisitionError, ConfigError
from mpegscan.log import setup_logging
from mpegscan.scanner import scan_source, summarize

EXIT_OK = 0
EXIT_NO_HEADERS = 1
EXIT_ACQUISITION = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mpegscan", description="Report MPEG audio frame headers found at the start of a stream.")
    p.add_argument("locations", nargs="+", metavar="LOCATION", help="MP3 file path or http(s) URL")
    p.add_argument("--window", type=int, default=None, help="bytes to read from the start of each stream (default 8192)")
    p.add_argument("--timeout", type=float, default=None, help="network timeout in seconds")
    p.add_argument("--limit", type=int, default=None, help="print at most N headers per stream")
    p.add_argument("--json", action="store_true", help="print JSON instead of text")
    p.add_argument("--summary", action="store_true", help="print only the most common stream parameters")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def _config_from_args(args) -> ScanConfig:
    base = ScanConfig.from_env()
    return ScanConfig(
        window_bytes=args.window if args.window is not None else base.window_bytes,
        timeout=args.timeout if args.timeout is not None else base.timeout,
        log_level="DEBUG" if args.verbose else base.log_level,
    )


def _print_text(location: str, headers, args):
    print(f"{location}: {len(headers)} header(s)")
    if args.summary:
        info = summarize(headers)
        if info:
            print("  " + " ".join(f"{k}={v}" for k, v in info.items()))
        return
    shown = headers if args.limit is None else headers[:args.limit]
    for h in shown:
        print(f"  bit {h.bit_offset:>6} (byte {h.byte_offset:>5}): {h}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = _config_from_args(args)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ACQUISITION
    setup_logging(cfg.log_level)

    report = {}
    found_any = False
    failed = False
    for loc in args.locations:
        try:
            headers = scan_source(loc, cfg)
        except AcquisitionError as e:
            print(f"error: {e}", file=sys.stderr)
            failed = True
            continue
        found_any = found_any or bool(headers)
        if args.json:
            if args.summary:
                report[loc] = summarize(headers)
            else:
                shown = headers if args.limit is None else headers[:args.limit]
                report[loc] = [h.as_dict() for h in shown]
        else:
            _print_text(loc, headers, args)

    if args.json:
        print(json.dumps(report, indent=2))
    if failed:
        return EXIT_ACQUISITION
    return EXIT_OK if found_any else EXIT_NO_HEADERS


if __name__ == "__main__":
    sys.exit(main())
