import logging
from pathlib import Path
from typing import Union

import requests

from .config import DEFAULT_TIMEOUT, DEFAULT_WINDOW_BYTES
from .exceptions import AcquisitionError

log = logging.getLogger(__name__)

CHUNK_SIZE = 4096


def is_url(location: Union[str, Path]) -> bool:
    return str(location).lower().startswith(("http://", "https://"))


def _read_file(path: Path, size: int) -> bytes:
    with open(path, "rb") as f:
        return f.read(size)


def _read_url(url: str, size: int, timeout: float) -> bytes:
    headers = {"Range": f"bytes=0-{size - 1}"}
    with requests.get(url, headers=headers, timeout=timeout, stream=True) as response:
        response.raise_for_status()
        out = bytearray()
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            out.extend(chunk)
            if len(out) >= size:
                break
    return bytes(out[:size])


def read_leading_bytes(location: Union[str, Path], size: int = DEFAULT_WINDOW_BYTES,
                       timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """Read at most ``size`` bytes from the start of a file or http(s) URL.

    A resource shorter than ``size`` is returned as is. Any failure to obtain
    the bytes is raised as AcquisitionError.
    """
    if size <= 0:
        raise ValueError("size must be positive")
    loc = str(location)
    try:
        if is_url(loc):
            data = _read_url(loc, size, timeout)
        else:
            data = _read_file(Path(loc), size)
    except (OSError, requests.RequestException) as e:
        log.warning("could not read %s: %s", loc, e)
        raise AcquisitionError(loc, str(e)) from e
    log.debug("read %d bytes from %s", len(data), loc)
    return data
