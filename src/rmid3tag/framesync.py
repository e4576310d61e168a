import numpy as np

from .errors import FormatError
from .source import ByteSource

# MPEG-1 Layer III, with and without the protection bit.
FRAME_SYNC_PATTERNS = (b"\xff\xfb", b"\xff\xfa")
SCAN_WINDOW = 4096

_SYNC_LEAD = 0xFF
_SYNC_FOLLOW = np.array([p[1] for p in FRAME_SYNC_PATTERNS], dtype=np.uint8)

def has_frame_sync_at(source: ByteSource, offset: int) -> bool:
    data = source.read_at(offset, 2)
    if len(data) != 2:
        return False
    return data in FRAME_SYNC_PATTERNS

def scan_for_frame_sync(source: ByteSource, start: int, window: int = SCAN_WINDOW) -> int:
    """Return the first offset >= start where a frame sync pattern begins.

    Reads `window + 1` bytes at a time so that a pattern split across two
    windows is still seen. Raises FormatError once the scan reaches EOF.
    """
    offset = start
    while True:
        chunk = source.read_at(offset, window + 1)
        if len(chunk) < 2:
            raise FormatError("mpeg frame not found")
        buf = np.frombuffer(chunk, dtype=np.uint8)
        hits = np.flatnonzero((buf[:-1] == _SYNC_LEAD) & np.isin(buf[1:], _SYNC_FOLLOW))
        if hits.size:
            return offset + int(hits[0])
        offset += len(chunk) - 1
