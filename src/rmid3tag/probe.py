"""Locate the MPEG frame region between optional ID3v2 and ID3v1 tags.

    +---------------+
    |  ID3v2 tag    |  optional, may start one byte late
    +---------------+ <-- frame_offset
    |  MPEG frames  |  frame_size bytes
    +---------------+
    |  ID3v1 tag    |  optional, last 128 bytes
    +---------------+
"""
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from .errors import FormatError, ReadError
from .framesync import scan_for_frame_sync
from .source import ByteSource, FileByteSource
from .synchsafe import decode_synchsafe

logger = logging.getLogger(__name__)

V2_MARKER = b"ID3"
V2_HEADER_LEN = 10
V2_SIZE_FIELD = 6  # marker(3) + version(2) + flags(1)
V1_MARKER = b"TAG"
V1_TAG_LEN = 128


class HeaderOffsetKind(Enum):
    NONE = "none"
    AT_ZERO = "at_zero"
    AT_ONE = "at_one"  # one stray leading byte before the marker

    @property
    def offset(self) -> int:
        return 1 if self is HeaderOffsetKind.AT_ONE else 0


@dataclass(frozen=True)
class FileStat:
    total_size: int
    v1_tag_present: bool
    v2_tag_present: bool
    frame_offset: int
    header_offset: HeaderOffsetKind = HeaderOffsetKind.NONE

    @property
    def frame_size(self) -> int:
        size = self.total_size - self.frame_offset - (V1_TAG_LEN if self.v1_tag_present else 0)
        if size < 0:
            raise FormatError(
                f"mpeg frame size is negative ({size}): file of {self.total_size} bytes "
                f"with frame offset {self.frame_offset}"
            )
        return size


def _read_exact(source: ByteSource, offset: int, size: int) -> bytes:
    data = source.read_at(offset, size)
    if len(data) != size:
        raise ReadError(f"short read at offset {offset}: wanted {size} bytes, got {len(data)}")
    return data

def detect_header_offset(marker: bytes) -> HeaderOffsetKind:
    if marker[:3] == V2_MARKER:
        return HeaderOffsetKind.AT_ZERO
    if marker[1:4] == V2_MARKER:
        return HeaderOffsetKind.AT_ONE
    return HeaderOffsetKind.NONE

def locate_frame_offset(source: ByteSource, kind: HeaderOffsetKind) -> int:
    """Offset of the first MPEG frame after the ID3v2 tag starting at `kind`.

    The declared tag size is only a lower bound: some encoders pad beyond it,
    so the frame sync is searched for from there on.
    """
    h = kind.offset
    declared = decode_synchsafe(_read_exact(source, h + V2_SIZE_FIELD, 4)) + V2_HEADER_LEN + h
    found = scan_for_frame_sync(source, declared)
    logger.debug("id3v2 %s: declared size %d, frame at %d (%d padding bytes skipped)",
                 kind.value, declared, found, found - declared)
    return found

def has_v1_tag(source: ByteSource, total_size: int) -> bool:
    if total_size < V1_TAG_LEN:
        raise ReadError(f"file of {total_size} bytes is too small to hold an id3v1 tag")
    return _read_exact(source, total_size - V1_TAG_LEN, 3) == V1_MARKER

def probe(source: ByteSource, total_size: int) -> FileStat:
    kind = detect_header_offset(_read_exact(source, 0, 4))
    frame_offset = 0 if kind is HeaderOffsetKind.NONE else locate_frame_offset(source, kind)
    stat = FileStat(
        total_size=total_size,
        v1_tag_present=has_v1_tag(source, total_size),
        v2_tag_present=kind is not HeaderOffsetKind.NONE,
        frame_offset=frame_offset,
        header_offset=kind,
    )
    # frame_size raises FormatError when negative
    logger.debug("mpeg frame region: offset %d, size %d", stat.frame_offset, stat.frame_size)
    return stat

def probe_file(path: Union[str, Path]) -> FileStat:
    with open(path, "rb") as fh:
        total_size = os.fstat(fh.fileno()).st_size
        return probe(FileByteSource(fh), total_size)
