import struct

from .synchsafe import encode_synchsafe
from .textframe import ARTIST_FRAME_ID, TITLE_FRAME_ID, build_text_frame

MAGIC = b"ID3"
VERSION_MAJOR = 3
VERSION_MINOR = 0
HDR_FMT = ">3s B B B"

def build_id3v2_tag(*frames: bytes) -> bytes:
    body = b"".join(frames)
    head = struct.pack(HDR_FMT, MAGIC, VERSION_MAJOR, VERSION_MINOR, 0)
    return head + encode_synchsafe(len(body), 4) + body

def build_minimal_tag(title: str, artist: str) -> bytes:
    """ID3v2.3 tag holding exactly a title and an artist frame."""
    return build_id3v2_tag(
        build_text_frame(TITLE_FRAME_ID, title),
        build_text_frame(ARTIST_FRAME_ID, artist),
    )
