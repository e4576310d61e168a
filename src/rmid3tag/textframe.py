import struct

from .errors import EncodingError

TITLE_FRAME_ID = "TIT2"
ARTIST_FRAME_ID = "TPE1"

ENCODING_UTF16_BOM = 0x01
BOM_BE = b"\xfe\xff"
TERMINATOR = b"\x00\x00"

# id, size (plain big-endian in v2.3, not synchsafe), flags
FRAME_HEADER_FMT = ">4s I H"

def encode_text(text: str) -> bytes:
    """UTF-16BE with byte order mark, null terminated."""
    try:
        units = text.encode("utf-16-be")
    except UnicodeEncodeError as e:
        raise EncodingError(f"cannot encode {text!r} as UTF-16: {e.reason}") from e
    return BOM_BE + units + TERMINATOR

def build_text_frame(frame_id: str, text: str) -> bytes:
    if len(frame_id) != 4 or not frame_id.isascii():
        raise ValueError(f"frame id must be 4 ASCII characters, got {frame_id!r}")
    payload = bytes([ENCODING_UTF16_BOM]) + encode_text(text)
    return struct.pack(FRAME_HEADER_FMT, frame_id.encode("ascii"), len(payload), 0) + payload
