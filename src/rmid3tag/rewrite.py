import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

from .errors import ReadError
from .probe import FileStat

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
UNKNOWN = "-"
SEPARATOR = " - "
COPY_CHUNK = 1024 * 1024

@dataclass(frozen=True)
class RewriteConfig:
    check: bool = False
    set_tag: bool = False
    guess: bool = False
    title: str = ""
    artist: str = ""
    backup_suffix: str = ".backup"
    verbose: bool = False

def guess_from_filename(path: PathLike) -> Tuple[str, str]:
    """Split "Artist - Title.mp3" into (title, artist)."""
    name = Path(path).name
    if "." in name:
        name = name.rsplit(".", 1)[0]
    idx = name.find(SEPARATOR)
    if idx <= 0 or idx + len(SEPARATOR) == len(name):
        return UNKNOWN, UNKNOWN
    return name[idx + len(SEPARATOR):], name[:idx]

def _copy_exact(src, dst, size: int):
    remaining = size
    while remaining:
        chunk = src.read(min(COPY_CHUNK, remaining))
        if not chunk:
            raise ReadError(f"unexpected end of file: {size - remaining} of {size} frame bytes copied")
        dst.write(chunk)
        remaining -= len(chunk)

def copy_frames(path: PathLike, offset: int, size: int, tag: bytes = b"") -> Path:
    """Write `tag` followed by the frame region of `path` into a new temp file.

    The temp file is created next to `path` so it can later be renamed over it.
    """
    p = Path(path)
    fd, tmp = tempfile.mkstemp(prefix="tmp_", dir=p.resolve().parent)
    tmp_path = Path(tmp)
    try:
        with open(fd, "wb") as out, p.open("rb") as src:
            if tag:
                out.write(tag)
            src.seek(offset)
            _copy_exact(src, out, size)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return tmp_path

def replace_with_backup(path: PathLike, tmp_path: PathLike, suffix: str = ".backup") -> Path:
    p = Path(path)
    backup = p.with_name(p.name + suffix)
    try:
        os.rename(p, backup)
        os.rename(tmp_path, p)
    except OSError:
        Path(tmp_path).unlink(missing_ok=True)
        raise
    logger.info("replaced %s (original kept as %s)", p, backup)
    return backup

def rewrite_file(path: PathLike, stat: FileStat, tag: bytes = b"", backup_suffix: str = ".backup") -> Path:
    tmp = copy_frames(path, stat.frame_offset, stat.frame_size, tag)
    logger.debug("copied %d frame bytes and %d tag bytes into %s", stat.frame_size, len(tag), tmp)
    return replace_with_backup(path, tmp, backup_suffix)
