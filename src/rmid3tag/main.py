import argparse
import sys
from typing import List, Optional

from .errors import Rmid3tagError
from .logging_setup import setup_logging
from .probe import FileStat, probe_file
from .rewrite import RewriteConfig, guess_from_filename, rewrite_file
from .tagbuild import build_minimal_tag

PROG = "rmid3tag"

DESCRIPTION = """\
Delete the id3 tags contained in an mp3 file.
By default the original file is left as a backup.
When no option is set, only the tags are deleted."""

class UsageParser(argparse.ArgumentParser):
    """Usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")

def build_parser() -> argparse.ArgumentParser:
    ap = UsageParser(prog=PROG, description=DESCRIPTION,
                     formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("filename", help="mp3 file")
    ap.add_argument("-c", "--check", action="store_true", help="nothing is changed. dump id3 tag info.")
    ap.add_argument("-s", "--set", dest="set_tag", action="store_true",
                    help="set tag. must be used with -t and -a.")
    ap.add_argument("-t", "--title", default="", help='title. use -t "SONG NAME"')
    ap.add_argument("-a", "--artist", default="", help='artist. use -a "ARTIST NAME"')
    ap.add_argument("-g", "--guess", action="store_true",
                    help='set tag. guess title and artist from a filename like "Artist - Title.mp3".')
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap

def parse_config(argv: Optional[List[str]] = None):
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.set_tag and (not args.title or not args.artist or args.guess):
        ap.error("-s must be used with -t and -a, and not with -g")
    cfg = RewriteConfig(check=args.check, set_tag=args.set_tag, guess=args.guess,
                        title=args.title, artist=args.artist, verbose=args.verbose)
    return cfg, args.filename

def format_stat(stat: FileStat) -> str:
    rows = [
        ("V1Tag Exist", stat.v1_tag_present),
        ("V2Tag Exist", stat.v2_tag_present),
        ("File Size", stat.total_size),
        ("MPEG Frame Offset", stat.frame_offset),
        ("MPEG Frame Size", stat.frame_size),
    ]
    return "\n".join(f"[{PROG}] {k:<17} = {v}" for k, v in rows)

def run(cfg: RewriteConfig, filename: str) -> int:
    stat = probe_file(filename)
    if cfg.check:
        print(format_stat(stat))
        return 0

    title, artist = cfg.title, cfg.artist
    if cfg.guess:
        title, artist = guess_from_filename(filename)

    tag = b""
    if cfg.set_tag or cfg.guess:
        tag = build_minimal_tag(title, artist)

    rewrite_file(filename, stat, tag, cfg.backup_suffix)
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    cfg, filename = parse_config(argv)
    logger = setup_logging(cfg.verbose)
    try:
        return run(cfg, filename)
    except (Rmid3tagError, OSError) as e:
        logger.debug("failed on %s", filename, exc_info=True)
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    raise SystemExit(main())
