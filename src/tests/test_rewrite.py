import os
import sys
import tempfile
import unittest
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from mp3_fixtures import id3v1_tag, id3v2_tag, mpeg_frames
from rmid3tag.errors import ReadError
from rmid3tag.probe import probe_file
from rmid3tag.rewrite import copy_frames, guess_from_filename, replace_with_backup, rewrite_file
from rmid3tag.tagbuild import build_minimal_tag


class TestGuessFromFilename(unittest.TestCase):

    def test_artist_and_title(self):
        self.assertEqual(guess_from_filename("Artist - Title.mp3"), ("Title", "Artist"))
        self.assertEqual(guess_from_filename("/music/A - B - C.mp3"), ("B - C", "A"))
        self.assertEqual(guess_from_filename("Artist - Title"), ("Title", "Artist"))

    def test_only_last_extension_removed(self):
        self.assertEqual(guess_from_filename("Mr. X - Song.v2.mp3"), ("Song.v2", "Mr. X"))

    def test_unusable_names(self):
        for name in ("NoSeparator.mp3", " - Title.mp3", "Artist - .mp3", ""):
            with self.subTest(name=name):
                self.assertEqual(guess_from_filename(name), ("-", "-"))


class TestRewrite(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.frames = mpeg_frames(count=6)
        self.original = id3v2_tag(300, extra_padding=12) + self.frames + id3v1_tag()
        self.path = Path(self.tmpdir.name) / "Some Artist - Some Title.mp3"
        self.path.write_bytes(self.original)

    def tearDown(self):
        self.tmpdir.cleanup()

    def _leftover_temp_files(self):
        return [n for n in os.listdir(self.tmpdir.name) if n.startswith("tmp_")]

    def test_copy_frames(self):
        tmp = copy_frames(self.path, 322, len(self.frames), b"HEAD")
        self.assertEqual(tmp.parent, self.path.resolve().parent)
        self.assertEqual(tmp.read_bytes(), b"HEAD" + self.frames)

    def test_copy_frames_short_source(self):
        with self.assertRaises(ReadError):
            copy_frames(self.path, 322, len(self.original))
        self.assertEqual(self._leftover_temp_files(), [])

    def test_strip_tags(self):
        stat = probe_file(self.path)
        backup = rewrite_file(self.path, stat)
        self.assertEqual(self.path.read_bytes(), self.frames)
        self.assertEqual(backup.name, self.path.name + ".backup")
        self.assertEqual(backup.read_bytes(), self.original)
        self.assertEqual(self._leftover_temp_files(), [])

    def test_replace_tags(self):
        tag = build_minimal_tag("Some Title", "Some Artist")
        rewrite_file(self.path, probe_file(self.path), tag)
        self.assertEqual(self.path.read_bytes(), tag + self.frames)
        again = probe_file(self.path)
        self.assertTrue(again.v2_tag_present)
        self.assertFalse(again.v1_tag_present)
        self.assertEqual(again.frame_offset, len(tag))

    def test_custom_backup_suffix(self):
        backup = rewrite_file(self.path, probe_file(self.path), backup_suffix=".orig")
        self.assertTrue(backup.name.endswith(".mp3.orig"))

    def test_replace_failure_removes_temp(self):
        tmp = copy_frames(self.path, 0, 10)
        missing = Path(self.tmpdir.name) / "missing.mp3"
        with self.assertRaises(OSError):
            replace_with_backup(missing, tmp)
        self.assertFalse(tmp.exists())
        self.assertEqual(self.path.read_bytes(), self.original)


if __name__ == "__main__":
    unittest.main()
