"""
Tests for tools/download.py - saving the document to disk.
"""

import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from xmlprompt.tools.download import XML_MIME_TYPE, offer_download


class TestOfferDownload(unittest.TestCase):

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_mime_type(self):
        self.assertEqual(XML_MIME_TYPE, "application/xml")

    def test_writes_exact_bytes_as_utf8(self):
        text = '<?xml version="1.0" encoding="UTF-8"?>\n<Task>Größe\r\n✓</Task>'
        path = offer_download(text, directory=self.temp_dir)

        self.assertEqual(path, self.temp_dir / "prompt.xml")
        self.assertEqual(path.read_bytes(), text.encode("utf-8"))

    def test_custom_filename_and_new_directory(self):
        target = self.temp_dir / "nested" / "out"
        path = offer_download("<a/>", filename="mine.xml", directory=target)
        self.assertEqual(path, target / "mine.xml")
        self.assertEqual(path.read_text(encoding="utf-8"), "<a/>")

    def test_defaults_to_current_directory(self):
        with patch("pathlib.Path.cwd", return_value=self.temp_dir):
            path = offer_download("<a/>")
        self.assertEqual(path, self.temp_dir / "prompt.xml")

    def test_overwrites_existing_file(self):
        offer_download("old", directory=self.temp_dir)
        path = offer_download("new", directory=self.temp_dir)
        self.assertEqual(path.read_text(encoding="utf-8"), "new")


if __name__ == "__main__":
    unittest.main()
