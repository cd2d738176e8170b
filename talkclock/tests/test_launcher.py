"""Command line launcher: snapshot rendering and radius override."""
from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from PIL import Image

import main


class TestLauncher(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmp = Path(self._tmp.name)
        self.config = str(self.tmp / "missing.ini")

    def test_snapshot_uses_radius_override(self) -> None:
        png = self.tmp / "face.png"
        self.assertEqual(main.main(["--config", self.config, "--radius", "60", "--snapshot", str(png)]), 0)
        with Image.open(png) as img:
            self.assertEqual(img.size, (220, 220))

    def test_zero_radius_is_rejected(self) -> None:
        png = self.tmp / "face.png"
        with self.assertLogs("talkclock", level="ERROR"):
            code = main.main(["--config", self.config, "--radius", "0", "--snapshot", str(png)])
        self.assertEqual(code, 1)
        self.assertFalse(png.exists())


if __name__ == "__main__":
    unittest.main()
