import os
import tempfile
import unittest

from config import CFG
from io_files import write_coords
from models import Point, Triangle


class WriteOutputsTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self._orig_coords = CFG.COORDS_OUT

    def tearDown(self) -> None:
        CFG.COORDS_OUT = self._orig_coords

    def test_write_coords_uses_configured_relative_path(self) -> None:
        CFG.COORDS_OUT = "outputs/custom_coords.txt"
        tri = Triangle(Point(0, 0), Point(2, 0), Point(0, 2))

        path = write_coords([tri], self.tmpdir.name)

        expected = os.path.join(self.tmpdir.name, "outputs", "custom_coords.txt")
        self.assertEqual(path, expected)
        with open(path, "r", encoding="utf-8") as fh:
            contents = fh.read()
        self.assertEqual(contents, "Printing Triangle Coordinates: (0,0) | (2,0) | (0,2)\n\n")

    def test_write_coords_accepts_absolute_path_and_empty_solution(self) -> None:
        target = os.path.join(self.tmpdir.name, "txt", "coords.txt")
        CFG.COORDS_OUT = target

        path = write_coords([], self.tmpdir.name)

        self.assertEqual(path, target)
        with open(path, "r", encoding="utf-8") as fh:
            self.assertEqual(fh.read(), "No solution\n")

    def test_write_coords_disabled_by_default(self) -> None:
        CFG.COORDS_OUT = ""
        self.assertIsNone(write_coords([], self.tmpdir.name))


if __name__ == "__main__":
    unittest.main()
