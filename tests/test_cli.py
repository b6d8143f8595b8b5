import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from fold_label_designer import main


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmp = Path(self._tmp.name)

    def test_dump_ops(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["--width", "4", "--height", "2", "--fold-type", "up-down", "--dump-ops"])
        self.assertEqual(code, 0)
        payload = json.loads(out.getvalue())
        self.assertEqual(payload["layout"]["final"], {"width_in": 4.0, "height_in": 2.5})
        self.assertEqual(len([op for op in payload["ops"] if op["op"] == "line"]), 8)

    def test_exports_png(self) -> None:
        target = self.tmp / "design.png"
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--title", "Spice Jar", "-o", str(target)])
        self.assertIn(f"Wrote {target}", out.getvalue())
        self.assertTrue(target.read_bytes().startswith(b"\x89PNG"))

    def test_invalid_size_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["--width", "12", "--dump-ops"])
        self.assertIn("Invalid label size", str(ctx.exception))

    def test_invalid_image_exits(self) -> None:
        notes = self.tmp / "notes.txt"
        notes.write_text("hello")
        with self.assertRaises(SystemExit) as ctx:
            main(["--image", str(notes), "--dump-ops"])
        self.assertIn("Invalid file type", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
