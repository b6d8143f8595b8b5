import struct
import tempfile
import unittest
from io import BytesIO
from pathlib import Path

from PIL import Image

from fold_labels.images import load_image
from fold_labels.label_generation import export_design, render_pdf, render_raster
from fold_labels.label_types import FoldType, LabelSpec


def _png_size(data: bytes) -> tuple[int, int]:
    return struct.unpack(">II", data[16:24])


def _red_png() -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (40, 20), (255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


class RenderOutputTests(unittest.TestCase):
    def setUp(self) -> None:
        self.spec = LabelSpec("Label Design", 4, 2, FoldType.CENTRAL)

    def _assert_close(self, pixel: tuple[int, ...], expected: tuple[int, int, int]) -> None:
        for actual, wanted in zip(pixel, expected):
            self.assertAlmostEqual(actual, wanted, delta=3)

    def test_render_pdf(self) -> None:
        pdf = render_pdf(self.spec)
        self.assertTrue(pdf.startswith(b"%PDF"))

    def test_render_png_page_size(self) -> None:
        png = render_raster(self.spec, fmt="png")
        self.assertTrue(png.startswith(b"\x89PNG"))
        width, height = _png_size(png)
        self.assertAlmostEqual(width, 1123, delta=1)
        self.assertAlmostEqual(height, 794, delta=1)

    def test_render_jpeg(self) -> None:
        jpeg = render_raster(self.spec, fmt="jpeg")
        self.assertTrue(jpeg.startswith(b"\xff\xd8\xff"))
        self.assertEqual(render_raster(self.spec, fmt="jpg")[:3], b"\xff\xd8\xff")

    def test_unknown_raster_format(self) -> None:
        with self.assertRaises(ValueError):
            render_raster(self.spec, fmt="gif")

    def test_placeholder_and_image_pixels(self) -> None:
        placeholder = Image.open(BytesIO(render_raster(self.spec))).convert("RGB")
        self._assert_close(placeholder.getpixel((500, 350)), (226, 232, 240))
        self._assert_close(placeholder.getpixel((5, 790)), (248, 250, 252))

        with_image = render_raster(self.spec, load_image(_red_png()))
        pixel = Image.open(BytesIO(with_image)).convert("RGB").getpixel((500, 350))
        self.assertGreater(pixel[0], 200)
        self.assertLess(pixel[1], 60)
        self.assertLess(pixel[2], 60)

    def test_render_is_repeatable(self) -> None:
        self.assertEqual(render_raster(self.spec), render_raster(self.spec))


class ExportDesignTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmp = Path(self._tmp.name)
        self.spec = LabelSpec("Shelf Tag", 3, 1.5, FoldType.UP_DOWN)

    def test_format_from_suffix(self) -> None:
        target = self.tmp / "tag.pdf"
        message = export_design(str(target), self.spec)
        self.assertEqual(message, f"Wrote {target}")
        self.assertTrue(target.read_bytes().startswith(b"%PDF"))

        png_target = self.tmp / "tag.png"
        export_design(str(png_target), self.spec)
        self.assertTrue(png_target.read_bytes().startswith(b"\x89PNG"))

    def test_explicit_format_wins(self) -> None:
        target = self.tmp / "tag.out"
        export_design(str(target), self.spec, fmt="jpeg")
        self.assertTrue(target.read_bytes().startswith(b"\xff\xd8\xff"))

    def test_unknown_format(self) -> None:
        with self.assertRaises(ValueError):
            export_design(str(self.tmp / "tag.gif"), self.spec)


if __name__ == "__main__":
    unittest.main()
