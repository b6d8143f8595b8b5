import unittest

from fold_labels.utils import centered_rect, format_inches, inches_to_pixels


class LabelUtilsTests(unittest.TestCase):
    def test_inches_to_pixels(self) -> None:
        self.assertEqual(inches_to_pixels(1), 96)
        self.assertEqual(inches_to_pixels(0.25), 24)
        self.assertEqual(inches_to_pixels(4.5), 432)

    def test_format_inches(self) -> None:
        self.assertEqual(format_inches(4), "4")
        self.assertEqual(format_inches(4.0), "4")
        self.assertEqual(format_inches(4.5), "4.5")
        self.assertEqual(format_inches(2.25), "2.25")
        self.assertEqual(format_inches(10.5), "10.5")

    def test_format_inches_exponents(self) -> None:
        self.assertEqual(format_inches(1e-7), "1e-7")
        self.assertEqual(format_inches(2.5e-10), "2.5e-10")
        self.assertEqual(format_inches(1e20), "100000000000000000000")
        self.assertEqual(format_inches(1e21), "1e+21")

    def test_centered_rect(self) -> None:
        rect = centered_rect(384, 192, 1123, 794)
        self.assertEqual((rect.x, rect.y), (369.5, 301))
        self.assertEqual(rect.center, (561.5, 397))
        self.assertEqual((rect.right, rect.bottom), (753.5, 493))

    def test_centered_rect_larger_than_area(self) -> None:
        rect = centered_rect(48, 1008, 1123, 794)
        self.assertLess(rect.y, 0)
        self.assertEqual(rect.center, (561.5, 397))

    def test_inset(self) -> None:
        inner = centered_rect(100, 50, 200, 100).inset(2)
        self.assertEqual((inner.x, inner.y, inner.width, inner.height), (52, 27, 96, 46))


if __name__ == "__main__":
    unittest.main()
