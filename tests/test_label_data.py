import unittest

from fold_labels.label_data import (
    build_label_spec,
    default_label_spec,
    download_filename,
    fold_type_choices,
    parse_dimension,
)
from fold_labels.label_types import FoldType, LabelSpec


class ParseDimensionTests(unittest.TestCase):
    def test_accepts_range_bounds(self) -> None:
        self.assertEqual(parse_dimension("Width", "0.5"), 0.5)
        self.assertEqual(parse_dimension("Width", 10), 10.0)
        self.assertEqual(parse_dimension("Width", " 4.25 "), 4.25)

    def test_rejects_out_of_range(self) -> None:
        for value in ("0.25", "10.5", "0", "-2"):
            with self.subTest(value=value):
                with self.assertRaisesRegex(ValueError, "between 0.5 and 10"):
                    parse_dimension("Height", value)

    def test_rejects_non_numbers(self) -> None:
        for value in ("abc", "nan", "inf", "", None):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_dimension("Width", value)


class BuildLabelSpecTests(unittest.TestCase):
    def test_builds_spec(self) -> None:
        spec = build_label_spec("Box", "4", "2", "left-right")
        self.assertEqual(spec, LabelSpec("Box", 4.0, 2.0, FoldType.LEFT_RIGHT))

    def test_unknown_fold_falls_back(self) -> None:
        spec = build_label_spec("Box", 4, 2, "origami")
        self.assertIs(spec.fold_type, FoldType.CENTRAL)

    def test_missing_title_uses_default(self) -> None:
        self.assertEqual(build_label_spec(None, 4, 2, None).title, "Label Design")
        self.assertEqual(build_label_spec("", 4, 2, None).title, "")

    def test_default_spec(self) -> None:
        self.assertEqual(
            default_label_spec(),
            LabelSpec("Label Design", 4.0, 2.0, FoldType.CENTRAL),
        )


class HelperTests(unittest.TestCase):
    def test_download_filename(self) -> None:
        self.assertEqual(download_filename("Label Design"), "Label_Design_label_design.jpg")
        self.assertEqual(download_filename("A  b\tc"), "A_b_c_label_design.jpg")
        self.assertEqual(download_filename("x/y", "pdf"), "x_y_label_design.pdf")

    def test_fold_type_choices(self) -> None:
        self.assertEqual(
            fold_type_choices(),
            [
                ("central", "Central Fold"),
                ("left-right", "Left & Right Fold"),
                ("up-down", "Up & Down Fold"),
            ],
        )


if __name__ == "__main__":
    unittest.main()
