#!/usr/bin/env python3
"""Render a folded label mockup onto an A4 landscape page."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Optional, Sequence

from dotenv import load_dotenv

from fold_labels.draw_ops import draw_op_to_dict
from fold_labels.images import InvalidImageError, load_image_file
from fold_labels.label_data import (
    DEFAULT_FOLD_TYPE,
    DEFAULT_HEIGHT_IN,
    DEFAULT_TITLE,
    DEFAULT_WIDTH_IN,
    build_label_spec,
    fold_type_choices,
)
from fold_labels.label_generation import EXPORT_FORMATS, export_design
from fold_labels.label_types import ImageAsset, LabelSpec
from fold_labels.layout import layout_for_spec, layout_to_dict
from fold_labels.renderer import render


def dump_draw_ops(spec: LabelSpec, image: ImageAsset | None) -> str:
    """Return the layout and draw operations for ``spec`` as JSON."""

    payload = {
        "layout": layout_to_dict(layout_for_spec(spec)),
        "ops": [draw_op_to_dict(op) for op in render(spec, image)],
    }
    return json.dumps(payload, indent=2)


def build_parser() -> argparse.ArgumentParser:
    fold_values = [value for value, _ in fold_type_choices()]
    parser = argparse.ArgumentParser(
        description="Folded label design -> A4 landscape mockup (JPEG/PNG/PDF)"
    )
    parser.add_argument(
        "--title",
        default=DEFAULT_TITLE,
        help=f"Title printed at the top of the page (default: {DEFAULT_TITLE}).",
    )
    parser.add_argument(
        "-W", "--width",
        default=DEFAULT_WIDTH_IN,
        help=f"Nominal label width in inches (default: {DEFAULT_WIDTH_IN:g}).",
    )
    parser.add_argument(
        "-H", "--height",
        default=DEFAULT_HEIGHT_IN,
        help=f"Nominal label height in inches (default: {DEFAULT_HEIGHT_IN:g}).",
    )
    parser.add_argument(
        "-f", "--fold-type",
        default=DEFAULT_FOLD_TYPE.value,
        help=(
            "Fold type: " + ", ".join(fold_values)
            + f" (default: {DEFAULT_FOLD_TYPE.value}). "
            "Unknown values fall back to central."
        ),
    )
    parser.add_argument(
        "-i", "--image",
        help="Artwork for the printable image region.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: <title>_label_design.jpg).",
    )
    parser.add_argument(
        "--format",
        choices=sorted(EXPORT_FORMATS),
        help="Output format (default: from the output suffix, else jpg).",
    )
    parser.add_argument(
        "--dump-ops",
        action="store_true",
        help="Print the layout and draw operations as JSON instead of exporting.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for exporting a label design."""

    load_dotenv()
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        spec = build_label_spec(args.title, args.width, args.height, args.fold_type)
    except ValueError as exc:
        raise SystemExit(f"Invalid label size: {exc}") from exc

    image = None
    if args.image:
        try:
            image = load_image_file(args.image)
        except InvalidImageError as exc:
            raise SystemExit(str(exc)) from exc

    if args.dump_ops:
        print(dump_draw_ops(spec, image))
        return 0

    try:
        message = export_design(args.output, spec, image, args.format)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(message)
    return 0


if __name__ == "__main__":
    main()
