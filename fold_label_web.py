"""Web UI for designing folded labels."""

from __future__ import annotations

import argparse
import base64
import logging
import os
from io import BytesIO
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify, render_template, request, send_file
from werkzeug.datastructures import FileStorage, MultiDict
from werkzeug.wrappers import Response

from fold_labels.draw_ops import draw_op_to_dict
from fold_labels.images import InvalidImageError, load_image
from fold_labels.label_data import (
    DEFAULT_FOLD_TYPE,
    DEFAULT_HEIGHT_IN,
    DEFAULT_TITLE,
    DEFAULT_WIDTH_IN,
    DIMENSION_STEP_IN,
    MAX_DIMENSION_IN,
    MIN_DIMENSION_IN,
    build_label_spec,
    download_filename,
    fold_type_choices,
)
from fold_labels.label_generation import render_raster
from fold_labels.label_types import ImageAsset, LabelSpec
from fold_labels.layout import layout_for_spec, layout_to_dict
from fold_labels.renderer import render

__all__ = ["create_app", "run_web_app"]

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / "fold_labels" / "templates"


def _form_values(values: MultiDict[str, str]) -> dict[str, str]:
    return {
        "title": values.get("title", DEFAULT_TITLE),
        "width": values.get("width", f"{DEFAULT_WIDTH_IN:g}"),
        "height": values.get("height", f"{DEFAULT_HEIGHT_IN:g}"),
        "fold_type": values.get("fold_type", DEFAULT_FOLD_TYPE.value),
    }


def _read_upload(upload: FileStorage | None) -> ImageAsset | None:
    if upload is None or not upload.filename:
        return None
    mimetype = upload.mimetype or ""
    if not mimetype.startswith("image/"):
        raise InvalidImageError("Invalid file type. Please upload an image file.")
    return load_image(upload.read())


def _read_design(values: dict[str, str]) -> LabelSpec:
    return build_label_spec(
        values["title"],
        values["width"],
        values["height"],
        values["fold_type"],
    )


def create_app() -> Flask:
    """Create the Flask app serving the label designer."""
    app = Flask(__name__, template_folder=str(TEMPLATE_DIR))
    app.config["SECRET_KEY"] = os.getenv(
        "FLASK_SECRET_KEY", "fold-labels-ui")

    def _render_page(
        values: dict[str, str],
        *,
        preview_src: str | None = None,
        error: str | None = None,
        status: int = 200,
    ) -> tuple[str, int]:
        page = render_template(
            "designer.html",
            values=values,
            fold_choices=fold_type_choices(),
            preview_src=preview_src,
            error=error,
            min_dimension=MIN_DIMENSION_IN,
            max_dimension=MAX_DIMENSION_IN,
            dimension_step=DIMENSION_STEP_IN,
        )
        return page, status

    @app.route("/", methods=["GET", "POST"])
    # pyright: ignore[reportUnusedFunction]
    def index() -> tuple[str, int]:
        source = request.form if request.method == "POST" else request.args
        values = _form_values(source)
        try:
            spec = _read_design(values)
            image = _read_upload(request.files.get("image"))
        except ValueError as exc:
            return _render_page(values, error=str(exc), status=400)

        png_bytes = render_raster(spec, image, "png")
        preview_src = "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")
        return _render_page(values, preview_src=preview_src)

    @app.route("/download", methods=["POST"])
    # pyright: ignore[reportUnusedFunction]
    def download() -> Response | tuple[str, int]:
        values = _form_values(request.form)
        try:
            spec = _read_design(values)
            image = _read_upload(request.files.get("image"))
        except ValueError as exc:
            return _render_page(values, error=str(exc), status=400)

        jpeg_bytes = render_raster(spec, image, "jpeg")
        name = download_filename(spec.title, "jpg")
        logger.info("Serving %s (%d bytes)", name, len(jpeg_bytes))
        return send_file(
            BytesIO(jpeg_bytes),
            mimetype="image/jpeg",
            as_attachment=True,
            download_name=name,
        )

    @app.route("/api/draw-ops", methods=["GET"])
    # pyright: ignore[reportUnusedFunction]
    def draw_ops() -> Response | tuple[Response, int]:
        values = _form_values(request.args)
        try:
            spec = _read_design(values)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        return jsonify(
            {
                "layout": layout_to_dict(layout_for_spec(spec)),
                "ops": [draw_op_to_dict(op) for op in render(spec)],
            }
        )

    return app


def run_web_app(host: str, port: int) -> None:
    """Launch the Flask development server."""
    app = create_app()

    use_reloader_env = os.getenv("USE_RELOADER")
    use_reloader = (
        str(use_reloader_env).lower() in {"1", "true", "yes", "on"}
        if use_reloader_env is not None
        else True
    )
    app.run(host=host, port=port, debug=False, use_reloader=use_reloader)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for the web UI."""
    load_dotenv()
    parser = argparse.ArgumentParser(
        description="Folded label designer web UI"
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host/IP for the web UI (default: 127.0.0.1).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=4000,
        help="Port for the web UI (default: 4000).",
    )

    args = parser.parse_args(argv)

    run_web_app(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    main()
