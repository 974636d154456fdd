## routes.py
from __future__ import annotations

from pathlib import Path

from flask import Blueprint, abort, current_app, jsonify, send_file

from deck_site.services.verifier import BuildVerifier


def create_blueprint(output_dir: Path, index_file: str, verifier: BuildVerifier) -> Blueprint:
    bp = Blueprint("site", __name__)
    root = Path(output_dir).resolve()

    def _serve(relative: str):
        full = (root / relative).resolve()
        if root not in full.parents:
            abort(404)
        if not full.is_file():
            abort(404)
        return send_file(full)

    @bp.get("/")
    def index():
        return _serve(index_file)

    @bp.get("/smoke")
    def smoke():
        report = verifier.verify()
        current_app.logger.info("Smoke test: passed=%d failed=%d", report.passed, report.failed)
        return jsonify(report.to_dict()), (200 if report.ok else 503)

    @bp.get("/<path:filename>")
    def static_file(filename: str):
        return _serve(filename)

    return bp
