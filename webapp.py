"""
Web UI — Flask app serving the article form and the task API.

Provides:
  - The single-page form (URL input, task buttons, result area)
  - POST /api/parse  → {date, title, content}
  - POST /api/<task> → {summary} | {theses} | {telegramPost} | {translation}

Every failure, HTTP-level ones included, is rendered as
{"error": ..., "errorType": ...}.
"""

import logging

from flask import Flask, render_template, request, jsonify
from werkzeug.exceptions import HTTPException

import config
from errors import ApiError, ERROR_MESSAGES, SERVER_ERROR, VALIDATION
from orchestrator import Orchestrator
from tasks import TASKS

log = logging.getLogger(__name__)

_orchestrator = None  # set via create_app()


def _payload() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def create_app(orchestrator=None):
    global _orchestrator
    _orchestrator = orchestrator or Orchestrator()

    app = Flask(__name__)
    app.secret_key = config.WEB_SECRET

    # ── Pages ───────────────────────────────────────────────

    @app.route("/")
    def index():
        return render_template("index.html", error_messages=ERROR_MESSAGES)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    # ── API endpoints ───────────────────────────────────────

    @app.route("/api/parse", methods=["POST"])
    def api_parse():
        return jsonify(_orchestrator.parse(_payload()))

    @app.route("/api/<task_name>", methods=["POST"])
    def api_task(task_name):
        if task_name not in TASKS:
            return jsonify({"error": f"Неизвестная задача: {task_name}",
                            "errorType": VALIDATION}), 404
        return jsonify(_orchestrator.run_task(task_name, _payload()))

    # ── Errors ──────────────────────────────────────────────

    @app.errorhandler(ApiError)
    def handle_api_error(e):
        log.info(f"{request.path} failed: {e.kind}")
        return jsonify(e.to_dict()), e.status

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        # wrong method, unknown route, oversized body and the like
        return jsonify({"error": e.description, "errorType": VALIDATION}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        log.exception(f"Unhandled error on {request.path}")
        err = ApiError(SERVER_ERROR)
        return jsonify(err.to_dict()), err.status

    return app
