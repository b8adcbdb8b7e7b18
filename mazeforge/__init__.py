"""
project: MazeForge
module: __init__.py
License: MIT

Flask application setup for the level generation service.

Configuration is sourced from environment variables with reasonable defaults
for development. A local `instance/` directory holds runtime files such as
the server log.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

from mazeforge.maze import LevelConfigError

# Load .env if present so MAZE_* / MAZEFORGE_* flags can be supplied without
# exporting shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)
# Ensure instance directory exists for the server log and other runtime files
try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # read-only installs; _configure_logging retries when the server starts
    pass

app.config.update(
    # Level generation feature flags / metrics
    MAZE_ENABLE_GENERATION_METRICS=bool(os.getenv("MAZE_ENABLE_GENERATION_METRICS", "1") == "1"),
    MAZE_DISABLE_CACHE=bool(os.getenv("MAZE_DISABLE_CACHE", "0") == "1"),
)

# Register HTTP blueprints (import after app created)
from mazeforge.routes.levels_api import bp_levels  # noqa: E402

app.register_blueprint(bp_levels)


def create_app():
    """Return the Flask app instance."""
    return app


@app.errorhandler(LevelConfigError)
def bad_level_config(e):
    return jsonify({"error": str(e)}), 400


@app.errorhandler(404)
def not_found(e):
    return jsonify({"error": "not found"}), 404


# Error handling: log details and return an error id the client can report
@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal error", "error_id": error_id}), 500
