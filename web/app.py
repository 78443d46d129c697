#!/usr/bin/env python3
"""
SVGO Export - Flask Web Application

Receives export-finished events forwarded by the design application and
compresses the exported SVG files on this machine.
"""

import logging
import threading

from flask import Flask, jsonify, request
from flask_cors import CORS

from svgoexport import (
    ExportBatch,
    ExportCompletionHandler,
    ExportPayloadError,
    NullSoundPlayer,
    SVGOOptimizer,
    SoundPlayer,
)
from svgoexport.optimizer import SVGO_PATH

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)

# Configuration
app.config["SVGO_PATH"] = SVGO_PATH
app.config["PLAY_SOUND"] = True
# Optional callables replacing the svgo runner and the sound player
app.config["OPTIMIZER"] = None
app.config["SOUND_PLAYER"] = None

# One batch at a time, so folders are never optimized concurrently
handler_lock = threading.Lock()


def create_handler() -> ExportCompletionHandler:
    """Build a handler from the app configuration."""
    optimizer = app.config["OPTIMIZER"] or SVGOOptimizer(app.config["SVGO_PATH"])

    sound = app.config["SOUND_PLAYER"]
    if sound is None:
        sound = SoundPlayer() if app.config["PLAY_SOUND"] else NullSoundPlayer()

    return ExportCompletionHandler(optimizer=optimizer, sound=sound)


@app.route("/api/health")
def health():
    """Report whether svgo can be found."""
    svgo_path = app.config["SVGO_PATH"]
    return jsonify({
        "status": "ok",
        "svgo_path": svgo_path,
        "svgo_available": SVGOOptimizer(svgo_path).is_available(),
    })


@app.route("/api/export-finished", methods=["POST"])
def export_finished():
    """Compress the SVG files of a finished export."""
    data = request.get_json(silent=True)

    if data is None:
        return jsonify({"error": "No data provided"}), 400

    try:
        batch = ExportBatch.from_action_context(data)
    except ExportPayloadError as e:
        return jsonify({"error": str(e)}), 400

    with handler_lock:
        outcome = create_handler().handle(batch)

    if outcome is None:
        return jsonify({"handled": False})

    return jsonify({"handled": True, **outcome.to_dict()})


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    print("Starting SVGO Export Web Server...")
    print("Forward export events to http://localhost:5000/api/export-finished")
    app.run(debug=True, host="127.0.0.1", port=5000)
