# backend/app.py
import os
from flask import Flask, request, jsonify, send_file

from .build_utils import archive_task, create_task, read_status, run_icon_task

app = Flask(__name__)

# =========================
# Index
# =========================
@app.route("/")
def index():
    return "<h2>Icon Builder Backend</h2>"

# =========================
# Create an icon task
# =========================
@app.route("/api/icons", methods=["POST"])
def api_icons():
    api_key = request.headers.get("X-API-Key")
    required_key = os.environ.get("API_KEY")

    if required_key and api_key != required_key:
        return jsonify({"error": "Invalid API Key"}), 401

    upload = request.files.get("logo")
    if upload is None or not upload.filename:
        return jsonify({"error": "Missing file: logo"}), 400

    task_id, source_path = create_task(upload, upload.filename)
    result = run_icon_task(task_id, source_path)

    if result["status"] != "done":
        return jsonify(result), 422
    return jsonify(result), 201

# =========================
# Task status
# =========================
@app.route("/api/status/<task_id>", methods=["GET"])
def api_status(task_id):
    status = read_status(task_id)
    if status is None:
        return jsonify({"error": "task not found"}), 404
    return jsonify(status)

# =========================
# Download the generated icons
# =========================
@app.route("/api/download/<task_id>", methods=["GET"])
def api_download(task_id):
    status = read_status(task_id)
    if status is None:
        return jsonify({"error": "task not found"}), 404
    if status["status"] != "done":
        return jsonify({"error": f"task is {status['status']}"}), 409

    archive = archive_task(task_id)
    return send_file(archive, mimetype="application/zip", as_attachment=True,
                     download_name=f"icons-{task_id}.zip")

# =========================
# Local debug entry
# =========================
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 10000)))
