# hiredash/api/submissions.py
from flask import Blueprint, jsonify, request, current_app
from hiredash.extensions import store
from hiredash.errors import InvalidInput, NotFound

bp = Blueprint("submissions", __name__)


@bp.get("/api/submissions")
def list_submissions():
    try:
        return jsonify(store.list())
    except Exception:
        current_app.logger.exception("GET /api/submissions error")
        return jsonify({"error": "Failed to read submissions file"}), 500


@bp.post("/api/submissions")
def create_submission():
    payload = request.get_json(silent=True)
    try:
        candidate = store.create(payload)
    except InvalidInput as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        current_app.logger.exception("POST /api/submissions error")
        return jsonify({"error": "Failed to save candidate"}), 500
    return jsonify({"message": "Candidate added successfully", "candidate": candidate})


@bp.put("/api/submissions/<candidate_id>")
def update_submission_reason(candidate_id):
    body = request.get_json(silent=True) or {}
    reason = body.get("reason") if isinstance(body, dict) else None
    try:
        candidate = store.update_reason(candidate_id, reason)
    except NotFound:
        return jsonify({"error": "Candidate not found"}), 404
    except Exception:
        current_app.logger.exception("PUT /api/submissions/%s error", candidate_id)
        return jsonify({"error": "Failed to update reason"}), 500
    return jsonify({"message": "Reason updated", "candidate": candidate})
