from flask import jsonify

from quizbuilder.errors import StorageError
from quizbuilder.health import health_bp
from quizbuilder.quiz.repository import get_repository


@health_bp.route("/health", methods=["GET"])
def health():
    """Simple liveness endpoint."""
    return jsonify({"status": "ok", "message": "Quiz Builder API is running"}), 200


@health_bp.route("/health/db", methods=["GET"])
def health_db():
    """Report whether the database answers a trivial query."""
    try:
        get_repository().ping()
    except StorageError:
        return jsonify({"status": "error", "message": "Database connection failed"}), 503
    return jsonify({"status": "ok", "message": "Database connection successful"}), 200
