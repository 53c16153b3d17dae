"""
Quiz module for authoring quizzes, taking them and reviewing results.

Routes are registered on ``quiz_bp``; the app factory mounts it under the
configured API prefix.
"""
from flask import Blueprint

quiz_bp = Blueprint('quiz', __name__)

from quizbuilder.quiz import routes  # noqa: E402,F401
from quizbuilder.quiz import result_routes  # noqa: E402,F401
