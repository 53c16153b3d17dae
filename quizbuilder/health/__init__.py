from flask import Blueprint

# Blueprint for liveness and database checks
health_bp = Blueprint("health", __name__)

# Import routes so that they are registered with the blueprint
from quizbuilder.health import routes  # noqa: E402,F401
