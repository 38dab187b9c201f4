from flask import Blueprint

# Create blueprints
utils_bp = Blueprint('utils_api', __name__)

# Import routes to register with blueprints
# These imports MUST be after the blueprint definitions
from routes import utility_routes

def register_blueprints(app):
    """Register all blueprints with the Flask app"""
    app.register_blueprint(utils_bp)
