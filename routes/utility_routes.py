import logging
from flask import request, jsonify
from controllers.utility_controller import UtilityController
from routes import utils_bp

logger = logging.getLogger('utility_routes')

# GET /health - Liveness check
@utils_bp.route('/health', methods=['GET'])
def health():
    """Report that the service is up"""
    return jsonify({"status": "ok"}), 200

# POST /emails/validate - Validate one or many email addresses
@utils_bp.route('/emails/validate', methods=['POST'])
def validate_email():
    """Validate the email (or list of emails) in the request body"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        logger.warning("Email validation request without a JSON object body")
        return jsonify({"error": "Request body must be a JSON object"}), 400

    if 'emails' in data:
        success, result, status_code = UtilityController.validate_emails(data['emails'])
    elif 'email' in data:
        success, result, status_code = UtilityController.validate_email(data['email'])
    else:
        return jsonify({"error": "Either email or emails is required"}), 400

    return jsonify(result), status_code

# POST /passwords - Generate passwords
@utils_bp.route('/passwords', methods=['POST'])
def generate_password():
    """Generate passwords from the options in the request body"""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        logger.warning("Password request with a non-object JSON body")
        return jsonify({"error": "Request body must be a JSON object"}), 400

    success, result, status_code = UtilityController.generate_passwords(
        length=data.get('length'),
        numbers=data.get('numbers', True),
        special=data.get('special', True),
        alphabets=data.get('alphabets', True),
        count=data.get('count', 1)
    )

    if not success:
        logger.warning(f"Password request rejected: {result['error']}")
    return jsonify(result), status_code
