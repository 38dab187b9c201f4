# app.py
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration
from flask import Flask
import os
import logging
from config import Config
from routes import register_blueprints
from flask_cors import CORS

logger = logging.getLogger(__name__)

# Initialize Sentry SDK before Flask app
if Config.SENTRY_DSN:
    sentry_sdk.init(
        dsn=Config.SENTRY_DSN,
        # Submitted email addresses are user data, keep them out of events
        send_default_pii=False,
        traces_sample_rate=Config.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[FlaskIntegration()],
    )
    logger.info("Sentry SDK initialized successfully")
else:
    logger.warning("SENTRY_DSN not found in environment variables. Sentry monitoring is disabled.")


def create_app(testing=False):
    """Create and configure the Flask application"""
    app = Flask(__name__)
    app.secret_key = Config.SECRET_KEY
    app.config['TESTING'] = testing

    if not testing:
        try:
            Config.validate()
            logger.info("Configuration validated successfully")
        except Exception as e:
            logger.critical(f"Configuration validation failed: {str(e)}")
            raise

    # Configure CORS
    if Config.CORS_ORIGINS:
        CORS(app, origins=Config.CORS_ORIGINS)
        logger.info(f"CORS configured with allowed origins: {Config.CORS_ORIGINS}")
    else:
        CORS(app)
        logger.info("CORS configured: allowing all origins")

    register_blueprints(app)

    return app


app = create_app()

# Main entry point
if __name__ == '__main__':
    app.run(
        host=os.getenv('HOST', '0.0.0.0'),
        port=int(os.getenv('PORT', 8000)),
        debug=os.getenv('FLASK_DEBUG', 'False').lower() == 'true'
    )
