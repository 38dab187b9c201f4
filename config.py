import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Configure logging, ignoring unknown level names
_log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=_log_level if _log_level in logging.getLevelNamesMapping() else "INFO",
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Silence overly verbose loggers
logging.getLogger('urllib3').setLevel(logging.WARNING)
logging.getLogger('werkzeug').setLevel(logging.WARNING)


def _int_env(name, default):
    """Read an integer environment variable, tolerating blank or invalid input"""
    raw = os.getenv(name, str(default))
    try:
        return int(raw) if str(raw).strip() != "" else default
    except (TypeError, ValueError):
        return default


# Configuration class
class Config:
    # Security configuration
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    # Sentry configuration
    SENTRY_DSN = os.getenv("SENTRY_DSN")
    try:
        SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1"))
    except ValueError:
        SENTRY_TRACES_SAMPLE_RATE = 0.1

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Password endpoint limits
    _pdl_val = _int_env("PASSWORD_DEFAULT_LENGTH", 8)
    PASSWORD_DEFAULT_LENGTH = _pdl_val if _pdl_val > 0 else 8
    _pml_val = _int_env("PASSWORD_MAX_LENGTH", 1024)
    PASSWORD_MAX_LENGTH = _pml_val if _pml_val > 0 else 1024
    PASSWORD_MAX_COUNT = 100

    # Allowed CORS origins (comma-separated, empty allows all)
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    # Validate configuration
    @classmethod
    def validate(cls):
        problems = []
        if cls.LOG_LEVEL not in logging.getLevelNamesMapping():
            problems.append(f"LOG_LEVEL={cls.LOG_LEVEL}")
        if cls.PASSWORD_DEFAULT_LENGTH > cls.PASSWORD_MAX_LENGTH:
            problems.append("PASSWORD_DEFAULT_LENGTH exceeds PASSWORD_MAX_LENGTH")
        if problems:
            raise EnvironmentError(f"Invalid configuration: {', '.join(problems)}")
        return True
