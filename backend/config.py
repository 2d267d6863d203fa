"""
config.py - Application configuration settings
"""

import os
from datetime import timedelta
from dotenv import load_dotenv

# Load environment variables immediately
load_dotenv()


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name):
    return [v.strip().lower() for v in os.getenv(name, "").split(",") if v.strip()]


class Config:
    """Application configuration."""
    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-only-secret-do-not-use-in-production')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///mock_interview.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    APP_VERSION = os.getenv('APP_VERSION', '1.0.0')

    # Upload settings
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB
    MAX_PDF_SIZE = 5 * 1024 * 1024  # 5MB

    # JWT settings
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'dev-only-jwt-secret-do-not-use-in-production')
    JWT_ACCESS_TOKEN_EXPIRE = timedelta(days=7)

    # Accounts
    REQUIRE_USER_APPROVAL = _env_bool('REQUIRE_USER_APPROVAL', True)
    ADMIN_EMAILS = _env_list('ADMIN_EMAILS')
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', 'http://localhost:3000').split(',')

    # Gemini model settings
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash-lite")
    GEMINI_TEMPERATURE = float(os.getenv("GEMINI_TEMPERATURE", "0.7"))
    GEMINI_MAX_OUTPUT_TOKENS = int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "2048"))

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE = os.getenv('LOG_FILE')

    @staticmethod
    def init_app(app):
        """Initialize application with configuration."""
        from logger import configure_logging
        configure_logging(app.config['LOG_LEVEL'], app.config.get('LOG_FILE'))


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    JWT_SECRET_KEY = 'test-jwt-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    REQUIRE_USER_APPROVAL = False
    ADMIN_EMAILS = ['admin@example.com']
    LOG_LEVEL = 'WARNING'
    LOG_FILE = None
