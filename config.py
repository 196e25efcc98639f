"""
Configuration for the CS Fundamentals guide
Environment-specific settings selected through FLASK_ENV
"""
import os
import secrets
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)
    DEBUG = False
    TESTING = False

    # Session
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = timedelta(days=30)

    # Rate limiting
    RATE_LIMIT_DEFAULT = os.environ.get('RATE_LIMIT_DEFAULT', '300 per hour')

    # Caching
    CACHE_DEFAULT_TIMEOUT = int(os.environ.get('CACHE_DEFAULT_TIMEOUT', 300))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Landing selection (falls back to first category / first topic)
    DEFAULT_CATEGORY = os.environ.get('DEFAULT_CATEGORY', 'oop')
    DEFAULT_TOPIC_ID = os.environ.get('DEFAULT_TOPIC_ID', 'encapsulation')
    DEFAULT_THEME = 'dark'

    CONTACT_EMAIL = os.environ.get('CONTACT_EMAIL', 'yrk122005@gmail.com')

    @classmethod
    def init_app(cls, app):
        app.config.from_object(cls)


class DevelopmentConfig(Config):
    DEBUG = True
    SESSION_COOKIE_SECURE = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    TESTING = True
    DEBUG = True
    SECRET_KEY = 'test-secret-key'
    SESSION_COOKIE_SECURE = False
    LOG_LEVEL = 'WARNING'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig,
}
