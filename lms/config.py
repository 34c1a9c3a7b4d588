import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default='false'):
    return os.getenv(name, default).lower() in ('true', '1', 'yes')


class Config:
    """Application configuration."""

    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')
    DEBUG = os.getenv('FLASK_ENV', 'development') == 'development'
    TESTING = False

    # JWT bearer tokens
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = int(os.getenv('JWT_ACCESS_TOKEN_EXPIRES', '3600'))

    # Elasticsearch
    ELASTICSEARCH_URL = os.getenv('ELASTICSEARCH_URL', 'http://localhost:9200')
    ELASTICSEARCH_USER = os.getenv('ELASTICSEARCH_USER', 'elastic')
    ELASTICSEARCH_PASSWORD = os.getenv('ELASTICSEARCH_PASSWORD', 'elastic123')

    # Default Admin
    DEFAULT_ADMIN_USER = os.getenv('DEFAULT_ADMIN_USER', 'admin')
    DEFAULT_ADMIN_PASSWORD = os.getenv('DEFAULT_ADMIN_PASSWORD', 'admin123')

    # API Keys
    API_KEY_PREFIX = 'lms_'
    API_KEY_HEADER = 'X-API-Key'

    # Session
    PERMANENT_SESSION_LIFETIME = 86400  # 24 hours

    # Kaltura fallback settings, used when no plugin setting is stored
    KALTURA_ENABLED = _env_flag('KALTURA_ENABLED')
    KALTURA_DOMAIN = os.getenv('KALTURA_DOMAIN')
    KALTURA_RESOURCE_DOMAIN = os.getenv('KALTURA_RESOURCE_DOMAIN')
    KALTURA_RTMP_DOMAIN = os.getenv('KALTURA_RTMP_DOMAIN')
    KALTURA_PARTNER_ID = os.getenv('KALTURA_PARTNER_ID')


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SECRET_KEY = 'test-secret-key'
    JWT_SECRET_KEY = 'test-jwt-secret-key'
    KALTURA_ENABLED = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
