# config.py
# Flask application configuration

import os


class Config:
    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    SQLALCHEMY_DATABASE_URI = os.getenv(
        'DATABASE_URL',
        f'sqlite:///{os.path.join(BASE_DIR, "instance", "scorers.db")}'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv('SECRET_KEY', 'your-secret-key-change-me')  # override in production

    # Name of the communal scorer that orphaned user/case defaults fall back to
    DEFAULT_SCORER_NAME = os.getenv('DEFAULT_SCORER_NAME', 'AP@10')
    # Owner of the system default scorer
    SYSTEM_USER_EMAIL = os.getenv('SYSTEM_USER_EMAIL', 'system@scorers.local')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Create tables and the system default scorer on startup (no migrations needed)
    AUTO_CREATE_SCHEMA = os.getenv('AUTO_CREATE_SCHEMA', '1') not in ('0', 'false', 'False')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'test'
    LOG_LEVEL = 'DEBUG'
    AUTO_CREATE_SCHEMA = True
