import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {'1', 'true', 'yes', 'on'}


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev_key_123'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///atividades.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 'local' desativa o cookie Secure para permitir http://localhost
    APP_ENV = os.environ.get('APP_ENV', 'production')

    SESSION_LIFETIME_DAYS = int(os.environ.get('SESSION_LIFETIME_DAYS', '7'))
    SESSION_TOKEN_COOKIE = os.environ.get('SESSION_TOKEN_COOKIE', 'atividades_sessao')
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE', APP_ENV != 'local')
    SESSION_COOKIE_SAMESITE = 'Lax'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    APP_ENV = 'local'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SESSION_COOKIE_SECURE = False
    LOG_LEVEL = 'WARNING'
