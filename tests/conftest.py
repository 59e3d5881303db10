import pytest

from urlcodec import create_app
from urlcodec.config.system_settings import Settings

_SETTINGS_ENV = [
    'SETTINGS_FILE', 'APP_HOST', 'APP_PORT', 'APP_DEBUG', 'API_PREFIX', 'MAX_CONTENT_LENGTH',
    'APP_LOG_LEVEL', 'APP_LOG_DIR', 'APP_LOG_FILE', 'APP_LOG_BACKUP', 'APP_USE_WATCHED_LOG',
    'APP_LOG_TO_FILE', 'DEFAULT_ENCODING', 'DECODE_ERRORS',
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """隔离环境变量和当前目录下的 settings.ini"""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def app():
    return create_app(Settings(LOG_TO_FILE=False))


@pytest.fixture
def client(app):
    return app.test_client()
