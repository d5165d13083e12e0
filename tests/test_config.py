"""
Unit tests for runtime configuration
"""
import os

import pytest

from saasday_server import config
from saasday_server.config import DEFAULT_PORT, Settings, load_env_file, parse_port
from saasday_server.exceptions import ConfigurationError


@pytest.mark.unit
def test_defaults_when_environment_is_empty():
    settings = Settings.from_env(environ={})

    assert settings.port == DEFAULT_PORT
    assert settings.host == '0.0.0.0'
    assert settings.log_level == 'INFO'
    assert settings.cors_origins == ['*']
    assert settings.auth_api_keys == []
    assert settings.security_log_file is None


@pytest.mark.unit
def test_values_read_from_environment():
    settings = Settings.from_env(environ={
        'PORT': ' 8080 ',
        'HOST': '127.0.0.1',
        'LOG_LEVEL': 'warning',
        'CORS_ORIGINS': 'http://a.example.com, http://b.example.com,',
        'AUTH_API_KEYS': 'k1,k2',
        'SECURITY_LOG_FILE': 'logs/security.log',
    })

    assert settings.port == 8080
    assert settings.host == '127.0.0.1'
    assert settings.log_level == 'WARNING'
    assert settings.cors_origins == ['http://a.example.com', 'http://b.example.com']
    assert settings.auth_api_keys == ['k1', 'k2']
    assert settings.security_log_file == 'logs/security.log'


@pytest.mark.unit
def test_development_defaults_to_debug():
    assert Settings.from_env(environ={'FLASK_ENV': 'development'}).log_level == 'DEBUG'


@pytest.mark.unit
def test_unknown_log_level_rejected():
    with pytest.raises(ConfigurationError):
        Settings.from_env(environ={'LOG_LEVEL': 'LOUD'})


@pytest.mark.unit
@pytest.mark.parametrize('raw', [None, '', '   '])
def test_parse_port_default(raw):
    assert parse_port(raw) == DEFAULT_PORT


@pytest.mark.unit
@pytest.mark.parametrize('raw', ['http', '80.5', '0', '65536', '-1'])
def test_parse_port_rejects_bad_values(raw):
    with pytest.raises(ConfigurationError) as excinfo:
        parse_port(raw)
    assert excinfo.value.details == {'PORT': raw}


@pytest.mark.unit
def test_env_file_does_not_override_process_environment(tmp_path, monkeypatch):
    env_file = tmp_path / '.env'
    env_file.write_text('SAASDAY_TEST_KEPT=from-file\nSAASDAY_TEST_NEW=from-file\n', encoding='utf-8')
    monkeypatch.setenv('SAASDAY_TEST_KEPT', 'from-process')
    # register for cleanup; load_dotenv writes straight to os.environ
    monkeypatch.setenv('SAASDAY_TEST_NEW', 'placeholder')
    monkeypatch.delenv('SAASDAY_TEST_NEW')

    assert load_env_file(env_file) is True

    assert os.environ['SAASDAY_TEST_KEPT'] == 'from-process'
    assert os.environ['SAASDAY_TEST_NEW'] == 'from-file'


@pytest.mark.unit
def test_missing_env_file_is_skipped(tmp_path):
    assert load_env_file(tmp_path / 'absent.env') is False


@pytest.mark.unit
def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setattr(config, 'load_env_file', lambda *a, **k: False)
    monkeypatch.setenv('PORT', '5055')

    assert Settings.from_env().port == 5055
