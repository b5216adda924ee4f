import os
from datetime import timedelta

import pytest

os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('BCRYPT_ROUNDS', '4')

from todo_api.core.config import ConfigurationError, load_auth_settings, parse_duration  # noqa: E402


@pytest.mark.parametrize(
    ('raw', 'expected'),
    [
        ('3600', timedelta(seconds=3600)),
        ('45s', timedelta(seconds=45)),
        ('15m', timedelta(minutes=15)),
        ('1h', timedelta(hours=1)),
        ('7d', timedelta(days=7)),
        (' 2H ', timedelta(hours=2)),
    ],
)
def test_parse_duration_accepts_seconds_and_unit_suffixes(raw: str, expected: timedelta) -> None:
    assert parse_duration(raw) == expected


@pytest.mark.parametrize('raw', ['', 'soon', '1w', '-5m', '0', '1.5h'])
def test_parse_duration_rejects_invalid_values(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_duration(raw)


def test_load_auth_settings_reads_secret_and_expiry() -> None:
    settings = load_auth_settings({'JWT_SECRET': 'top-secret', 'JWT_EXPIRES_IN': '1h'})

    assert settings.jwt_secret == 'top-secret'
    assert settings.jwt_expires_in == timedelta(hours=1)
    assert settings.jwt_algorithm == 'HS256'


def test_load_auth_settings_fails_closed_without_secret() -> None:
    with pytest.raises(ConfigurationError) as exception_info:
        load_auth_settings({'JWT_EXPIRES_IN': '1h'})

    assert 'JWT_SECRET' in str(exception_info.value)


def test_load_auth_settings_treats_blank_secret_as_missing() -> None:
    with pytest.raises(ConfigurationError):
        load_auth_settings({'JWT_SECRET': '   ', 'JWT_EXPIRES_IN': '1h'})


def test_load_auth_settings_requires_expiry() -> None:
    with pytest.raises(ConfigurationError) as exception_info:
        load_auth_settings({'JWT_SECRET': 'top-secret'})

    assert 'JWT_EXPIRES_IN' in str(exception_info.value)


def test_load_auth_settings_rejects_malformed_expiry() -> None:
    with pytest.raises(ConfigurationError):
        load_auth_settings({'JWT_SECRET': 'top-secret', 'JWT_EXPIRES_IN': 'forever'})


def test_load_auth_settings_requires_long_secret_in_production() -> None:
    with pytest.raises(ConfigurationError):
        load_auth_settings({'APP_ENV': 'production', 'JWT_SECRET': 'short', 'JWT_EXPIRES_IN': '1h'})

    settings = load_auth_settings(
        {'APP_ENV': 'production', 'JWT_SECRET': 'x' * 32, 'JWT_EXPIRES_IN': '1h'}
    )
    assert len(settings.jwt_secret) == 32


@pytest.mark.parametrize('algorithm', ['HS256', 'HS384', 'hs512'])
def test_load_auth_settings_accepts_hmac_algorithms(algorithm: str) -> None:
    settings = load_auth_settings({'JWT_SECRET': 'top-secret', 'JWT_EXPIRES_IN': '1h', 'JWT_ALGORITHM': algorithm})

    assert settings.jwt_algorithm == algorithm.upper()


@pytest.mark.parametrize('algorithm', ['RS256', 'ES256', 'none', ''])
def test_load_auth_settings_rejects_non_hmac_algorithms(algorithm: str) -> None:
    with pytest.raises(ConfigurationError) as exception_info:
        load_auth_settings({'JWT_SECRET': 'top-secret', 'JWT_EXPIRES_IN': '1h', 'JWT_ALGORITHM': algorithm})

    assert 'JWT_ALGORITHM' in str(exception_info.value)
