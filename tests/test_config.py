from nikeplus import config


def test_timeout_unset_keeps_transport_default(monkeypatch):
    monkeypatch.delenv("NIKEPLUS_REQUEST_TIMEOUT", raising=False)
    assert config._env_timeout("NIKEPLUS_REQUEST_TIMEOUT") is None


def test_timeout_parses_positive_seconds(monkeypatch):
    monkeypatch.setenv("NIKEPLUS_REQUEST_TIMEOUT", "12.5")
    assert config._env_timeout("NIKEPLUS_REQUEST_TIMEOUT") == 12.5


def test_timeout_zero_or_garbage_means_none(monkeypatch):
    monkeypatch.setenv("NIKEPLUS_REQUEST_TIMEOUT", "0")
    assert config._env_timeout("NIKEPLUS_REQUEST_TIMEOUT") is None
    monkeypatch.setenv("NIKEPLUS_REQUEST_TIMEOUT", "soon")
    assert config._env_timeout("NIKEPLUS_REQUEST_TIMEOUT") is None


def test_env_str_ignores_blank(monkeypatch):
    monkeypatch.setenv("NIKEPLUS_API_BASE_URL", "   ")
    assert config._env_str("NIKEPLUS_API_BASE_URL", "https://api.nike.com") == (
        "https://api.nike.com"
    )


def test_derived_portal_urls():
    assert config.NIKEPLUS_LOGIN_URL == f"{config.NIKEPLUS_DEVELOPER_URL}/login"
    assert config.NIKEPLUS_TOKEN_URL.endswith("/get_auth_token")
