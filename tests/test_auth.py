import logging

import pytest
import requests

from conftest import FakeResp
from nikeplus.config import NIKEPLUS_LOGIN_URL, NIKEPLUS_TOKEN_URL
from nikeplus.errors import LoginError, NikePlusAPIError, TokenError
from nikeplus.nike_client import auth
from nikeplus.nike_client.session import NikeSession


@pytest.fixture
def fresh_session(fake_http):
    return NikeSession(http=fake_http)


def test_login_posts_form_credentials(fresh_session, fake_http):
    fake_http.queue(FakeResp(200, text="<html/>", url="https://developer.nike.com/categories"))

    auth.login(fresh_session, "runner@example.com", "s3cret")

    call = fake_http.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == NIKEPLUS_LOGIN_URL
    assert call["data"] == {
        "email": "runner@example.com",
        "password": "s3cret",
        "continue_url": "/categories",
    }
    assert fresh_session.access_token == ""


def test_login_form_post_does_not_ask_for_json(fresh_session, fake_http):
    fake_http.queue(FakeResp(200, text="<html/>", url="https://developer.nike.com/categories"))

    auth.login(fresh_session, "runner@example.com", "s3cret")

    headers = fake_http.calls[0].get("headers") or {}
    assert headers.get("Accept") != "application/json"


def test_login_logs_masked_email(fresh_session, fake_http, caplog):
    fake_http.queue(
        FakeResp(
            200,
            text="<html/>",
            url="https://developer.nike.com/categories?error=invalid_credentials",
        )
    )

    with caplog.at_level(logging.DEBUG, logger="nikeplus"):
        with pytest.raises(LoginError):
            auth.login(fresh_session, "runner@example.com", "s3cret")

    assert "r****@example.com" in caplog.text
    assert "runner@example.com" not in caplog.text
    assert "s3cret" not in caplog.text


def test_login_error_marker_in_redirect_fails(fresh_session, fake_http):
    fake_http.queue(
        FakeResp(
            200,
            text="<html/>",
            url="https://developer.nike.com/categories?error=invalid_credentials",
        )
    )

    with pytest.raises(LoginError) as excinfo:
        auth.login(fresh_session, "runner@example.com", "wrong")

    assert "error=invalid_credentials" in str(excinfo.value)
    assert excinfo.value.query == "error=invalid_credentials"


def test_login_ignores_status_code(fresh_session, fake_http):
    fake_http.queue(FakeResp(500, text="", url="https://developer.nike.com/categories"))
    auth.login(fresh_session, "runner@example.com", "s3cret")


def test_login_transport_error_propagates_unchanged(fresh_session, fake_http):
    fake_http.queue(requests.ConnectionError("dns failure"))
    with pytest.raises(requests.ConnectionError):
        auth.login(fresh_session, "runner@example.com", "s3cret")


def test_ask_access_token_stores_and_returns_token(fresh_session, fake_http):
    fake_http.queue(FakeResp(200, data={"auth_token": "abc123", "expires_in": 3600}))

    token = auth.ask_access_token(fresh_session)

    assert token == "abc123"
    assert fresh_session.access_token == "abc123"
    call = fake_http.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == NIKEPLUS_TOKEN_URL
    assert call["headers"]["Accept"] == "application/json"
    assert "data" not in call and "json" not in call


def test_ask_access_token_missing_field_fails(fresh_session, fake_http):
    fake_http.queue(FakeResp(200, data={"foo": "bar"}))

    with pytest.raises(TokenError, match="Cannot obtain access token"):
        auth.ask_access_token(fresh_session)
    assert fresh_session.access_token == ""


def test_ask_access_token_non_string_token_fails(fake_http):
    session = NikeSession(access_token="old", http=fake_http)
    fake_http.queue(FakeResp(200, data={"auth_token": 12345}))

    with pytest.raises(TokenError):
        auth.ask_access_token(session)
    assert session.access_token == "old"


def test_ask_access_token_remote_error_is_normalized(fresh_session, fake_http):
    fake_http.queue(FakeResp(401, data={"error": "not_logged_in"}))

    with pytest.raises(NikePlusAPIError, match="not_logged_in"):
        auth.ask_access_token(fresh_session)
    assert fresh_session.access_token == ""
