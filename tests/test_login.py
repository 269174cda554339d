"""Tests for the login endpoints and the account service."""
import logging

import pytest

from employee_portal_api.app.core.errors import ApiError
from employee_portal_api.app.services.account_service import AccountService


def test_login_success_returns_full_account(client):
    response = client.post("/api/login", json={"username": "test", "password": "123456"})
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "歡迎 測試員工！",
        "user": {"username": "test", "password": "123456", "name": "測試員工"},
    }


def test_login_admin(client):
    response = client.post("/api/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["name"] == "管理員"


def test_login_wrong_password(client):
    response = client.post("/api/login", json={"username": "test", "password": "wrong"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "帳號或密碼錯誤"}


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "", "password": ""},
        {"username": "TEST", "password": "123456"},
        {"username": "test", "password": "12345"},
        {"username": "tes", "password": "123456"},
        {"username": "test ", "password": "123456"},
        {"username": "admin", "password": "123456"},
        {"username": "test"},
        {"password": "123456"},
        {},
        {"username": "test", "password": 123456},
        {"username": None, "password": None},
    ],
)
def test_login_rejects_unknown_credentials(client, payload):
    response = client.post("/api/login", json=payload)
    assert response.status_code == 401
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "帳號或密碼錯誤"


@pytest.mark.parametrize("raw", [b"", b"{not json", b"[\"test\", \"123456\"]", b"\"test\"", b"\xff\xfe"])
def test_login_malformed_body_is_unauthorized(client, raw):
    response = client.post("/api/login", content=raw, headers={"Content-Type": "application/json"})
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_failed_login_is_logged(client, caplog):
    with caplog.at_level(logging.WARNING):
        client.post("/api/login", json={"username": "test", "password": "nope"})
    assert any("Failed login" in r.getMessage() for r in caplog.records)


def test_login_page_is_html(client):
    response = client.get("/api/login")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "fetch('/api/login'" in response.text
    assert "sessionStorage.setItem('user'" in response.text
    assert "/dashboard" in response.text


def test_find_account_requires_both_fields(seed):
    account = AccountService.find_account(seed, "admin", "admin123")
    assert account is not None
    assert account.name == "管理員"
    assert AccountService.find_account(seed, "admin", "wrong") is None
    assert AccountService.find_account(seed, 1, "admin123") is None


def test_service_login_raises_api_error(seed):
    with pytest.raises(ApiError) as excinfo:
        AccountService.login(seed, "nobody", "x")
    assert excinfo.value.status_code == 401


@pytest.mark.parametrize("content_type", ["text/plain", "application/x-www-form-urlencoded", None])
def test_login_ignores_non_json_body(client, content_type):
    headers = {"Content-Type": content_type} if content_type else {}
    response = client.post(
        "/api/login",
        content=b'{"username":"test","password":"123456"}',
        headers=headers,
    )
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "帳號或密碼錯誤"}


@pytest.mark.parametrize("content_type", ["application/json; charset=utf-8", "application/vnd.api+json"])
def test_login_accepts_json_media_types(client, content_type):
    response = client.post(
        "/api/login",
        content=b'{"username":"test","password":"123456"}',
        headers={"Content-Type": content_type},
    )
    assert response.status_code == 200
