"""Tests for settings, seed data and logging setup."""
import dataclasses
import logging

import pytest
from pydantic import ValidationError

from employee_portal_api.app.core.config import Settings
from employee_portal_api.app.core.logging_config import setup_logging
from employee_portal_api.app.core.paths import normalize_path
from employee_portal_api.app.core.seed import build_seed_data, default_seed_data


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "HOST", "API_VERSION", "DEBUG", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.port == 8080
    assert s.host == "0.0.0.0"
    assert s.api_version == "3.0.0"
    assert s.debug is False
    assert s.cors_origin_list == ["*"]


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")
    s = Settings()
    assert s.port == 9090
    assert s.debug is True
    assert s.cors_origin_list == ["http://a.example", "http://b.example"]


def test_seed_collections_are_immutable():
    seed = default_seed_data()
    with pytest.raises(dataclasses.FrozenInstanceError):
        seed.accounts = ()
    with pytest.raises(AttributeError):
        seed.products.append(None)
    with pytest.raises(ValidationError):
        seed.products[0].price = 1
    with pytest.raises(TypeError):
        seed.locations[3] = "倉庫C"


def test_seed_keys_are_unique():
    seed = default_seed_data()
    assert len({a.username for a in seed.accounts}) == len(seed.accounts)
    assert len({p.id for p in seed.products}) == len(seed.products)


def test_duplicate_username_rejected():
    with pytest.raises(ValueError):
        build_seed_data(
            accounts=[
                {"username": "test", "password": "1", "name": "A"},
                {"username": "test", "password": "2", "name": "B"},
            ],
            products=[],
        )


def test_duplicate_product_id_rejected():
    with pytest.raises(ValueError):
        build_seed_data(
            accounts=[],
            products=[
                {"id": 1, "name": "A", "price": 1, "stock": 1},
                {"id": 1, "name": "B", "price": 2, "stock": 2},
            ],
        )


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging("DEBUG")
    count = len(root.handlers)
    setup_logging("DEBUG")
    assert len(root.handlers) == count


@pytest.mark.parametrize(
    "path,expected",
    [("/", "/"), ("/health/", "/health"), ("/HEALTH", "/health"), ("/health//", "/health/"), ("/api/Login", "/api/login")],
)
def test_normalize_path(path, expected):
    assert normalize_path(path) == expected
