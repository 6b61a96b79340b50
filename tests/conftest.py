"""Shared fixtures: default credentials and fake HTTP responses."""
from unittest.mock import Mock

import pytest

from config import app_config


@pytest.fixture(autouse=True)
def api_config(monkeypatch):
    """Known API config for every test (no real env vars involved)"""
    monkeypatch.setattr(app_config.payment_api, "api_key", "sk_test_default")
    monkeypatch.setattr(app_config.payment_api, "api_base", "https://api.stripe.com")
    monkeypatch.setattr(app_config.payment_api, "connect_base", "https://connect.stripe.com")
    monkeypatch.setattr(app_config.payment_api, "api_version", None)
    return app_config.payment_api


@pytest.fixture
def make_response():
    """Factory for fake ``requests.Response`` objects"""

    def _make(data, status_code=200):
        response = Mock()
        response.json.return_value = data
        response.status_code = status_code
        return response

    return _make


@pytest.fixture
def account_data():
    """Sample account response"""
    return {
        "id": "acct_1234",
        "object": "account",
        "email": "test+bindings@stripe.com",
        "charges_enabled": False,
        "details_submitted": False,
        "keys": {
            "publishable": "publishable-key",
            "secret": "secret-key",
        },
        "legal_entity": {
            "first_name": "Bling",
            "address": {
                "line1": None,
                "city": "San Francisco",
            },
            "additional_owners": [],
        },
        "external_accounts": {
            "object": "list",
            "url": "/v1/accounts/acct_1234/external_accounts",
            "has_more": False,
            "data": [],
        },
    }
