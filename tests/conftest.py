"""Shared fixtures for the claims MCP tests."""

import pytest

from claims_backend.config.settings import (
    AppSettings,
    AuthSettings,
    IdentityStorageApiSettings,
    Settings,
)
from claims_backend.state.claim_state import Claim

XML_STRING = "http://www.w3.org/2001/XMLSchema#string"


@pytest.fixture
def api_settings():
    return IdentityStorageApiSettings(api_url="http://identity.test", api_base_path="/api/v1/")


@pytest.fixture
def settings(api_settings):
    return Settings(
        app=AppSettings(name="Test Claims Server", version="1.2.3"),
        identity_storage_api=api_settings,
        auth=AuthSettings(scheme="Bearer", expected_token="s3cret"),
    )


@pytest.fixture
def role_claim():
    return Claim(
        id="11111111-1111-1111-1111-111111111111",
        type="role",
        value="admin",
        value_type=XML_STRING,
        display_text="Administrator",
        properties={"source": "ldap"},
        description="Grants admin rights",
    )
