"""
Tests for mcp_server.build_mcp.

Tools are exercised through an in-memory fastmcp Client; the claim
gateway behind them is mocked.
"""

import json
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastmcp import Client

from claims_backend.mcp_tools.claim_tools import ClaimTools
from claims_backend.services.claim_client import ClaimClient
from mcp_server import build_mcp

TOOL_NAMES = {
    "IdentityStorage.GetClaims",
    "IdentityStorage.GetClaimDetails",
    "IdentityStorage.DeleteClaim",
    "IdentityStorage.CreateClaim",
    "IdentityStorage.UpdateClaim",
    "General.GetAppVersion",
}


@pytest.fixture
def claim_client():
    return MagicMock(spec=ClaimClient)


@pytest.fixture
def mcp(settings, claim_client):
    return build_mcp(settings, ClaimTools(claim_client))


def _text(result):
    return result.content[0].text


class TestBuildMcp:
    @pytest.mark.asyncio
    async def test_registers_all_tools(self, mcp):
        async with Client(mcp) as client:
            tools = await client.list_tools()
        assert {tool.name for tool in tools} == TOOL_NAMES

    @pytest.mark.asyncio
    async def test_app_version_tool(self, mcp):
        async with Client(mcp) as client:
            result = await client.call_tool("General.GetAppVersion", {})
        assert json.loads(_text(result))["AppVersion"] == "1.2.3"

    @pytest.mark.asyncio
    async def test_get_claims_tool(self, mcp, claim_client, role_claim):
        claim_client.load_claims = AsyncMock(return_value=[role_claim])
        async with Client(mcp) as client:
            result = await client.call_tool("IdentityStorage.GetClaims", {})
        assert json.loads(_text(result))[0]["Id"] == role_claim.id

    @pytest.mark.asyncio
    async def test_update_tool_rejects_mismatched_id(self, mcp, claim_client):
        claim_client.update_claim = AsyncMock()
        async with Client(mcp) as client:
            result = await client.call_tool(
                "IdentityStorage.UpdateClaim",
                {"claim_id": "abc", "claim_dto": {"Id": "xyz", "Type": "role"}},
            )
        assert json.loads(_text(result))["Status"] == "Validation Failed"
        claim_client.update_claim.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_tool_reports_missing_fields(self, mcp, claim_client):
        claim_client.create_claim = AsyncMock()
        async with Client(mcp) as client:
            result = await client.call_tool("IdentityStorage.CreateClaim", {"claim_dto": {"Type": "role"}})
        assert len(json.loads(_text(result))["Errors"]) == 3
        claim_client.create_claim.assert_not_awaited()


class TestMain:
    def test_bad_log_level_is_reported_not_raised(self, monkeypatch, caplog):
        import mcp_server
        from claims_backend.config.settings import Settings

        monkeypatch.setattr(mcp_server, "get_settings", lambda: Settings(log_level="verbose"))
        with caplog.at_level(logging.INFO, logger="claims_backend"):
            assert mcp_server.main() == 1
        assert any("Host terminated unexpectedly" in r.getMessage() for r in caplog.records)
