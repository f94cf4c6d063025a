"""Tests for claims_backend.mcp_tools.app_info_tool."""

import json
from datetime import datetime, timezone

from claims_backend.mcp_tools.app_info_tool import get_app_version, utc_ticks


class TestGetAppVersion:
    def test_reports_version_and_times(self):
        result = json.loads(get_app_version("1.2.3"))

        assert set(result) == {"AppVersion", "AppNow", "AppNowUtc", "AppUtcTicks"}
        assert result["AppVersion"] == "1.2.3"
        now = datetime.fromisoformat(result["AppNow"].replace("Z", "+00:00"))
        now_utc = datetime.fromisoformat(result["AppNowUtc"].replace("Z", "+00:00"))
        assert now == now_utc
        assert now_utc.utcoffset().total_seconds() == 0
        assert result["AppUtcTicks"] == utc_ticks(now_utc)

    def test_missing_version_defaults(self):
        assert json.loads(get_app_version(None))["AppVersion"] == "?.?"
        assert json.loads(get_app_version(""))["AppVersion"] == "?.?"

    def test_compact_output(self):
        assert "\n" not in get_app_version("1.0")


class TestUtcTicks:
    def test_unix_epoch(self):
        assert utc_ticks(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 621355968000000000

    def test_microsecond_resolution(self):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert utc_ticks(base.replace(microsecond=1)) - utc_ticks(base) == 10
