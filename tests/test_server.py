"""Tests for the MCP server tools and HTTP plumbing."""

import json
import logging
from collections import deque
from unittest.mock import AsyncMock, MagicMock

import pytest
from mpn_mcp.config import MAX_BATCH_MPNS
from mpn_mcp.manufacturers import MANUFACTURER_DEFINITIONS
from mpn_mcp.server import (
    RateLimitMiddleware,
    _HealthFilterLog,
    _parse_list_param,
    _validate_mpn,
    app,
    health,
    mpn_classify_batch,
    mpn_compare,
    mpn_identify,
    mpn_list_manufacturers,
    mpn_possible_manufacturers,
)


class TestIdentify:
    """mpn_identify tool."""

    @pytest.mark.asyncio
    async def test_known_part(self):
        result = await mpn_identify(mpn="lm358n")
        assert result["mpn"] == "LM358N"
        assert result["manufacturer"] == {"key": "ti", "name": "Texas Instruments"}
        assert result["component_type"] == "opamp_ti"
        assert result["family"] == "opamp"
        assert result["series"] == "LM358"
        assert result["package"] == "DIP"
        assert result["candidates"][0] == {"key": "ti", "name": "Texas Instruments", "confidence": "high"}
        assert [c["key"] for c in result["candidates"]] == ["ti", "st", "onsemi"]

    @pytest.mark.asyncio
    async def test_unknown_part(self):
        result = await mpn_identify(mpn="XYZZY1")
        assert result["manufacturer"]["key"] == "unknown"
        assert result["component_type"] == "unclassified"
        assert result["family"] == "unclassified"
        assert result["series"] == ""
        assert result["package"] == ""
        assert result["candidates"] == []

    @pytest.mark.asyncio
    async def test_74_series_generic(self):
        result = await mpn_identify(mpn="74HC00D")
        assert result["component_type"] == "ic"

    @pytest.mark.asyncio
    async def test_blank(self):
        assert await mpn_identify(mpn="  ") == {"error": "mpn is required"}

    @pytest.mark.asyncio
    async def test_too_long(self):
        result = await mpn_identify(mpn="X" * 101)
        assert result == {"error": "mpn too long (max 100 characters)"}


class TestPossibleManufacturers:
    """mpn_possible_manufacturers tool."""

    @pytest.mark.asyncio
    async def test_generic_part(self):
        result = await mpn_possible_manufacturers(mpn="IRF530")
        assert result["mpn"] == "IRF530"
        first = result["manufacturers"][0]
        assert (first["key"], first["confidence"]) == ("infineon", "high")
        assert {"vishay", "st"} <= {m["key"] for m in result["manufacturers"]}

    @pytest.mark.asyncio
    async def test_nothing_plausible(self):
        result = await mpn_possible_manufacturers(mpn="XYZZY1")
        assert result == {"mpn": "XYZZY1", "manufacturers": []}

    @pytest.mark.asyncio
    async def test_blank(self):
        assert "error" in await mpn_possible_manufacturers(mpn="")


class TestCompare:
    """mpn_compare tool."""

    @pytest.mark.asyncio
    async def test_second_source(self):
        result = await mpn_compare(mpn1="LM358", mpn2="MC1458")
        assert result["similarity"] == pytest.approx(0.9)
        assert result["official_replacement"] is False
        assert result["part1"]["manufacturer"]["key"] == "ti"
        assert result["part2"]["manufacturer"]["key"] == "onsemi"

    @pytest.mark.asyncio
    async def test_official_replacement(self):
        result = await mpn_compare(mpn1="LM358N", mpn2="LM358DR")
        assert result["official_replacement"] is True
        assert result["similarity"] == pytest.approx(0.9)

    @pytest.mark.asyncio
    async def test_same_part(self):
        result = await mpn_compare(mpn1="LM358-N", mpn2="lm358n")
        assert result["similarity"] == 1.0

    @pytest.mark.asyncio
    async def test_error_names_the_argument(self):
        assert await mpn_compare(mpn1="LM358N", mpn2="") == {"error": "mpn2 is required"}
        assert await mpn_compare(mpn1="", mpn2="LM358N") == {"error": "mpn1 is required"}


class TestClassifyBatch:
    """mpn_classify_batch tool."""

    @pytest.mark.asyncio
    async def test_list_in_order(self):
        result = await mpn_classify_batch(mpns=["LM358N", "", "STM32F103C8T6"])
        assert result["count"] == 3
        assert result["results"][0]["component_type"] == "opamp_ti"
        assert result["results"][1] == {"mpn": "", "error": "mpn is required"}
        assert result["results"][2]["manufacturer"]["key"] == "st"
        assert "candidates" not in result["results"][0]

    @pytest.mark.asyncio
    async def test_json_string(self):
        result = await mpn_classify_batch(mpns='["IRF540N", "BME280"]')
        assert result["count"] == 2
        assert result["results"][1]["component_type"] == "pressure_sensor_bosch"

    @pytest.mark.asyncio
    async def test_non_string_entry(self):
        result = await mpn_classify_batch(mpns=["LM358N", 42])
        assert result["results"][1] == {"mpn": 42, "error": "mpn is required"}

    @pytest.mark.asyncio
    async def test_not_a_list(self):
        assert await mpn_classify_batch(mpns="LM358N") == {"error": "mpns must be a list of part numbers"}

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await mpn_classify_batch(mpns=[]) == {"error": "mpns is empty"}

    @pytest.mark.asyncio
    async def test_too_many(self):
        result = await mpn_classify_batch(mpns=["LM358N"] * (MAX_BATCH_MPNS + 1))
        assert result == {"error": f"Too many MPNs: {MAX_BATCH_MPNS + 1} (max {MAX_BATCH_MPNS})"}


class TestListManufacturers:
    """mpn_list_manufacturers tool."""

    @pytest.mark.asyncio
    async def test_catalog_order(self):
        result = await mpn_list_manufacturers()
        assert result["count"] == len(MANUFACTURER_DEFINITIONS)
        assert [m["key"] for m in result["manufacturers"]] == [d[0] for d in MANUFACTURER_DEFINITIONS]

    @pytest.mark.asyncio
    async def test_component_types(self):
        result = await mpn_list_manufacturers()
        ti = next(m for m in result["manufacturers"] if m["key"] == "ti")
        assert {"opamp_ti", "opamp", "voltage_regulator_linear_ti"} <= set(ti["component_types"])
        assert ti["component_types"] == sorted(ti["component_types"])


class TestParseListParam:
    """JSON string arrays from MCP clients."""

    @pytest.mark.parametrize("value,expected", [
        (["a", "b"], ["a", "b"]),
        ('["a", "b"]', ["a", "b"]),
        ("[]", []),
        ('{"a": 1}', None),
        ("not json", None),
        (None, None),
        (42, None),
    ])
    def test_parse(self, value, expected):
        assert _parse_list_param(value) == expected


class TestValidateMpn:
    @pytest.mark.parametrize("value,expected", [
        ("LM358N", None),
        ("", "mpn is required"),
        (None, "mpn is required"),
        ("A" * 100, None),
        ("A" * 101, "mpn too long (max 100 characters)"),
    ])
    def test_validate(self, value, expected):
        assert _validate_mpn(value) == expected


class TestRateLimit:
    """Sliding-window rate limiting per client IP."""

    @pytest.fixture
    def limiter(self):
        return RateLimitMiddleware(MagicMock(), requests_per_window=2, window_seconds=60.0)

    def test_limit_per_ip(self, limiter):
        assert limiter._retry_after("10.0.0.1", now=100.0) == 0.0
        assert limiter._retry_after("10.0.0.1", now=110.0) == 0.0
        assert limiter._retry_after("10.0.0.1", now=120.0) == pytest.approx(40.0)
        assert limiter._retry_after("10.0.0.2", now=120.0) == 0.0

    def test_window_slides(self, limiter):
        limiter._retry_after("10.0.0.1", now=100.0)
        limiter._retry_after("10.0.0.1", now=110.0)
        assert limiter._retry_after("10.0.0.1", now=160.5) == 0.0
        assert list(limiter.hits["10.0.0.1"]) == [110.0, 160.5]

    def test_rejected_requests_are_not_counted(self, limiter):
        limiter._retry_after("10.0.0.1", now=100.0)
        limiter._retry_after("10.0.0.1", now=101.0)
        limiter._retry_after("10.0.0.1", now=102.0)
        assert len(limiter.hits["10.0.0.1"]) == 2

    def test_stale_ips_swept(self, limiter):
        limiter.hits["10.0.0.9"] = deque([0.0])
        limiter._sweep(now=1000.0)
        assert "10.0.0.9" not in limiter.hits

    def test_tracked_ip_cap(self, limiter):
        limiter.MAX_TRACKED_IPS = 2
        assert limiter._retry_after("10.0.0.1", now=100.0) == 0.0
        assert limiter._retry_after("10.0.0.2", now=100.0) == 0.0
        assert limiter._retry_after("10.0.0.3", now=100.0) == 60.0
        # Room again once the first two fall out of the window
        assert limiter._retry_after("10.0.0.3", now=200.0) == 0.0

    def test_client_ip_from_forwarded_header(self, limiter):
        request = MagicMock()
        request.headers = {"x-forwarded-for": "1.1.1.1, 2.2.2.2"}
        assert limiter._client_ip(request) == "2.2.2.2"

    def test_client_ip_from_connection(self, limiter):
        request = MagicMock()
        request.headers = {"x-forwarded-for": " , "}
        request.client.host = "3.3.3.3"
        assert limiter._client_ip(request) == "3.3.3.3"

    @pytest.mark.asyncio
    async def test_dispatch_throttles_with_retry_after(self):
        limiter = RateLimitMiddleware(MagicMock(), requests_per_window=1, window_seconds=30.0)
        request = MagicMock()
        request.headers = {}
        request.client.host = "4.4.4.4"
        request.url.path = "/mcp"
        call_next = AsyncMock(return_value="ok")

        assert await limiter.dispatch(request, call_next) == "ok"
        response = await limiter.dispatch(request, call_next)
        assert response.status_code == 429
        assert 1 <= int(response.headers["retry-after"]) <= 30
        assert call_next.await_count == 1

    @pytest.mark.asyncio
    async def test_health_is_exempt(self):
        limiter = RateLimitMiddleware(MagicMock(), requests_per_window=0)
        request = MagicMock()
        request.url.path = "/health"
        call_next = AsyncMock(return_value="ok")
        assert await limiter.dispatch(request, call_next) == "ok"
        assert limiter.hits == {}


class TestHealth:
    """Health endpoint and access log filter."""

    @pytest.mark.asyncio
    async def test_health(self):
        response = await health(None)
        body = json.loads(response.body)
        assert body["status"] == "healthy"
        assert body["service"] == "mpn-mcp"

    def test_route_registered(self):
        assert any(getattr(route, "path", None) == "/health" for route in app.routes)

    def test_filter_drops_health_lines(self):
        log_filter = _HealthFilterLog()
        health_record = logging.LogRecord("uvicorn.access", logging.INFO, "", 0, "GET /health 200", None, None)
        mcp_record = logging.LogRecord("uvicorn.access", logging.INFO, "", 0, "POST /mcp 200", None, None)
        assert log_filter.filter(health_record) is False
        assert log_filter.filter(mcp_record) is True
