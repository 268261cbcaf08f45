"""MPN MCP Server - Identify manufacturers, component types and replacements from part numbers."""

import json
import logging
import math
import time
from collections import deque
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from . import __version__
from .arbiter import resolve_type
from .catalog import get_catalog
from .config import (
    HTTP_PORT,
    LOG_LEVEL,
    MAX_BATCH_MPNS,
    RATE_LIMIT_REQUESTS,
    RATE_LIMIT_WINDOW_SECONDS,
)
from .mpn import canonical
from .resolver import (
    extract_package_code,
    extract_series,
    is_official_replacement,
    resolve_manufacturer,
    resolve_possible_manufacturers,
)
from .similarity import similarity
from .taxonomy import family_of

logger = logging.getLogger(__name__)

MAX_MPN_LENGTH = 100


@asynccontextmanager
async def lifespan(app):
    """Build the manufacturer catalog on startup (not on first request)."""
    catalog = get_catalog()
    logger.info(f"MPN server {__version__} ready: {len(catalog)} manufacturers")
    yield


# Create MCP server
mcp = FastMCP(
    name="mpn",
    instructions="Offline MPN resolution. No auth required. Use mpn_identify to get the manufacturer, component type, series and package of a part number, mpn_compare to score two part numbers as replacements (0.0 to 1.0), and mpn_classify_batch for BOM-sized lists.",
    lifespan=lifespan,
)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding-window rate limit per client IP.

    Each IP keeps a deque of request times inside the window. A throttled client
    gets a 429 whose Retry-After is the time until its oldest request leaves the
    window. The table of tracked IPs is bounded; when it is full and nothing is
    stale, new IPs are refused instead of growing it.
    """

    MAX_TRACKED_IPS = 10_000
    EXEMPT_PATHS = frozenset({"/health"})

    def __init__(self, app, requests_per_window: int = RATE_LIMIT_REQUESTS,
                 window_seconds: float = RATE_LIMIT_WINDOW_SECONDS):
        super().__init__(app)
        self.requests_per_window = requests_per_window
        self.window_seconds = window_seconds
        self.hits: dict[str, deque[float]] = {}
        self._next_sweep = time.monotonic() + window_seconds

    def _client_ip(self, request) -> str:
        """Rightmost X-Forwarded-For entry (appended by our proxy), else the peer address."""
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            ips = [ip.strip() for ip in forwarded.split(",") if ip.strip()]
            if ips:
                return ips[-1]
        return request.client.host if request.client else "unknown"

    def _sweep(self, now: float) -> None:
        """Forget IPs whose newest request is outside the window."""
        horizon = now - self.window_seconds
        for ip in [ip for ip, times in self.hits.items() if not times or times[-1] <= horizon]:
            del self.hits[ip]

    def _retry_after(self, client_ip: str, now: float | None = None) -> float:
        """Record a request. Returns 0.0 if allowed, else seconds until a slot frees up."""
        if now is None:
            now = time.monotonic()
        if now >= self._next_sweep:
            self._sweep(now)
            self._next_sweep = now + self.window_seconds

        times = self.hits.get(client_ip)
        if times is None:
            if len(self.hits) >= self.MAX_TRACKED_IPS:
                self._sweep(now)
                if len(self.hits) >= self.MAX_TRACKED_IPS:
                    return self.window_seconds
            times = self.hits[client_ip] = deque()

        horizon = now - self.window_seconds
        while times and times[0] <= horizon:
            times.popleft()
        if len(times) >= self.requests_per_window:
            return times[0] - horizon

        times.append(now)
        return 0.0

    async def dispatch(self, request, call_next):
        if request.url.path in self.EXEMPT_PATHS:
            return await call_next(request)

        client_ip = self._client_ip(request)
        retry_after = self._retry_after(client_ip)
        if retry_after:
            seconds = max(1, math.ceil(retry_after))
            logger.warning(f"Rate limit exceeded for {client_ip} on {request.url.path}")
            return JSONResponse(
                status_code=429,
                content={"error": "Rate limit exceeded", "retry_after": seconds},
                headers={"Retry-After": str(seconds)},
            )
        return await call_next(request)


# Helpers to handle JSON string arrays from MCP clients
def _parse_list_param(value: list[str] | str | None) -> list[str] | None:
    """Parse a list parameter that may come as a JSON string from some MCP clients.

    Some clients serialize list parameters as '["a", "b"]' instead of arrays.
    """
    if value is None:
        return None
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
            if isinstance(parsed, list):
                return parsed
        except json.JSONDecodeError:
            logger.debug(f"Failed to parse list parameter as JSON: {value[:100]!r}")
    return None


def _validate_mpn(mpn: str | None, field: str = "mpn") -> str | None:
    """Error message for an unusable MPN argument, or None if it is fine."""
    if not isinstance(mpn, str) or not mpn.strip():
        return f"{field} is required"
    if len(mpn) > MAX_MPN_LENGTH:
        return f"{field} too long (max {MAX_MPN_LENGTH} characters)"
    return None


def _classify(mpn: str) -> dict:
    component_type = resolve_type(mpn)
    return {
        "mpn": canonical(mpn),
        "manufacturer": resolve_manufacturer(mpn).to_dict(),
        "component_type": component_type.value,
        "family": family_of(component_type).value,
        "series": extract_series(mpn),
        "package": extract_package_code(mpn),
    }


# Tools

@mcp.tool(
    annotations=ToolAnnotations(
        title="Identify MPN",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def mpn_identify(mpn: str) -> dict:
    """Identify a manufacturer part number.

    Args:
        mpn: Manufacturer part number (e.g., "LM358DR", "STM32F103C8T6", "GRM188R71H104KA93D")

    Returns:
        mpn (normalized), manufacturer {key, name}, candidates (all plausible manufacturers
        with confidence high/medium/low), component_type, family, series, package.
        Unrecognized parts return manufacturer "unknown" and component_type "unclassified".
    """
    error = _validate_mpn(mpn)
    if error:
        return {"error": error}

    result = _classify(mpn)
    result["candidates"] = [
        {**manufacturer.to_dict(), "confidence": confidence}
        for manufacturer, confidence in resolve_possible_manufacturers(mpn)
    ]
    return result


@mcp.tool(
    annotations=ToolAnnotations(
        title="Possible Manufacturers",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def mpn_possible_manufacturers(mpn: str) -> dict:
    """List every manufacturer that could plausibly make this part number.

    Useful for generic numbers made by several vendors (1N4148, 2N3904, 74HC00).

    Args:
        mpn: Manufacturer part number

    Returns:
        mpn and manufacturers: [{key, name, confidence}], best first
    """
    error = _validate_mpn(mpn)
    if error:
        return {"error": error}

    return {
        "mpn": canonical(mpn),
        "manufacturers": [
            {**manufacturer.to_dict(), "confidence": confidence}
            for manufacturer, confidence in resolve_possible_manufacturers(mpn)
        ],
    }


@mcp.tool(
    annotations=ToolAnnotations(
        title="Compare MPNs",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def mpn_compare(mpn1: str, mpn2: str) -> dict:
    """Score how well one part can replace another.

    Args:
        mpn1: First manufacturer part number
        mpn2: Second manufacturer part number

    Returns:
        similarity (0.0-1.0; 1.0 same part, >=0.9 drop-in equivalent, 0.7 likely compatible,
        0.3 same family only, 0.0 not a replacement), official_replacement (the manufacturer
        documents mpn2 as a replacement for mpn1), and the identification of both parts.
    """
    for field, value in (("mpn1", mpn1), ("mpn2", mpn2)):
        error = _validate_mpn(value, field)
        if error:
            return {"error": error}

    return {
        "similarity": similarity(mpn1, mpn2),
        "official_replacement": is_official_replacement(mpn1, mpn2),
        "part1": _classify(mpn1),
        "part2": _classify(mpn2),
    }


@mcp.tool(
    annotations=ToolAnnotations(
        title="Classify MPN List",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def mpn_classify_batch(mpns: list[str] | str) -> dict:
    """Identify many part numbers in one call (e.g., a BOM column).

    Args:
        mpns: List of manufacturer part numbers (max 500)

    Returns:
        results: one entry per input in input order (see mpn_identify, without candidates).
        Blank or oversized entries get an "error" entry instead.
    """
    parsed = _parse_list_param(mpns)
    if parsed is None:
        return {"error": "mpns must be a list of part numbers"}
    if not parsed:
        return {"error": "mpns is empty"}
    if len(parsed) > MAX_BATCH_MPNS:
        return {"error": f"Too many MPNs: {len(parsed)} (max {MAX_BATCH_MPNS})"}

    results = []
    for mpn in parsed:
        error = _validate_mpn(mpn)
        if error:
            results.append({"mpn": mpn, "error": error})
        else:
            results.append(_classify(mpn))
    return {"count": len(results), "results": results}


@mcp.tool(
    annotations=ToolAnnotations(
        title="List Manufacturers",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def mpn_list_manufacturers() -> dict:
    """List the manufacturers this server recognizes, in resolution order.

    Returns:
        manufacturers: [{key, name, component_types}]
    """
    catalog = get_catalog()
    return {
        "count": len(catalog),
        "manufacturers": [
            {
                **manufacturer.to_dict(),
                "component_types": sorted(t.value for t in manufacturer.handler.supported_types),
            }
            for manufacturer in catalog
        ],
    }


# Health check endpoint
async def health(request):
    return JSONResponse({
        "status": "healthy",
        "service": "mpn-mcp",
        "version": __version__,
    })


# Create ASGI app
def create_app():
    """Create the ASGI application."""
    middleware = [
        Middleware(
            RateLimitMiddleware,
            requests_per_window=RATE_LIMIT_REQUESTS,
            window_seconds=RATE_LIMIT_WINDOW_SECONDS,
        ),
    ]

    # stateless_http=True: clients don't forward session cookies
    app = mcp.http_app(
        path="/mcp",
        middleware=middleware,
        transport="streamable-http",
        stateless_http=True,
    )

    app.routes.append(Route("/health", health))

    return app


app = create_app()


class _HealthFilterLog(logging.Filter):
    """Suppress noisy /health access logs from Docker healthchecks."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return "/health" not in msg


def main():
    """Run the server."""
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL)
    logging.getLogger("uvicorn.access").addFilter(_HealthFilterLog())

    uvicorn.run(
        "mpn_mcp.server:app",
        host="0.0.0.0",
        port=HTTP_PORT,
        lifespan="on",
    )


if __name__ == "__main__":
    main()
