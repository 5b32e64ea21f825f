"""MPN Match MCP Server - Identify manufacturers and replacements from part numbers."""

import logging
import time
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from . import __version__
from . import lookup
from .config import EAGER_RULE_SETS, HTTP_PORT, LOG_LEVEL, RATE_LIMIT_REQUESTS
from .manufacturers import MANUFACTURERS, initialize_all

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    """Optionally build every rule set on startup (otherwise they load on first lookup)."""
    if EAGER_RULE_SETS:
        count = initialize_all()
        logger.info(f"Rule sets ready: {len(MANUFACTURERS)} manufacturers, {count} patterns")
    else:
        logger.info(f"{len(MANUFACTURERS)} manufacturers registered, rule sets load on demand")
    yield


# Create MCP server
mcp = FastMCP(
    name="mpnmatch",
    instructions="Identify electronic parts from manufacturer part numbers (MPNs). No auth required. Use identify_part for manufacturer, category, series and package of one MPN. Use check_replacement to decide whether one MPN is an official substitute for another from the same manufacturer. Use find_part_number when the MPN is buried in free text such as a BOM line.",
    lifespan=lifespan,
)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rate limiting middleware - 100 requests/minute per IP.

    Includes protections against memory exhaustion from IP spoofing:
    - Maximum tracked IPs limit (10,000)
    - Periodic cleanup of stale IPs
    """

    MAX_TRACKED_IPS = 10_000

    def __init__(self, app, requests_per_minute: int = RATE_LIMIT_REQUESTS):
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.request_counts: dict[str, list[float]] = {}
        self._last_cleanup = time.time()

    def _get_client_ip(self, request) -> str:
        """Extract client IP, preferring the rightmost X-Forwarded-For entry (set by our proxy)."""
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            ips = [ip.strip() for ip in forwarded.split(",")]
            return ips[-1] if ips else "unknown"
        return request.client.host if request.client else "unknown"

    def _cleanup_stale_ips(self, now: float) -> None:
        window_start = now - 60
        stale_ips = [
            ip for ip, timestamps in self.request_counts.items()
            if not timestamps or timestamps[-1] < window_start
        ]
        for ip in stale_ips:
            del self.request_counts[ip]

    def _check_rate_limit(self, client_ip: str) -> bool:
        """Record a request and return True if the client is over its limit."""
        now = time.time()
        window_start = now - 60

        if now - self._last_cleanup > 60:
            self._cleanup_stale_ips(now)
            self._last_cleanup = now

        if len(self.request_counts) >= self.MAX_TRACKED_IPS:
            self._cleanup_stale_ips(now)
            # Still full after cleanup: reject rather than grow
            if len(self.request_counts) >= self.MAX_TRACKED_IPS:
                return True

        if client_ip not in self.request_counts:
            self.request_counts[client_ip] = [now]
            return False

        self.request_counts[client_ip] = [
            t for t in self.request_counts[client_ip] if t > window_start
        ]
        if len(self.request_counts[client_ip]) >= self.requests_per_minute:
            return True

        self.request_counts[client_ip].append(now)
        return False

    async def dispatch(self, request, call_next):
        if request.url.path == "/health":
            return await call_next(request)

        client_ip = self._get_client_ip(request)
        if self._check_rate_limit(client_ip):
            logger.warning(f"Rate limit exceeded for {client_ip}")
            return JSONResponse(
                status_code=429,
                content={"error": "Rate limit exceeded", "retry_after": 60},
                headers={"Retry-After": "60"},
            )
        return await call_next(request)


# Tools

_READ_ONLY = dict(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=False,
)


@mcp.tool(annotations=ToolAnnotations(title="Identify Part", **_READ_ONLY))
def identify_part(mpn: str) -> dict:
    """Identify a part from its manufacturer part number.

    Args:
        mpn: Manufacturer part number (e.g., "AS7262-BLGT", "GD25Q128CSIG", "1N4148")

    Returns:
        manufacturer: Best match {id, name} ("UNKNOWN" when nothing matched)
        candidates: Every plausible manufacturer with confidence "high", "medium" or "low"
        category, base_category: Component category tags (None if not recognized)
        series, package, mounting_type: Structural attributes decoded from the MPN
    """
    return lookup.identify_part(mpn)


@mcp.tool(annotations=ToolAnnotations(title="Check Replacement", **_READ_ONLY))
def check_replacement(mpn_a: str, mpn_b: str, manufacturer: str | None = None) -> dict:
    """Check whether mpn_b is an official replacement for mpn_a.

    Only same-manufacturer substitutions are evaluated; parts from different
    manufacturers always return replacement=false. The check is directional:
    a higher voltage grade (1N4007) replaces a lower one (1N4001), not the reverse.

    Args:
        mpn_a: The specified part
        mpn_b: The candidate substitute
        manufacturer: Optional manufacturer name or alias both parts must belong to
    """
    return lookup.check_replacement(mpn_a, mpn_b, manufacturer)


@mcp.tool(annotations=ToolAnnotations(title="List Manufacturers", **_READ_ONLY))
def list_manufacturers(category: str | None = None) -> dict:
    """List known manufacturers in classification priority order.

    Args:
        category: Optional category tag filter (e.g., "memory_flash", "sensor", "diode")
    """
    return lookup.list_manufacturers(category)


@mcp.tool(annotations=ToolAnnotations(title="Find Part Number", **_READ_ONLY))
def find_part_number(text: str) -> dict:
    """Find the first recognizable MPN in free text (BOM line, note, email) and identify it.

    Args:
        text: Free text, e.g. "U3; MPN=GD25Q128CSIG; 128Mbit flash"
    """
    return lookup.find_part_number(text)


# Health check endpoint
async def health(request):
    return JSONResponse({
        "status": "healthy",
        "service": "mpnmatch-mcp",
        "version": __version__,
    })


# Create ASGI app
def create_app():
    """Create the ASGI application."""
    middleware = [
        Middleware(RateLimitMiddleware, requests_per_minute=RATE_LIMIT_REQUESTS),
    ]

    # Stateless: MCP clients don't all forward session cookies
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
    """Suppress noisy /health access logs from container healthchecks."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return "/health" not in msg


def main():
    """Run the server."""
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("uvicorn.access").addFilter(_HealthFilterLog())

    uvicorn.run(
        "mpnmatch_mcp.server:app",
        host="0.0.0.0",
        port=HTTP_PORT,
        lifespan="on",
    )


if __name__ == "__main__":
    main()
