"""Configuration for MPN Match MCP server."""

import os

# Server settings
HTTP_PORT = int(os.getenv("HTTP_PORT", "8080"))
RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", "100"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Build every rule set during server startup instead of on first lookup
EAGER_RULE_SETS = os.getenv("EAGER_RULE_SETS", "false").lower() in ("1", "true", "yes")

# Classification limits
MAX_MPN_LENGTH = int(os.getenv("MAX_MPN_LENGTH", "64"))  # Longer inputs are treated as unresolvable
MAX_CANDIDATES = int(os.getenv("MAX_CANDIDATES", "10"))  # Cap on ranked candidates returned by tools
