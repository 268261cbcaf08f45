"""Configuration for the MPN resolution MCP server."""

import os

# Server settings
HTTP_PORT = int(os.getenv("HTTP_PORT", "8080"))
RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", "100"))
RATE_LIMIT_WINDOW_SECONDS = float(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))
LOG_LEVEL = os.getenv("MPN_LOG_LEVEL", "INFO").upper()

# Batch classification limit (mpn_classify_batch)
MAX_BATCH_MPNS = int(os.getenv("MAX_BATCH_MPNS", "500"))

# Generic similarity fallback weights (used when no family calculator applies)
SIMILARITY_BASE_TYPE_WEIGHT = float(os.getenv("SIMILARITY_BASE_TYPE_WEIGHT", "0.4"))
SIMILARITY_MANUFACTURER_WEIGHT = float(os.getenv("SIMILARITY_MANUFACTURER_WEIGHT", "0.3"))
SIMILARITY_SERIES_WEIGHT = float(os.getenv("SIMILARITY_SERIES_WEIGHT", "0.2"))

# Score tiers shared by the family calculators
HIGH_SIMILARITY = 0.9
MEDIUM_SIMILARITY = 0.7
LOW_SIMILARITY = 0.3
