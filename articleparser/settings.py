"""Runtime settings for articleparser.

Values are read once at import time; each can be overridden with the
environment variable named beside it.
"""

from __future__ import annotations

import os

# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------
# Seconds before a fetch is abandoned (ARTICLEPARSER_TIMEOUT)
DEFAULT_TIMEOUT = float(os.getenv("ARTICLEPARSER_TIMEOUT", "30"))

# ARTICLEPARSER_USER_AGENT
USER_AGENT = os.getenv(
    "ARTICLEPARSER_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36",
)

# ---------------------------------------------------------------------------
# Language detection
# ---------------------------------------------------------------------------
# Shorter samples are reported as undetectable
LANGDETECT_MIN_CHARS = 40
# Fixed seed makes langdetect deterministic across runs
LANGDETECT_SEED = 0

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
# ARTICLEPARSER_LOG_LEVEL
LOG_LEVEL = os.getenv("ARTICLEPARSER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
