"""
Configuration for the grid search backend.

Every setting can be overridden through an environment variable of the
same name.
"""

import os
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    return int(raw)


# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# HTTP Configuration
# =============================================================================

# Comma-separated list of origins allowed by CORS
CORS_ALLOW_ORIGINS = [
    o.strip() for o in os.environ.get("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
]

# =============================================================================
# Search Configuration
# =============================================================================

# Largest rows * columns a single /api/run request may ask for
MAX_GRID_CELLS = int(os.environ.get("MAX_GRID_CELLS", "250000"))

# Visitation budget applied when a request does not send one (unset = unbounded)
DEFAULT_MAX_VISITED = _optional_int("DEFAULT_MAX_VISITED")
