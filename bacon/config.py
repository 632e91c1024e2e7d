"""
Configuration constants for the Six Degrees collaboration graph.

All tunable settings are defined here. Values can be overridden with
environment variables or a .env file at the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of bacon/
PROJECT_ROOT = Path(__file__).parent.parent

# Optional .env file with local overrides
ENV_PATH = PROJECT_ROOT / ".env"

load_dotenv(ENV_PATH)

# =============================================================================
# Universe Configuration
# =============================================================================

# Center of the universe used when none is given
DEFAULT_CENTER = os.environ.get("BACON_CENTER", "Kevin Bacon")

# Number of centers returned by a ranking when no count is given
DEFAULT_RANK_COUNT = int(os.environ.get("BACON_RANK_COUNT", "10"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
