"""
Configuration constants for the Path Finder Visualizer.

All paths, defaults, and tunable parameters are defined here.
Secrets are loaded from environment variables (or a local .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of pathviz/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Directory for user-supplied graph files (.json / .msgpack)
DATA_DIR = Path(os.environ.get("PATHVIZ_DATA_DIR", PROJECT_ROOT / "data"))

# =============================================================================
# Search Configuration
# =============================================================================

# Selector used when an unknown algorithm name is requested
DEFAULT_ALGORITHM = "dijkstra"

# Distance reported when no path connects start and end
NO_PATH_DISTANCE = -1.0

# Weighted A*: f(n) = g(n) + WEIGHT * h(n)
# 1.0 is plain A*; > 1 trades optimality for fewer expansions
ASTAR_HEURISTIC_WEIGHT = 1.0

# =============================================================================
# Visualizer Configuration
# =============================================================================

# Sample graph shown when a session starts
DEFAULT_SAMPLE_GRAPH = "cities"

# A click within this many canvas units of a node center selects it
NODE_HIT_RADIUS = 30.0

# Decimal places when displaying distances
DISTANCE_DECIMALS = 2

# =============================================================================
# Web Server Configuration
# =============================================================================

FLASK_SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "pathviz-dev-key-change-in-production")
FLASK_HOST = os.environ.get("FLASK_HOST", "127.0.0.1")
FLASK_PORT = int(os.environ.get("FLASK_PORT", "5000"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
