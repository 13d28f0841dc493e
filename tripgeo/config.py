"""
config.py
---------
Central configuration for tripgeo.
All knobs can be overridden through environment variables (or a .env file
placed next to this module). Nothing here performs I/O beyond reading .env.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Won't override vars already set in the shell.
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path, override=False)

# ── Clustering ────────────────────────────────────────────────────────────────
# Single-linkage threshold used when a caller does not pass max_distance (metres)
CLUSTER_MAX_DISTANCE_M: float = float(os.getenv("CLUSTER_MAX_DISTANCE_M", "1000.0"))

# ── Clustering quality report ─────────────────────────────────────────────────
# Mean cluster radius above which attractions are reported as dispersed (metres)
QUALITY_DISPERSED_RADIUS_M: float = float(os.getenv("QUALITY_DISPERSED_RADIUS_M", "2000.0"))
# Mean clusters per day above which a day is reported as covering too many areas
QUALITY_MAX_CLUSTERS_PER_DAY: float = float(os.getenv("QUALITY_MAX_CLUSTERS_PER_DAY", "4.0"))

# ── Coordinate correction ─────────────────────────────────────────────────────
# Locations are rewritten only when WGS84 → GCJ-02 moves them further than this (metres)
COORD_MIN_OFFSET_M: float = float(os.getenv("COORD_MIN_OFFSET_M", "10.0"))
# is_possibly_wgs84: round-trip drift above which a point is flagged (metres)
COORD_WGS84_HINT_THRESHOLD_M: float = float(os.getenv("COORD_WGS84_HINT_THRESHOLD_M", "10.0"))
