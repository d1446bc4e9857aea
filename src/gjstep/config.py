# -----------------------------------------------------------------------------
# Configuration
# Purpose:
#   Fixed algorithm constants plus a handful of environment overrides for the
#   transcript geometry, the catalog path, the API URL and the log level. A
#   local .env is loaded here, so every entry point sees the same values.
# -----------------------------------------------------------------------------

from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[2]

# ---------------- algorithm constants (not configurable) ----------------
EPS = 1e-10            # pivot / elimination-factor threshold
VALID_DIMS = ((2, 3), (3, 4))   # 2x3 or 3x4 augmented only

ZERO_EPS = 1e-14       # formatter: treat as exact zero
INT_EPS = 1e-12        # formatter: snap to nearest integer
SNAP_EPS = 1e-12       # small_val: squash elimination residue
CF_TOL = 5e-8          # continued fraction acceptance
CF_REMAINDER_EPS = 1e-15
CF_MAX_ITER = 32
MAX_DEN = 1000         # <= 1000 keeps things readable on-screen

# ---------------- transcript geometry ----------------
MAX_LINES = int(os.getenv("GJSTEP_MAX_LINES", "280"))
LINE_CHARS = int(os.getenv("GJSTEP_LINE_CHARS", "56"))
LINE_WIDTH = LINE_CHARS - 1          # last slot is reserved by the display buffer
CELL_CHARS = 16
CELL_WIDTH = CELL_CHARS - 1

# Viewer: (LCD_HEIGHT - 2*margin) // line_h on a 240px screen
VIEW_LINES = int(os.getenv("GJSTEP_VIEW_LINES", str((240 - 2 * 4) // 8)))

# ---------------- services ----------------
CATALOG_PATH = os.getenv("CATALOG_PATH", str(PROJECT_ROOT / "data" / "systems.yaml"))
API_URL = os.getenv("API_URL", "http://127.0.0.1:8000")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
