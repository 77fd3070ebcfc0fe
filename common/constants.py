import os
from pathlib import Path
from dotenv import load_dotenv

# Pages can be opened directly, so load `.env` here rather than in main.py.
load_dotenv(override=False)

# Project root = .../league_table
APP_ROOT = Path(__file__).resolve().parents[1]

# ----- Match store (Supabase REST) -----
SUPABASE_URL       = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY       = os.getenv("SUPABASE_KEY", "")
MATCHES_TABLE      = os.getenv("MATCHES_TABLE", "matches")
COMPETITIONS_TABLE = os.getenv("COMPETITIONS_TABLE", "competitions")
MATCH_CACHE_PATH   = Path(os.getenv("MATCH_CACHE_PATH", str(APP_ROOT / "data" / "matches_cache.json")))
REQUEST_TIMEOUT    = (10, 20)   # (connect, read) seconds
USER_AGENT         = "league-table/1.0"

# ----- Display -----
LOGO_BASE_URL = os.getenv("LOGO_BASE_URL", "app/static/logos")
LOG_LEVEL     = os.getenv("LOG_LEVEL", "INFO")

# Columns expected in a CSV import (header row)
CSV_COLUMNS = ["competition", "date", "home", "away", "score_home", "score_away", "matchweek"]
