"""
Common utility functions shared by the engines, the match store and the pages.

This module contains:
    - logging setup used by every entry point (`setup_logging`),
    - network helpers (a small requests.Session wrapper around the Supabase
        REST API, `rest_get` / `rest_post`),
    - small sorting and date helpers so every module orders team names and
        compares kickoff dates the same way.

Nothing here imports Streamlit, so the engines and the store can be used
(and tested) outside of a running app.
"""

# Import libraries
from __future__ import annotations
import logging
import unicodedata
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

import requests

from .constants import LOG_LEVEL, REQUEST_TIMEOUT, SUPABASE_KEY, SUPABASE_URL, USER_AGENT

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once; later calls are no-ops (basicConfig)."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)


SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})


def rest_configured() -> bool:
    return bool(SUPABASE_URL and SUPABASE_KEY)


def _rest_headers() -> Dict[str, str]:
    return {"apikey": SUPABASE_KEY, "Authorization": f"Bearer {SUPABASE_KEY}"}


def rest_get(table: str, params: Optional[Dict[str, Any]] = None) -> Any:
    url = f"{SUPABASE_URL.rstrip('/')}/rest/v1/{table}"
    qp = {"select": "*"}
    if params: qp.update(params)
    resp = SESSION.get(url, params=qp, headers=_rest_headers(), timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.json()


def rest_post(table: str, rows: List[Dict[str, Any]]) -> Any:
    # `return=representation` makes PostgREST echo the inserted rows (with ids)
    url = f"{SUPABASE_URL.rstrip('/')}/rest/v1/{table}"
    headers = {**_rest_headers(), "Prefer": "return=representation"}
    resp = SESSION.post(url, json=rows, headers=headers, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.json()


def team_sort_key(name: str) -> Tuple[str, str, str]:
    """
    Alphabetical key used for every team-name ordering in the app.

    Compares ignoring accents and case first ("Éire" sorts with "Eire",
    before "Fulham"). Ties are broken by accents (plain first), then by case
    with lower case before upper case ("arsenal" < "Arsenal" < "Barnet"),
    the way a locale-aware comparison orders names.
    """
    s = str(name)
    base = "".join(c for c in unicodedata.normalize("NFKD", s) if not unicodedata.combining(c))
    return (base.casefold(), s.casefold(), s.swapcase())


def date_sort_key(d: Optional[date]) -> Tuple[int, date]:
    """Ascending dates with undated fixtures last."""
    return (1, date.min) if d is None else (0, d)


def is_upcoming(d: Optional[date], today: date) -> bool:
    return d is not None and d >= today
