"""
Data controller helpers that glue the match store to the Streamlit pages.

This module exposes the convenience functions used by pages:
    - `load_matches()` / `load_competitions()` return the store's data,
        cached with `st.cache_data` so reruns do not hit the network.
    - `save_match()` and `import_csv()` write through the store and then
        clear the read cache, so the next page run sees the new matches.

All HTTP and fallback handling lives in `common.store`; this module only
adds caching and the write-then-invalidate step.
"""

from __future__ import annotations
from typing import List, Optional

import streamlit as st

from models.match_model import MatchRecord
from common.store import MatchStore
from common.csv_import import import_matches_csv

_store = MatchStore()


@st.cache_data(ttl=300, show_spinner=False)
def load_matches() -> List[MatchRecord]:
    return _store.fetch_matches()


@st.cache_data(ttl=3600, show_spinner=False)
def load_competitions() -> List[str]:
    names = [c.name for c in _store.fetch_competitions()]
    if not names:
        # Competitions table empty: fall back to names seen in matches
        names = sorted({m.competition for m in load_matches() if m.competition})
    return names


def _invalidate() -> None:
    load_matches.clear()
    load_competitions.clear()


def save_match(record: MatchRecord) -> Optional[MatchRecord]:
    saved = _store.create_match(record)
    _invalidate()
    return saved


def import_csv(uploaded_file) -> List[MatchRecord]:
    """Raises CSVImportError / MatchStoreError; pages show the message."""
    saved = import_matches_csv(uploaded_file, _store)
    _invalidate()
    return saved
