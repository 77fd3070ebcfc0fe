"""
Match store: Supabase REST tables with a local JSON cache as fallback.

Reads never raise. When the REST call fails (no configuration, network
error, HTTP error status, malformed payload) the store logs a warning and
serves the last cached snapshot instead, so pages always get a list; an
empty list means "no data".

Writes return the accepted record. They do not re-fetch the match list:
callers that cache reads (see `controllers.data_controller`) clear their
own cache after a write.
"""

from __future__ import annotations
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import requests

from models.match_model import Competition, MatchRecord
from common.constants import COMPETITIONS_TABLE, MATCH_CACHE_PATH, MATCHES_TABLE
from common.utils import rest_configured, rest_get, rest_post

logger = logging.getLogger(__name__)


class MatchStoreError(RuntimeError):
    """A write was rejected by the backing store."""


class StoreUnavailable(MatchStoreError):
    """SUPABASE_URL / SUPABASE_KEY are not set."""


class MatchStore:
    def __init__(self, cache_path: Optional[Path] = None):
        self.cache_path = Path(cache_path) if cache_path else MATCH_CACHE_PATH

    # ---------- Local cache ----------
    def _read_cache(self) -> List[MatchRecord]:
        if not self.cache_path.exists():
            return []
        try:
            rows = json.loads(self.cache_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.exception("Could not read match cache %s", self.cache_path)
            return []
        if not isinstance(rows, list):
            return []
        return [MatchRecord.from_dict(r) for r in rows if isinstance(r, dict)]

    def _write_cache(self, matches: Iterable[MatchRecord]) -> bool:
        try:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            self.cache_path.write_text(json.dumps([m.to_dict() for m in matches], indent=2), encoding="utf-8")
            return True
        except OSError:
            logger.exception("Could not write match cache %s", self.cache_path)
            return False

    def _cached(self, competition: Optional[str]) -> List[MatchRecord]:
        cached = self._read_cache()
        if competition:
            cached = [m for m in cached if m.competition == competition]
        logger.info("Serving %d cached matches", len(cached))
        return cached

    # ---------- Reads ----------
    def _get_rows(self, table: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        if not rest_configured():
            raise StoreUnavailable("Supabase is not configured")
        rows = rest_get(table, params)
        if not isinstance(rows, list):
            raise ValueError(f"Unexpected payload from {table}: {type(rows).__name__}")
        return rows

    def fetch_matches(self, competition: Optional[str] = None) -> List[MatchRecord]:
        """All matches (newest first), or only `competition`'s. Falls back to the cache."""
        params: Dict[str, Any] = {"order": "date.desc"}
        if competition:
            params["competition"] = f"eq.{competition}"
        try:
            rows = self._get_rows(MATCHES_TABLE, params)
        except (requests.RequestException, MatchStoreError, ValueError) as exc:
            logger.warning("Fetching matches failed (%s); falling back to local cache", exc)
            return self._cached(competition)

        matches = [MatchRecord.from_dict(r) for r in rows]
        logger.info("Fetched %d matches", len(matches))
        if not competition:
            # Full snapshot only; a filtered read would truncate the cache
            self._write_cache(matches)
        return matches

    def fetch_competitions(self) -> List[Competition]:
        try:
            rows = self._get_rows(COMPETITIONS_TABLE)
            comps = [Competition(name=str(r.get("name", "")), id=r.get("id")) for r in rows if r.get("name")]
        except (requests.RequestException, MatchStoreError, ValueError) as exc:
            logger.warning("Fetching competitions failed (%s); using cached match names", exc)
            comps = []
        if comps:
            return comps
        names = sorted({m.competition for m in self._read_cache() if m.competition})
        return [Competition(name=n) for n in names]

    # ---------- Writes ----------
    def _insert(self, records: List[MatchRecord]) -> List[MatchRecord]:
        if not rest_configured():
            raise StoreUnavailable("Supabase is not configured")
        try:
            rows = rest_post(MATCHES_TABLE, [r.to_dict() for r in records])
        except (requests.RequestException, ValueError) as exc:
            raise MatchStoreError(f"Inserting matches failed: {exc}") from exc
        if not isinstance(rows, list):
            return list(records)
        return [MatchRecord.from_dict(r) for r in rows]

    def create_match(self, record: MatchRecord) -> Optional[MatchRecord]:
        """
        Insert one match and return the accepted record.
        If the store rejects it, keep it in the local cache instead
        (timestamp id) so the app keeps working offline.
        """
        try:
            saved = self._insert([record])
            return saved[0] if saved else record
        except MatchStoreError as exc:
            logger.warning("%s; saving match to local cache", exc)

        cached = self._read_cache()
        local = MatchRecord.from_dict({**record.to_dict(), "id": int(time.time() * 1000)})
        if not self._write_cache(cached + [local]):
            return None
        return local

    def insert_matches(self, records: List[MatchRecord]) -> List[MatchRecord]:
        """Bulk insert (CSV import). Raises MatchStoreError on failure."""
        if not records:
            return []
        saved = self._insert(list(records))
        logger.info("Inserted %d matches", len(saved))
        return saved
