"""
CSV bulk import of match results.

Expected header row:
    competition,date,home,away,score_home,score_away,matchweek

Rows missing a competition or a team, or whose scores / matchweek are not
finite numbers, or whose matchweek is below 1, are dropped without error. If nothing usable is left the import is
rejected with `CSVImportError` so the page can tell the user.
"""

from __future__ import annotations
import io
import logging
from typing import List, Union

import numpy as np
import pandas as pd

from models.match_model import MatchRecord
from common.constants import CSV_COLUMNS

logger = logging.getLogger(__name__)

REQUIRED_TEXT    = ["competition", "home", "away"]
REQUIRED_NUMERIC = ["score_home", "score_away", "matchweek"]


class CSVImportError(ValueError):
    pass


def _read_frame(source) -> pd.DataFrame:
    if isinstance(source, bytes):
        source = io.BytesIO(source)
    elif isinstance(source, str) and "\n" in source:
        source = io.StringIO(source)
    try:
        # Everything as text; numbers are validated below
        return pd.read_csv(source, dtype=str, keep_default_na=False, skipinitialspace=True)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise CSVImportError(f"Could not parse CSV: {exc}") from exc


def parse_matches_csv(source: Union[str, bytes, io.IOBase]) -> List[MatchRecord]:
    """Return the valid rows of a CSV (path, text, bytes or file object) as MatchRecords."""
    df = _read_frame(source)
    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in REQUIRED_TEXT + REQUIRED_NUMERIC if c not in df.columns]
    if missing or df.empty:
        raise CSVImportError("No valid matches found in the CSV file")
    if "date" not in df.columns:
        df["date"] = ""

    df = df[CSV_COLUMNS].apply(lambda col: col.str.strip())

    has_text = (df[REQUIRED_TEXT] != "").all(axis=1)
    numeric = df[REQUIRED_NUMERIC].apply(pd.to_numeric, errors="coerce")
    # "inf" parses as a float; matchweeks start at 1
    has_numbers = numeric.notna().all(axis=1) & np.isfinite(numeric).all(axis=1) & (numeric["matchweek"] >= 1)
    valid = df[has_text & has_numbers].copy()
    valid[REQUIRED_NUMERIC] = numeric.loc[valid.index].astype(int)

    dropped = len(df) - len(valid)
    if dropped:
        logger.info("Dropped %d invalid CSV rows", dropped)
    if valid.empty:
        raise CSVImportError("No valid matches found in the CSV file")
    return [MatchRecord.from_dict(row) for row in valid.to_dict(orient="records")]


def import_matches_csv(source, store) -> List[MatchRecord]:
    """Parse a CSV and bulk insert it through `store` (a MatchStore)."""
    records = parse_matches_csv(source)
    return store.insert_matches(records)
