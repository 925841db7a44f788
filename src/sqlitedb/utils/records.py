from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

import pandas as pd

from sqlitedb.utils.settings import parse_date

# Smallest date SQL Server's datetime accepts; stands in for "no date".
MIN_DATETIME = datetime(1753, 1, 1)


def get_string_datetime(row: Optional[Sequence[Any]], index: int) -> datetime:
    """Read a date/time stored as text from column ``index`` of ``row``.

    Returns :data:`MIN_DATETIME` when the row is missing, the index is
    negative or out of range, the column is ``NULL``, holds no digits or cannot be parsed.
    """
    if row is None or index < 0 or index >= len(row):
        return MIN_DATETIME

    raw = row[index]
    if raw is None:
        return MIN_DATETIME
    # relative words such as "now" or "today" are not stored dates
    if not any(ch.isdigit() for ch in str(raw)):
        return MIN_DATETIME
    try:
        ts = parse_date(raw)
    except (ValueError, TypeError):
        return MIN_DATETIME
    if pd.isna(ts):
        return MIN_DATETIME
    return ts.tz_localize(None).to_pydatetime()
