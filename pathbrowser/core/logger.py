"""
Lookup log writer for pathbrowser.

Responsibilities:
- Write a CSV log of lookup traces.

Expected usage:
- scanner.trace_lookup(browser, name) builds a list[LookupRecord].
- call write_lookup_log(records, root_path) and then print the path using
  console.print_lookup_log_written(...).
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Sequence

from .errors import LoggingError
from .models import LookupRecord
from .scanner import lookup_to_frame

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_LOG_DIRNAME = ".pathbrowser"
DEFAULT_LOG_SUBDIR = "logs"
DEFAULT_LOG_PREFIX = "lookup_log"

def write_lookup_log(
    records: Sequence[LookupRecord] | Iterable[LookupRecord],
    root_path: Path,
    *,
    log_dirname: str = DEFAULT_LOG_DIRNAME,
    log_subdir: str = DEFAULT_LOG_SUBDIR,
    filename_prefix: str = DEFAULT_LOG_PREFIX,
) -> Path:
    """
    Write a CSV lookup log and return the written file path.

    The log is written under:
        {root_path}/{log_dirname}/{log_subdir}/{filename_prefix}_YYYYmmdd_HHMMSSZ.csv

    A CSV file is always written, even without records, so the CLI can
    reliably report a log path.

    Raises
    ------
    LoggingError
        If the log directory cannot be created or the file cannot be written.
    """
    log_dir = Path(root_path) / log_dirname / log_subdir
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise LoggingError(f"Failed to create log directory: {log_dir}") from exc

    # Timestamped filename (UTC) for stable ordering.
    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%SZ")
    log_path = log_dir / f"{filename_prefix}_{ts}.csv"

    record_list: List[LookupRecord] = list(records)

    df = lookup_to_frame(record_list)

    try:
        df.to_csv(log_path, index=False)
    except OSError as exc:
        raise LoggingError(f"Failed to write lookup log to '{log_path}'.") from exc

    return log_path
