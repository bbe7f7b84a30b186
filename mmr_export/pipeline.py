"""
Month -> listing -> TCX export -> file, one stage at a time.

Each stage fans out through `map_bounded` and fully drains before the next
stage starts. Per-item failures come back as values, get reported on stderr
and are tallied in the ExportSummary; they never stop the run.
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from datetime import date, datetime
from functools import partial
from pathlib import Path
from typing import Dict, List, Optional, Union

import requests

from .config import ExportConfig
from .export import fetch_tcx
from .listing import fetch_month_workouts
from .months import add_month, iter_months, month_label
from .pool import map_bounded, split_results
from .workouts import ExportResult, TcxDownload, collect_downloads
from .writer import write_export


@dataclass
class ExportSummary:
    months_requested: int = 0
    months_listed: int = 0
    months_failed: int = 0
    downloads_found: int = 0
    downloads_dropped: int = 0
    exports_ok: int = 0
    exports_failed: int = 0
    files_written: int = 0
    files_failed: int = 0

    def format(self) -> str:
        return (
            f"months {self.months_listed}/{self.months_requested} listed ({self.months_failed} failed) · "
            f"workouts {self.downloads_found} found ({self.downloads_dropped} without id) · "
            f"exports {self.exports_ok} ok ({self.exports_failed} failed) · "
            f"files {self.files_written} written ({self.files_failed} failed)"
        )


_local = threading.local()


def thread_session() -> requests.Session:
    """One requests.Session per worker thread, reused for that thread's calls."""
    sess = getattr(_local, "session", None)
    if sess is None:
        sess = requests.Session()
        _local.session = sess
    return sess


def _list_month(month: date, *, cfg: ExportConfig, session: Optional[requests.Session]) -> List[Dict]:
    print(f"[list] REQUESTING: {month_label(month)}")
    return fetch_month_workouts(month, cfg=cfg, session=session or thread_session())


def _export_workout(download: TcxDownload, *, cfg: ExportConfig, session: Optional[requests.Session]) -> ExportResult:
    return fetch_tcx(download, cfg=cfg, session=session or thread_session())


def _write_outcome(outcome: Union[ExportResult, Exception], *, destination: Path, ext: str) -> Optional[Path]:
    if isinstance(outcome, Exception):
        # Export already failed; report it here and leave the batch running.
        print(f"[write] skipped: {outcome}", file=sys.stderr)
        return None
    return write_export(outcome, destination, ext)


def run_export(
    cfg: ExportConfig,
    *,
    session: Optional[requests.Session] = None,
    now: Optional[datetime] = None,
) -> ExportSummary:
    """
    Run every stage and return the tally. Without an explicit `session` each
    worker thread opens its own requests.Session.
    """
    summary = ExportSummary()

    stop = add_month(cfg.until) if cfg.until else (now or datetime.now())
    months = list(iter_months(cfg.since, stop))
    summary.months_requested = len(months)
    print(f"[months] {len(months)} months to request ({month_label(cfg.since)} onwards)")

    listed = map_bounded(partial(_list_month, cfg=cfg, session=session), months, workers=cfg.list_workers)
    month_lists, month_errors = split_results(listed)
    summary.months_listed = len(month_lists)
    summary.months_failed = len(month_errors)
    print(f"[list] {len(month_lists)} months of data found, requesting TCX files...")
    for err in month_errors:
        print(f"[list] {err}", file=sys.stderr)

    downloads, dropped = collect_downloads(w for month in month_lists for w in month)
    summary.downloads_found = len(downloads)
    summary.downloads_dropped = dropped
    print(f"[export] {len(downloads)} TCX downloads to be requested...")

    exported = map_bounded(partial(_export_workout, cfg=cfg, session=session), downloads, workers=cfg.export_workers)
    ok, failed = split_results(exported)
    summary.exports_ok = len(ok)
    summary.exports_failed = len(failed)

    written = map_bounded(
        partial(_write_outcome, destination=cfg.destination, ext=cfg.extension),
        exported,
        workers=cfg.write_workers,
    )
    paths, write_errors = split_results(written)
    summary.files_written = sum(1 for p in paths if p is not None)
    summary.files_failed = len(write_errors)
    for err in write_errors:
        print(f"[write] {err}", file=sys.stderr)

    print(f"[done] {summary.format()}")
    return summary
