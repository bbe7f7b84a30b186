from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple

from .errors import UnusableWorkout, WorkoutDateMissing, WorkoutIdNotFound

# Examples: https://www.mapmyrun.com/workout/123456, /workout/987
WORKOUT_ID_PATTERN = re.compile(r"/workout/(\d+)$")


@dataclass(frozen=True)
class TcxDownload:
    date: str
    id: str


@dataclass(frozen=True)
class ExportResult:
    id: str
    date: str
    data: bytes
    status_code: int = 200


def normalize_date(text: str) -> str:
    """Make a display date path-safe: 2020/03/15 -> 2020-03-15."""
    return str(text or "").replace("/", "-")


def extract_download(summary: Any) -> TcxDownload:
    if not isinstance(summary, dict):
        raise WorkoutIdNotFound(str(summary), summary)
    url = str(summary.get("view_url"))
    m = WORKOUT_ID_PATTERN.search(url)
    if not m:
        raise WorkoutIdNotFound(url, summary)
    day = normalize_date(summary.get("date")).strip()
    # Output files are named <date>-<id>.tcx.
    if not day:
        raise WorkoutDateMissing(m.group(1), summary)
    return TcxDownload(date=day, id=m.group(1))


def collect_downloads(summaries: Iterable[Any]) -> Tuple[List[TcxDownload], int]:
    """
    Turn listing entries into downloads, dropping the ones without a workout
    id or date (and anything that is not a summary object at all).
    Returns (downloads, dropped_count).
    """
    downloads: List[TcxDownload] = []
    dropped = 0
    for summary in summaries:
        try:
            downloads.append(extract_download(summary))
        except UnusableWorkout as e:
            print(str(e), file=sys.stderr)
            dropped += 1
    return downloads, dropped
