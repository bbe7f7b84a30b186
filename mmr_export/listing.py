from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

import requests

from .config import ExportConfig
from .errors import MalformedResponse, NoWorkoutData, TransportError
from .months import month_label

DASHBOARD_PATH = "/workouts/dashboard.json"


def month_params(month: date) -> Dict[str, int]:
    return {"month": month.month, "year": month.year}


def month_path(month: date) -> str:
    return f"{DASHBOARD_PATH}?month={month.month}&year={month.year}"


def flatten_workouts(payload: Any) -> List[Dict]:
    """
    Pull every workout out of `workout_data.workouts`, a mapping of
    day-key -> list of workout summaries. A missing mapping yields [];
    non-object entries inside a day's list are skipped.

    Raises ValueError when a day's value is neither a list nor an object.
    """
    if not isinstance(payload, dict):
        return []
    workout_data = payload.get("workout_data") or {}
    if not isinstance(workout_data, dict):
        return []
    by_day = workout_data.get("workouts") or {}
    if not isinstance(by_day, dict):
        return []
    out: List[Dict] = []
    for day, day_entries in by_day.items():
        if isinstance(day_entries, list):
            out.extend(e for e in day_entries if isinstance(e, dict))
        elif isinstance(day_entries, dict):
            out.append(day_entries)
        else:
            raise ValueError(f"day {day!r} holds {type(day_entries).__name__}, not a list of workouts")
    return out


def fetch_month_workouts(
    month: date,
    *,
    cfg: ExportConfig,
    session: Optional[requests.Session] = None,
) -> List[Dict]:
    """
    Fetch the dashboard listing for one month.

    Each call passes its own URL, params and headers; nothing request-specific
    is stored on the session.
    """
    sess = session or requests.Session()
    target = month_path(month)
    try:
        resp = sess.get(
            cfg.base_url + DASHBOARD_PATH,
            params=month_params(month),
            headers=cfg.headers(),
            timeout=cfg.timeout_s,
        )
    except requests.RequestException as e:
        raise TransportError(target, e) from e

    try:
        payload = resp.json()
    except ValueError as e:
        raise MalformedResponse(target, f"invalid JSON ({e})") from e
    if not isinstance(payload, dict):
        raise MalformedResponse(target, f"expected an object, got {type(payload).__name__}")

    try:
        workouts = flatten_workouts(payload)
    except ValueError as e:
        raise MalformedResponse(target, str(e)) from e
    if not workouts:
        raise NoWorkoutData(month)

    print(f"[list] {len(workouts)} workouts found in {month_label(month)}")
    return workouts
