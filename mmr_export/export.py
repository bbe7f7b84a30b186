from __future__ import annotations

from typing import Optional

import requests

from .config import ExportConfig
from .errors import ExportRejected, TransportError
from .workouts import ExportResult, TcxDownload


def export_path(workout_id: str, fmt: str = "tcx") -> str:
    return f"/workout/export/{workout_id}/{fmt}"


def fetch_tcx(
    download: TcxDownload,
    *,
    cfg: ExportConfig,
    session: Optional[requests.Session] = None,
) -> ExportResult:
    """
    Download one workout export and hand back the body untouched.

    With status_policy "any" every completed response counts as a payload;
    with "success" a non-2xx status raises ExportRejected instead.
    """
    sess = session or requests.Session()
    path = export_path(download.id, cfg.extension)
    try:
        resp = sess.get(cfg.base_url + path, headers=cfg.headers(), timeout=cfg.timeout_s)
    except requests.RequestException as e:
        raise TransportError(path, e) from e

    if cfg.status_policy == "success" and not 200 <= resp.status_code < 300:
        raise ExportRejected(download.id, resp.status_code)

    return ExportResult(
        id=download.id,
        date=download.date,
        data=resp.content,
        status_code=resp.status_code,
    )
