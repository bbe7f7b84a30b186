import json
import pathlib
import sys
import threading

import pytest

# Ensure project root on path for module imports
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mmr_export.config import ExportConfig


class FakeResponse:
    def __init__(self, body=b"", status_code=200):
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.content = body
        self.status_code = status_code

    @property
    def text(self):
        return self.content.decode("utf-8", errors="replace")

    def json(self):
        return json.loads(self.content)


class FakeSession:
    """
    Stand-in for requests.Session. `handler(url, params)` returns a FakeResponse
    or raises (e.g. requests.ConnectionError).
    """

    def __init__(self, handler):
        self.handler = handler
        self.calls = []
        self._lock = threading.Lock()

    def get(self, url, params=None, headers=None, timeout=None):
        with self._lock:
            self.calls.append(
                {
                    "url": url,
                    "params": params,
                    "headers": headers,
                    "timeout": timeout,
                    "thread": threading.get_ident(),
                }
            )
        return self.handler(url, params)


@pytest.fixture
def cfg(tmp_path):
    return ExportConfig(session_id="abc123", base_url="https://mmr.test", destination=tmp_path)


def listing_payload(*days):
    """Build a dashboard.json body; each arg is the list of workouts for one day."""
    return {"workout_data": {"workouts": {f"day{i}": entries for i, entries in enumerate(days)}}}


def workout(wid, day="2020/03/15"):
    return {"view_url": f"/workout/{wid}", "date": day}
