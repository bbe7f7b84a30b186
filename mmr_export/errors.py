"""
Failures the exporter captures per item.

Every stage catches these at its boundary (see `pool.map_bounded`) so one bad
month, workout or file never aborts its siblings.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any


class ExportError(RuntimeError):
    """Base class for all per-item exporter failures."""


class NoWorkoutData(ExportError):
    def __init__(self, month: date) -> None:
        super().__init__(f"Workout data not found for {month.strftime('%b %Y')}")
        self.month = month


class TransportError(ExportError):
    """Connection-level failure (DNS, refused, reset, timeout)."""

    def __init__(self, target: str, cause: BaseException) -> None:
        super().__init__(f"Request for {target} failed: {cause}")
        self.target = target
        self.cause = cause


class MalformedResponse(ExportError):
    """The listing endpoint answered with something that is not a JSON object."""

    def __init__(self, target: str, detail: str) -> None:
        super().__init__(f"Malformed response for {target}: {detail}")
        self.target = target
        self.detail = detail


class UnusableWorkout(ExportError):
    """A listing entry that cannot be turned into a download; it is dropped."""


class WorkoutIdNotFound(UnusableWorkout):
    def __init__(self, url: str, summary: Any = None) -> None:
        super().__init__(f"ERROR FINDING WORKOUT ID: URL: {url}, DEBUG: {summary!r}")
        self.url = url
        self.summary = summary


class WorkoutDateMissing(UnusableWorkout):
    def __init__(self, workout_id: str, summary: Any = None) -> None:
        super().__init__(f"ERROR FINDING WORKOUT DATE: ID: {workout_id}, DEBUG: {summary!r}")
        self.workout_id = workout_id
        self.summary = summary


class ExportRejected(ExportError):
    """Non-2xx export response while the status policy is `success`."""

    def __init__(self, workout_id: str, status_code: int) -> None:
        super().__init__(f"Export of workout {workout_id} rejected with HTTP {status_code}")
        self.workout_id = workout_id
        self.status_code = status_code


class WriteFailed(ExportError):
    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Could not write {path}: {cause}")
        self.path = path
        self.cause = cause
