"""
MapMyRun workout exporter.

`export_mmr.py` is the CLI entrypoint; the stages live here so they can be
tested one by one.
"""

from .config import EPOCH, ExportConfig, build_config, load_dotenv, parse_month
from .errors import (
    ExportError,
    ExportRejected,
    MalformedResponse,
    NoWorkoutData,
    TransportError,
    UnusableWorkout,
    WorkoutDateMissing,
    WorkoutIdNotFound,
    WriteFailed,
)
from .export import export_path, fetch_tcx
from .listing import fetch_month_workouts, flatten_workouts, month_path
from .months import add_month, iter_months, month_label
from .pipeline import ExportSummary, run_export
from .pool import map_bounded, split_results
from .workouts import ExportResult, TcxDownload, collect_downloads, extract_download, normalize_date
from .writer import output_path, write_export

__all__ = [
    "EPOCH",
    "ExportConfig",
    "ExportError",
    "ExportRejected",
    "ExportResult",
    "ExportSummary",
    "MalformedResponse",
    "NoWorkoutData",
    "TcxDownload",
    "TransportError",
    "UnusableWorkout",
    "WorkoutDateMissing",
    "WorkoutIdNotFound",
    "WriteFailed",
    "add_month",
    "build_config",
    "collect_downloads",
    "export_path",
    "extract_download",
    "fetch_month_workouts",
    "fetch_tcx",
    "flatten_workouts",
    "iter_months",
    "load_dotenv",
    "map_bounded",
    "month_label",
    "month_path",
    "normalize_date",
    "output_path",
    "parse_month",
    "run_export",
    "split_results",
    "write_export",
]
