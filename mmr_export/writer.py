from __future__ import annotations

from pathlib import Path

from .errors import WriteFailed
from .workouts import ExportResult


def output_path(destination: Path, result: ExportResult, ext: str = "tcx") -> Path:
    return Path(destination) / f"{result.date}-{result.id}.{ext}"


def write_export(result: ExportResult, destination: Path, ext: str = "tcx") -> Path:
    """
    Write the payload verbatim. An existing file with the same name is
    overwritten; the destination directory is never created here.
    """
    path = output_path(destination, result, ext)
    try:
        with path.open("wb") as f:
            f.write(result.data)
    except OSError as e:
        raise WriteFailed(path, e) from e
    return path
