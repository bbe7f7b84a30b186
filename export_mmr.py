"""
Export every MapMyRun workout as a TCX file.

The script walks the dashboard JSON API month by month from January 2005,
collects the workout ids of each month, downloads each workout's TCX export
and writes it to `<destination>/<date>-<id>.tcx`.

Usage:
    export MMR_SESSION_ID=...   # value of the `mmfsessid` cookie
    uv run python export_mmr.py --destination export --since 2015-01
"""

import argparse
import sys
from pathlib import Path

import yaml

from mmr_export.config import STATUS_POLICIES, build_config
from mmr_export.paths import CONFIG_DIR
from mmr_export.pipeline import run_export


def main() -> None:
    parser = argparse.ArgumentParser(description="Bulk-export MapMyRun workouts as TCX files.")
    parser.add_argument(
        "--session-id",
        default=None,
        help="mmfsessid cookie value (defaults to $MMR_SESSION_ID or .env).",
    )
    parser.add_argument(
        "--destination",
        default=None,
        help="Existing directory to write TCX files into (default: ./export).",
    )
    parser.add_argument("--since", default=None, help="First month to export, YYYY-MM (default 2005-01).")
    parser.add_argument(
        "--until",
        default=None,
        help="Last month to export, YYYY-MM inclusive (default: the month before the current one).",
    )
    parser.add_argument("--list-workers", type=int, default=None, help="Concurrent month listings (default 6).")
    parser.add_argument("--export-workers", type=int, default=None, help="Concurrent TCX downloads (default 10).")
    parser.add_argument("--write-workers", type=int, default=None, help="Concurrent file writes (default 20).")
    parser.add_argument("--timeout-s", type=float, default=None, help="Per-request timeout in seconds.")
    parser.add_argument(
        "--status-policy",
        choices=STATUS_POLICIES,
        default=None,
        help="'any' saves every export response body; 'success' skips non-2xx responses.",
    )
    parser.add_argument(
        "--config",
        default=str(CONFIG_DIR / "export.yml"),
        help="YAML settings file (keys match the long options).",
    )
    args = parser.parse_args()

    overrides = {
        "session_id": args.session_id,
        "destination": args.destination,
        "since": args.since,
        "until": args.until,
        "list_workers": args.list_workers,
        "export_workers": args.export_workers,
        "write_workers": args.write_workers,
        "timeout_s": args.timeout_s,
        "status_policy": args.status_policy,
    }
    try:
        cfg = build_config(overrides, config_path=Path(args.config))
    except (ValueError, TypeError, yaml.YAMLError) as e:
        raise SystemExit(f"Invalid configuration: {e}")

    if not cfg.session_id:
        raise SystemExit("Missing MMR_SESSION_ID. Example: export MMR_SESSION_ID='...'")
    if not cfg.destination.is_dir():
        raise SystemExit(f"Destination directory does not exist: {cfg.destination}")

    try:
        run_export(cfg)
    except Exception as e:
        print(f"Export aborted: {e!r}", file=sys.stderr)


if __name__ == "__main__":
    main()
