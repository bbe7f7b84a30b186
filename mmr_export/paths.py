from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
CONFIG_DIR = ROOT / "config"
EXPORT_DIR = ROOT / "export"

MMR_HOST = "www.mapmyrun.com"
MMR_BASE_URL = f"https://{MMR_HOST}"
