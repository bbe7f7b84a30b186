from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .paths import CONFIG_DIR, EXPORT_DIR, MMR_BASE_URL, ROOT

# 2005-01-01 is the first date MapMyRun has data for.
EPOCH = date(2005, 1, 1)
STATUS_POLICIES = ("any", "success")


@dataclass(frozen=True)
class ExportConfig:
    session_id: str = ""
    base_url: str = MMR_BASE_URL
    destination: Path = EXPORT_DIR
    since: date = EPOCH
    until: Optional[date] = None
    list_workers: int = 6
    export_workers: int = 10
    write_workers: int = 20
    timeout_s: float = 60.0
    status_policy: str = "any"
    extension: str = "tcx"

    def headers(self) -> Dict[str, str]:
        return {"Cookie": f"mmfsessid={self.session_id}"}


def load_dotenv(path: Path = ROOT / ".env") -> None:
    """
    Minimal .env loader.
    - Supports KEY=VALUE lines
    - Also accepts `export KEY=VALUE`, so the same file can be `source`d from a shell
    - Ignores blank lines and comments
    - Does not overwrite existing environment variables
    - Read errors propagate
    """
    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export ") :]
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip("'").strip('"')
        if not key or key in os.environ:
            continue
        os.environ[key] = value


def parse_month(value: str) -> date:
    """Parse `YYYY-MM` (or a full `YYYY-MM-DD`) into the first day of that month."""
    parts = str(value).strip().split("-")
    if len(parts) < 2:
        raise ValueError(f"Expected YYYY-MM, got {value!r}")
    return date(int(parts[0]), int(parts[1]), 1)


def _coerce(name: str, value: Any) -> Any:
    if value is None:
        if name == "until":
            return None
        raise ValueError(f"{name} must not be empty")
    if name == "destination":
        return Path(value).expanduser()
    if name in {"since", "until"}:
        return value.replace(day=1) if isinstance(value, date) else parse_month(value)
    if name.endswith("_workers"):
        return int(value)
    if name == "timeout_s":
        return float(value)
    if name == "status_policy":
        policy = str(value).strip().lower()
        if policy not in STATUS_POLICIES:
            raise ValueError(f"status_policy must be one of {STATUS_POLICIES}, got {value!r}")
        return policy
    return str(value)


def load_yaml_settings(path: Path = CONFIG_DIR / "export.yml") -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open() as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path} is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping of settings")
    known = {f.name for f in fields(ExportConfig)}
    return {k: v for k, v in data.items() if k in known}


def env_settings() -> Dict[str, Any]:
    settings: Dict[str, Any] = {}
    if os.getenv("MMR_SESSION_ID"):
        settings["session_id"] = os.environ["MMR_SESSION_ID"]
    if os.getenv("MMR_DESTINATION"):
        settings["destination"] = os.environ["MMR_DESTINATION"]
    return settings


def build_config(
    overrides: Optional[Dict[str, Any]] = None,
    *,
    config_path: Path = CONFIG_DIR / "export.yml",
    dotenv_path: Optional[Path] = ROOT / ".env",
) -> ExportConfig:
    """
    Layer settings: CLI overrides > environment (.env included) > YAML file > defaults.
    `None` values in overrides mean "not given" and fall through.
    """
    if dotenv_path is not None:
        load_dotenv(dotenv_path)
    merged: Dict[str, Any] = {}
    merged.update(load_yaml_settings(config_path))
    merged.update(env_settings())
    merged.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return replace(ExportConfig(), **{k: _coerce(k, v) for k, v in merged.items()})
