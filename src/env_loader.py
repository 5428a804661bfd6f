from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional


def _parse_line(line: str) -> Optional[tuple[str, str]]:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    if line.startswith("export "):
        line = line[len("export "):].lstrip()

    key, value = line.split("=", 1)
    key = key.strip()
    value = value.strip()
    if not key:
        return None

    # Strip one pair of matching quotes: KEY="some value"
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]
    return key, value


def read_dotenv(path: str | Path | None = None) -> Dict[str, str]:
    """Parse a .env file into a dict. Missing/unreadable files yield {}."""
    env_path = Path(path or ".env")
    if not env_path.exists():
        return {}

    try:
        text = env_path.read_text(encoding="utf-8")
    except OSError:
        return {}

    values: Dict[str, str] = {}
    for line in text.splitlines():
        parsed = _parse_line(line)
        if parsed is not None:
            key, value = parsed
            values[key] = value
    return values


def load_dotenv_if_present(path: str | Path | None = None) -> None:
    """
    Lightweight .env loader used for local development.

    - Reads KEY=VALUE pairs from the given file (default: ".env" in CWD).
    - Ignores empty lines and comments starting with "#".
    - Accepts an optional "export " prefix and quoted values.
    - Does *not* overwrite variables that are already present in os.environ.

    When the dashboard runs behind AWS Lambda the variables are configured
    on the function itself, so the file simply does not exist.
    """
    for key, value in read_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value


__all__ = ["load_dotenv_if_present", "read_dotenv"]
