from __future__ import annotations

import os
from pathlib import Path


def _parse_line(raw: str) -> tuple[str, str] | None:
    line = raw.strip()
    if not line or line.startswith("#"):
        return None
    if line.lower().startswith("export "):
        line = line[7:].strip()
    if "=" not in line:
        return None
    k, v = line.split("=", 1)
    k = k.strip()
    if not k:
        return None
    return k, v.strip().strip('"').strip("'")


def load_dotenv_like(*candidates: str) -> str | None:
    """Load the first .env file found into os.environ (no dependencies).

    Explicit ``candidates`` are tried first, then ``.env`` and ``.env.local``
    in the working directory and next to this file. Variables that are
    already set (e.g. DATABASE_URI from the process manager) win.
    Returns the path that was loaded, or None if nothing was found.
    """
    paths: list[Path] = [Path(c) for c in candidates if c]

    cwd = Path.cwd()
    proj_root = Path(__file__).resolve().parent
    paths.extend([cwd / ".env", proj_root / ".env", cwd / ".env.local", proj_root / ".env.local"])

    for p in paths:
        if not p.is_file():
            continue
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            continue
        for raw in text.splitlines():
            parsed = _parse_line(raw)
            if parsed:
                os.environ.setdefault(*parsed)
        return str(p)
    return None
