"""Backup the employee snapshot.

Note: JSON store is copied as-is; MySQL store uses `mysqldump` (nếu máy có cài).
"""

from __future__ import annotations

import importlib
import shutil
import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")

    if str(getattr(settings, "STORE_BACKEND", "json")).lower() == "json":
        src = Path(settings.DATA_FILE)
        if not src.exists():
            raise SystemExit(f"Snapshot {src} does not exist yet")
        out_file = out_dir / f"employees_{ts}.json"
        shutil.copy2(src, out_file)
        print(f"OK: Backup created: {out_file}")
        return

    db = settings.DB_CONFIG
    out_file = out_dir / f"{db['database']}_{ts}.sql"
    cmd = [
        "mysqldump",
        f"-h{db['host']}",
        f"-u{db['user']}",
        f"-p{db['password']}",
        db["database"],
        "employee_snapshots",
    ]

    try:
        with out_file.open("wb") as f:
            subprocess.run(cmd, stdout=f, stderr=subprocess.PIPE, check=True)
        print(f"OK: Backup created: {out_file}")
    except FileNotFoundError:
        raise SystemExit("`mysqldump` not found. Install the MySQL client tools or back up with Workbench.")


if __name__ == "__main__":
    main()
