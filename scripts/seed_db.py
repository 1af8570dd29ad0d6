from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    service = container.payroll_service
    service.load()
    added = service.seed_demo_employees()
    if added:
        print(f"OK: Seeded {added} demo employees -> {type(container.employee_repo).__name__}")
    else:
        print(f"SKIP: store already has {len(container.directory)} employees")


if __name__ == "__main__":
    main()
