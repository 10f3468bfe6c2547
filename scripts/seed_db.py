from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.employee_management.employee_management.storage.json_store import JsonDocumentStore


def main() -> None:
    parser = argparse.ArgumentParser(description="Reset the data file to a fresh document.")
    parser.add_argument("--empty", action="store_true", help="start without the demo employees")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    data_file = Path(settings.DATA_FILE)
    if data_file.exists():
        data_file.unlink()

    store = JsonDocumentStore(data_file, seed_demo_data=not args.empty)
    doc = store.load()
    print(f"OK: Seeded {data_file} (employees={len(doc['employees'])})")


if __name__ == "__main__":
    main()
