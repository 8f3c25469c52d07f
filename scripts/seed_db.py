"""Reset the stored state to the first-run seed (one admin, two departments).

Also forgets the remembered session token.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_portal.hr_portal.container import kv_store_from_settings
from src.hr_portal.hr_portal.storage.adapter import PersistentStoreAdapter
from src.hr_portal.hr_portal.storage.seed import seed_state


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    adapter = PersistentStoreAdapter(kv_store_from_settings(settings))

    adapter.save(seed_state())
    adapter.forget()
    print(f"OK: Seeded store ({settings.STORAGE_BACKEND})")


if __name__ == "__main__":
    main()
