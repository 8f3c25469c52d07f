"""Backup the stored state blob.

Note: works for both storage backends since it only reads through the key-value store.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_portal.hr_portal.container import kv_store_from_settings
from src.hr_portal.hr_portal.core.constants import STORAGE_KEY


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    raw = kv_store_from_settings(settings).get_item(STORAGE_KEY)
    if raw is None:
        raise SystemExit("Nothing stored yet: start the app once or run scripts/seed_db.py.")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{STORAGE_KEY}_{ts}.json"
    out_file.write_text(json.dumps(json.loads(raw), ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
