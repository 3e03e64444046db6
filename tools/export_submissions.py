"""Download stored survey submissions as CSV (same format as GET /surveys/export)."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from application.export import export_filename, submissions_to_csv
from application.submissions import SubmissionLog
from infrastructure.config import load_app_config
from infrastructure.constants import APP_CONFIG_FILE
from infrastructure.io import write_text
from infrastructure.stores import make_store


def export(config_path: Path, out_dir: Path, limit: int | None, bom: bool) -> Path:
    cfg = load_app_config(config_path)
    store = make_store(cfg)
    try:
        log = SubmissionLog.from_cfg(cfg, store)
        records = log.list_recent(limit or cfg.store.max_entries)
    finally:
        store.close()

    path = out_dir / export_filename(date.today())
    return write_text(path, submissions_to_csv(records), bom=bom)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default=str(APP_CONFIG_FILE), help="Path to app.yaml (default: configs/app.yaml)")
    ap.add_argument("--env", default=".env", help="Path to .env file (default: .env; skipped if missing)")
    ap.add_argument("--out-dir", default="exports", help="Output directory (default: exports)")
    ap.add_argument("--limit", type=int, default=None, help="Newest N submissions (default: all retained)")
    ap.add_argument("--bom", action="store_true", help="Write a UTF-8 BOM for spreadsheet apps")
    args = ap.parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    path = export(Path(args.config), Path(args.out_dir), args.limit, args.bom)
    print(f"Wrote submissions CSV: {path}")


if __name__ == "__main__":
    main()
