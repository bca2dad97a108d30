"""Build the roster from the calendar without the web form.

    python scripts/build_roster.py              # this/next Saturday
    python scripts/build_roster.py 2024-06-15   # explicit date
"""
from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.confession_attendance.confession_attendance.container import build_container
from src.confession_attendance.confession_attendance.core.exceptions import DomainError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("date", nargs="?", help="YYYY-MM-DD (default: this or next Saturday)")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    try:
        result = container.roster_service.build_roster(args.date)
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"OK: roster for {result.date} has {result.count} people")
    return 0


if __name__ == "__main__":
    sys.exit(main())
