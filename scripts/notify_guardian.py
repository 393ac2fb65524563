"""Send one guardian follow-up from the operator's machine.

Usage: python scripts/notify_guardian.py <student_id> [--week N]
"""
from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.main import configure_logging
from src.attendance_tracker.attendance_tracker.notifications.channel import BrowserChannel


def main() -> int:
    parser = argparse.ArgumentParser(description="Open a WhatsApp follow-up message for a student's guardian.")
    parser.add_argument("student_id")
    parser.add_argument("--week", type=int, default=None, help="week number under review (default from settings)")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(db_config=dict(settings.DB_CONFIG), settings=settings)

    outcome = container.notification_workflow.send(args.student_id, args.week, BrowserChannel())
    print(f"{outcome.status.value}: {outcome.message}")
    if outcome.delivery is not None and not outcome.delivery.persisted:
        print(f"WARNING: message state not saved ({outcome.delivery.reason})")
    return 0 if outcome.confirmed else 1


if __name__ == "__main__":
    sys.exit(main())
