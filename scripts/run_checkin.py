#!/usr/bin/env python3
"""
Console driver for the check-in client.

Logs in, acquires the configured position and records one check-in or
check-out, printing each notification.

Usage:
    python scripts/run_checkin.py --email a@b.com --type in

Environment variables:
    API_BASE_URL - Backend base URL
    GOOGLE_MAPS_API_KEY - Reverse geocoding key
    STATIC_LATITUDE / STATIC_LONGITUDE - Position to report
"""

import argparse
import asyncio
import getpass
import json
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from fieldcheck.config import Settings, configure_logging
from fieldcheck.dependencies import init_all_services
from fieldcheck.types import CheckInType, Outcome


def _print_outcome(outcome: Outcome, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps(outcome.to_dict()))
        return
    marker = "OK" if outcome.ok else "!!"
    print(f"[{marker}] {outcome.title}: {outcome.message}")


async def run(email: str, password: str, check_type: CheckInType, as_json: bool = False) -> int:
    """Run one login/check-in/logout cycle and return an exit code."""
    settings = Settings()
    configure_logging(settings)
    controller = init_all_services(settings)

    outcome = await controller.login(email, password)
    _print_outcome(outcome, as_json)
    if not outcome.ok:
        return 1

    view = controller.view_model()
    print(view.welcome_text)
    if not view.can_check_in:
        print(view.location_message)
        controller.logout()
        return 1

    print(f"Position: {view.latitude}, {view.longitude}")

    if check_type == CheckInType.IN:
        outcome = await controller.check_in()
    else:
        outcome = await controller.check_out()
    _print_outcome(outcome, as_json)

    controller.logout()
    return 0 if outcome.ok else 1


def main() -> None:
    parser = argparse.ArgumentParser(description="Record a check-in or check-out")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", help="Prompted for when omitted")
    parser.add_argument("--type", choices=[t.value for t in CheckInType], default="in")
    parser.add_argument("--json", action="store_true", help="Print outcomes as JSON")
    args = parser.parse_args()

    password = args.password if args.password is not None else getpass.getpass("Password: ")
    sys.exit(asyncio.run(run(args.email, password, CheckInType(args.type), args.json)))


if __name__ == "__main__":
    main()
