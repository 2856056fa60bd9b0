"""
Owner-only schema administration.

WARNING: `reset` DROPS participants, events, submissions and submission_team.

Usage:
  python -m submission_service.scripts.manage_db init --caller <owner_id>
  python -m submission_service.scripts.manage_db reset --caller <owner_id> --yes
  python -m submission_service.scripts.manage_db status
"""
from __future__ import annotations

import argparse
import os
import sys

from submission_service.auth import NOT_OWNER_MSG, is_owner
from submission_service.errors import ServiceError
from submission_service.logs import LogContext, setup_logging
from submission_service.services.admin_svc import initialize, reset, schema_tables


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="manage_db")
    ap.add_argument("command", choices=["init", "reset", "status"])
    ap.add_argument("--caller", default=None, help="caller identity, must match owner_id for init/reset")
    ap.add_argument("--db", default=None, help="override SUBMISSION_DB_PATH")
    ap.add_argument("--yes", action="store_true", help="confirm destructive reset")
    args = ap.parse_args(argv)

    setup_logging()
    if args.db:
        os.environ["SUBMISSION_DB_PATH"] = args.db

    if args.command == "status":
        print({"message": "ok", "tables": schema_tables()})
        return 0

    log = LogContext(f"{args.command.upper()}_SERVICE", user=args.caller or "anonymous")
    if not is_owner(args.caller):
        log.write("ERROR", NOT_OWNER_MSG)
        print(NOT_OWNER_MSG, file=sys.stderr)
        return 2
    if args.command == "reset" and not args.yes:
        print("refusing to reset without --yes", file=sys.stderr)
        return 2

    try:
        if args.command == "init":
            initialize()
        else:
            reset()
    except ServiceError as e:
        log.write("ERROR", str(e))
        print(f"{e.kind}: {e}", file=sys.stderr)
        return 1
    log.write("OK")
    print({"message": "ok", "tables": schema_tables()})
    return 0


if __name__ == "__main__":
    sys.exit(main())
