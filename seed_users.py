#!/usr/bin/env python3
"""
Populate the users table with sample records.

Applies pending migrations, then inserts ``--count`` users named
``User <i>`` with e-mail ``user<i>@example.com``.  E-mails that already
exist are skipped, so the script can be run repeatedly.

Usage:
    python seed_users.py --db ./users.db --count 7
"""

import argparse
import os
import sys
from typing import List, Optional

from user_listing_api.app.core.config import ConfigurationError, parse_database_url
from user_listing_api.app.core.db import get_cursor, init_db


def seed_users(database_path: str, count: int) -> int:
    """Insert up to ``count`` sample users and return how many were added."""
    init_db(database_path)
    added = 0
    with get_cursor(database_path) as cursor:
        for i in range(1, count + 1):
            cursor.execute(
                "INSERT OR IGNORE INTO users (email, name) VALUES (?, ?)",
                (f"user{i}@example.com", f"User {i}"),
            )
            added += cursor.rowcount
    return added


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Insert sample users into the SQLite database.")
    ap.add_argument(
        "--db",
        default=os.getenv("DATABASE_URL"),
        help="SQLite path or sqlite:/// URL (defaults to $DATABASE_URL)",
    )
    ap.add_argument("--count", type=int, default=10, help="Number of sample users (default 10)")
    args = ap.parse_args(argv)

    if not args.db:
        print("[!] No database given; pass --db or set DATABASE_URL.", file=sys.stderr)
        return 1
    if args.count < 0:
        print("[!] --count must not be negative.", file=sys.stderr)
        return 1
    try:
        path = parse_database_url(args.db)
    except ConfigurationError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1

    added = seed_users(path, args.count)
    print(f"[+] Added {added} user(s) to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
