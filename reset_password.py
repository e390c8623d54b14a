#!/usr/bin/env python3
"""
Reset a user's password in the Event Hub MongoDB database.

This script DOES NOT read or reveal any existing passwords.  It simply
stores a new bcrypt hash for the user with the given e‑mail.

Usage:
    python reset_password.py --email admin@ex.com --password "NewStrongPass!234"
    python reset_password.py --mongo-uri mongodb://db:27017/events --email admin@ex.com

If --password is omitted, you will be prompted to enter it securely.
The connection string defaults to the MONGO_URI setting.
"""

import argparse
import getpass
import sys
from typing import List, Optional

from pymongo import MongoClient
from pymongo.database import Database

from event_hub_api.app.core.config import settings
from event_hub_api.app.services.user_service import UserService


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Reset an Event Hub user's password.")
    ap.add_argument("--mongo-uri", default=settings.mongo_uri, help="MongoDB connection string (default: MONGO_URI)")
    ap.add_argument("--db", default=settings.mongo_db, help="Database name when the URI names none")
    ap.add_argument("--email", required=True, help="User email to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    return ap


def main(argv: Optional[List[str]] = None, db: Optional[Database] = None) -> int:
    args = build_parser().parse_args(argv)

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    client = None
    if db is None:
        client = MongoClient(args.mongo_uri, serverSelectionTimeoutMS=settings.mongo_timeout_ms)
        db = client.get_default_database(default=args.db)
    try:
        if not UserService.set_password(db, args.email, new_password):
            print(f"[!] No user found with email: {args.email}", file=sys.stderr)
            return 2
        print(f"[+] Password updated for user: {args.email}")
        return 0
    finally:
        if client is not None:
            client.close()


if __name__ == "__main__":
    sys.exit(main())
