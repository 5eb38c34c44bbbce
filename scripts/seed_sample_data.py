#!/usr/bin/env python3
"""
Seed the configured document store with sample users and accounts.
Usage: from project root:
  python scripts/seed_sample_data.py
Connection settings come from BANKSTORE_* environment variables or .env.
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from bankstore.config import get_settings, setup_logging
from bankstore.domain import Account, BankUser, ResultType
from bankstore.store_context import StoreContext

SAMPLE_USERS = [
    BankUser(id="U1", user_name="bob", first_name="Bob", last_name="Smith"),
    BankUser(id="U2", user_name="alice", first_name="Alice", last_name="Jones"),
    BankUser(id="U3", user_name="carol", first_name="Carol", last_name="Smith"),
]

SAMPLE_ACCOUNTS = [
    Account(id="A1", user_name="bob", number=100),
    Account(id="A2", user_name="bob", number=101),
    Account(id="A3", user_name="alice", number=200),
    Account(id="A4", user_name="carol", number=300),
]


def seed_sample_data() -> int:
    """Create the sample documents, reporting each outcome."""
    setup_logging()
    settings = get_settings()
    print(f"Seeding {settings.store_backend} store")
    print("=" * 60)

    failures = 0
    with StoreContext(settings) as ctx:
        for user in SAMPLE_USERS:
            result = ctx.users.create_user(user)
            print(f"user {user.id:<4} {user.user_name:<8} -> {result.result_type.value}")
            if not result.succeeded and result.result_type is not ResultType.DUPLICATE:
                failures += 1

        for account in SAMPLE_ACCOUNTS:
            result = ctx.accounts.create_account(account)
            print(f"account {account.id:<4} #{account.number:<6} -> {result.result_type.value}")
            if not result.succeeded and result.result_type is not ResultType.DUPLICATE:
                failures += 1

    print("=" * 60)
    print("Done" if failures == 0 else f"Done with {failures} failures")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(seed_sample_data())
