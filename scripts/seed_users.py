#!/usr/bin/env python3
"""
Seed the bank_app database with demo users.

Transactions deliberately mix text dates and native timestamps, the way the
legacy data does, so the normalization path runs end to end.

Usage:
    python scripts/seed_users.py
    python scripts/seed_users.py --count 5
"""
import argparse
import asyncio
import os
import random
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from dotenv import load_dotenv

load_dotenv()

from domain.entities import Instant, Text, Transaction, User
from infrastructure.db.database import AsyncSessionLocal, create_tables, close_db
from infrastructure.db.repositories.user_repo_sqlalchemy import UserRepoSqlalchemy
from infrastructure.logging.structlog_logs import logger

FIRST_NAMES = ["Ada", "Grace", "Alan", "Edsger", "Barbara", "Donald"]
LAST_NAMES = ["Lovelace", "Hopper", "Turing", "Dijkstra", "Liskov", "Knuth"]
TYPES = ["deposit", "withdrawal", "transfer"]


def build_user(rng: random.Random, n_transactions: int) -> User:
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    now = datetime.now(timezone.utc)
    transactions = []
    for _ in range(n_transactions):
        when = now - timedelta(days=rng.randint(0, 180), minutes=rng.randint(0, 1439))
        # roughly half of the rows use the legacy text form
        date = Text(when.strftime("%Y-%m-%dT%H:%M:%S.000Z")) if rng.random() < 0.5 else Instant(when)
        amount = Decimal(rng.randint(100, 50000)) / 100
        transactions.append(Transaction(type=rng.choice(TYPES), amount=amount, date=date))
    return User(
        id=str(uuid4()),
        first_name=first,
        last_name=last,
        email=f"{first}.{last}@example.com".lower(),
        balance=Decimal(rng.randint(0, 1000000)) / 100,
        transactions=transactions,
    )


async def seed(count: int, transactions_per_user: int, seed_value: int) -> None:
    rng = random.Random(seed_value)
    await create_tables()
    async with AsyncSessionLocal() as session:
        repo = UserRepoSqlalchemy(session)
        for _ in range(count):
            user = await repo.save_user(build_user(rng, transactions_per_user))
            logger.info("user_seeded", user_id=user.id, transaction_count=len(user.transactions))
    await close_db()


def main():
    parser = argparse.ArgumentParser(description="Seed demo users and transactions")
    parser.add_argument("--count", type=int, default=3, help="Number of users")
    parser.add_argument("--transactions", type=int, default=12, help="Transactions per user")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()
    asyncio.run(seed(args.count, args.transactions, args.seed))


if __name__ == "__main__":
    main()
