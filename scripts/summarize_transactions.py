#!/usr/bin/env python3
"""
Monthly transaction summary, offline.

Runs the normalization and monthly grouping over a JSON file of transactions,
without touching the database.

Usage:
    python scripts/summarize_transactions.py transactions.json
    python scripts/summarize_transactions.py transactions.json --json

The file holds either a list of {type, amount, date} records or an object
with a "transactions" list.
"""
import argparse
import json
import os
import sys
from decimal import Decimal, InvalidOperation

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from domain.entities import Text, Transaction
from domain.exceptions import MalformedRecordError
from domain.services import MonthlyGrouping


def load_transactions(file_path: str) -> list[Transaction]:
    """Load raw transactions from JSON file. Dates stay as text."""
    with open(file_path, "r") as f:
        raw = json.load(f)
    if isinstance(raw, dict):
        raw = raw.get("transactions", [])

    if not isinstance(raw, list):
        raise ValueError("expected a list of transactions")

    transactions = []
    for i, t in enumerate(raw):
        if not isinstance(t, dict):
            raise ValueError(f"transaction #{i} is not an object: {t!r}")
        try:
            amount = Decimal(str(t.get("amount", 0)))
        except InvalidOperation as e:
            raise ValueError(f"transaction #{i} has a non-numeric amount: {t.get('amount')!r}") from e
        transactions.append(Transaction(
            type=str(t.get("type", "")),
            amount=amount,
            date=Text(str(t.get("date", ""))),
        ))
    return transactions


def format_groups(groups) -> str:
    """Format groups for human-readable output."""
    lines = []
    for g in groups:
        total = sum((t.amount for t in g.transactions), Decimal(0))
        lines.append(f"{g.year:04d}-{g.month:02d}  ({len(g.transactions)} transactions, net {total})")
        for t in g.transactions:
            lines.append(f"    {t.date.value.isoformat()}  {t.type:<12} {t.amount}")
    if not lines:
        lines.append("No transactions.")
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Group transactions by calendar month (UTC)"
    )
    parser.add_argument(
        "file_path",
        help="Path to transactions JSON file"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON"
    )

    args = parser.parse_args()

    try:
        transactions = load_transactions(args.file_path)
    except FileNotFoundError:
        print(f"Error: File not found: {args.file_path}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.file_path}: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: Invalid transactions in {args.file_path}: {e}")
        sys.exit(1)

    try:
        groups = MonthlyGrouping.summarize(transactions)
    except MalformedRecordError as e:
        print(f"Error: {e}")
        sys.exit(2)

    if args.json:
        output = [
            {
                "year": g.year,
                "month": g.month,
                "transactions": [
                    {"type": t.type, "amount": t.amount, "date": t.date.value.isoformat()}
                    for t in g.transactions
                ],
            }
            for g in groups
        ]
        print(json.dumps(output, indent=2, default=str))
    else:
        print(format_groups(groups))


if __name__ == "__main__":
    main()
