#!/usr/bin/env python3
"""Seed an account service with synthetic customers and accounts.

This script generates customers, opens accounts for them through the
account service (so every opening rule applies), runs a number of
commissioned transactions per account and prints a summary.

Accounts live in the configured store (in-memory by default); events go to
the console, memory or Kafka.
"""

import argparse
import time
from collections import Counter
from decimal import Decimal

from bank_accounts.app import build_publisher, build_store
from bank_accounts.config import AccountServiceConfig
from bank_accounts.customers import InMemoryCustomerDirectory
from bank_accounts.logging import configure_logging
from bank_accounts.seeding import run_seed
from bank_accounts.services import AccountService


def print_summary(
    service: AccountService,
    rejections: Counter,
    commissions: Decimal,
    elapsed: float,
) -> None:
    """Print a summary of the seeded data."""
    accounts = service.list_all()
    by_type = Counter(a.account_type.value for a in accounts)

    print(f"\n{'='*60}")
    print("Seed Summary")
    print("=" * 60)
    for account_type, count in sorted(by_type.items()):
        print(f"  {account_type}: {count} accounts")
    print(f"  Business accounts: {sum(1 for a in accounts if a.is_business_account())}")
    print(f"  Commissions charged: {commissions:.2f}")
    if rejections:
        print("\nRejected requests:")
        for reason, count in rejections.most_common():
            print(f"  {count:4d}  {reason}")
    print(f"\nCompleted in {elapsed:.2f}s")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the account service with synthetic data"
    )
    parser.add_argument(
        "--customers",
        type=int,
        default=20,
        help="Number of customers to generate (default: 20)",
    )
    parser.add_argument(
        "--transactions",
        type=int,
        default=8,
        help="Commissioned transactions per account (default: 8)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--publisher",
        choices=["console", "memory", "kafka"],
        default="memory",
        help="Event publisher backend (default: memory)",
    )
    parser.add_argument(
        "--store",
        choices=["memory", "postgres"],
        default="memory",
        help="Account store backend (default: memory)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    args = parser.parse_args()

    config = AccountServiceConfig.from_env()
    config.publisher_backend = args.publisher
    config.store_backend = args.store
    if args.log_level:
        config.log_level = args.log_level
    configure_logging(config)

    directory = InMemoryCustomerDirectory()
    publisher = build_publisher(config)
    service = AccountService(
        store=build_store(config),
        directory=directory,
        publisher=publisher,
    )

    start = time.perf_counter()
    result = run_seed(
        service,
        directory,
        publisher,
        num_customers=args.customers,
        transactions_per_account=args.transactions,
        seed=args.seed,
    )

    print_summary(service, result.rejections, result.commissions, time.perf_counter() - start)


if __name__ == "__main__":
    main()
