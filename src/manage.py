"""Stockroom management CLI.

Usage:
    python src/manage.py setup-db                  # Create all tables
    python src/manage.py drop-db                   # Drop all tables
    python src/manage.py seed                      # Standard categories and sample vendors
    python src/manage.py repair-disciplines        # Report categories with unusable disciplines
    python src/manage.py repair-disciplines --apply
    python src/manage.py rebuild                   # Report containers rebuilt from persisted stock
"""

import argparse
import sys


def _domain():
    from stockroom.domain import stockroom

    stockroom.init()
    return stockroom


def setup_database():
    from stockroom.utils.db import setup_db

    print("Creating stockroom database schema...")
    setup_db(_domain())
    print("Done.")


def drop_database():
    from stockroom.utils.db import drop_db

    print("Dropping stockroom database schema...")
    drop_db(_domain())
    print("Done.")


def seed():
    from stockroom.seeding import seed_reference_data

    with _domain().domain_context():
        created = seed_reference_data()

    print(f"Categories created: {len(created['categories'])}")
    print(f"Vendors created: {len(created['vendors'])}")


def repair_disciplines(apply=False):
    from stockroom.repair import repair_category_disciplines

    with _domain().domain_context():
        repairs = repair_category_disciplines(apply=apply)

    if not repairs:
        print("All category disciplines are valid.")
        return

    for repair in repairs:
        if repair.discipline is None:
            status = "needs manual repair"
        else:
            status = "repaired" if repair.applied else "would repair"
        print(f"  {repair.name}: {repair.previous!r} -> {repair.discipline!r} ({status})")

    if not apply:
        print("Dry run. Re-run with --apply to write the changes.")


def rebuild():
    from stockroom.engine import get_engine

    with _domain().domain_context():
        rebuilt = get_engine().rebuild()

    print(f"Containers rebuilt: {len(rebuilt)}")
    for category_id, entries in rebuilt.items():
        print(f"  {category_id}: {entries} entries")


def main():
    parser = argparse.ArgumentParser(description="Stockroom management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Seed the standard categories and sample vendors")

    repair_parser = subparsers.add_parser("repair-disciplines", help="Repair missing or wrong category disciplines")
    repair_parser.add_argument("--apply", action="store_true", help="Write the repairs (default: dry run)")

    subparsers.add_parser("rebuild", help="Rebuild category containers from persisted stock")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed()
    elif args.command == "repair-disciplines":
        repair_disciplines(apply=args.apply)
    elif args.command == "rebuild":
        rebuild()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
