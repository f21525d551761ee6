from __future__ import annotations

import argparse

from userlookup.db.seed import create_schema, seed_sample_users
from userlookup.db.session import get_sessionmaker, reset_engine
from userlookup.observability.logging import configure_logging


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="User lookup database helpers")
    parser.add_argument("--create-schema", action="store_true", help="Create the users table if it is missing")
    parser.add_argument("--seed", action="store_true", help="Insert the sample users (idempotent)")
    args = parser.parse_args(argv)

    if not (args.create_schema or args.seed):
        parser.error("nothing to do; pass --create-schema and/or --seed")

    configure_logging()
    try:
        if args.create_schema:
            create_schema()
        if args.seed:
            with get_sessionmaker()() as db:
                added = seed_sample_users(db)
            print(f"Seeded {added} user(s)")
    finally:
        reset_engine()


if __name__ == "__main__":
    main()
