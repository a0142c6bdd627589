"""Create the sequence counter table in the configured database.

Reads DATABASE_URL from .env / environment and creates all registered ORM tables.
Optionally seeds the counter when it has never been set.

Usage:
  python scripts/create_tables.py
  python scripts/create_tables.py --seed 10000
"""

from __future__ import annotations

import argparse
import pathlib
import os
import sys
from collections.abc import Sequence

from dotenv import load_dotenv
from sqlalchemy.orm import sessionmaker

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from quiniela.models.base import Base
from quiniela.config import resolve_database_url
from quiniela.db import create_app_engine
from quiniela.repositories.counter_repository import CounterRepository

# Import models so they register with Base.metadata
from quiniela import models  # noqa: F401


def main(argv: Sequence[str] | None = None) -> int:
    """Create all ORM tables in the target database."""

    parser = argparse.ArgumentParser(description="Create the local counter table")
    parser.add_argument("--seed", dest="seed", type=int, default=None, help="Initial counter value if unset")
    args = parser.parse_args(argv)

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    engine = create_app_engine(resolve_database_url())
    Base.metadata.create_all(bind=engine)
    print("Tables created (or already exist).")

    if args.seed is not None:
        if args.seed < 0:
            raise SystemExit("--seed must be >= 0")
        key = os.getenv("SEQUENCE_KEY", "secuenciaCounter")
        repo = CounterRepository(sessionmaker(bind=engine))
        current = repo.get(key)
        if current is None:
            repo.set(key, str(args.seed))
            print(f"Counter {key} seeded at {args.seed}.")
        else:
            print(f"Counter {key} already at {current}; left unchanged.")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
