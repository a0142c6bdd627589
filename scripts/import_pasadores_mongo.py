"""Import the agent (pasador) directory into MongoDB.

Input is a JSON array of objects with ``displayId``, ``nombre`` and optionally
``nombreFantasia`` and ``id`` (used as the document ``_id``; documents without
one are matched on ``displayId``).

Usage:
  export MONGODB_URI='mongodb://localhost:27017'
  export MONGODB_DB='quiniela'
  python scripts/import_pasadores_mongo.py pasadores.json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import pathlib
from collections.abc import Sequence
from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError


logger = logging.getLogger(__name__)


def _load_rows(path: pathlib.Path) -> list[dict[str, Any]]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a JSON array of passers")

    rows: list[dict[str, Any]] = []
    for i, item in enumerate(payload, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"{path}: item {i} is not an object")
        display_id = str(item.get("displayId") or "").strip()
        nombre = str(item.get("nombre") or "").strip()
        if not display_id or not nombre:
            raise ValueError(f"{path}: item {i} needs displayId and nombre")
        rows.append(
            {
                "id": str(item["id"]).strip() if item.get("id") else None,
                "displayId": display_id,
                "nombre": nombre,
                "nombreFantasia": str(item.get("nombreFantasia") or "").strip(),
            }
        )
    return rows


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Upsert passers from a JSON file into MongoDB")
    parser.add_argument("path", type=pathlib.Path)
    parser.add_argument("--mongo-uri", dest="mongo_uri", type=str, default=None)
    parser.add_argument("--mongo-db", dest="mongo_db", type=str, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    mongo_uri = args.mongo_uri or os.getenv("MONGODB_URI") or "mongodb://localhost:27017"
    mongo_db = args.mongo_db or os.getenv("MONGODB_DB") or "quiniela"

    try:
        rows = _load_rows(args.path)
    except (OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    logger.info("MongoDB: %s (db=%s)", mongo_uri, mongo_db)
    with MongoClient(mongo_uri) as client:
        col = client[mongo_db]["pasadores"]

        try:
            col.create_index("displayId", unique=True)
        except PyMongoError:
            logger.exception("Failed to create index; continuing")

        for row in rows:
            doc = {k: row[k] for k in ("displayId", "nombre", "nombreFantasia")}
            match = {"_id": row["id"]} if row["id"] else {"displayId": row["displayId"]}
            col.update_one(match, {"$set": doc}, upsert=True)

    logger.info("Imported %s passers", len(rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
