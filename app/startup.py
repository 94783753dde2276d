import csv
import logging
import os
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.analytics.models.tables import TABLES
from app.database import Base


logger = logging.getLogger(__name__)


def create_schema(engine: Engine) -> None:
    """Create the offices, employees, customers and products tables if missing."""
    Base.metadata.create_all(bind=engine)


def _coerce(model_cls, row: dict) -> dict:
    values = {}
    for column in model_cls.__table__.columns:
        raw = row.get(column.name)
        if raw is None or raw == "":
            values[column.name] = None
        elif column.type.python_type is int:
            values[column.name] = int(raw)
        else:
            values[column.name] = raw
    return values


def populate_db_from_csv(engine: Engine, csv_dir: Optional[str] = None) -> None:
    """Seed each empty table from `<csv_dir>/<table>.csv`; idempotent on startup.

    - Pass SEED_CSV_DIR env var to override the directory.
    - Tables that already hold rows are left untouched.
    """
    if csv_dir is None:
        csv_dir = os.getenv("SEED_CSV_DIR", "mock_data")

    with Session(engine) as db:
        for model_cls in TABLES:
            table = model_cls.__tablename__
            if db.query(model_cls).first():
                logger.info("Table %s already populated; skipping CSV seed.", table)
                continue
            csv_path = os.path.join(csv_dir, f"{table}.csv")
            try:
                with open(csv_path, "r", newline="", encoding="utf-8") as f:
                    batch = [model_cls(**_coerce(model_cls, row)) for row in csv.DictReader(f)]
            except FileNotFoundError:
                logger.warning("Seed file %s not found; skipping %s.", csv_path, table)
                continue
            if batch:
                db.add_all(batch)
                db.commit()
                logger.info("Seeded %d rows into %s from %s", len(batch), table, csv_path)
            else:
                logger.info("No rows found in %s; nothing to seed.", csv_path)
