#!/usr/bin/env python3
"""
Create candidate tables.
Run from project root: python3 scripts/create_tables.py
"""
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.config import get_config
from app.db.database import Base, get_engine, init_db


def create_tables():
    """Create all tables used by the application."""
    config = get_config()
    engine = get_engine(config)

    print(f"Creating tables for database: {engine.url.render_as_string(hide_password=True)}")
    print("-" * 50)

    init_db(engine)
    for table in Base.metadata.sorted_tables:
        print(f"  ✅ Table '{table.name}'")

    print("\n✅ Done")


if __name__ == "__main__":
    try:
        create_tables()
    except Exception as e:
        print(f"❌ Failed to create tables: {e}")
        sys.exit(1)
