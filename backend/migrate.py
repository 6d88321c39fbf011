#!/usr/bin/env python3
"""
Bring an existing database up to the current schema.

create_all() creates missing tables but never touches existing ones, so the
one-application-per-seeker-per-job unique index is added here for databases
created before it existed.
"""

import sys
from pathlib import Path

from sqlalchemy import inspect, text

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from app.database import init_db, engine

UNIQUE_APPLICATION_INDEX = "uq_applications_job_seeker"


def migrate() -> bool:
    print("Initializing database with all models...")
    init_db()
    print("✓ Database initialized successfully")

    inspector = inspect(engine)
    existing_index_names = {i.get("name") for i in inspector.get_indexes("applications") if i.get("name")}
    existing_unique_names = {
        u.get("name") for u in inspector.get_unique_constraints("applications") if u.get("name")
    }
    if UNIQUE_APPLICATION_INDEX in existing_index_names | existing_unique_names:
        print(f"✓ Unique index already exists: {UNIQUE_APPLICATION_INDEX}")
        return True

    # Fails if duplicate (job_id, seeker_id) rows already exist; those must be cleaned up by hand.
    try:
        with engine.begin() as conn:
            conn.execute(text(
                f"CREATE UNIQUE INDEX {UNIQUE_APPLICATION_INDEX} ON applications (job_id, seeker_id)"
            ))
    except Exception as e:
        print(f"✗ Could not add unique index {UNIQUE_APPLICATION_INDEX}: {e}")
        return False

    print(f"✓ Added unique index: {UNIQUE_APPLICATION_INDEX}")
    return True


if __name__ == "__main__":
    success = migrate()
    sys.exit(0 if success else 1)
