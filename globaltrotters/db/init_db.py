"""
Database initialization script.
"""
from globaltrotters.core.logging import configure_logging
from globaltrotters.db.session import SessionLocal, init_db
from globaltrotters.db.seed import seed_catalogue


def main():
    configure_logging()
    print("Initializing database...")
    init_db()
    db = SessionLocal()
    try:
        added = seed_catalogue(db)
    finally:
        db.close()
    print(f"Database initialized successfully! ({added} new cities)")


if __name__ == "__main__":
    main()
