"""
Create a demo user with five sample trips.

Usage: python seed_user_trips.py [email]
"""
import sys
import os

# Add the project directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sqlalchemy import func
from globaltrotters.db.session import SessionLocal
from globaltrotters.db.seed import seed_catalogue, seed_user_trips
from globaltrotters.models.trip import Trip, TripActivity


def main():
    email = sys.argv[1] if len(sys.argv) > 1 else "demo@globaltrotters.app"
    db = SessionLocal()
    try:
        print("Starting user trips seeding...")
        seed_catalogue(db)
        user = seed_user_trips(db, email)

        trip_count = db.query(func.count(Trip.id)).filter(Trip.user_id == user.id).scalar()
        activity_count = db.query(func.count(TripActivity.id)).join(Trip).filter(
            Trip.user_id == user.id
        ).scalar()
        print("Summary:")
        print(f"   User: {user.email}")
        print(f"   Trips: {trip_count}")
        print(f"   Trip Activities: {activity_count}")
    except Exception as e:
        db.rollback()
        print(f"Seeding failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
