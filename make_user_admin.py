"""
Promote a user to the ADMIN role.

Usage: python make_user_admin.py <email>
"""
import sys
import os

# Add the project directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from globaltrotters.db.session import SessionLocal
from globaltrotters.models.user import User
from globaltrotters.services.user_service import make_user_admin


def main():
    if len(sys.argv) < 2:
        print("Usage: python make_user_admin.py <email>")
        sys.exit(2)
    email = sys.argv[1]

    db = SessionLocal()
    try:
        print(f"Looking for user with email: {email}")
        user, changed = make_user_admin(email, db)
        if user is None:
            print(f"User not found with email: {email}")
            print("\nAvailable users:")
            for u in db.query(User).order_by(User.email).all():
                print(f"  - {u.email} ({u.name}) - Role: {u.role.value}")
            sys.exit(1)
        if not changed:
            print("User is already an admin!")
            return
        print("Successfully updated user to ADMIN!")
        print(f"   Name: {user.name}")
        print(f"   Email: {user.email}")
        print(f"   Role: {user.role.value}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
