#!/usr/bin/env python3
"""
Create an AgencyHQ staff account
================================
Creates the database tables and the upload folder if they are missing,
then adds an admin user (or promotes an existing one).

Usage:
    python scripts/create_admin.py --email admin@agency.com --password secret [--name "Agency Admin"]
"""

import argparse
import sys
from pathlib import Path

from agencyhq.auth import get_password_hash
from agencyhq.config import get_settings
from agencyhq.database import Base, SessionLocal, engine
from agencyhq.models.user import ROLE_ADMIN, User


def create_admin(email: str, password: str, display_name: str = None, dry_run: bool = False):
    settings = get_settings()
    upload_dir = Path(settings.upload_dir)

    print(f"Initializing AgencyHQ at: {settings.database_url}")
    print("-" * 50)

    if dry_run:
        print("[DRY RUN] Would create tables")
        print(f"[DRY RUN] Would create upload folder: {upload_dir}")
        print(f"[DRY RUN] Would create admin: {email}")
        return

    Base.metadata.create_all(bind=engine)
    print("✓ Tables ready")

    upload_dir.mkdir(parents=True, exist_ok=True)
    print(f"✓ Upload folder: {upload_dir}")

    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email).first()
        if user:
            user.role = ROLE_ADMIN
            user.hashed_password = get_password_hash(password)
            user.is_active = True
            print(f"✓ Updated existing user: {email}")
        else:
            user = User(
                email=email,
                hashed_password=get_password_hash(password),
                display_name=display_name,
                role=ROLE_ADMIN,
                is_active=True,
            )
            db.add(user)
            print(f"✓ Created admin: {email}")
        db.commit()
    finally:
        db.close()

    print("-" * 50)
    print("Done! Start the API with:")
    print("   uvicorn agencyhq.main:app --reload")


def main():
    parser = argparse.ArgumentParser(description="Create an AgencyHQ admin account")
    parser.add_argument("--email", required=True, help="Login email for the admin")
    parser.add_argument("--password", required=True, help="Password for the admin")
    parser.add_argument("--name", default=None, help="Display name")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be created without making changes"
    )
    args = parser.parse_args()

    if len(args.password) < 8:
        print("Password must be at least 8 characters", file=sys.stderr)
        sys.exit(1)

    create_admin(args.email, args.password, args.name, args.dry_run)


if __name__ == "__main__":
    main()
