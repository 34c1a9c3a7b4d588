#!/usr/bin/env python3
"""
Script to create an admin user for the LMS.
Run this after starting Elasticsearch.
"""

import getpass
import os
import sys

# Add the parent directory to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lms import create_app
from lms.auth import User


def main():
    """Main entry point."""
    app = create_app()

    print("\nLMS - Create Admin User")
    print("=" * 50)

    username = input("Username: ").strip()
    if not username:
        print("✗ Username is required")
        sys.exit(1)

    email = input("Email (optional): ").strip() or f"{username}@localhost"

    password = getpass.getpass("Password: ")
    if len(password) < 8:
        print("✗ Password must be at least 8 characters")
        sys.exit(1)

    password_confirm = getpass.getpass("Confirm password: ")
    if password != password_confirm:
        print("✗ Passwords do not match")
        sys.exit(1)

    with app.app_context():
        user, error = User.create(username, email, password, is_admin=True)

    if error:
        print(f"✗ {error}")
        sys.exit(1)

    print(f"\n{'=' * 50}")
    print(f"✓ Admin user '{user.username}' created successfully!")


if __name__ == "__main__":
    main()
