"""
reset_db.py - Drop and recreate every table, optionally seeding an approved admin.

Usage:
    ADMIN_EMAIL=admin@example.com ADMIN_PASSWORD=... python scripts/reset_db.py
"""
import os

from app import create_app
from models import db, User


def reset_database(app, admin_email=None, admin_password=None):
    """Recreate the schema. Returns the seeded admin user id, if any."""
    with app.app_context():
        db.drop_all()
        db.create_all()

        if not (admin_email and admin_password):
            return None

        admin = User(
            email=admin_email.lower(),
            name='Administrator',
            role='admin',
            status='approved'
        )
        admin.set_password(admin_password)
        db.session.add(admin)
        db.session.commit()
        return admin.id


def main():
    app = create_app()
    print(f"⚠️ Resetting database at {app.config['SQLALCHEMY_DATABASE_URI']}")
    admin_id = reset_database(app, os.getenv('ADMIN_EMAIL'), os.getenv('ADMIN_PASSWORD'))
    print("✅ Tables recreated")
    if admin_id:
        print(f"✅ Admin user created (id={admin_id})")


if __name__ == '__main__':
    main()
