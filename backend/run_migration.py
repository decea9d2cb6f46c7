"""
Create tables and triggers, then seed the support message cache.
"""
import sys
import os

# Add the backend directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from moodwall.db.session import init_db
from moodwall.db.migrations.seed_support_messages import migrate as seed_support_messages


def migrate():
    print("Creating tables...")
    init_db()
    print("Seeding support messages...")
    seed_support_messages()
    print("Migration completed successfully!")


if __name__ == "__main__":
    migrate()
