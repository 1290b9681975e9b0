"""
Database Initialization Script
Creates tables and optionally seeds them with sample flights
"""

from app.extensions import db
from app.db_init.sample_data import SAMPLE_FLIGHTS


def clear_database():
    """Drop all tables and recreate them"""
    print("🗑️  Dropping all tables...")
    db.drop_all()
    print("✅ Tables dropped successfully")

    print("📋 Creating tables...")
    db.create_all()
    print("✅ Tables created successfully")


def init_database(store, with_sample_data=True):
    """
    Initialize the database with tables and optionally sample data

    Args:
        store: TicketStore used to insert the sample flights
        with_sample_data (bool): Whether to populate with sample flights

    Returns:
        Number of flights stored afterwards
    """
    print("🚀 Initializing database...")

    print("📋 Creating tables...")
    db.create_all()
    print("✅ Tables created successfully")

    if with_sample_data:
        print("\n✈️  Loading sample flights...")
        created, failed, errors = store.load_many(SAMPLE_FLIGHTS)
        print(f"   - Flights created: {created}")
        if failed:
            print(f"   - Flights rejected: {failed}")
            for error in errors:
                print(f"     {error}")
    else:
        print("✅ Database tables created (no sample data)")

    return store.count()


def reset_database(store):
    """Complete database reset - drop, create, and populate"""
    print("⚠️  RESETTING DATABASE - This will delete all data!")
    clear_database()
    total = init_database(store, with_sample_data=True)
    print("\n✅ Database reset complete!")
    return total
