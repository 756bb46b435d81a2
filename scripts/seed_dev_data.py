#!/usr/bin/env python3
"""Reset the local database to the built-in restaurant list.

Clears all restaurants and the roll history, then inserts DEFAULT_RESTAURANTS.

Usage:
    # Per-user data file:
    python scripts/seed_dev_data.py

    # Or a specific database:
    LUNCH_DATABASE_URL=sqlite:///./dev.db python scripts/seed_dev_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lunch.config import Settings
from lunch.services.restaurant_store import RestaurantStore
from lunch.services.seed import DEFAULT_RESTAURANTS


def seed_dev_data():
    """Clear both tables and re-seed the default restaurants."""
    store = RestaurantStore.open(Settings(seed_on_first_launch=False))
    print(f"Using database {store.engine.url}")

    try:
        print("Clearing existing data...")
        store.clear()
        added = store.seed(DEFAULT_RESTAURANTS)
        print(f"Seeded {added} restaurants successfully!")
    except Exception as e:
        print(f"Error seeding dev data: {e}")
        raise
    finally:
        store.close()


if __name__ == "__main__":
    seed_dev_data()
