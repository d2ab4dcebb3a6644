"""
Main Execution Script for the Daily Routine Planner.
Loads categories, builds a randomized routine, geocodes it and exports it.
"""

import os
import sys
import json
import random
import asyncio
import logging
from typing import List, Optional

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from pydantic import ValidationError

from models import Category, ScheduledActivity
from scheduler import RoutineScheduler
from services import (
    GeminiGeocoder,
    MockGeocoder,
    RoutineGenerationError,
    default_categories,
    filter_valid_categories,
    generate_routine,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("Main")

# --- CONFIGURATION ---
CATEGORIES_FILENAME = "categories.json"
EXPORT_FILENAME = "routine.json"
API_KEY = os.environ.get("GOOGLE_API_KEY")
SEED = os.environ.get("ROUTINE_SEED")  # Set for a reproducible routine
CITY_HINT = "Puerto Peñasco, Sonora, Mexico"
# ---------------------


def save_categories(categories: List[Category], filename: str):
    """Persist categories so the next run starts from the user's edits."""
    with open(filename, 'w') as f:
        json.dump([c.model_dump(mode='json') for c in categories], f, indent=2, ensure_ascii=False)
    logger.info(f"💾 Saved {len(categories)} categories to {filename}")


def load_categories(filename: str) -> Optional[List[Category]]:
    """Re-hydrate Category models from JSON. None when missing or unreadable."""
    try:
        with open(filename, 'r') as f:
            data = json.load(f)
        categories = [Category(**item) for item in data]
        logger.info(f"📂 Loaded {len(categories)} categories from {filename}")
        return categories
    except (FileNotFoundError, json.JSONDecodeError):
        logger.warning(f"⚠️ Categories file {filename} not found or invalid. Falling back to presets.")
        return None
    except ValidationError as e:
        logger.error(f"❌ Invalid category data in {filename}: {e}")
        return None


def export_routine(routine: List[ScheduledActivity], filename: str):
    with open(filename, 'w') as f:
        json.dump([a.model_dump(mode='json') for a in routine], f, indent=2, ensure_ascii=False)
    logger.info(f"✅ Routine exported to {filename}")


def main():
    categories = load_categories(CATEGORIES_FILENAME)
    if not categories:
        categories = default_categories()
        save_categories(categories, CATEGORIES_FILENAME)

    rng = random.Random(int(SEED)) if SEED else random.Random()
    geocoder = GeminiGeocoder(api_key=API_KEY, city_hint=CITY_HINT) if API_KEY else MockGeocoder()

    scheduler = RoutineScheduler(filter_valid_categories(categories), rng=rng)
    try:
        routine = asyncio.run(generate_routine(categories, geocoder, scheduler=scheduler))
    except RoutineGenerationError as e:
        logger.error(f"❌ {e}")
        return 1

    print("\n" + "=" * 50)
    print("🗓️  TODAY'S ROUTINE")
    print("=" * 50)
    for activity in routine:
        where = f"({activity.coords.lat:.4f}, {activity.coords.lon:.4f})" if activity.coords else "(no coordinates)"
        print(f"{activity.start_time}-{activity.end_time}  {activity.category_name:<10} {activity.address} {where}")

    print("\n📊 STATISTICS")
    print(scheduler.state.get_statistics())

    report = scheduler.state.get_failure_report()
    if report:
        print("\n🔍 PARTIALLY SCHEDULED")
        for fail in report:
            print(f"❌ {fail['category_name']}: {fail['placed']}/{fail['requested']}")
            print(f"   Reason: {fail['latest_reason']}")

    export_routine(routine, EXPORT_FILENAME)
    return 0


if __name__ == "__main__":
    sys.exit(main())
