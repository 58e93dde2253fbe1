import logging
import os
import random
import sys
import time
from datetime import datetime

from src.db import repository
from src.db.database import Store
from src.models.campground import CampgroundIn
from src.seeds.cities import cities
from src.seeds.seed_helpers import descriptors, places

logger = logging.getLogger(__name__)

SEED_COUNT = 50
MIN_PRICE = 10
MAX_PRICE = 29
IMAGE_URL = "https://source.unsplash.com/random/?camping"
DESCRIPTION = "lorem ipsum dolor sit amet consectetur adipisicing elit. Quisquam, quos"


def sample(items, rng=random):
    return items[rng.randrange(len(items))]


def make_campground(rng=random):
    """Build one random, validated campground."""
    city = sample(cities, rng)
    return CampgroundIn(
        title=f"{sample(descriptors, rng)} {sample(places, rng)}",
        location=f"{city['city']}, {city['state']}",
        image=IMAGE_URL,
        description=DESCRIPTION,
        price=rng.randint(MIN_PRICE, MAX_PRICE),
    )


def seed_db(store, count=SEED_COUNT, rng=random):
    """
    Empty the database and insert `count` generated campgrounds.

    Args:
        store: An open Store
        count: Number of campgrounds to create
        rng: Source of randomness, replaceable for repeatable runs

    Returns:
        Number of campgrounds inserted
    """
    db = store.session()
    try:
        repository.delete_all(db)

        for i in range(count):
            repository.create_campground(db, make_campground(rng))
            if (i + 1) % 10 == 0:
                logger.info(f"Seeding: {i + 1}/{count}")
    finally:
        db.close()

    return count


def configure_logging():
    # Create logs directory
    logs_dir = os.path.join(os.getcwd(), 'logs')
    os.makedirs(logs_dir, exist_ok=True)

    # Create log file with today's date
    log_filename = os.path.join(logs_dir, f'seed_{datetime.now().strftime("%Y%m%d")}.log')

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_filename),
            logging.StreamHandler()
        ]
    )


def main(url=None):
    configure_logging()

    store = Store(url) if url else Store()
    start_time = time.time()
    try:
        store.open()
        inserted = seed_db(store)
        logger.info(f"Seed completed: {inserted} campgrounds in {time.time() - start_time:.2f} seconds")
        return 0
    except Exception as e:
        logger.error(f"Seeding failed: {str(e)}", exc_info=True)
        return 1
    finally:
        # Close the connection so the script exits on its own
        store.close()


if __name__ == "__main__":
    sys.exit(main())
