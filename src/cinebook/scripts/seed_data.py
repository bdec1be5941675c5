"""Seed script to populate a demo theater, hall and movie."""

import asyncio
import logging

from cinebook.database import AsyncSessionLocal
from cinebook.models.hall import Hall
from cinebook.models.movie import Movie
from cinebook.models.theater import Theater

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)

DEMO_THEATER = {
    "id": "grand-rex",
    "name": "Le Grand Rex",
    "address": "1 Boulevard Poissonniere",
    "postal_code": "75002",
    "city": "paris",
    "phone": "+33 1 45 08 93 89",
    "email": "contact@grandrex.example",
}

# Row letters, seat numbers; 0 marks the centre aisle
DEMO_LAYOUT = [
    [f"{row}{n}" for n in range(1, 5)] + [0] + [f"{row}{n}" for n in range(5, 9)]
    for row in "ABCDEF"
]

DEMO_MOVIE = {
    "id": "00000000-0000-4000-8000-000000000001",
    "title": "Metropolis",
    "description": "A futuristic city sharply divided between workers and planners.",
    "genre": "Science Fiction",
    "director": "Fritz Lang",
    "age_rating": "PG",
    "duration_minutes": 153,
}


async def seed_data() -> None:
    """Insert the demo rows that are not already present."""
    async with AsyncSessionLocal() as session:
        if await session.get(Theater, DEMO_THEATER["id"]):
            logger.info(f"Theater {DEMO_THEATER['id']} already exists, skipping")
        else:
            session.add(Theater(**DEMO_THEATER))
            logger.info(f"Added theater: {DEMO_THEATER['name']}")

        if await session.get(Hall, (DEMO_THEATER["id"], "1")):
            logger.info("Hall 1 already exists, skipping")
        else:
            session.add(Hall(theater_id=DEMO_THEATER["id"], hall_id="1", seats_layout=DEMO_LAYOUT))
            logger.info("Added hall 1")

        if await session.get(Movie, DEMO_MOVIE["id"]):
            logger.info(f"Movie {DEMO_MOVIE['title']} already exists, skipping")
        else:
            session.add(Movie(**DEMO_MOVIE))
            logger.info(f"Added movie: {DEMO_MOVIE['title']}")

        await session.commit()


if __name__ == "__main__":
    asyncio.run(seed_data())
