
import asyncio
import logging

import asyncpg

from .config import settings
from .dependencies import create_schema
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

# Sample Data; FirstMovie/Planet is the fixture the API smoke tests expect
MOVIES = [
    {
        "title": "FirstMovie",
        "description": "The first movie ever stored in this catalogue.",
        "director": "First Director",
        "country": "Planet"
    },
    {
        "title": "Central Station",
        "description": "A former schoolteacher who writes letters for illiterate people helps a young boy search for his father.",
        "director": "Walter Salles",
        "country": "Brazil"
    },
    {
        "title": "City of God",
        "description": "In the slums of Rio, two kids' paths diverge as one struggles to become a photographer and the other a kingpin.",
        "director": "Fernando Meirelles",
        "country": "Brazil"
    },
    {
        "title": "Parasite",
        "description": "Greed and class discrimination threaten the newly formed symbiotic relationship between the wealthy Park family and the destitute Kim clan.",
        "director": "Bong Joon Ho",
        "country": "South Korea"
    },
    {
        "title": "Amelie",
        "description": "Amelie is an innocent and naive girl in Paris with her own sense of justice who decides to help those around her.",
        "director": "Jean-Pierre Jeunet",
        "country": "France"
    },
    {
        "title": "Spirited Away",
        "description": "During her family's move to the suburbs, a sullen 10-year-old girl wanders into a world ruled by gods, witches, and spirits.",
        "director": "Hayao Miyazaki",
        "country": "Japan"
    }
]

async def seed_data():
    logger.info("Starting data seeding")

    conn = await asyncpg.connect(settings.DATABASE_URL)
    try:
        await create_schema(conn)

        existing = await conn.fetchval("SELECT COUNT(*) FROM movies")
        if existing:
            logger.info(f"Table already holds {existing} movies, skipping seed")
            return

        await conn.executemany(
            """
            INSERT INTO movies (title, description, director, country)
            VALUES ($1, $2, $3, $4)
            """,
            [
                (movie["title"], movie["description"], movie["director"], movie["country"])
                for movie in MOVIES
            ]
        )
        logger.info(f"Inserted {len(MOVIES)} movies")
    finally:
        await conn.close()

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(seed_data())
