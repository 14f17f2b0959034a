import asyncio
import logging
from datetime import date
from bookstore.core.config import settings
from bookstore.core.logging import setup_logging
from bookstore.db.models.scheme import Book, Magazine
from bookstore.db.session import Database

logger = logging.getLogger(__name__)

SAMPLE_BOOKS = [
    {"title": "The Left Hand of Darkness", "author": "Ursula K. Le Guin", "isbn": "9780441478125", "publish_date": date(1969, 3, 1)},
    {"title": "The Dispossessed", "author": "Ursula K. Le Guin", "isbn": "9780060512750", "publish_date": date(1974, 5, 1)},
    {"title": "A Wizard of Earthsea", "author": "Ursula K. Le Guin", "isbn": "9780547722023", "publish_date": date(1968, 11, 1)},
    {"title": "Kindred", "author": "Octavia E. Butler", "isbn": "9780807083697", "publish_date": date(1979, 6, 1)},
    {"title": "Parable of the Sower", "author": "Octavia E. Butler", "isbn": "9780446675505", "publish_date": date(1993, 10, 1)},
    {"title": "Beowulf", "author": None, "isbn": "9780393320978", "publish_date": date(2000, 1, 1)},
]

SAMPLE_MAGAZINES = [
    {"title": "Amazing Stories", "author": "Octavia E. Butler", "isbn": "0002-6689", "publish_date": date(1987, 4, 1), "issue": "61"},
    {"title": "Asimov's Science Fiction", "author": "Connie Willis", "isbn": "1065-2698", "publish_date": date(1982, 1, 1), "issue": "48"},
    {"title": "Asimov's Science Fiction", "author": "Connie Willis", "isbn": "1065-2698", "publish_date": date(1988, 7, 1), "issue": "133"},
    {"title": "Galaxy", "author": None, "isbn": "0016-4003", "publish_date": date(1955, 2, 1), "issue": "9"},
]


async def seed_catalog(database: Database) -> None:
    async with database.session() as session:
        session.add_all([Book(**book) for book in SAMPLE_BOOKS])
        session.add_all([Magazine(**magazine) for magazine in SAMPLE_MAGAZINES])
        await session.commit()
    logger.info(f"Seeded {len(SAMPLE_BOOKS)} books and {len(SAMPLE_MAGAZINES)} magazines")


async def main():
    database = Database.from_settings(settings)
    try:
        await database.init()
        await seed_catalog(database)
    finally:
        await database.dispose()


if __name__ == "__main__":
    setup_logging("bookstore", level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)
    asyncio.run(main())
