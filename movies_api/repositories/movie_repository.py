import functools
import logging
from typing import List, Optional

import asyncpg
from asyncpg import Pool

from ..exceptions import DatastoreFault
from ..models.movie import MAX_MOVIE_ID
from ..schemas.movie import Movie

logger = logging.getLogger(__name__)

MOVIE_COLUMNS = "id, title, description, director, country"

# Errors raised by the driver when the database is unreachable or rejects a statement
DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def storable_id(movie_id: Optional[int]) -> bool:
    return movie_id is not None and 1 <= movie_id <= MAX_MOVIE_ID


def translate_faults(func):
    """Re-raise driver errors as DatastoreFault; absence is never an error here."""
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except DRIVER_ERRORS as e:
            raise DatastoreFault(f"{func.__name__} failed: {e}") from e
    return wrapper


class MovieRepository:
    def __init__(self, db: Pool):
        self.db = db

    @translate_faults
    async def find_by_country(self, country: str) -> List[Movie]:
        """All movies whose country equals the argument exactly (case-sensitive)"""
        query = f"""
            SELECT {MOVIE_COLUMNS}
            FROM movies
            WHERE country = $1
            ORDER BY id
        """
        rows = await self.db.fetch(query, country)
        return [Movie.model_validate(dict(row)) for row in rows]

    @translate_faults
    async def list_all(self) -> List[Movie]:
        query = f"SELECT {MOVIE_COLUMNS} FROM movies ORDER BY id"
        rows = await self.db.fetch(query)
        return [Movie.model_validate(dict(row)) for row in rows]

    @translate_faults
    async def find_by_id(self, movie_id: int) -> Optional[Movie]:
        if not storable_id(movie_id):
            return None
        query = f"SELECT {MOVIE_COLUMNS} FROM movies WHERE id = $1"
        row = await self.db.fetchrow(query, movie_id)
        return Movie.model_validate(dict(row)) if row else None

    @translate_faults
    async def find_by_title(self, title: str) -> Optional[Movie]:
        """
        Single movie with exactly this title.
        Titles are not unique; when several rows match there is no single
        result and None is returned, same as for no match.
        """
        query = f"""
            SELECT {MOVIE_COLUMNS}
            FROM movies
            WHERE title = $1
            ORDER BY id
            LIMIT 2
        """
        rows = await self.db.fetch(query, title)
        if len(rows) > 1:
            logger.warning("Title lookup matched more than one movie", extra={"detail": title})
            return None
        return Movie.model_validate(dict(rows[0])) if rows else None

    @translate_faults
    async def persist(self, movie: Movie) -> None:
        """Insert the movie and set the id assigned by the database on it"""
        query = """
            INSERT INTO movies (title, description, director, country)
            VALUES ($1, $2, $3, $4)
            RETURNING id
        """
        movie.id = await self.db.fetchval(
            query,
            movie.title,
            movie.description,
            movie.director,
            movie.country
        )

    @translate_faults
    async def is_persistent(self, movie: Movie) -> bool:
        if not storable_id(movie.id):
            return False
        query = "SELECT EXISTS(SELECT 1 FROM movies WHERE id = $1)"
        return bool(await self.db.fetchval(query, movie.id))

    @translate_faults
    async def update(self, movie: Movie) -> bool:
        if not storable_id(movie.id):
            return False
        query = """
            UPDATE movies
            SET title = $2, description = $3, director = $4, country = $5
            WHERE id = $1
            RETURNING id
        """
        updated_id = await self.db.fetchval(
            query,
            movie.id,
            movie.title,
            movie.description,
            movie.director,
            movie.country
        )
        return updated_id is not None

    @translate_faults
    async def delete_by_id(self, movie_id: int) -> bool:
        if not storable_id(movie_id):
            return False
        query = "DELETE FROM movies WHERE id = $1 RETURNING id"
        deleted_id = await self.db.fetchval(query, movie_id)
        return deleted_id is not None
