import logging
from typing import List, Optional

from ..repositories.movie_repository import MovieRepository
from ..schemas.movie import Movie, MovieCreate, MovieUpdate

logger = logging.getLogger(__name__)

class MovieService:
    def __init__(self, movie_repo: MovieRepository):
        self.movie_repo = movie_repo

    async def list_movies(self) -> List[Movie]:
        return await self.movie_repo.list_all()

    async def get_movie(self, movie_id: int) -> Optional[Movie]:
        return await self.movie_repo.find_by_id(movie_id)

    async def get_movie_by_title(self, title: str) -> Optional[Movie]:
        return await self.movie_repo.find_by_title(title)

    async def get_movies_by_country(self, country: str) -> List[Movie]:
        return await self.movie_repo.find_by_country(country)

    async def create_movie(self, movie_data: MovieCreate) -> Optional[Movie]:
        """
        Persist a new movie, then check that it was actually stored.
        Returns None when the movie did not end up in the database.
        """
        movie = Movie(**movie_data.model_dump())
        await self.movie_repo.persist(movie)

        if not await self.movie_repo.is_persistent(movie):
            logger.warning("Movie was not persisted", extra={"movie_id": movie.id})
            return None

        logger.info("Movie created", extra={"movie_id": movie.id})
        return movie

    async def update_movie(self, movie_id: int, movie_data: MovieUpdate) -> Optional[Movie]:
        """
        Overwrite the fields present in movie_data on an existing movie.
        The id never changes. Returns None if there is no movie with movie_id.
        """
        movie = await self.movie_repo.find_by_id(movie_id)
        if movie is None:
            return None

        for field, value in movie_data.model_dump(exclude_unset=True).items():
            setattr(movie, field, value)

        # Deleted between the lookup and the write
        if not await self.movie_repo.update(movie):
            return None

        logger.info("Movie updated", extra={"movie_id": movie_id})
        return movie

    async def delete_movie(self, movie_id: int) -> bool:
        deleted = await self.movie_repo.delete_by_id(movie_id)
        if deleted:
            logger.info("Movie deleted", extra={"movie_id": movie_id})
        return deleted
