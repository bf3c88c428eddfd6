
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from typing import Dict, List, Optional
from unittest.mock import AsyncMock

from movies_api.dependencies import get_db_pool
from movies_api.main import app
from movies_api.limiter import limiter
from movies_api.repositories.movie_repository import MovieRepository
from movies_api.routers.movie_router import get_movie_repository
from movies_api.schemas.movie import Movie


class InMemoryMovieRepository:
    """Same operations as MovieRepository, backed by a dict"""

    def __init__(self):
        self.rows: Dict[int, Movie] = {}
        self._next_id = 1

    async def find_by_country(self, country: str) -> List[Movie]:
        return [m.model_copy() for m in self.rows.values() if m.country == country]

    async def list_all(self) -> List[Movie]:
        return [m.model_copy() for m in self.rows.values()]

    async def find_by_id(self, movie_id: int) -> Optional[Movie]:
        movie = self.rows.get(movie_id)
        return movie.model_copy() if movie else None

    async def find_by_title(self, title: str) -> Optional[Movie]:
        matches = [m for m in self.rows.values() if m.title == title]
        return matches[0].model_copy() if len(matches) == 1 else None

    async def persist(self, movie: Movie) -> None:
        movie.id = self._next_id
        self._next_id += 1
        self.rows[movie.id] = movie.model_copy()

    async def is_persistent(self, movie: Movie) -> bool:
        return movie.id is not None and movie.id in self.rows

    async def update(self, movie: Movie) -> bool:
        if movie.id not in self.rows:
            return False
        self.rows[movie.id] = movie.model_copy()
        return True

    async def delete_by_id(self, movie_id: int) -> bool:
        return self.rows.pop(movie_id, None) is not None


@pytest.fixture
def mock_db_pool():
    pool = AsyncMock()
    # Mock connection context manager
    conn = AsyncMock()
    pool.acquire.return_value.__aenter__.return_value = conn
    return pool

@pytest.fixture
def movie_repo():
    return InMemoryMovieRepository()

@pytest.fixture
def mock_movie_repo():
    return AsyncMock(spec=MovieRepository)

async def _client_for(overrides):
    app.dependency_overrides.update(overrides)

    transport = ASGITransport(app=app)
    limiter.enabled = False
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    limiter.enabled = True

    app.dependency_overrides = {}

@pytest_asyncio.fixture
async def client(movie_repo):
    async for ac in _client_for({get_movie_repository: lambda: movie_repo}):
        yield ac

@pytest_asyncio.fixture
async def mock_client(mock_movie_repo):
    async for ac in _client_for({get_movie_repository: lambda: mock_movie_repo}):
        yield ac

@pytest_asyncio.fixture
async def db_client(mock_db_pool):
    # Real MovieRepository on top of a mocked asyncpg pool
    async for ac in _client_for({get_db_pool: lambda: mock_db_pool}):
        yield ac
