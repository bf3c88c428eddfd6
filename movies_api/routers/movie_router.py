from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from typing import List

from ..config import settings
from ..schemas.movie import Movie, MovieCreate, MovieUpdate
from ..dependencies import get_db_pool
from ..repositories.movie_repository import MovieRepository
from ..services.movie_service import MovieService
from ..limiter import limiter

router = APIRouter(prefix="/movies", tags=["movies"])

MOVIE_NOT_FOUND = "Movie not found"

async def get_movie_repository(db = Depends(get_db_pool)) -> MovieRepository:
    return MovieRepository(db)

async def get_movie_service(
    movie_repo: MovieRepository = Depends(get_movie_repository)
) -> MovieService:
    return MovieService(movie_repo)

@router.get("", response_model=List[Movie])
@limiter.limit(settings.RATE_LIMIT_READ)
async def get_all(
    request: Request,
    service: MovieService = Depends(get_movie_service)
):
    """List all movies"""
    return await service.list_movies()

@router.get("/title/{title:path}", response_model=Movie)
@limiter.limit(settings.RATE_LIMIT_READ)
async def get_by_title(
    title: str,
    request: Request,
    service: MovieService = Depends(get_movie_service)
):
    """Get the movie with exactly this title; slashes in the title are kept"""
    movie = await service.get_movie_by_title(title)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return movie

@router.get("/country/{country}", response_model=List[Movie])
@limiter.limit(settings.RATE_LIMIT_READ)
async def get_by_country(
    country: str,
    request: Request,
    service: MovieService = Depends(get_movie_service)
):
    """
    Get movies from a country.
    An unknown country is not an error: the list is just empty.
    """
    return await service.get_movies_by_country(country)

@router.get("/{movie_id}", response_model=Movie)
@limiter.limit(settings.RATE_LIMIT_READ)
async def get_by_id(
    movie_id: int,
    request: Request,
    service: MovieService = Depends(get_movie_service)
):
    """Get a movie by id"""
    movie = await service.get_movie(movie_id)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return movie

@router.post("", response_model=Movie, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def create(
    movie_data: MovieCreate,
    request: Request,
    response: Response,
    service: MovieService = Depends(get_movie_service)
):
    """Create a movie; Location points at the new resource"""
    movie = await service.create_movie(movie_data)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Movie could not be persisted")
    response.headers["Location"] = f"{router.prefix}/{movie.id}"
    return movie

@router.put("/{movie_id}", response_model=Movie)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def update_by_id(
    movie_id: int,
    movie_data: MovieUpdate,
    request: Request,
    service: MovieService = Depends(get_movie_service)
):
    """Update the given fields of a movie"""
    movie = await service.update_movie(movie_id, movie_data)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return movie

@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def delete_by_id(
    movie_id: int,
    request: Request,
    service: MovieService = Depends(get_movie_service)
):
    """Delete a movie"""
    if not await service.delete_movie(movie_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
