from pydantic import BaseModel, ConfigDict
from typing import Optional

class MovieBase(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    director: Optional[str] = None
    country: Optional[str] = None

class MovieCreate(MovieBase):
    """Body of POST /movies"""
    pass

class MovieUpdate(MovieBase):
    """Body of PUT /movies/{id}; only fields present in the body are applied"""
    pass

class Movie(MovieBase):
    """Movie as stored; id is assigned by the database on persist"""
    id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
