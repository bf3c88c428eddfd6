from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import CreateTable

Base = declarative_base()

# id is SERIAL (int4); larger ids cannot exist in the table
MAX_MOVIE_ID = 2**31 - 1

class MovieDB(Base):
    """
    ORM Model - Mapping 1-1 with table 'movies' in Postgres
    """
    __tablename__ = 'movies'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255))
    description = Column(Text)
    director = Column(String(255))
    country = Column(String(100))


def movies_table_ddl() -> str:
    """CREATE TABLE statement for the movies table, rendered for PostgreSQL."""
    statement = CreateTable(MovieDB.__table__, if_not_exists=True)
    return str(statement.compile(dialect=postgresql.dialect()))
