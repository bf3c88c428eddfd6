
import pytest
from unittest.mock import AsyncMock

from movies_api.dependencies import create_schema
from movies_api.models.movie import movies_table_ddl

def test_movies_table_ddl():
    ddl = movies_table_ddl()

    assert "CREATE TABLE IF NOT EXISTS movies" in ddl
    assert "id SERIAL NOT NULL" in ddl
    assert "PRIMARY KEY (id)" in ddl
    for column in ("title", "description", "director", "country"):
        assert column in ddl

@pytest.mark.asyncio
async def test_create_schema_runs_ddl():
    conn = AsyncMock()

    await create_schema(conn)

    conn.execute.assert_awaited_once_with(movies_table_ddl())
