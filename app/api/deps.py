"""FastAPI dependencies for dependency injection.

Provides:
- Request-scoped database session (commit on success, rollback on error)
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infra.database import get_db_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for the current request.

    Yields:
        AsyncSession committed when the request handler returns normally
    """
    async with get_db_session() as session:
        yield session


# Type aliases for cleaner annotations
DbSession = Annotated[AsyncSession, Depends(get_db)]
