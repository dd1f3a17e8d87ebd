from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.storage.base import ScheduleStorage
from app.storage.database import SqlAlchemyStorage


async def get_storage(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> ScheduleStorage:
    """Storage for this request: the process-wide memory store if one was set up at startup, else the database."""
    memory: Optional[ScheduleStorage] = getattr(request.app.state, "memory_storage", None)
    if memory is not None:
        return memory
    return SqlAlchemyStorage(db)
