import logging
from typing import List

from app.core.exceptions import NotFoundError
from app.core.schemas import TeacherCreate, TeacherResponse, TeacherUpdate
from app.storage.base import ScheduleStorage

logger = logging.getLogger(__name__)


async def list_teachers(storage: ScheduleStorage) -> List[TeacherResponse]:
    return await storage.list_teachers()


async def get_teacher(storage: ScheduleStorage, teacher_id: str) -> TeacherResponse:
    obj = await storage.get_teacher(teacher_id)
    if not obj:
        raise NotFoundError("Teacher")
    return obj


async def create_teacher(storage: ScheduleStorage, payload: TeacherCreate) -> TeacherResponse:
    obj = await storage.create_teacher(payload)
    logger.info("step=teacher.create id=%s", obj.id)
    return obj


async def update_teacher(storage: ScheduleStorage, teacher_id: str, payload: TeacherUpdate) -> TeacherResponse:
    obj = await storage.update_teacher(teacher_id, payload)
    if not obj:
        raise NotFoundError("Teacher")
    return obj


async def delete_teacher(storage: ScheduleStorage, teacher_id: str) -> None:
    """Remove the teacher only; its schedule slots stay and resolve as "Unknown" when read."""
    if not await storage.delete_teacher(teacher_id):
        raise NotFoundError("Teacher")
    logger.info("step=teacher.delete id=%s", teacher_id)
