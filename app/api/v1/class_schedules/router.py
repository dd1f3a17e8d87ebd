from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from app.core.exceptions import unexpected_errors
from app.core.schemas import ScheduleSlotResponse
from app.storage.base import ScheduleStorage
from app.storage.dependencies import get_storage

from .schemas import ClassScheduleOverview, ClassScheduleRow
from . import service

router = APIRouter(prefix="/api/class-schedules", tags=["class-schedules"])


@router.get("", response_model=List[ClassScheduleOverview])
async def list_class_schedules(storage: ScheduleStorage = Depends(get_storage)) -> List[ClassScheduleOverview]:
    """All classes (every grade/section) with their resolved slots, e.g. for an all-classes export."""
    with unexpected_errors("fetch class schedules"):
        return await service.list_class_schedules(storage)


@router.get("/{grade}/{section}", response_model=List[ClassScheduleRow])
async def get_class_schedule(
    grade: str,
    section: str,
    storage: ScheduleStorage = Depends(get_storage),
) -> List[ClassScheduleRow]:
    with unexpected_errors("fetch class schedule"):
        grade_no, section_no = service.parse_class(grade, section)
        return await service.get_class_schedule(storage, grade_no, section_no)


@router.post(
    "/{grade}/{section}",
    response_model=List[ScheduleSlotResponse],
    status_code=status.HTTP_201_CREATED,
)
async def save_class_schedule(
    grade: str,
    section: str,
    body: Any = Body(None),
    storage: ScheduleStorage = Depends(get_storage),
) -> List[ScheduleSlotResponse]:
    with unexpected_errors("save class schedule"):
        grade_no, section_no = service.parse_class(grade, section)
        return await service.save_class_schedule(storage, grade_no, section_no, body)
