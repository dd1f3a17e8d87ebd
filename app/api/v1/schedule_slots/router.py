from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status

from app.core.exceptions import unexpected_errors
from app.core.schemas import ScheduleSlotCreate, ScheduleSlotResponse, ScheduleSlotUpdate
from app.storage.base import ScheduleStorage
from app.storage.dependencies import get_storage

from .schemas import ConflictCheckRequest, ConflictReport
from . import service

router = APIRouter(tags=["schedule-slots"])


@router.get("/api/schedule-slots", response_model=List[ScheduleSlotResponse])
async def list_schedule_slots(storage: ScheduleStorage = Depends(get_storage)) -> List[ScheduleSlotResponse]:
    with unexpected_errors("fetch schedule slots"):
        return await service.list_slots(storage)


@router.post("/api/schedule-slots/conflicts", response_model=ConflictReport)
async def check_schedule_conflict(
    payload: ConflictCheckRequest,
    storage: ScheduleStorage = Depends(get_storage),
) -> ConflictReport:
    """Report whether the class already has a slot at that day/period. Advisory only; nothing is blocked."""
    with unexpected_errors("check schedule conflict"):
        return await service.check_conflict(storage, payload)


@router.get("/api/schedule-slots/{slot_id}", response_model=ScheduleSlotResponse)
async def get_schedule_slot(
    slot_id: str,
    storage: ScheduleStorage = Depends(get_storage),
) -> ScheduleSlotResponse:
    with unexpected_errors("fetch schedule slot"):
        return await service.get_slot(storage, slot_id)


@router.post(
    "/api/schedule-slots",
    response_model=ScheduleSlotResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_schedule_slot(
    payload: ScheduleSlotCreate,
    storage: ScheduleStorage = Depends(get_storage),
) -> ScheduleSlotResponse:
    with unexpected_errors("create schedule slot"):
        return await service.create_slot(storage, payload)


@router.patch("/api/schedule-slots/{slot_id}", response_model=ScheduleSlotResponse)
async def update_schedule_slot(
    slot_id: str,
    payload: ScheduleSlotUpdate,
    storage: ScheduleStorage = Depends(get_storage),
) -> ScheduleSlotResponse:
    with unexpected_errors("update schedule slot"):
        return await service.update_slot(storage, slot_id, payload)


@router.delete("/api/schedule-slots/{slot_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule_slot(
    slot_id: str,
    storage: ScheduleStorage = Depends(get_storage),
) -> Response:
    with unexpected_errors("delete schedule slot"):
        await service.delete_slot(storage, slot_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/api/teachers/{teacher_id}/schedule-slots", response_model=List[ScheduleSlotResponse])
async def list_teacher_schedule_slots(
    teacher_id: str,
    storage: ScheduleStorage = Depends(get_storage),
) -> List[ScheduleSlotResponse]:
    with unexpected_errors("fetch teacher schedule slots"):
        return await service.list_teacher_slots(storage, teacher_id)


@router.post(
    "/api/teachers/{teacher_id}/schedule-slots/batch",
    response_model=List[ScheduleSlotResponse],
    status_code=status.HTTP_201_CREATED,
)
async def replace_teacher_schedule_slots(
    teacher_id: str,
    body: Any = Body(None),
    storage: ScheduleStorage = Depends(get_storage),
) -> List[ScheduleSlotResponse]:
    """Replace the teacher's slots with body.slots. teacherId in each item is overwritten with the path id."""
    with unexpected_errors("batch create schedule slots"):
        return await service.replace_teacher_slots(storage, teacher_id, body)
