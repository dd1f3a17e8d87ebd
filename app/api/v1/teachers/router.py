from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.core.exceptions import unexpected_errors
from app.core.schemas import TeacherCreate, TeacherResponse, TeacherUpdate
from app.storage.base import ScheduleStorage
from app.storage.dependencies import get_storage

from . import service

router = APIRouter(prefix="/api/teachers", tags=["teachers"])


@router.get("", response_model=List[TeacherResponse])
async def list_teachers(storage: ScheduleStorage = Depends(get_storage)) -> List[TeacherResponse]:
    with unexpected_errors("fetch teachers"):
        return await service.list_teachers(storage)


@router.get("/{teacher_id}", response_model=TeacherResponse)
async def get_teacher(
    teacher_id: str,
    storage: ScheduleStorage = Depends(get_storage),
) -> TeacherResponse:
    with unexpected_errors("fetch teacher"):
        return await service.get_teacher(storage, teacher_id)


@router.post("", response_model=TeacherResponse, status_code=status.HTTP_201_CREATED)
async def create_teacher(
    payload: TeacherCreate,
    storage: ScheduleStorage = Depends(get_storage),
) -> TeacherResponse:
    with unexpected_errors("create teacher"):
        return await service.create_teacher(storage, payload)


@router.patch("/{teacher_id}", response_model=TeacherResponse)
async def update_teacher(
    teacher_id: str,
    payload: TeacherUpdate,
    storage: ScheduleStorage = Depends(get_storage),
) -> TeacherResponse:
    with unexpected_errors("update teacher"):
        return await service.update_teacher(storage, teacher_id, payload)


@router.delete("/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_teacher(
    teacher_id: str,
    storage: ScheduleStorage = Depends(get_storage),
) -> Response:
    with unexpected_errors("delete teacher"):
        await service.delete_teacher(storage, teacher_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
