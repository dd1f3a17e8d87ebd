from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.models import ScheduleSlot, Teacher
from app.core.schemas import (
    ScheduleSlotCreate,
    ScheduleSlotResponse,
    ScheduleSlotUpdate,
    TeacherCreate,
    TeacherResponse,
    TeacherUpdate,
)
from app.storage.base import ScheduleStorage

# API field name -> column attribute
_SLOT_FIELDS = {
    "teacherId": "teacher_id",
    "day": "day",
    "period": "period",
    "grade": "grade",
    "section": "section",
}


def _teacher_to_response(t: Teacher) -> TeacherResponse:
    return TeacherResponse.model_validate(t)


def _slot_to_response(s: ScheduleSlot) -> ScheduleSlotResponse:
    return ScheduleSlotResponse(
        id=s.id,
        teacherId=s.teacher_id,
        day=s.day,
        period=s.period,
        grade=s.grade,
        section=s.section,
    )


class SqlAlchemyStorage(ScheduleStorage):
    """Storage over an async SQLAlchemy session. Every mutation commits on its own."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_teachers(self) -> List[TeacherResponse]:
        result = await self.db.execute(select(Teacher).order_by(Teacher.created_at, Teacher.id))
        return [_teacher_to_response(t) for t in result.scalars().all()]

    async def get_teacher(self, teacher_id: str) -> Optional[TeacherResponse]:
        obj = await self.db.get(Teacher, teacher_id)
        return _teacher_to_response(obj) if obj else None

    async def create_teacher(self, payload: TeacherCreate) -> TeacherResponse:
        obj = Teacher(name=payload.name, subject=payload.subject)
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return _teacher_to_response(obj)

    async def update_teacher(self, teacher_id: str, payload: TeacherUpdate) -> Optional[TeacherResponse]:
        obj = await self.db.get(Teacher, teacher_id)
        if not obj:
            return None
        for key, value in payload.model_dump(exclude_unset=True).items():
            setattr(obj, key, value)
        await self.db.commit()
        await self.db.refresh(obj)
        return _teacher_to_response(obj)

    async def delete_teacher(self, teacher_id: str) -> bool:
        obj = await self.db.get(Teacher, teacher_id)
        if not obj:
            return False
        await self.db.delete(obj)
        await self.db.commit()
        return True

    async def list_slots(self) -> List[ScheduleSlotResponse]:
        result = await self.db.execute(select(ScheduleSlot).order_by(ScheduleSlot.created_at, ScheduleSlot.id))
        return [_slot_to_response(s) for s in result.scalars().all()]

    async def list_teacher_slots(self, teacher_id: str) -> List[ScheduleSlotResponse]:
        result = await self.db.execute(
            select(ScheduleSlot)
            .where(ScheduleSlot.teacher_id == teacher_id)
            .order_by(ScheduleSlot.created_at, ScheduleSlot.id)
        )
        return [_slot_to_response(s) for s in result.scalars().all()]

    async def get_slot(self, slot_id: str) -> Optional[ScheduleSlotResponse]:
        obj = await self.db.get(ScheduleSlot, slot_id)
        return _slot_to_response(obj) if obj else None

    async def create_slot(self, payload: ScheduleSlotCreate) -> ScheduleSlotResponse:
        obj = ScheduleSlot(
            teacher_id=payload.teacherId,
            day=payload.day.value,
            period=payload.period,
            grade=payload.grade,
            section=payload.section,
        )
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return _slot_to_response(obj)

    async def update_slot(self, slot_id: str, payload: ScheduleSlotUpdate) -> Optional[ScheduleSlotResponse]:
        obj = await self.db.get(ScheduleSlot, slot_id)
        if not obj:
            return None
        for key, value in payload.model_dump(exclude_unset=True, mode="json").items():
            setattr(obj, _SLOT_FIELDS[key], value)
        await self.db.commit()
        await self.db.refresh(obj)
        return _slot_to_response(obj)

    async def delete_slot(self, slot_id: str) -> bool:
        obj = await self.db.get(ScheduleSlot, slot_id)
        if not obj:
            return False
        await self.db.delete(obj)
        await self.db.commit()
        return True

    async def delete_teacher_slots(self, teacher_id: str) -> int:
        result = await self.db.execute(delete(ScheduleSlot).where(ScheduleSlot.teacher_id == teacher_id))
        await self.db.commit()
        return result.rowcount or 0
