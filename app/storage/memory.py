import uuid
from typing import Dict, List, Optional

from app.core.schemas import (
    ScheduleSlotCreate,
    ScheduleSlotResponse,
    ScheduleSlotUpdate,
    TeacherCreate,
    TeacherResponse,
    TeacherUpdate,
)
from app.storage.base import ScheduleStorage


class MemoryStorage(ScheduleStorage):
    """Process-local storage keyed by id, in insertion order.

    Methods never await while mutating, so the event loop serializes them.
    Records are copied on the way in and out.
    """

    def __init__(self) -> None:
        self._teachers: Dict[str, TeacherResponse] = {}
        self._slots: Dict[str, ScheduleSlotResponse] = {}

    async def list_teachers(self) -> List[TeacherResponse]:
        return [t.model_copy() for t in self._teachers.values()]

    async def get_teacher(self, teacher_id: str) -> Optional[TeacherResponse]:
        obj = self._teachers.get(teacher_id)
        return obj.model_copy() if obj else None

    async def create_teacher(self, payload: TeacherCreate) -> TeacherResponse:
        obj = TeacherResponse(id=str(uuid.uuid4()), **payload.model_dump())
        self._teachers[obj.id] = obj
        return obj.model_copy()

    async def update_teacher(self, teacher_id: str, payload: TeacherUpdate) -> Optional[TeacherResponse]:
        obj = self._teachers.get(teacher_id)
        if not obj:
            return None
        obj = obj.model_copy(update=payload.model_dump(exclude_unset=True))
        self._teachers[teacher_id] = obj
        return obj.model_copy()

    async def delete_teacher(self, teacher_id: str) -> bool:
        return self._teachers.pop(teacher_id, None) is not None

    async def list_slots(self) -> List[ScheduleSlotResponse]:
        return [s.model_copy() for s in self._slots.values()]

    async def list_teacher_slots(self, teacher_id: str) -> List[ScheduleSlotResponse]:
        return [s.model_copy() for s in self._slots.values() if s.teacherId == teacher_id]

    async def get_slot(self, slot_id: str) -> Optional[ScheduleSlotResponse]:
        obj = self._slots.get(slot_id)
        return obj.model_copy() if obj else None

    async def create_slot(self, payload: ScheduleSlotCreate) -> ScheduleSlotResponse:
        obj = ScheduleSlotResponse(id=str(uuid.uuid4()), **payload.model_dump())
        self._slots[obj.id] = obj
        return obj.model_copy()

    async def update_slot(self, slot_id: str, payload: ScheduleSlotUpdate) -> Optional[ScheduleSlotResponse]:
        obj = self._slots.get(slot_id)
        if not obj:
            return None
        obj = obj.model_copy(update=payload.model_dump(exclude_unset=True))
        self._slots[slot_id] = obj
        return obj.model_copy()

    async def delete_slot(self, slot_id: str) -> bool:
        return self._slots.pop(slot_id, None) is not None

    async def delete_teacher_slots(self, teacher_id: str) -> int:
        doomed = [slot_id for slot_id, s in self._slots.items() if s.teacherId == teacher_id]
        for slot_id in doomed:
            del self._slots[slot_id]
        return len(doomed)
