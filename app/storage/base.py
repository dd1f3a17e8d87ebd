"""Storage interface for teachers and schedule slots.

Each call is independent: there is no transaction spanning several calls, so
multi-step operations built on top (batch replacement) are not atomic.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.core.schemas import (
    ScheduleSlotCreate,
    ScheduleSlotResponse,
    ScheduleSlotUpdate,
    TeacherCreate,
    TeacherResponse,
    TeacherUpdate,
)


class ScheduleStorage(ABC):
    # Teachers

    @abstractmethod
    async def list_teachers(self) -> List[TeacherResponse]: ...

    @abstractmethod
    async def get_teacher(self, teacher_id: str) -> Optional[TeacherResponse]: ...

    @abstractmethod
    async def create_teacher(self, payload: TeacherCreate) -> TeacherResponse: ...

    @abstractmethod
    async def update_teacher(self, teacher_id: str, payload: TeacherUpdate) -> Optional[TeacherResponse]:
        """Apply only the fields set on ``payload``. None when the teacher does not exist."""

    @abstractmethod
    async def delete_teacher(self, teacher_id: str) -> bool: ...

    # Schedule slots

    @abstractmethod
    async def list_slots(self) -> List[ScheduleSlotResponse]: ...

    @abstractmethod
    async def list_teacher_slots(self, teacher_id: str) -> List[ScheduleSlotResponse]: ...

    @abstractmethod
    async def get_slot(self, slot_id: str) -> Optional[ScheduleSlotResponse]: ...

    @abstractmethod
    async def create_slot(self, payload: ScheduleSlotCreate) -> ScheduleSlotResponse: ...

    @abstractmethod
    async def update_slot(self, slot_id: str, payload: ScheduleSlotUpdate) -> Optional[ScheduleSlotResponse]: ...

    @abstractmethod
    async def delete_slot(self, slot_id: str) -> bool: ...

    @abstractmethod
    async def delete_teacher_slots(self, teacher_id: str) -> int:
        """Remove every slot of a teacher; returns how many were removed."""
