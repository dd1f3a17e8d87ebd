from app.core.models.schedule_slot import ScheduleSlot
from app.core.models.teacher import Teacher

__all__ = [
    "ScheduleSlot",
    "Teacher",
]
