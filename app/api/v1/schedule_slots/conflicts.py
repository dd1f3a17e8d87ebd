"""Advisory double-booking check for a class at a given day/period.

Nothing calls this on the write path: duplicates are allowed in storage and the
check only produces a warning for the schedule editor.
"""

from typing import Iterable, Optional

from app.core.schemas import ScheduleSlotResponse

CONFLICT_TITLE = "تعارض في الجدول"


def find_conflict(
    slots: Iterable[ScheduleSlotResponse],
    grade: int,
    section: int,
    day: str,
    period: int,
    ignore_slot_id: Optional[str] = None,
) -> Optional[ScheduleSlotResponse]:
    """First slot already placing (grade, section) at (day, period), skipping ``ignore_slot_id``."""
    for slot in slots:
        if ignore_slot_id is not None and slot.id == ignore_slot_id:
            continue
        if (
            slot.grade == grade
            and slot.section == section
            and slot.day == day
            and slot.period == period
        ):
            return slot
    return None


def conflict_message(grade: int, section: int, day: str, period: int) -> str:
    return f"يوجد بالفعل حصة للصف {grade}/{section} في {day} الحصة {period}"
