import logging
from typing import Any, Dict, List, Tuple

from app.api.v1.schedule_slots.service import create_slots, slots_from_body, validate_slot_items
from app.core.enums import GRADES, SECTIONS, day_ordinal
from app.core.exceptions import InvalidDataError
from app.core.schemas import ScheduleSlotResponse, TeacherResponse
from app.storage.base import ScheduleStorage

from .schemas import ClassScheduleOverview, ClassScheduleRow

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


def parse_class(grade: str, section: str) -> Tuple[int, int]:
    try:
        return int(grade), int(section)
    except (TypeError, ValueError):
        raise InvalidDataError("Invalid grade or section")


def build_rows(
    slots: List[ScheduleSlotResponse],
    teachers: Dict[str, TeacherResponse],
    grade: int,
    section: int,
) -> List[ClassScheduleRow]:
    rows = []
    for slot in slots:
        if slot.grade != grade or slot.section != section:
            continue
        teacher = teachers.get(slot.teacherId)
        rows.append(
            ClassScheduleRow(
                day=slot.day,
                period=slot.period,
                subject=teacher.subject if teacher else UNKNOWN,
                teacherName=teacher.name if teacher else UNKNOWN,
            )
        )
    rows.sort(key=lambda r: (day_ordinal(r.day), r.period))
    return rows


async def get_class_schedule(storage: ScheduleStorage, grade: int, section: int) -> List[ClassScheduleRow]:
    slots = await storage.list_slots()
    teachers = {t.id: t for t in await storage.list_teachers()}
    return build_rows(slots, teachers, grade, section)


async def list_class_schedules(storage: ScheduleStorage) -> List[ClassScheduleOverview]:
    """Every grade/section, in GRADES x SECTIONS order, including classes with no slots."""
    slots = await storage.list_slots()
    teachers = {t.id: t for t in await storage.list_teachers()}
    return [
        ClassScheduleOverview(grade=g, section=s, slots=build_rows(slots, teachers, g, s))
        for g in GRADES
        for s in SECTIONS
    ]


async def save_class_schedule(
    storage: ScheduleStorage,
    grade: int,
    section: int,
    body: Any,
) -> List[ScheduleSlotResponse]:
    """
    Replace every slot of (grade, section) with body.slots; grade/section in each item are
    overwritten with the path values. Same non-transactional delete-then-create as the teacher batch.
    """
    payloads = validate_slot_items(slots_from_body(body), grade=grade, section=section)
    existing = [s for s in await storage.list_slots() if s.grade == grade and s.section == section]
    for slot in existing:
        await storage.delete_slot(slot.id)
    created = await create_slots(storage, payloads)
    logger.info(
        "step=class_schedule.save grade=%s section=%s removed=%s created=%s",
        grade, section, len(existing), len(created),
    )
    return created
