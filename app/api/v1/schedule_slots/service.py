import logging
from typing import Any, List

from app.core.exceptions import InvalidDataError, NotFoundError
from app.core.schemas import ScheduleSlotCreate, ScheduleSlotResponse, ScheduleSlotUpdate
from app.core.validation import validate_payload
from app.storage.base import ScheduleStorage

from .conflicts import CONFLICT_TITLE, conflict_message, find_conflict
from .schemas import ConflictCheckRequest, ConflictReport

logger = logging.getLogger(__name__)


def slots_from_body(body: Any) -> List[Any]:
    """The ``slots`` array of a ``{"slots": [...]}`` body."""
    slots = body.get("slots") if isinstance(body, dict) else None
    if not isinstance(slots, list):
        raise InvalidDataError("Slots must be an array")
    return slots


def validate_slot_items(items: List[Any], **overrides: Any) -> List[ScheduleSlotCreate]:
    """Validate every item with ``overrides`` stamped over it. Fails on the first invalid item, before any write."""
    validated = []
    for index, item in enumerate(items):
        data = {**item, **overrides} if isinstance(item, dict) else item
        result = validate_payload(ScheduleSlotCreate, data, loc_prefix=("slots", index))
        if not result.ok:
            raise InvalidDataError(details=result.details)
        validated.append(result.value)
    return validated


async def create_slots(storage: ScheduleStorage, payloads: List[ScheduleSlotCreate]) -> List[ScheduleSlotResponse]:
    created = []
    for payload in payloads:
        created.append(await storage.create_slot(payload))
    return created


async def list_slots(storage: ScheduleStorage) -> List[ScheduleSlotResponse]:
    return await storage.list_slots()


async def list_teacher_slots(storage: ScheduleStorage, teacher_id: str) -> List[ScheduleSlotResponse]:
    return await storage.list_teacher_slots(teacher_id)


async def get_slot(storage: ScheduleStorage, slot_id: str) -> ScheduleSlotResponse:
    obj = await storage.get_slot(slot_id)
    if not obj:
        raise NotFoundError("Schedule slot")
    return obj


async def create_slot(storage: ScheduleStorage, payload: ScheduleSlotCreate) -> ScheduleSlotResponse:
    return await storage.create_slot(payload)


async def update_slot(storage: ScheduleStorage, slot_id: str, payload: ScheduleSlotUpdate) -> ScheduleSlotResponse:
    obj = await storage.update_slot(slot_id, payload)
    if not obj:
        raise NotFoundError("Schedule slot")
    return obj


async def delete_slot(storage: ScheduleStorage, slot_id: str) -> None:
    if not await storage.delete_slot(slot_id):
        raise NotFoundError("Schedule slot")


async def replace_teacher_slots(storage: ScheduleStorage, teacher_id: str, body: Any) -> List[ScheduleSlotResponse]:
    """
    Replace a teacher's whole slot set: delete all, then create each payload with teacherId forced to teacher_id.
    Payloads are validated up front. Not transactional: a storage failure part-way leaves the
    deletes and earlier creates in place, and concurrent calls for one teacher can interleave.
    """
    payloads = validate_slot_items(slots_from_body(body), teacherId=teacher_id)
    removed = await storage.delete_teacher_slots(teacher_id)
    created = await create_slots(storage, payloads)
    logger.info(
        "step=teacher_slots.replace teacher_id=%s removed=%s created=%s",
        teacher_id, removed, len(created),
    )
    return created


async def check_conflict(storage: ScheduleStorage, payload: ConflictCheckRequest) -> ConflictReport:
    existing = find_conflict(
        await storage.list_slots(),
        payload.grade,
        payload.section,
        payload.day,
        payload.period,
        ignore_slot_id=payload.ignoreSlotId,
    )
    if existing is None:
        return ConflictReport(conflict=False)
    return ConflictReport(
        conflict=True,
        title=CONFLICT_TITLE,
        message=conflict_message(payload.grade, payload.section, payload.day.value, payload.period),
        slot=existing,
    )
