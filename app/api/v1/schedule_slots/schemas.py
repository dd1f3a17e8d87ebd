from typing import Optional

from pydantic import BaseModel, Field, StrictInt, field_validator

from app.core.enums import MAX_PERIOD, MIN_PERIOD, Weekday
from app.core.schemas import ScheduleSlotResponse, _check_grade, _check_section


class ConflictCheckRequest(BaseModel):
    """A prospective (grade, section) assignment at (day, period)."""
    grade: StrictInt
    section: StrictInt
    day: Weekday
    period: StrictInt = Field(..., ge=MIN_PERIOD, le=MAX_PERIOD)
    ignoreSlotId: Optional[str] = Field(None, description="Slot being edited; never reported as its own conflict")

    @field_validator("grade")
    @classmethod
    def grade_in_range(cls, v: int) -> int:
        return _check_grade(v)

    @field_validator("section")
    @classmethod
    def section_in_range(cls, v: int) -> int:
        return _check_section(v)


class ConflictReport(BaseModel):
    conflict: bool
    title: Optional[str] = None
    message: Optional[str] = None
    slot: Optional[ScheduleSlotResponse] = Field(None, description="The slot already holding this class at that time")
