"""Teacher and schedule slot schemas (camelCase for frontend).

Create models carry every required field; Update models accept any subset of
fields but reject an explicit null.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator

from app.core.enums import GRADES, MAX_PERIOD, MIN_PERIOD, SECTIONS, Weekday


def _reject_null(v: Any) -> Any:
    if v is None:
        raise ValueError("may not be null")
    return v


def _check_grade(v: Optional[int]) -> Optional[int]:
    if v is not None and v not in GRADES:
        raise ValueError(f"grade must be one of {', '.join(str(g) for g in GRADES)}")
    return v


def _check_section(v: Optional[int]) -> Optional[int]:
    if v is not None and v not in SECTIONS:
        raise ValueError(f"section must be one of {', '.join(str(s) for s in SECTIONS)}")
    return v


class TeacherCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    subject: str = Field(..., min_length=1, max_length=255)

    class Config:
        str_strip_whitespace = True


class TeacherUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    subject: Optional[str] = Field(None, min_length=1, max_length=255)

    class Config:
        str_strip_whitespace = True

    @field_validator("name", "subject", mode="before")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        return _reject_null(v)


class TeacherResponse(BaseModel):
    id: str
    name: str
    subject: str

    class Config:
        from_attributes = True


class ScheduleSlotCreate(BaseModel):
    teacherId: str = Field(..., min_length=1, max_length=255)
    day: Weekday
    period: StrictInt = Field(..., ge=MIN_PERIOD, le=MAX_PERIOD)
    grade: StrictInt
    section: StrictInt

    class Config:
        str_strip_whitespace = True

    @field_validator("grade")
    @classmethod
    def grade_in_range(cls, v: int) -> int:
        return _check_grade(v)

    @field_validator("section")
    @classmethod
    def section_in_range(cls, v: int) -> int:
        return _check_section(v)


class ScheduleSlotUpdate(BaseModel):
    teacherId: Optional[str] = Field(None, min_length=1, max_length=255)
    day: Optional[Weekday] = None
    period: Optional[StrictInt] = Field(None, ge=MIN_PERIOD, le=MAX_PERIOD)
    grade: Optional[StrictInt] = None
    section: Optional[StrictInt] = None

    class Config:
        str_strip_whitespace = True

    @field_validator("teacherId", "day", "period", "grade", "section", mode="before")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        return _reject_null(v)

    @field_validator("grade")
    @classmethod
    def grade_in_range(cls, v: Optional[int]) -> Optional[int]:
        return _check_grade(v)

    @field_validator("section")
    @classmethod
    def section_in_range(cls, v: Optional[int]) -> Optional[int]:
        return _check_section(v)


class ScheduleSlotResponse(BaseModel):
    id: str
    teacherId: str
    day: Weekday
    period: int
    grade: int
    section: int
