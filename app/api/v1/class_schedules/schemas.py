"""Class schedule views (camelCase for frontend)."""

from typing import List

from pydantic import BaseModel, Field

from app.core.enums import Weekday


class ClassScheduleRow(BaseModel):
    """One slot of a class with its teacher resolved; "Unknown" when the teacher no longer exists."""
    day: Weekday
    period: int
    subject: str
    teacherName: str


class ClassScheduleOverview(BaseModel):
    grade: int
    section: int
    slots: List[ClassScheduleRow] = Field(..., description="Rows sorted by day then period")
