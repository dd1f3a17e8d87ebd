"""Weekly schedule slot: one (day, period) of a teacher in one grade/section.

teacher_id is deliberately not a foreign key; slots may outlive their teacher.
(grade, section, day, period) is not unique at this layer.
"""

from sqlalchemy import Column, DateTime, Index, Integer, String

from app.core.models.teacher import _new_id, _utcnow
from app.db.session import Base


class ScheduleSlot(Base):
    __tablename__ = "schedule_slots"
    __table_args__ = (
        Index("ix_schedule_slots_teacher_id", "teacher_id"),
        Index("ix_schedule_slots_class", "grade", "section"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    teacher_id = Column(String(255), nullable=False)
    day = Column(String(16), nullable=False)
    period = Column(Integer, nullable=False)
    grade = Column(Integer, nullable=False)
    section = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
