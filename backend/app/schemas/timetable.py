from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

SubjectCategory = Literal["Core", "Elective", "Activity", "Break", "Intervention"]
ConflictSeverity = Literal["normal", "high"]


class Department(str, Enum):
    CRECHE = "Creche"
    NURSERY = "Nursery"
    KG = "Kindergarten"
    LOWER_BASIC = "Lower Basic"
    UPPER_BASIC = "Upper Basic"
    JHS = "Junior High School"


class ValueRecord(BaseModel):
    """Immutable input/output record; accepts both camelCase and snake_case keys."""

    model_config = {
        "populate_by_name": True,
        "frozen": True,
    }


class Subject(ValueRecord):
    id: str
    name: str
    category: SubjectCategory
    color: str = ""
    goal: str | None = None


class TimeSlot(ValueRecord):
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    label: str
    is_break: bool = Field(default=False, alias="isBreak")
    is_assembly: bool = Field(default=False, alias="isAssembly")
    is_support: bool = Field(default=False, alias="isSupport")


class SchedulingRule(ValueRecord):
    id: str = ""
    name: str = ""
    target_dept: Literal["ALL"] | Department = Field(alias="targetDept")
    day: str
    slot_label: str = Field(alias="slotLabel")
    subject_id: str = Field(alias="subjectId")
    is_active: bool = Field(default=True, alias="isActive")

    def applies_to(self, department: Department, day: str, slot: TimeSlot) -> bool:
        return (
            self.is_active
            and (self.target_dept == "ALL" or self.target_dept == department)
            and self.day == day
            and self.slot_label == slot.label
        )


class FacilitatorConfig(ValueRecord):
    id: str
    name: str
    department: Department
    subject_id: str = Field(alias="subjectId")
    available_days: list[str] = Field(default_factory=list, alias="availableDays")
    periods_per_week: int = Field(alias="periodsPerWeek")


class TimetableEntry(ValueRecord):
    day: str
    slot: TimeSlot
    subject: Subject
    teacher_id: str = Field(alias="teacherId")
    class_key: str = Field(alias="classKey")
    is_intervention: bool = Field(default=False, alias="isIntervention")


class Conflict(ValueRecord):
    teacher_id: str = Field(alias="teacherId")
    day: str
    start_time: str = Field(alias="startTime")
    class_keys: list[str] = Field(alias="classKeys")
    severity: ConflictSeverity
