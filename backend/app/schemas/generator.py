from __future__ import annotations

from pydantic import BaseModel, Field

from app.schemas.timetable import (
    Conflict,
    Department,
    FacilitatorConfig,
    SchedulingRule,
    Subject,
    TimeSlot,
    TimetableEntry,
)
from app.services.catalog import CUSTOMARY_ACTIVITIES, SUBJECTS_BY_DEPT, TIME_SLOTS


def _default_subjects_by_dept() -> dict[Department, list[Subject]]:
    return {department: list(subjects) for department, subjects in SUBJECTS_BY_DEPT.items()}


class GenerateTimetableRequest(BaseModel):
    """Everything the generator needs.

    Structural catalogs (slots, subjects, customary activities) fall back to
    the school defaults; per-term configuration (rules, facilitators, streams,
    support lanes) defaults to empty.
    """

    rules: list[SchedulingRule] = Field(default_factory=list)
    slots: list[TimeSlot] = Field(default_factory=lambda: list(TIME_SLOTS))
    facilitators: list[FacilitatorConfig] = Field(default_factory=list)
    stream_config: dict[str, list[str]] = Field(default_factory=dict, alias="streamConfig")
    subjects_by_dept: dict[Department, list[Subject]] = Field(
        default_factory=_default_subjects_by_dept,
        alias="subjectsByDept",
    )
    customary_activities: list[Subject] = Field(
        default_factory=lambda: list(CUSTOMARY_ACTIVITIES),
        alias="customaryActivities",
    )
    support_slots: list[TimeSlot] = Field(default_factory=list, alias="supportSlots")
    intervention_subjects: list[Subject] = Field(default_factory=list, alias="interventionSubjects")

    model_config = {
        "populate_by_name": True,
    }


class TimetableSummary(BaseModel):
    class_count: int = Field(alias="classCount")
    standard_entries: int = Field(alias="standardEntries")
    intervention_entries: int = Field(alias="interventionEntries")
    unresolved_cells: int = Field(alias="unresolvedCells")
    conflicts: int
    high_severity_conflicts: int = Field(alias="highSeverityConflicts")
    facilitator_load: dict[str, int] = Field(default_factory=dict, alias="facilitatorLoad")

    model_config = {
        "populate_by_name": True,
    }


class GenerateTimetableResponse(BaseModel):
    entries: list[TimetableEntry] = Field(default_factory=list)
    conflicts: list[Conflict] = Field(default_factory=list)
    summary: TimetableSummary


class DetectConflictsRequest(BaseModel):
    entries: list[TimetableEntry] = Field(default_factory=list)


class ClassTimetableCell(BaseModel):
    entry: TimetableEntry
    conflict: Conflict | None = None


class ClassTimetableOut(BaseModel):
    class_key: str = Field(alias="classKey")
    is_intervention: bool = Field(alias="isIntervention")
    days: dict[str, list[ClassTimetableCell]] = Field(default_factory=dict)

    model_config = {
        "populate_by_name": True,
    }


class CatalogOut(BaseModel):
    days: list[str]
    departments: dict[Department, list[str]]
    time_slots: list[TimeSlot] = Field(alias="timeSlots")
    support_time_slots: list[TimeSlot] = Field(alias="supportTimeSlots")
    subjects_by_dept: dict[Department, list[Subject]] = Field(alias="subjectsByDept")
    customary_activities: list[Subject] = Field(alias="customaryActivities")
    break_subjects: list[Subject] = Field(alias="breakSubjects")
    intervention_subjects: list[Subject] = Field(alias="interventionSubjects")

    model_config = {
        "populate_by_name": True,
    }
