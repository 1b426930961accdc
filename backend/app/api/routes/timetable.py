from __future__ import annotations

import logging
from time import perf_counter

from fastapi import APIRouter

from app.core.exceptions import ResourceNotFoundError
from app.schemas.generator import (
    ClassTimetableCell,
    ClassTimetableOut,
    GenerateTimetableRequest,
    GenerateTimetableResponse,
)
from app.schemas.timetable import Conflict, TimetableEntry
from app.services.conflict_service import detect_conflicts
from app.services.scheduler_service import generate_all_timetables
from app.services.timetable_views import class_grid, list_class_keys
from app.services.workload import summarize

router = APIRouter()

logger = logging.getLogger(__name__)


def _run_generation(payload: GenerateTimetableRequest) -> tuple[list[TimetableEntry], list[Conflict]]:
    started = perf_counter()
    logger.info(
        "TIMETABLE GENERATION START | rules=%s | slots=%s | facilitators=%s | support_slots=%s",
        len(payload.rules),
        len(payload.slots),
        len(payload.facilitators),
        len(payload.support_slots),
    )
    entries = generate_all_timetables(
        rules=payload.rules,
        slots=payload.slots,
        facilitators=payload.facilitators,
        stream_config=payload.stream_config,
        subjects_by_dept=payload.subjects_by_dept,
        customary_activities=payload.customary_activities,
        support_slots=payload.support_slots,
        intervention_subjects=payload.intervention_subjects,
    )
    conflicts = detect_conflicts(entries)
    logger.info(
        "TIMETABLE GENERATION DONE | entries=%s | conflicts=%s | elapsed_ms=%.1f",
        len(entries),
        len(conflicts),
        (perf_counter() - started) * 1000,
    )
    return entries, conflicts


@router.post("/generate", response_model=GenerateTimetableResponse)
def generate_timetable(payload: GenerateTimetableRequest) -> GenerateTimetableResponse:
    entries, conflicts = _run_generation(payload)
    summary = summarize(entries, conflicts)
    if summary.unresolved_cells:
        logger.warning(
            "TIMETABLE GENERATION UNRESOLVED | cells=%s assigned to the staff pool",
            summary.unresolved_cells,
        )
    return GenerateTimetableResponse(entries=entries, conflicts=conflicts, summary=summary)


@router.post("/classes/{class_key}", response_model=ClassTimetableOut)
def get_class_timetable(
    class_key: str,
    payload: GenerateTimetableRequest,
    intervention: bool = False,
) -> ClassTimetableOut:
    if class_key not in list_class_keys(payload.stream_config):
        raise ResourceNotFoundError("Class", class_key)

    entries, conflicts = _run_generation(payload)
    grid = class_grid(entries, conflicts, class_key, intervention)
    return ClassTimetableOut(
        class_key=class_key,
        is_intervention=intervention,
        days={
            day: [ClassTimetableCell(entry=entry, conflict=conflict) for entry, conflict in cells]
            for day, cells in grid.items()
        },
    )
