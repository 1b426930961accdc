from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from app.schemas.generator import TimetableSummary
from app.schemas.timetable import Conflict, TimetableEntry
from app.services.conflict_service import UNASSIGNED_TEACHERS
from app.services.scheduler_service import STAFF_POOL


def facilitator_load(entries: Iterable[TimetableEntry]) -> dict[str, int]:
    counts = Counter(entry.teacher_id for entry in entries if entry.teacher_id not in UNASSIGNED_TEACHERS)
    return dict(sorted(counts.items()))


def unresolved_cells(entries: Iterable[TimetableEntry]) -> list[TimetableEntry]:
    """Cells the institution still has to staff by hand."""
    return [entry for entry in entries if entry.teacher_id == STAFF_POOL]


def summarize(entries: Sequence[TimetableEntry], conflicts: Sequence[Conflict]) -> TimetableSummary:
    class_keys = list(dict.fromkeys(entry.class_key for entry in entries))
    intervention = sum(1 for entry in entries if entry.is_intervention)
    return TimetableSummary(
        class_count=len(class_keys),
        standard_entries=len(entries) - intervention,
        intervention_entries=intervention,
        unresolved_cells=len(unresolved_cells(entries)),
        conflicts=len(conflicts),
        high_severity_conflicts=sum(1 for conflict in conflicts if conflict.severity == "high"),
        facilitator_load=facilitator_load(entries),
    )
