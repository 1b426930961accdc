from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from app.schemas.timetable import Conflict, ConflictSeverity, TimetableEntry
from app.services.scheduler_service import NO_TEACHER, STAFF_POOL

# Placeholders cannot clash with anything.
UNASSIGNED_TEACHERS = frozenset({NO_TEACHER, STAFF_POOL})

# Upper Basic and JHS grades; matched as substrings of the class key.
SENIOR_LEVEL_MARKERS = ("Basic 7", "Basic 8", "Basic 9", "Basic 4", "Basic 5", "Basic 6")


def conflict_severity(class_keys: Iterable[str]) -> ConflictSeverity:
    for class_key in class_keys:
        if any(marker in class_key for marker in SENIOR_LEVEL_MARKERS):
            return "high"
    return "normal"


class ConflictService:
    def __init__(self, entries: Iterable[TimetableEntry]):
        self.entries: List[TimetableEntry] = list(entries)

    def detect_conflicts(self) -> List[Conflict]:
        grouped: Dict[Tuple[str, str, str], List[TimetableEntry]] = defaultdict(list)
        for entry in self.entries:
            if entry.teacher_id in UNASSIGNED_TEACHERS:
                continue
            grouped[(entry.teacher_id, entry.day, entry.slot.start_time)].append(entry)

        conflicts: List[Conflict] = []
        for (teacher_id, day, start_time), group in grouped.items():
            if len(group) < 2:
                continue
            # Duplicate class keys are kept as-is.
            class_keys = [entry.class_key for entry in group]
            conflicts.append(
                Conflict(
                    teacher_id=teacher_id,
                    day=day,
                    start_time=start_time,
                    class_keys=class_keys,
                    severity=conflict_severity(class_keys),
                )
            )
        return conflicts


def detect_conflicts(entries: Iterable[TimetableEntry]) -> List[Conflict]:
    return ConflictService(entries).detect_conflicts()
