from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from app.schemas.timetable import Conflict, TimetableEntry
from app.services.catalog import DAYS, DEPARTMENTS_STRUCTURE, STREAM_NONE, make_class_key


def list_class_keys(stream_config: Mapping[str, Sequence[str]]) -> list[str]:
    """Class keys in the order the generator visits them."""
    keys: list[str] = []
    for levels in DEPARTMENTS_STRUCTURE.values():
        for level in levels:
            streams = stream_config.get(level)
            for stream in [STREAM_NONE] if streams is None else streams:
                keys.append(make_class_key(level, stream))
    return keys


def entries_for_class(
    entries: Iterable[TimetableEntry],
    class_key: str,
    intervention: bool = False,
) -> list[TimetableEntry]:
    return [entry for entry in entries if entry.class_key == class_key and entry.is_intervention == intervention]


def conflict_for_cell(
    conflicts: Iterable[Conflict],
    class_key: str,
    day: str,
    start_time: str,
    teacher_id: str | None = None,
) -> Conflict | None:
    for conflict in conflicts:
        if teacher_id is not None and conflict.teacher_id != teacher_id:
            continue
        if conflict.day == day and conflict.start_time == start_time and class_key in conflict.class_keys:
            return conflict
    return None


def class_grid(
    entries: Iterable[TimetableEntry],
    conflicts: Sequence[Conflict],
    class_key: str,
    intervention: bool = False,
) -> dict[str, list[tuple[TimetableEntry, Conflict | None]]]:
    grid: dict[str, list[tuple[TimetableEntry, Conflict | None]]] = {day: [] for day in DAYS}
    for entry in entries_for_class(entries, class_key, intervention):
        conflict = conflict_for_cell(conflicts, class_key, entry.day, entry.slot.start_time, entry.teacher_id)
        grid.setdefault(entry.day, []).append((entry, conflict))
    return grid
