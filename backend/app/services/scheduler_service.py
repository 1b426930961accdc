from __future__ import annotations

from collections.abc import Mapping, Sequence

from app.schemas.timetable import (
    Department,
    FacilitatorConfig,
    SchedulingRule,
    Subject,
    TimeSlot,
    TimetableEntry,
)
from app.services.catalog import (
    BREAK_SUBJECTS,
    DAYS,
    DEPARTMENTS_STRUCTURE,
    STREAM_NONE,
    break_subject,
    make_class_key,
)

DEFAULT_PERIODS_PER_WEEK = 4

NO_TEACHER = "None"
STAFF_POOL = "Staff Pool"
INTERVENTION_SPECIALIST = "Intervention Specialist"

# Only these two tiers may borrow each other's facilitators.
CROSS_DEPARTMENT_TIERS = (Department.UPPER_BASIC, Department.JHS)


def selection_seed(class_key: str, day: str, slot_label: str) -> int:
    """Stable pseudo-random seed: the sum of code points of the joined strings."""
    return sum(ord(char) for char in f"{class_key}{day}{slot_label}")


def assign_teacher(
    department: Department,
    subject: Subject,
    day: str,
    facilitators: Sequence[FacilitatorConfig],
) -> str:
    if subject.category == "Break" or subject.id == "assembly":
        return NO_TEACHER

    for facilitator in facilitators:
        if (
            facilitator.department == department
            and facilitator.subject_id == subject.id
            and day in facilitator.available_days
        ):
            return facilitator.name

    if department in CROSS_DEPARTMENT_TIERS:
        for facilitator in facilitators:
            if (
                facilitator.department in CROSS_DEPARTMENT_TIERS
                and facilitator.subject_id == subject.id
                and day in facilitator.available_days
            ):
                return facilitator.name

    return STAFF_POOL


class TimetableGenerator:
    """Builds the weekly grid for every class in the institution.

    Generation is a pure function of the constructor arguments. Quota counters
    live only for the duration of one class pass, so classes never influence
    each other and repeated calls give identical output.
    """

    def __init__(
        self,
        rules: Sequence[SchedulingRule],
        slots: Sequence[TimeSlot],
        facilitators: Sequence[FacilitatorConfig],
        stream_config: Mapping[str, Sequence[str]],
        subjects_by_dept: Mapping[Department, Sequence[Subject]],
        customary_activities: Sequence[Subject],
        support_slots: Sequence[TimeSlot] = (),
        intervention_subjects: Sequence[Subject] = (),
    ):
        self.rules = list(rules)
        self.slots = list(slots)
        self.facilitators = list(facilitators)
        self.stream_config = stream_config
        self.subjects_by_dept = subjects_by_dept
        self.customary_activities = list(customary_activities)
        self.support_slots = list(support_slots)
        self.intervention_subjects = list(intervention_subjects)

    @property
    def has_support_lane(self) -> bool:
        return bool(self.support_slots) and bool(self.intervention_subjects)

    def streams_for(self, level: str) -> list[str]:
        # A level absent from the config is not subdivided; an empty list means no classes.
        streams = self.stream_config.get(level)
        if streams is None:
            return [STREAM_NONE]
        return list(streams)

    def generate(self) -> list[TimetableEntry]:
        entries: list[TimetableEntry] = []
        for department, levels in DEPARTMENTS_STRUCTURE.items():
            subjects = list(self.subjects_by_dept.get(department) or [])
            for level in levels:
                for stream in self.streams_for(level):
                    class_key = make_class_key(level, stream)
                    entries.extend(self.generate_class_timetable(department, class_key, subjects))
                    if self.has_support_lane:
                        entries.extend(self.generate_support_timetable(department, class_key))
        return entries

    def initial_demand(self, department: Department, subjects: Sequence[Subject]) -> dict[str, int]:
        demand: dict[str, int] = {}
        for subject in subjects:
            config = next(
                (
                    facilitator
                    for facilitator in self.facilitators
                    if facilitator.department == department and facilitator.subject_id == subject.id
                ),
                None,
            )
            demand[subject.id] = config.periods_per_week if config is not None else DEFAULT_PERIODS_PER_WEEK
        return demand

    def generate_class_timetable(
        self,
        department: Department,
        class_key: str,
        subjects: Sequence[Subject],
    ) -> list[TimetableEntry]:
        demand = self.initial_demand(department, subjects)
        entries: list[TimetableEntry] = []

        for day in DAYS:
            last_subject_id = ""
            for slot in self.slots:
                teacher_id: str | None = None
                if slot.is_assembly:
                    subject = break_subject("assembly")
                elif slot.is_break:
                    subject = break_subject("snack" if "Snack" in slot.label else "lunch")
                else:
                    rule = next((rule for rule in self.rules if rule.applies_to(department, day, slot)), None)
                    if rule is not None:
                        subject, teacher_id = self._pinned_subject(rule, subjects)
                    elif not subjects:
                        subject = BREAK_SUBJECTS[0]
                    else:
                        subject = self._rotate(
                            subjects,
                            demand,
                            last_subject_id,
                            selection_seed(class_key, day, slot.label),
                        )
                        last_subject_id = subject.id

                if teacher_id is None:
                    teacher_id = assign_teacher(department, subject, day, self.facilitators)
                entries.append(
                    TimetableEntry(
                        day=day,
                        slot=slot,
                        subject=subject,
                        teacher_id=teacher_id,
                        class_key=class_key,
                    )
                )

        return entries

    def generate_support_timetable(self, department: Department, class_key: str) -> list[TimetableEntry]:
        teacher_id = next(
            (facilitator.name for facilitator in self.facilitators if facilitator.department == department),
            INTERVENTION_SPECIALIST,
        )
        entries: list[TimetableEntry] = []
        for day in DAYS:
            for slot in self.support_slots:
                seed = selection_seed(class_key, day, slot.label)
                entries.append(
                    TimetableEntry(
                        day=day,
                        slot=slot,
                        subject=self.intervention_subjects[seed % len(self.intervention_subjects)],
                        teacher_id=teacher_id,
                        class_key=class_key,
                        is_intervention=True,
                    )
                )
        return entries

    def _pinned_subject(self, rule: SchedulingRule, subjects: Sequence[Subject]) -> tuple[Subject, str | None]:
        # Customary activities are whole-school events with no subject facilitator.
        for activity in self.customary_activities:
            if activity.id == rule.subject_id:
                return activity, NO_TEACHER
        if subjects:
            return subjects[0], None
        return BREAK_SUBJECTS[0], None

    @staticmethod
    def _rotate(
        subjects: Sequence[Subject],
        demand: dict[str, int],
        last_subject_id: str,
        seed: int,
    ) -> Subject:
        candidates = [s for s in subjects if s.id != last_subject_id and demand[s.id] > 0]
        if not candidates:
            candidates = [s for s in subjects if s.id != last_subject_id]
        if not candidates:
            candidates = list(subjects)

        subject = candidates[seed % len(candidates)]
        if demand[subject.id] > 0:
            demand[subject.id] -= 1
        return subject


def generate_all_timetables(
    rules: Sequence[SchedulingRule],
    slots: Sequence[TimeSlot],
    facilitators: Sequence[FacilitatorConfig],
    stream_config: Mapping[str, Sequence[str]],
    subjects_by_dept: Mapping[Department, Sequence[Subject]],
    customary_activities: Sequence[Subject],
    support_slots: Sequence[TimeSlot] = (),
    intervention_subjects: Sequence[Subject] = (),
) -> list[TimetableEntry]:
    return TimetableGenerator(
        rules=rules,
        slots=slots,
        facilitators=facilitators,
        stream_config=stream_config,
        subjects_by_dept=subjects_by_dept,
        customary_activities=customary_activities,
        support_slots=support_slots,
        intervention_subjects=intervention_subjects,
    ).generate()
