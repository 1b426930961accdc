import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.schemas.timetable import FacilitatorConfig, Subject, TimeSlot, TimetableEntry

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


def make_subject(subject_id, name=None, category="Core"):
    return Subject(id=subject_id, name=name or subject_id.title(), category=category)


def make_slot(label, start="08:00", end="08:40", **flags):
    return TimeSlot(start_time=start, end_time=end, label=label, **flags)


def make_facilitator(name, department, subject_id, days=None, periods=4):
    return FacilitatorConfig(
        id=name.lower().replace(" ", "-"),
        name=name,
        department=department,
        subject_id=subject_id,
        available_days=WEEKDAYS if days is None else days,
        periods_per_week=periods,
    )


def make_entry(class_key, teacher_id, day="Monday", start="08:30", subject_id="mat", intervention=False):
    return TimetableEntry(
        day=day,
        slot=make_slot("Period 1", start=start),
        subject=make_subject(subject_id),
        teacher_id=teacher_id,
        class_key=class_key,
        is_intervention=intervention,
    )
