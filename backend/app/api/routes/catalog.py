from fastapi import APIRouter

from app.schemas.generator import CatalogOut
from app.services.catalog import (
    BREAK_SUBJECTS,
    CUSTOMARY_ACTIVITIES,
    DAYS,
    DEPARTMENTS_STRUCTURE,
    INTERVENTION_SUBJECTS,
    SUBJECTS_BY_DEPT,
    SUPPORT_TIME_SLOTS,
    TIME_SLOTS,
)

router = APIRouter()


@router.get("", response_model=CatalogOut)
def get_catalog() -> CatalogOut:
    return CatalogOut(
        days=DAYS,
        departments=DEPARTMENTS_STRUCTURE,
        time_slots=TIME_SLOTS,
        support_time_slots=SUPPORT_TIME_SLOTS,
        subjects_by_dept=SUBJECTS_BY_DEPT,
        customary_activities=CUSTOMARY_ACTIVITIES,
        break_subjects=BREAK_SUBJECTS,
        intervention_subjects=INTERVENTION_SUBJECTS,
    )
