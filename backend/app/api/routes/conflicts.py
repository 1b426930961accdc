from fastapi import APIRouter

from app.schemas.generator import DetectConflictsRequest
from app.schemas.timetable import Conflict
from app.services.conflict_service import ConflictService

router = APIRouter()


@router.post("/detect", response_model=list[Conflict])
def detect_conflicts(payload: DetectConflictsRequest) -> list[Conflict]:
    return ConflictService(payload.entries).detect_conflicts()
