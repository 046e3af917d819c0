from fastapi import APIRouter, Depends

from app.core.storage import get_record_service
from app.domains.records.schemas import HealthResponse
from app.domains.records.services import FileRecordService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(service: FileRecordService = Depends(get_record_service)):
    """Liveness check with the number of stored records"""
    return HealthResponse(status="ok", records=await service.count_records())
