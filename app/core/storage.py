from fastapi import Depends, Request

from app.db.repositories.file_record_repository import FileRecordRepository
from app.domains.conversion import ConverterGateway
from app.domains.records.services import FileRecordService


# Dependencies for FastAPI; the app factory places the instances on app.state
def get_repository(request: Request) -> FileRecordRepository:
    return request.app.state.repository


def get_converter(request: Request) -> ConverterGateway:
    return request.app.state.converter


def get_record_service(
    repository: FileRecordRepository = Depends(get_repository),
    converter: ConverterGateway = Depends(get_converter)
) -> FileRecordService:
    return FileRecordService(repository, converter)
