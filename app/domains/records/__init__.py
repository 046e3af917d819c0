from app.domains.records.entities import FileRecord
from app.domains.records.schemas import (
    FileRecordResponse, UpdateHtmlRequest,
    DownloadJsonlRequest, DeleteRecordsRequest, MergeJsonlRequest
)
from app.domains.records.services import FileRecordService, JsonlExport

__all__ = [
    "FileRecord",
    "FileRecordResponse", "UpdateHtmlRequest",
    "DownloadJsonlRequest", "DeleteRecordsRequest", "MergeJsonlRequest",
    "FileRecordService", "JsonlExport"
]
