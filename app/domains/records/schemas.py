from pydantic import BaseModel, Field, RootModel, field_validator, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List
import uuid
from datetime import datetime

from app.domains.records.entities import FileRecord


class CamelModel(BaseModel):
    """Base schema serialised with camelCase keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileRecordResponse(CamelModel):
    """Record as returned to clients; the JSONL export is only available through download"""
    id: uuid.UUID
    file_name: str
    original_title: str
    file_type: str
    html_content: str
    created_at: datetime

    @classmethod
    def from_entity(cls, record: FileRecord) -> "FileRecordResponse":
        return cls(
            id=record.id,
            file_name=record.file_name,
            original_title=record.original_title,
            file_type=record.file_type,
            html_content=record.html_content,
            created_at=record.created_at
        )


class UpdateHtmlRequest(CamelModel):
    """Request to replace a record's HTML"""
    record_id: uuid.UUID
    html_content: str = Field(..., min_length=1)

    @field_validator('html_content')
    @classmethod
    def validate_html_content(cls, v):
        if not v.strip():
            raise ValueError('HTML content cannot be blank')
        return v


class DownloadJsonlRequest(CamelModel):
    """Request to download the JSONL export of one or more records"""
    record_ids: List[uuid.UUID] = Field(..., min_length=1)


class DeleteRecordsRequest(CamelModel):
    """Request to delete several records at once"""
    record_ids: List[uuid.UUID] = Field(..., min_length=1)


class MergeJsonlRequest(RootModel[List[str]]):
    """JSONL documents to merge, in order"""
    root: List[str] = Field(..., min_length=1)


class HealthResponse(BaseModel):
    status: str
    records: int
