from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import Response
from typing import List
from urllib.parse import quote
import logging
import uuid

from app.core.storage import get_record_service
from app.domains.conversion import ConversionError
from app.domains.records.schemas import (
    FileRecordResponse, UpdateHtmlRequest, DownloadJsonlRequest,
    DeleteRecordsRequest, MergeJsonlRequest
)
from app.domains.records.services import FileRecordService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/files", tags=["files"])

JSONL_MEDIA_TYPE = "application/x-ndjson"
DEFAULT_DOWNLOAD_NAME = "converted.jsonl"


def _attachment_header(file_name: str) -> str:
    """Content-Disposition value that survives non-ASCII file names"""
    if not file_name.isprintable():
        file_name = DEFAULT_DOWNLOAD_NAME
    fallback = file_name.replace('"', "") if file_name.isascii() else DEFAULT_DOWNLOAD_NAME
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(file_name)}"


@router.post("/upload", response_model=FileRecordResponse, status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: UploadFile = File(...),
    service: FileRecordService = Depends(get_record_service)
):
    """Upload a document, convert it and store the record"""
    # one byte past the limit is enough to reject an oversized upload
    content = await file.read(service.max_upload_bytes + 1)

    try:
        record = await service.create_from_upload(file.filename or "", content)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except ConversionError as e:
        logger.error(f"Conversion of '{file.filename}' failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Conversion failed: {e}"
        )

    return FileRecordResponse.from_entity(record)


@router.get("/records", response_model=List[FileRecordResponse])
async def list_records(service: FileRecordService = Depends(get_record_service)):
    """List records, newest first"""
    records = await service.list_records()
    return [FileRecordResponse.from_entity(record) for record in records]


@router.get("/records/{record_id}", response_model=FileRecordResponse)
async def get_record(
    record_id: uuid.UUID,
    service: FileRecordService = Depends(get_record_service)
):
    """Get a record by id"""
    record = await service.get_record(record_id)

    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Record not found"
        )

    return FileRecordResponse.from_entity(record)


@router.put("/update-html", response_model=FileRecordResponse)
async def update_html(
    update_request: UpdateHtmlRequest,
    service: FileRecordService = Depends(get_record_service)
):
    """Replace the HTML of a record"""
    record = await service.update_html(update_request.record_id, update_request.html_content)

    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Record not found"
        )

    return FileRecordResponse.from_entity(record)


@router.delete("/records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(
    record_id: uuid.UUID,
    service: FileRecordService = Depends(get_record_service)
):
    """Delete a record"""
    await service.delete_record(record_id)


@router.post("/records/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_records(
    delete_request: DeleteRecordsRequest,
    service: FileRecordService = Depends(get_record_service)
):
    """Delete several records"""
    await service.delete_records(delete_request.record_ids)


@router.post("/download-jsonl")
async def download_jsonl(
    download_request: DownloadJsonlRequest,
    service: FileRecordService = Depends(get_record_service)
):
    """Download the JSONL export of the requested records"""
    export = await service.export_jsonl(download_request.record_ids)

    if not export:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="None of the requested records exist"
        )

    logger.info(
        f"Exporting {export.record_count} of {len(download_request.record_ids)} requested record(s) "
        f"as '{export.file_name}'"
    )
    return Response(
        content=export.content,
        media_type=JSONL_MEDIA_TYPE,
        headers={"Content-Disposition": _attachment_header(export.file_name)}
    )


@router.post("/merge-jsonl")
async def merge_jsonl(
    merge_request: MergeJsonlRequest,
    service: FileRecordService = Depends(get_record_service)
):
    """Merge uploaded JSONL documents into one file"""
    try:
        merged = await service.merge_jsonl(merge_request.root)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return Response(
        content=merged,
        media_type=JSONL_MEDIA_TYPE,
        headers={"Content-Disposition": _attachment_header("merged.jsonl")}
    )
