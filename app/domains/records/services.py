from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence
import asyncio
import json
import logging
import uuid

from app.core.config import settings
from app.db.repositories.file_record_repository import FileRecordRepository
from app.domains.conversion import ConverterGateway
from app.domains.records.entities import FileRecord

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "converted.jsonl"


@dataclass(frozen=True)
class JsonlExport:
    file_name: str
    content: str
    record_count: int


class FileRecordService:
    """Service for converted file records"""

    def __init__(
        self,
        repository: FileRecordRepository,
        converter: ConverterGateway,
        *,
        max_upload_mb: Optional[int] = None,
        allowed_extensions: Optional[Iterable[str]] = None
    ):
        self.repository = repository
        self.converter = converter
        self.max_upload_mb = max_upload_mb if max_upload_mb is not None else settings.max_upload_mb
        self.allowed_extensions = {
            ext.lower().lstrip(".")
            for ext in (allowed_extensions if allowed_extensions is not None else settings.allowed_extensions)
        }

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    async def create_from_upload(self, file_name: str, content: bytes) -> FileRecord:
        """Convert an uploaded file and store the resulting record"""
        file_name = (file_name or "").strip()
        if not file_name:
            raise ValueError("File name is required")

        extension = file_name.rsplit(".", 1)[-1].lower() if "." in file_name else ""
        if extension not in self.allowed_extensions:
            raise ValueError(f"Unsupported file type: '{file_name}'")

        if not content:
            raise ValueError("Uploaded file is empty")

        if len(content) > self.max_upload_bytes:
            raise ValueError(f"Upload exceeds {self.max_upload_mb} MB")

        # ConversionError propagates to the caller; nothing is stored in that case
        result = await asyncio.to_thread(self.converter.convert, file_name, content)

        record = FileRecord.create(
            file_name=file_name,
            original_title=result.original_title,
            file_type=result.file_type,
            html_content=result.html_content,
            jsonl_content=result.jsonl_content
        )
        self.repository.save(record)
        logger.info(f"Created record {record.id} from upload '{file_name}' ({result.file_type})")
        return record

    async def list_records(self) -> List[FileRecord]:
        """All records, newest first"""
        return self.repository.find_all()

    async def count_records(self) -> int:
        return self.repository.count()

    async def get_record(self, record_id: uuid.UUID) -> Optional[FileRecord]:
        """Get a record by id"""
        return self.repository.find_by_id(record_id)

    async def update_html(self, record_id: uuid.UUID, html_content: str) -> Optional[FileRecord]:
        """Replace a record's HTML, keeping its id and creation time"""
        record = self.repository.find_by_id(record_id)

        if not record:
            return None

        # readers holding the previous record keep seeing the old HTML
        updated = self.repository.save(record.with_html(html_content))
        logger.info(f"Updated HTML of record {record_id}")
        return updated

    async def delete_record(self, record_id: uuid.UUID) -> None:
        """Delete a record; unknown ids are ignored"""
        self.repository.delete_by_id(record_id)
        logger.debug(f"Delete requested for record {record_id}")

    async def delete_records(self, record_ids: Sequence[uuid.UUID]) -> None:
        """Delete several records; unknown ids are ignored"""
        self.repository.delete_all(record_ids)
        logger.debug(f"Bulk delete requested for {len(record_ids)} record(s)")

    async def export_jsonl(self, record_ids: Sequence[uuid.UUID]) -> Optional[JsonlExport]:
        """Concatenate the JSONL exports of the given records.

        Ids are resolved in request order and ids without a record are
        skipped. Returns None when none of the ids resolve.
        """
        records = []
        for record_id in record_ids:
            record = self.repository.find_by_id(record_id)
            if record is None:
                logger.warning(f"Skipping unknown record {record_id} in JSONL export")
                continue
            records.append(record)

        if not records:
            return None

        chunks = [
            record.jsonl_content.rstrip("\r\n")
            for record in records
            if record.jsonl_content and record.jsonl_content.strip()
        ]
        content = "\n".join(chunks)
        if content:
            content += "\n"

        file_name = records[0].export_file_name() if len(records) == 1 else DEFAULT_EXPORT_NAME
        return JsonlExport(file_name=file_name, content=content, record_count=len(records))

    async def merge_jsonl(self, documents: Sequence[str]) -> str:
        """Merge JSONL documents into one, checking that every line is valid JSON"""
        if not documents:
            raise ValueError("At least one JSONL document is required")

        lines = []
        for doc_index, document in enumerate(documents, start=1):
            for line_number, line in enumerate(document.splitlines(), start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    json.loads(line)
                except json.JSONDecodeError as e:
                    raise ValueError(
                        f"Document {doc_index}, line {line_number}: invalid JSON ({e.msg})"
                    ) from e
                lines.append(line)

        logger.info(f"Merged {len(documents)} JSONL document(s) into {len(lines)} line(s)")
        return "\n".join(lines) + "\n" if lines else ""
