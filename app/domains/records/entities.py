import uuid
from datetime import datetime, timezone
from typing import Optional


class FileRecord:
    """A converted upload: the original file's metadata plus its HTML and JSONL renderings"""

    def __init__(
        self,
        id: uuid.UUID,
        file_name: str,
        original_title: str,
        file_type: str,
        html_content: str,
        jsonl_content: str,
        created_at: Optional[datetime] = None
    ):
        self._id = id
        self.file_name = file_name
        self.original_title = original_title
        self.file_type = file_type
        self.html_content = html_content
        self.jsonl_content = jsonl_content
        self._created_at = created_at or datetime.now(timezone.utc)

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def with_html(self, new_html: str) -> "FileRecord":
        """Copy of this record with a new HTML rendering, keeping id and creation time"""
        return FileRecord(
            id=self._id,
            file_name=self.file_name,
            original_title=self.original_title,
            file_type=self.file_type,
            html_content=new_html,
            jsonl_content=self.jsonl_content,
            created_at=self._created_at
        )

    def export_file_name(self) -> str:
        """Download name for this record's JSONL export"""
        title = self.original_title or self.file_name
        if not title:
            return "converted.jsonl"
        stem, dot, _ = title.rpartition(".")
        if dot and stem:
            title = stem
        return f"{title}.jsonl"

    @classmethod
    def create(
        cls,
        file_name: str,
        original_title: str,
        file_type: str,
        html_content: str,
        jsonl_content: str
    ) -> "FileRecord":
        """Create a new record with a fresh id and the current UTC time"""
        return cls(
            id=uuid.uuid4(),
            file_name=file_name,
            original_title=original_title,
            file_type=file_type,
            html_content=html_content,
            jsonl_content=jsonl_content,
            created_at=datetime.now(timezone.utc)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, FileRecord):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"FileRecord(id={self.id}, file_name={self.file_name}, created_at={self.created_at.isoformat()})"
