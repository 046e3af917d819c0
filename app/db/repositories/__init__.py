from app.db.repositories.file_record_repository import FileRecordRepository, InMemoryFileRecordRepository

__all__ = [
    "FileRecordRepository",
    "InMemoryFileRecordRepository"
]
