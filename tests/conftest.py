"""
Root conftest.py for the file record service tests.

Provides an isolated in-memory repository per test, a fake converter
standing in for the external document converter, and an httpx client
bound to an application built around both.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, List, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.db.repositories.file_record_repository import InMemoryFileRecordRepository
from app.domains.conversion import ConversionError, ConversionResult
from app.domains.records.entities import FileRecord
from app.domains.records.services import FileRecordService
from app.main import create_app


class FakeConverter:
    """Converter that records its calls and returns a fixed rendering."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: List[Tuple[str, bytes]] = []

    def convert(self, file_name: str, content: bytes) -> ConversionResult:
        self.calls.append((file_name, content))
        if self.fail:
            raise ConversionError("corrupt workbook")
        title = file_name.rsplit(".", 1)[0]
        return ConversionResult(
            original_title=title,
            file_type="EXCEL" if file_name.endswith((".xlsx", ".xls", ".csv")) else "WORD",
            html_content=f"<table><tr><td>{title}</td></tr></table>",
            jsonl_content='{"row": 1, "value": "a"}\n{"row": 2, "value": "b"}\n',
        )


BASE_TIME = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_record() -> Callable[..., FileRecord]:
    """Factory for records with controllable creation times."""

    def _make(
        name: str = "report.xlsx",
        minutes: int = 0,
        html: str = "<p>html</p>",
        jsonl: str = '{"a": 1}\n',
    ) -> FileRecord:
        record = FileRecord.create(
            file_name=name,
            original_title=name.rsplit(".", 1)[0],
            file_type="EXCEL",
            html_content=html,
            jsonl_content=jsonl,
        )
        return FileRecord(
            id=record.id,
            file_name=record.file_name,
            original_title=record.original_title,
            file_type=record.file_type,
            html_content=record.html_content,
            jsonl_content=record.jsonl_content,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )

    return _make


@pytest.fixture
def repository() -> InMemoryFileRecordRepository:
    return InMemoryFileRecordRepository()


@pytest.fixture
def converter() -> FakeConverter:
    return FakeConverter()


@pytest.fixture
def failing_converter() -> FakeConverter:
    return FakeConverter(fail=True)


@pytest.fixture
def service(repository, converter) -> FileRecordService:
    return FileRecordService(
        repository,
        converter,
        max_upload_mb=1,
        allowed_extensions=["xlsx", "csv", "docx"],
    )


@pytest.fixture
def app(repository, converter):
    return create_app(repository=repository, converter=converter)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
