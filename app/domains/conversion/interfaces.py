from dataclasses import dataclass
from typing import Protocol


class ConversionError(Exception):
    """Raised when an uploaded document cannot be converted"""


@dataclass(frozen=True)
class ConversionResult:
    original_title: str
    file_type: str
    html_content: str
    jsonl_content: str


class ConverterGateway(Protocol):
    def convert(self, file_name: str, content: bytes) -> ConversionResult:
        """Convert an uploaded document into HTML and JSONL.
        This is a blocking call; callers should offload to threads if needed.
        """
